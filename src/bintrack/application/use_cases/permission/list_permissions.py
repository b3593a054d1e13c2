"""List permissions use case."""

from bintrack.application.dto.permission_dto import PermissionFilter
from bintrack.application.ports import UnitOfWorkFactory
from bintrack.domain.entities import Permission
from bintrack.domain.value_objects import ObjectType, parse_enum


class ListPermissionsUseCase:
    """Query permission tuples, most recently granted first."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, permission_filter: PermissionFilter | None = None) -> list[Permission]:
        async with self._uow_factory() as uow:
            return await uow.permissions.find(permission_filter or PermissionFilter())

    async def for_object(self, object_type: ObjectType | str, object_id: str) -> list[Permission]:
        return await self.execute(
            PermissionFilter(
                object_type=parse_enum(ObjectType, object_type, "object_type"),
                object_id=object_id,
            )
        )
