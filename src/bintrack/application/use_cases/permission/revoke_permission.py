"""Revoke permission use case."""

import logging

from bintrack.application.dto.permission_dto import build_permission_key
from bintrack.application.ports import UnitOfWork, UnitOfWorkFactory
from bintrack.domain.entities import PermissionKey
from bintrack.domain.exceptions import PermissionNotFound
from bintrack.domain.value_objects import ObjectType, PermissionAction, SubjectType

logger = logging.getLogger(__name__)


class RevokePermissionUseCase:
    """Delete one permission tuple by natural key."""

    def __init__(self, unit_of_work_factory: UnitOfWorkFactory) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        object_type: ObjectType | str,
        object_id: str,
        subject_type: SubjectType | str,
        subject_id: str,
        action: PermissionAction | str,
    ) -> None:
        """Revoke permission. Raises PermissionNotFound if the tuple does not exist."""
        key = build_permission_key(object_type, object_id, subject_type, subject_id, action)
        async with self._uow_factory() as uow:
            await self.apply(uow, key)

    async def apply(self, uow: UnitOfWork, key: PermissionKey) -> None:
        """Revoke within an open unit of work."""
        deleted = await uow.permissions.delete(key)
        if not deleted:
            raise PermissionNotFound(
                f"Permission not found: {key.action.value} on {key.object_type.value} "
                f"{key.object_id} for {key.subject_type.value} {key.subject_id}"
            )
        logger.info(
            "Revoked %s on %s %s from %s %s",
            key.action.value,
            key.object_type.value,
            key.object_id,
            key.subject_type.value,
            key.subject_id,
        )
