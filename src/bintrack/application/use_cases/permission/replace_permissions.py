"""Replace or clear all permissions on an object."""

import logging
from collections.abc import Sequence

from bintrack.application.dto.permission_dto import PermissionFilter, PermissionSpec
from bintrack.application.ports import UnitOfWork, UnitOfWorkFactory
from bintrack.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from bintrack.application.use_cases.permission.revoke_permission import RevokePermissionUseCase
from bintrack.domain.entities import Permission
from bintrack.domain.exceptions import PermissionNotFound
from bintrack.domain.value_objects import ObjectType, parse_enum

logger = logging.getLogger(__name__)


class ReplacePermissionsUseCase:
    """Revoke every tuple on an object, then grant a new set.

    Both steps share one unit of work, so on a transactional store a failure
    leaves the previous permission set in place.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        grant_permission: GrantPermissionUseCase,
        revoke_permission: RevokePermissionUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._grant = grant_permission
        self._revoke = revoke_permission

    async def execute(
        self,
        object_type: ObjectType | str,
        object_id: str,
        grants: Sequence[PermissionSpec],
        granted_by: str | None = None,
    ) -> list[Permission]:
        object_type = parse_enum(ObjectType, object_type, "object_type")
        async with self._uow_factory() as uow:
            await self._revoke_all(uow, object_type, object_id)
            result = []
            for spec in grants:
                result.append(
                    await self._grant.apply(
                        uow,
                        object_type,
                        object_id,
                        spec.subject_type,
                        spec.subject_id,
                        spec.action,
                        granted_by,
                    )
                )
            return result

    async def clear(self, object_type: ObjectType | str, object_id: str) -> int:
        """Revoke all tuples on object. Returns number revoked."""
        object_type = parse_enum(ObjectType, object_type, "object_type")
        async with self._uow_factory() as uow:
            return await self._revoke_all(uow, object_type, object_id)

    async def _revoke_all(self, uow: UnitOfWork, object_type: ObjectType, object_id: str) -> int:
        current = await uow.permissions.find(
            PermissionFilter(object_type=object_type, object_id=object_id)
        )
        revoked = 0
        for permission in current:
            try:
                await self._revoke.apply(uow, permission.key)
                revoked += 1
            except PermissionNotFound:
                # removed concurrently between list and delete
                logger.warning("Permission already revoked: %s", permission.key)
        return revoked
