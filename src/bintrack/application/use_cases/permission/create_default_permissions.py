"""Default permission seeding for newly created objects."""

import logging

from bintrack.application.ports import UnitOfWorkFactory
from bintrack.application.use_cases.permission.grant_permission import GrantPermissionUseCase
from bintrack.domain.entities import Permission
from bintrack.domain.value_objects import ObjectType, PermissionAction, SubjectType

logger = logging.getLogger(__name__)


class CreateDefaultPermissionsUseCase:
    """Grant READ, WRITE and ADMIN on a new object to its owning organization or user.

    The organization-wide tuples give every member WRITE and ADMIN regardless
    of org role, which is broader than the implicit organization rule applied
    by the permission checker. This default is kept as-is.
    """

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        grant_permission: GrantPermissionUseCase,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._grant = grant_permission

    async def execute(
        self,
        object_type: ObjectType | str,
        object_id: str,
        owner_id: str,
        organization_id: str | None = None,
    ) -> list[Permission]:
        """Seed the three default tuples. All are written in one transaction."""
        if organization_id:
            subject_type, subject_id = SubjectType.ORGANIZATION, organization_id
        else:
            subject_type, subject_id = SubjectType.USER, owner_id

        async with self._uow_factory() as uow:
            granted = []
            for action in PermissionAction:
                granted.append(
                    await self._grant.apply(
                        uow,
                        object_type,
                        object_id,
                        subject_type,
                        subject_id,
                        action,
                        granted_by=owner_id,
                    )
                )

        logger.info(
            "Seeded default permissions on %s %s for %s %s",
            object_type,
            object_id,
            subject_type.value,
            subject_id,
        )
        return granted
