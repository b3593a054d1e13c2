"""Grant permission use case."""

import logging
from collections.abc import Callable, Sequence
from datetime import UTC, datetime
from uuid import uuid4

from bintrack.application.dto.permission_dto import PermissionSpec, normalize_id
from bintrack.application.ports import UnitOfWork, UnitOfWorkFactory
from bintrack.domain.entities import Permission
from bintrack.domain.exceptions import InvalidRole, ObjectNotFound, SubjectNotFound
from bintrack.domain.value_objects import (
    GlobalRole,
    ObjectType,
    PermissionAction,
    SubjectType,
    parse_enum,
)

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


class GrantPermissionUseCase:
    """Grant an action on an object to a subject (upsert by natural key)."""

    def __init__(
        self,
        unit_of_work_factory: UnitOfWorkFactory,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._clock = clock

    async def execute(
        self,
        object_type: ObjectType | str,
        object_id: str,
        subject_type: SubjectType | str,
        subject_id: str,
        action: PermissionAction | str,
        granted_by: str | None = None,
    ) -> Permission:
        """Grant permission. Granting an existing tuple refreshes granted_by/granted_at."""
        async with self._uow_factory() as uow:
            return await self.apply(
                uow, object_type, object_id, subject_type, subject_id, action, granted_by
            )

    async def execute_batch(
        self,
        object_type: ObjectType | str,
        object_id: str,
        grants: Sequence[PermissionSpec],
        granted_by: str | None = None,
    ) -> list[Permission]:
        """Grant several subject/action pairs on one object in a single transaction."""
        async with self._uow_factory() as uow:
            result = []
            for spec in grants:
                result.append(
                    await self.apply(
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

    async def apply(
        self,
        uow: UnitOfWork,
        object_type: ObjectType | str,
        object_id: str,
        subject_type: SubjectType | str,
        subject_id: str,
        action: PermissionAction | str,
        granted_by: str | None = None,
    ) -> Permission:
        """Grant within an open unit of work."""
        object_type = parse_enum(ObjectType, object_type, "object_type")
        subject_type = parse_enum(SubjectType, subject_type, "subject_type")
        action = parse_enum(PermissionAction, action, "action")
        object_id = normalize_id(object_id, "objectId")
        subject_id = normalize_id(subject_id, "subjectId")

        owned = await uow.objects.get(object_type, object_id)
        if owned is None:
            raise ObjectNotFound(f"{object_type.value.capitalize()} not found: {object_id}")

        subject_id = await self._resolve_subject(uow, subject_type, subject_id)

        permission = Permission(
            id=uuid4(),
            object_type=object_type,
            object_id=object_id,
            subject_type=subject_type,
            subject_id=subject_id,
            action=action,
            granted_at=self._clock(),
            granted_by=granted_by,
        )
        stored = await uow.permissions.upsert(permission)
        logger.info(
            "Granted %s on %s %s to %s %s (by %s)",
            action.value,
            object_type.value,
            object_id,
            subject_type.value,
            subject_id,
            granted_by,
        )
        return stored

    async def _resolve_subject(
        self, uow: UnitOfWork, subject_type: SubjectType, subject_id: str
    ) -> str:
        """Check the subject exists; return the canonical subject id."""
        if subject_type is SubjectType.USER:
            if await uow.users.get_by_id(subject_id) is None:
                raise SubjectNotFound(f"User not found: {subject_id}")
            return subject_id
        if subject_type is SubjectType.ORGANIZATION:
            if await uow.organizations.get_by_id(subject_id) is None:
                raise SubjectNotFound(f"Organization not found: {subject_id}")
            return subject_id
        role = subject_id.upper()
        if role not in GlobalRole.__members__:
            raise InvalidRole(f"Invalid role: {subject_id}")
        return GlobalRole[role].value
