"""Permission repository port."""

from typing import Protocol

from bintrack.application.dto.permission_dto import PermissionFilter
from bintrack.domain.entities import Permission, PermissionKey
from bintrack.domain.value_objects import ObjectType, PermissionAction, SubjectType


class PermissionRepository(Protocol):
    """Port for permission tuple persistence."""

    async def find(self, permission_filter: PermissionFilter) -> list[Permission]: ...

    async def list_subjects(
        self, object_type: ObjectType, object_id: str, action: PermissionAction
    ) -> list[tuple[SubjectType, str]]: ...

    async def upsert(self, permission: Permission) -> Permission: ...

    async def delete(self, key: PermissionKey) -> bool: ...
