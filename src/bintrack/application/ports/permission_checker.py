"""Permission checker port - object authorization."""

from typing import Protocol

from bintrack.domain.value_objects import ObjectType, PermissionAction


class PermissionChecker(Protocol):
    """Port for deciding whether a principal may act on an object."""

    async def can_access(
        self,
        principal_id: str,
        object_type: ObjectType | str,
        object_id: str,
        action: PermissionAction | str,
    ) -> bool: ...
