"""Repository ports."""

from bintrack.application.ports.repositories.organization_repository import (
    MembershipRepository,
    OrganizationRepository,
)
from bintrack.application.ports.repositories.owned_object_repository import (
    OwnedObjectRepository,
)
from bintrack.application.ports.repositories.permission_repository import (
    PermissionRepository,
)
from bintrack.application.ports.repositories.user_repository import UserRepository

__all__ = [
    "MembershipRepository",
    "OrganizationRepository",
    "OwnedObjectRepository",
    "PermissionRepository",
    "UserRepository",
]
