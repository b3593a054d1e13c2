"""Domain entities."""

from bintrack.domain.entities.organization import Organization, OrganizationMembership
from bintrack.domain.entities.owned_object import OwnedObject
from bintrack.domain.entities.permission import Permission, PermissionKey
from bintrack.domain.entities.principal import Principal

__all__ = [
    "Organization",
    "OrganizationMembership",
    "OwnedObject",
    "Permission",
    "PermissionKey",
    "Principal",
]
