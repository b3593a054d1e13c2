"""Organization and membership entities."""

from dataclasses import dataclass

from bintrack.domain.value_objects import OrgRole


@dataclass
class Organization:
    """Tenant that owns inventory objects."""

    id: str
    name: str
    slug: str


@dataclass
class OrganizationMembership:
    """User belongs to organization with a role."""

    organization_id: str
    user_id: str
    role: OrgRole = OrgRole.MEMBER
