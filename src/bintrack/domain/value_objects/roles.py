"""Global and organization roles."""

from enum import StrEnum


class GlobalRole(StrEnum):
    """Account-wide role of a user. ADMIN bypasses every check."""

    ADMIN = "ADMIN"
    USER = "USER"


class OrgRole(StrEnum):
    """Standing of a user inside one organization."""

    OWNER = "OWNER"
    ADMIN = "ADMIN"
    EDITOR = "EDITOR"
    VIEWER = "VIEWER"
    MEMBER = "MEMBER"

    @property
    def manages_objects(self) -> bool:
        """OWNER and ADMIN may write and administer organization objects."""
        return self in (OrgRole.OWNER, OrgRole.ADMIN)
