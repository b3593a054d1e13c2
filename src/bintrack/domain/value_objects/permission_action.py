"""Permission actions."""

from enum import StrEnum


class PermissionAction(StrEnum):
    """Actions that can be performed on inventory objects.

    ADMIN grants permission management on the object. It does not imply
    READ or WRITE; each action is checked on its own.
    """

    READ = "read"
    WRITE = "write"
    ADMIN = "admin"
