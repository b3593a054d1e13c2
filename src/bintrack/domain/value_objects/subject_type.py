"""Kinds of principals a permission can be granted to."""

from enum import StrEnum


class SubjectType(StrEnum):
    """Subject kinds - a user, an organization, or a global role name."""

    USER = "user"
    ORGANIZATION = "organization"
    ROLE = "role"
