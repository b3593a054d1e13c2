"""Domain value objects."""

from bintrack.domain.value_objects.object_type import ObjectType
from bintrack.domain.value_objects.parsing import parse_enum
from bintrack.domain.value_objects.permission_action import PermissionAction
from bintrack.domain.value_objects.roles import GlobalRole, OrgRole
from bintrack.domain.value_objects.subject_type import SubjectType

__all__ = [
    "GlobalRole",
    "ObjectType",
    "OrgRole",
    "PermissionAction",
    "SubjectType",
    "parse_enum",
]
