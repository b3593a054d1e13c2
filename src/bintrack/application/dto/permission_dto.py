"""Permission query and grant DTOs."""

from collections.abc import Mapping
from dataclasses import dataclass, fields

from bintrack.domain.entities import Permission, PermissionKey
from bintrack.domain.exceptions import ValidationError
from bintrack.domain.value_objects import (
    GlobalRole,
    ObjectType,
    PermissionAction,
    SubjectType,
    parse_enum,
)

# query parameter name -> filter field
_FILTER_PARAMS = {
    "objectType": "object_type",
    "object_type": "object_type",
    "objectId": "object_id",
    "object_id": "object_id",
    "subjectType": "subject_type",
    "subject_type": "subject_type",
    "subjectId": "subject_id",
    "subject_id": "subject_id",
    "action": "action",
}

_ENUM_FIELDS = {
    "object_type": ObjectType,
    "subject_type": SubjectType,
    "action": PermissionAction,
}


@dataclass(frozen=True)
class PermissionFilter:
    """Conjunction over permission fields. None leaves a field unconstrained."""

    object_type: ObjectType | None = None
    object_id: str | None = None
    subject_type: SubjectType | None = None
    subject_id: str | None = None
    action: PermissionAction | None = None

    @classmethod
    def from_params(cls, params: Mapping[str, object]) -> "PermissionFilter":
        """Build filter from query parameters; blank values are ignored."""
        values: dict[str, object] = {}
        for param, field_name in _FILTER_PARAMS.items():
            raw = params.get(param)
            if raw is None:
                continue
            if not isinstance(raw, str):
                raise ValidationError(f"Query parameter {param} must be given once")
            if not raw.strip():
                continue
            enum_cls = _ENUM_FIELDS.get(field_name)
            values[field_name] = (
                parse_enum(enum_cls, raw, field_name) if enum_cls else raw.strip()
            )
        return cls(**values)

    def constraints(self) -> dict[str, object]:
        """Set fields only, in declaration order."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }

    def matches(self, permission: Permission) -> bool:
        return all(
            getattr(permission, name) == value
            for name, value in self.constraints().items()
        )


@dataclass(frozen=True)
class PermissionSpec:
    """Subject/action pair to grant on an object, as sent in batch requests."""

    subject_type: SubjectType
    subject_id: str
    action: PermissionAction

    @classmethod
    def from_dict(cls, data: object) -> "PermissionSpec":
        if not isinstance(data, Mapping):
            raise ValidationError("Permission entry must be an object")
        subject_id = normalize_id(data.get("subjectId", data.get("subject_id")), "subjectId")
        return cls(
            subject_type=parse_enum(
                SubjectType, data.get("subjectType", data.get("subject_type")), "subject_type"
            ),
            subject_id=subject_id,
            action=parse_enum(PermissionAction, data.get("action"), "action"),
        )

    @classmethod
    def list_from_body(cls, body: object) -> list["PermissionSpec"]:
        if not isinstance(body, list):
            raise ValidationError("Request body must be a list of permissions")
        return [cls.from_dict(entry) for entry in body]


def normalize_id(value: object, field: str) -> str:
    """Canonical form of an object or subject id: a stripped, non-empty string.

    Integers are accepted, as JSON clients send numeric ids.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        value = str(value)
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"Missing required field: {field}")
    if not isinstance(value, str):
        raise ValidationError(f"Invalid {field}: expected a single string")
    return value.strip()


def build_permission_key(
    object_type: ObjectType | str,
    object_id: str,
    subject_type: SubjectType | str,
    subject_id: str,
    action: PermissionAction | str,
) -> PermissionKey:
    """Validate raw natural key parts. ROLE subject ids are normalized to role names."""
    object_type = parse_enum(ObjectType, object_type, "object_type")
    subject_type = parse_enum(SubjectType, subject_type, "subject_type")
    action = parse_enum(PermissionAction, action, "action")
    object_id = normalize_id(object_id, "objectId")
    subject_id = normalize_id(subject_id, "subjectId")
    if subject_type is SubjectType.ROLE and subject_id.upper() in GlobalRole.__members__:
        subject_id = GlobalRole[subject_id.upper()].value
    return PermissionKey(object_type, object_id, subject_type, subject_id, action)
