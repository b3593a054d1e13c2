"""Permission entity - explicit grant of an action on an object to a subject."""

from dataclasses import dataclass
from datetime import datetime
from typing import NamedTuple
from uuid import UUID

from bintrack.domain.value_objects import ObjectType, PermissionAction, SubjectType


class PermissionKey(NamedTuple):
    """Natural key of a permission tuple."""

    object_type: ObjectType
    object_id: str
    subject_type: SubjectType
    subject_id: str
    action: PermissionAction


@dataclass
class Permission:
    """Permission - subject may perform action on object."""

    id: UUID
    object_type: ObjectType
    object_id: str
    subject_type: SubjectType
    subject_id: str
    action: PermissionAction
    granted_at: datetime
    granted_by: str | None = None

    @property
    def key(self) -> PermissionKey:
        return PermissionKey(
            self.object_type,
            self.object_id,
            self.subject_type,
            self.subject_id,
            self.action,
        )
