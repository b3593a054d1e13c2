"""Ownership view of a bin, item or category."""

from dataclasses import dataclass

from bintrack.domain.value_objects import ObjectType


@dataclass
class OwnedObject:
    """Owner fields of an inventory object. Either owner may be absent."""

    object_type: ObjectType
    id: str
    user_id: str | None = None
    organization_id: str | None = None
