"""Owned object repository port."""

from typing import Protocol

from bintrack.domain.entities import OwnedObject
from bintrack.domain.value_objects import ObjectType


class OwnedObjectRepository(Protocol):
    """Port for owner lookup of bins, items and categories."""

    async def get(self, object_type: ObjectType, object_id: str) -> OwnedObject | None: ...
