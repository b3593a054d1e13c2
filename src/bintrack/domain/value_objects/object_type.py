"""Kinds of inventory objects that carry permissions."""

from enum import StrEnum


class ObjectType(StrEnum):
    """Resource kinds a permission can target."""

    BIN = "bin"
    ITEM = "item"
    CATEGORY = "category"
