"""Coercion of raw input into domain enums."""

from enum import Enum
from typing import TypeVar

from bintrack.domain.exceptions import ValidationError

E = TypeVar("E", bound=Enum)


def parse_enum(enum_cls: type[E], value: object, field: str) -> E:
    """Return enum member for value, matching by value then by name.

    Matching is case-insensitive. Raises ValidationError for anything else,
    including None.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        raw = value.strip()
        for member in enum_cls:
            if raw.lower() == str(member.value).lower() or raw.upper() == member.name:
                return member
    allowed = ", ".join(str(m.value) for m in enum_cls)
    raise ValidationError(f"Invalid {field}: {value!r} (expected one of: {allowed})")
