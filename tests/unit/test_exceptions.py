"""Unit tests for domain exceptions."""

import pytest

from bintrack.domain.exceptions import (
    BintrackError,
    InvalidRole,
    NotFound,
    ObjectNotFound,
    PermissionDenied,
    PermissionNotFound,
    SubjectNotFound,
    Unauthenticated,
    ValidationError,
)


def test_unauthenticated_maps_to_401() -> None:
    assert issubclass(Unauthenticated, BintrackError)
    assert Unauthenticated.http_status == 401
    assert Unauthenticated.code == "UNAUTHENTICATED"


def test_permission_denied_inherits_bintrack_error() -> None:
    """PermissionDenied is a subclass of BintrackError."""
    assert issubclass(PermissionDenied, BintrackError)


def test_not_found_family() -> None:
    """Object, subject and permission misses are all NotFound."""
    for exc in (ObjectNotFound, SubjectNotFound, PermissionNotFound):
        assert issubclass(exc, NotFound)
        assert exc.http_status == 404


def test_invalid_role_is_validation_error() -> None:
    assert issubclass(InvalidRole, ValidationError)
    assert InvalidRole.http_status == 400
    assert InvalidRole.code == "INVALID_ROLE"


def test_codes_are_distinct() -> None:
    codes = [
        exc.code
        for exc in (
            BintrackError,
            Unauthenticated,
            PermissionDenied,
            NotFound,
            ObjectNotFound,
            SubjectNotFound,
            PermissionNotFound,
            ValidationError,
            InvalidRole,
        )
    ]
    assert len(set(codes)) == len(codes)


def test_raise_not_found_catchable_as_bintrack_error() -> None:
    """NotFound can be caught as BintrackError."""
    with pytest.raises(BintrackError):
        raise ObjectNotFound("Bin not found: b1")


def test_exception_message_preserved() -> None:
    """Exception message is preserved when raised."""
    msg = "User does not have admin access"
    with pytest.raises(PermissionDenied, match=msg):
        raise PermissionDenied(msg)
