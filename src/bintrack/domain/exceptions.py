"""Domain exceptions."""


class BintrackError(Exception):
    """Base exception for Bintrack."""

    code = "INTERNAL_ERROR"
    http_status = 500


class Unauthenticated(BintrackError):
    """Request carries no valid credentials."""

    code = "UNAUTHENTICATED"
    http_status = 401


class PermissionDenied(BintrackError):
    """Principal does not have permission for the requested action."""

    code = "ACCESS_DENIED"
    http_status = 403


class NotFound(BintrackError):
    """Requested resource was not found."""

    code = "NOT_FOUND"
    http_status = 404


class ObjectNotFound(NotFound):
    """Bin, item or category referenced by a permission does not exist."""

    code = "OBJECT_NOT_FOUND"


class SubjectNotFound(NotFound):
    """User or organization a permission is granted to does not exist."""

    code = "SUBJECT_NOT_FOUND"


class PermissionNotFound(NotFound):
    """No permission tuple exists for the natural key."""

    code = "PERMISSION_NOT_FOUND"


class ValidationError(BintrackError):
    """Validation failed for input data."""

    code = "VALIDATION_ERROR"
    http_status = 400


class InvalidRole(ValidationError):
    """ROLE subject does not name a known global role."""

    code = "INVALID_ROLE"
