"""Application error taxonomy.

Every error raised on purpose by a handler or service derives from AppError
and carries an HTTP status, a machine-readable ``code`` and a human message.
The exception handlers in ``main`` turn them into the shared error envelope:

    {"success": false, "error": {"code": "...", "message": "...", "details": [...]}}
"""

from typing import Any, Dict, List, Optional


class AppError(Exception):
    """Base class for errors that map to a specific HTTP response."""

    status_code: int = 500
    default_code: str = "SERVER_ERROR"
    default_message: str = "Internal server error"

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        error: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return error


class ValidationError(AppError):
    """Malformed or missing input."""

    status_code = 400
    default_code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class AuthenticationError(AppError):
    """Missing, invalid or expired credentials."""

    status_code = 401
    default_code = "INVALID_TOKEN"
    default_message = "Invalid token"


class AuthorizationError(AppError):
    """Authenticated, but outside the caller's tenant or role."""

    status_code = 403
    default_code = "FORBIDDEN"
    default_message = "You do not have permission to perform this action"


class NotFoundError(AppError):
    status_code = 404
    default_code = "NOT_FOUND"
    default_message = "Resource not found"


class ConflictError(AppError):
    """Duplicate unique key or a delete blocked by dependent rows."""

    status_code = 409
    default_code = "DUPLICATE_ERROR"
    default_message = "Resource already exists"


class DomainRuleError(AppError):
    """A business precondition was not met."""

    status_code = 400
    default_code = "DOMAIN_ERROR"
    default_message = "Operation not allowed in the current state"


class AnimalNotAvailableError(DomainRuleError):
    default_code = "ANIMAL_NOT_AVAILABLE"
    default_message = "This animal is no longer available for adoption"


class ServerError(AppError):
    status_code = 500
    default_code = "SERVER_ERROR"
    default_message = "Internal server error"
