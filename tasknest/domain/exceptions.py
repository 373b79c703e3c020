"""Domain exceptions.

Every error a task operation can report is a TaskNestException. The HTTP
layer turns error_code into a status (tasknest.core.exception_handlers) and
returns to_dict() as the body, so messages and details must be safe to show
to any caller.
"""

from typing import Any


class TaskNestException(Exception):
    """Base class for reportable errors.

    Attributes:
        message: Caller-facing description.
        error_code: Stable machine-readable code (subclasses set ``code``).
        details: Extra context such as the failing field or resource id.
    """

    code: str | None = None

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.code or type(self).__name__
        self.details = dict(details) if details else {}

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body: error code, message and details."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(TaskNestException):
    """A field broke the task contract (length, required, closed enum set).

    ``field`` names the single failing field; ``errors`` lists
    {"field", "message"} entries when several fields were checked together.
    """

    code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        details: dict[str, Any] = {}
        if field:
            details["field"] = field
        if errors:
            details["errors"] = errors
        super().__init__(message, details=details)


class InvalidIdentifierException(TaskNestException):
    """An owner, caller or task id failed the identifier format check.

    Raised before any store access. Only the field name is reported; the
    rejected value is never echoed.
    """

    code = "INVALID_IDENTIFIER"

    def __init__(self, field: str) -> None:
        super().__init__(
            f"Invalid identifier format: {field}", details={"field": field}
        )


class AuthenticationException(TaskNestException):
    """Missing, malformed or expired bearer token."""

    code = "AUTHENTICATION_ERROR"

    def __init__(self, message: str = "Authentication failed") -> None:
        super().__init__(message)


class ResourceNotFoundException(TaskNestException):
    """No record matched the lookup or the write guard.

    Also covers records owned by someone else or in the wrong lifecycle
    state, so a caller cannot tell those cases apart from absence.
    """

    code = "RESOURCE_NOT_FOUND"

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            details={"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(TaskNestException):
    """The store rejected a write as a uniqueness violation."""

    code = "CONFLICT"

    def __init__(self, resource_type: str, message: str | None = None) -> None:
        super().__init__(
            message or f"{resource_type} conflicts with an existing record",
            details={"resource_type": resource_type},
        )
