"""Infrastructure exceptions.

The driver error is chained (raise ... from) for the logs but never copied
into message or details.
"""

from tasknest.domain.exceptions import TaskNestException


class StoreOperationError(TaskNestException):
    """Unexpected failure of the underlying store (connection, timeout, SQL error)."""

    code = "INTERNAL_ERROR"

    def __init__(self, operation: str) -> None:
        super().__init__(
            "An internal error occurred; please try again later.",
            details={"operation": operation},
        )
