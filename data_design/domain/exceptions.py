"""Domain-specific exceptions: framework-independent."""


class DataDesignError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(DataDesignError):
    """Raised when a caller-supplied value violates a field constraint.

    Always raised before any store interaction, so the caller can fix the
    input and retry.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class InvalidFormat(ValidationError):
    """Raised when a value does not have the shape of the expected type."""


class ImpossibleDate(ValidationError):
    """Raised when a well-formed date or time does not exist on the calendar."""


class StorageError(DataDesignError):
    """Raised when the store rejects a query or a fetched row is unusable.

    The underlying exception is kept on ``cause`` and chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        if cause is not None:
            message = f"{message} → {type(cause).__name__}: {cause}"
        super().__init__(message)
