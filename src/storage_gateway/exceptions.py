"""Custom exceptions for the storage gateway."""

from storage_gateway.domain.errors import ErrorKind, ErrorRecord, OperationError


class StorageError(Exception):
    """Raised by a storage client when a backend call fails."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class StorageNotFoundError(StorageError):
    """Raised when the addressed bucket, object or upload does not exist."""

    def __init__(self, resource: str, cause: Exception | None = None):
        self.resource = resource
        super().__init__(f"'{resource}' not found in storage", cause)


class StoragePermissionError(StorageError):
    """Raised when credentials are invalid or access is denied."""


class StorageUnavailableError(StorageError):
    """Raised when the backend is unreachable, timing out or throttling."""


class GatewayError(Exception):
    """
    Failure surfaced to the HTTP boundary.

    Carries the structured error of the failed operation and the snapshot of
    error records collected during the request.
    """

    status_code = 400

    def __init__(
        self,
        message: str,
        error: OperationError,
        errors: list[ErrorRecord] | None = None,
    ):
        self.message = message
        self.error = error
        self.errors = errors or []
        super().__init__(message)


class ParameterValidationError(GatewayError):
    """Raised when operation parameters are missing or malformed."""

    def __init__(
        self,
        message: str,
        context: dict | None = None,
        errors: list[ErrorRecord] | None = None,
    ):
        super().__init__(
            message,
            OperationError(
                kind=ErrorKind.VALIDATION, message=message, context=context or {}
            ),
            errors,
        )


class OperationFailedError(GatewayError):
    """Raised by a route when a storage operation returned a failed result."""

    def __init__(
        self,
        message: str,
        error: OperationError,
        errors: list[ErrorRecord] | None = None,
        status_code: int = 400,
    ):
        super().__init__(message, error, errors)
        self.status_code = status_code
