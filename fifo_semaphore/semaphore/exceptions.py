"""Custom exceptions for semaphore operations."""

from typing import Optional

from fifo_semaphore.common.error_codes import ERROR_CODES, ErrorCode


class SemaphoreError(Exception):
    """Base exception for semaphore operations.

    Attributes:
        error_code: The registered error code describing the failure, if any.
    """

    def __init__(self, message: str, error_code: Optional[ErrorCode] = None):
        super().__init__(message)
        self.error_code = error_code


class InvalidPermitsError(SemaphoreError, ValueError):
    """Raised when a semaphore is constructed with an invalid capacity.

    Example:
        >>> raise InvalidPermitsError(-1)
    """

    def __init__(self, permits: object):
        error_code = ERROR_CODES["SEMAPHORE_INVALID_PERMITS_ERROR"]
        super().__init__(f"{error_code}, got {permits!r}", error_code=error_code)
        self.permits = permits
