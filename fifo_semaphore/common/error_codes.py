"""
Error codes for fifo-semaphore.

Error codes follow the format: FifoSemaphore-{HTTP_Code}-{Unique_ID}
"""

from enum import Enum
from typing import Dict


class ErrorComponent(Enum):
    """Components that can generate errors in the system."""

    SEMAPHORE = "FifoSemaphore"


class ErrorCode:
    """Error code with component, HTTP code, and description."""

    def __init__(
        self, component: str, http_code: str, unique_id: str, description: str
    ):
        self.code = f"{component}-{http_code}-{unique_id}"
        self.description = description

    def __str__(self) -> str:
        return f"{self.code}: {self.description}"


# Semaphore Errors
SEMAPHORE_ERRORS = {
    "SEMAPHORE_INVALID_PERMITS_ERROR": ErrorCode(
        ErrorComponent.SEMAPHORE.value,
        "400",
        "00",
        "Semaphore must be initialized with a non-negative number of permits",
    ),
}

# Combined dictionary of all error codes
ERROR_CODES: Dict[str, ErrorCode] = {
    **SEMAPHORE_ERRORS,
}
