"""Domain error codes for the event tracker."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    STORE_FAILURE = "STORE_FAILURE"
    LIST_AFTER_CREATE_FAILED = "LIST_AFTER_CREATE_FAILED"
    INVALID_EVENT_DATE = "INVALID_EVENT_DATE"
    INVALID_CONFIGURATION = "INVALID_CONFIGURATION"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class StoreError(DomainError):
    """Raised when the backing store fails during an operation."""

    def __init__(
        self, operation: str, message: str, code: ErrorCode = ErrorCode.STORE_FAILURE
    ) -> None:
        super().__init__(code=code, message=f"{operation} - Error: {message}")
        object.__setattr__(self, "operation", operation)


class ListAfterCreateError(StoreError):
    """Raised when an event was stored but re-reading the list failed."""

    def __init__(self, message: str) -> None:
        super().__init__(
            "create.list_all", message, code=ErrorCode.LIST_AFTER_CREATE_FAILED
        )


class InvalidEventDateError(DomainError):
    """Raised when an event date is not a valid M/D/YYYY string."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_DATE,
            message=f"Invalid event date: {value}",
        )
        object.__setattr__(self, "value", value)


class ConfigurationError(DomainError):
    """Raised when the store cannot be built from the given settings."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.INVALID_CONFIGURATION, message=message)
