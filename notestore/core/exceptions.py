"""
Custom Exceptions.

Application-specific exception classes for consistent error handling.

Lookups that find nothing are not errors: repositories report them with
None or False. Exceptions are reserved for rejected input.
"""


class ApplicationError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, code: str = "SYS_INTERNAL_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidArgumentError(ApplicationError):
    """Raised when a note field or tag is given a value it cannot hold."""

    def __init__(self, message: str = "Invalid argument", details: dict | None = None) -> None:
        self.details = details or {}
        super().__init__(message, code="VAL_INVALID_ARGUMENT")
