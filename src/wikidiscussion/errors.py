from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-related errors.

    All errors that inherit from UserError will have their messages
    displayed to the user. These errors should not contain any
    sensitive information.
    """


class NotFoundError(UserError):
    """Raised when a requested page is not found."""

    def __init__(self, message: str = "Page not found") -> None:
        super().__init__(message)


class AccessDeniedError(UserError):
    """Raised when a user tries to read a page they do not have permission for."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message)


class ValidationError(UserError):
    """Raised when user input fails validation."""
