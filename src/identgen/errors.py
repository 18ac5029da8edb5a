from abc import ABC


class UserError(ABC, Exception):
    """Base class for user-facing errors.

    All errors that inherit from UserError will have their messages
    printed by the command line interface as-is.
    """


class ValidationError(UserError):
    """Raised when a table, an identifier state or other input fails validation."""
