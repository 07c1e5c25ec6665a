# contextlog/exceptions.py
"""
Custom exceptions for contextlog.

Centralized location for all custom exception classes raised by the package.
"""

from typing import Optional


class ContextLogError(Exception):
    """Base exception for all contextlog errors."""

    pass


class InvalidArgumentError(ContextLogError, ValueError):
    """Raised when a caller passes an argument that breaks a call contract."""

    def __init__(self, message: str, argument_name: Optional[str] = None):
        super().__init__(message)
        self.argument_name = argument_name


class ArgumentNullError(InvalidArgumentError):
    """Raised when a required argument is None."""

    pass


class SerializationError(ContextLogError, TypeError):
    """Raised when a value cannot be converted to JSON."""

    pass
