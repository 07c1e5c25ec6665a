# contextlog/guards.py
"""
Argument Guard Utilities

Small validation functions used at every public entry point so that
argument contract violations surface immediately and consistently.
"""

from typing import Any, Optional, Tuple, Type, Union

from .exceptions import ArgumentNullError, InvalidArgumentError


def ensure_not_none(value: Any, name: str) -> Any:
    """
    Ensure that a required argument is present.

    Args:
        value: The argument value
        name: The argument name, used in the error message

    Returns:
        The value unchanged

    Raises:
        ArgumentNullError: If the value is None
    """
    if value is None:
        raise ArgumentNullError(f"{name} cannot be None", argument_name=name)

    return value


def ensure_not_blank(value: Optional[str], name: str) -> str:
    """
    Ensure that a required string argument has content.

    Args:
        value: The string to validate
        name: The argument name, used in the error message

    Returns:
        The string unchanged (not stripped)

    Raises:
        ArgumentNullError: If the value is None
        InvalidArgumentError: If the value is not a string, or is empty or whitespace
    """
    ensure_not_none(value, name)

    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{name} must be a string, got {type(value).__name__}", argument_name=name
        )

    if not value.strip():
        raise InvalidArgumentError(
            f"{name} cannot be empty or whitespace", argument_name=name
        )

    return value


def ensure_instance(
    value: Any, expected: Union[Type, Tuple[Type, ...]], name: str
) -> Any:
    """Ensure that a required argument is present and of the expected type."""
    ensure_not_none(value, name)

    if not isinstance(value, expected):
        raise InvalidArgumentError(
            f"{name} must be an instance of {_type_names(expected)}, "
            f"got {type(value).__name__}",
            argument_name=name,
        )

    return value


def _type_names(expected: Union[Type, Tuple[Type, ...]]) -> str:
    if isinstance(expected, tuple):
        return " or ".join(item.__name__ for item in expected)
    return expected.__name__
