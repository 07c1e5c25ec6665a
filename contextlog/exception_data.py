# contextlog/exception_data.py
"""
Exception Data

Attaches contextual data to exceptions as JSON so that it travels with the
exception into log sinks.

Each exception gets a side-table (a plain dict stored on the instance).
Values are written once per key and are always either a built-in scalar or
a string. Rendering problems never escape: when a value cannot be serialized
its str() form is stored instead, and when that fails too nothing is stored.
"""

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Optional
from uuid import UUID

from loguru import logger

from .constants import CONTEXT_DATA_KEY, EMPTY_JSON_OBJECT, EXCEPTION_DATA_ATTRIBUTE
from .guards import ensure_instance, ensure_not_blank, ensure_not_none
from .serialization import SerializerSettings, get_serializer_settings, serialize

# Standard library value types stored without conversion
SCALAR_TYPES = frozenset(
    {
        bool,
        int,
        float,
        complex,
        Decimal,
        datetime,
        date,
        time,
        timedelta,
        UUID,
    }
)


def get_exception_data(exception: BaseException) -> Dict[str, Any]:
    """
    Get the data side-table of an exception, creating it when missing.

    Args:
        exception: The exception

    Returns:
        The mutable dict holding the exception's attached data

    Raises:
        ArgumentNullError: If exception is None
        InvalidArgumentError: If exception is not an exception instance
    """
    ensure_instance(exception, BaseException, "exception")

    data = getattr(exception, EXCEPTION_DATA_ATTRIBUTE, None)
    if not isinstance(data, dict):
        data = {}
        setattr(exception, EXCEPTION_DATA_ATTRIBUTE, data)

    return data


def add_context_data(
    exception: BaseException,
    data: Any,
    settings: Optional[SerializerSettings] = None,
) -> BaseException:
    """
    Add context data to the exception under the ContextData key.

    Args:
        exception: The exception
        data: The context data
        settings: Serializer settings (defaults to the current settings)

    Returns:
        The exception, with context data attached

    Raises:
        ArgumentNullError: If exception or data is None
    """
    return add_serialized_data(exception, CONTEXT_DATA_KEY, data, settings)


def add_serialized_data(
    exception: BaseException,
    key: str,
    data: Any,
    settings: Optional[SerializerSettings] = None,
) -> BaseException:
    """
    Add data to the exception as a JSON serialized value.

    The first value stored for a key wins; later calls for the same key
    leave the exception untouched.

    Args:
        exception: The exception
        key: The key identifying the data
        data: The data to store
        settings: Serializer settings (defaults to the current settings)

    Returns:
        The exception

    Raises:
        ArgumentNullError: If exception, key or data is None
        InvalidArgumentError: If key is empty or whitespace
    """
    ensure_instance(exception, BaseException, "exception")
    ensure_not_blank(key, "key")
    ensure_not_none(data, "data")

    if has_serialized_data(exception, key):
        return exception

    converted = _convert_data(data, settings)

    if converted is not None:
        get_exception_data(exception)[key] = converted

    return exception


def has_serialized_data(exception: BaseException, key: str) -> bool:
    """
    Check whether the exception holds data for a key.

    Raises:
        ArgumentNullError: If exception or key is None
        InvalidArgumentError: If key is empty or whitespace
    """
    ensure_instance(exception, BaseException, "exception")
    ensure_not_blank(key, "key")

    data = getattr(exception, EXCEPTION_DATA_ATTRIBUTE, None)

    return isinstance(data, dict) and key in data


def _convert_data(data: Any, settings: Optional[SerializerSettings]) -> Any:
    if type(data) in SCALAR_TYPES:
        return data

    if isinstance(data, str) and not isinstance(data, Enum):
        if not data.strip():
            return None
        return str.__str__(data)

    if settings is None:
        settings = get_serializer_settings()

    try:
        serialized = serialize(data, settings)

        if serialized == EMPTY_JSON_OBJECT:
            # Nothing of value was serialized, report whatever str() gives
            return str(data)

        return serialized
    except Exception:
        logger.debug(
            f"Serialization of {type(data).__name__} failed, falling back to str()"
        )

        try:
            return str(data)
        except Exception:
            logger.debug(
                f"str() of {type(data).__name__} failed, no exception data stored"
            )
            return None
