# contextlog/datetime_types.py
"""
Date/time support for context data serialization.

Registers converters for the timezone-aware types of the standard library
(zoneinfo zones, fixed offsets, durations and zoned date/times) on the
current serializer settings.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Type, TypeVar
from zoneinfo import ZoneInfo

from .guards import ensure_not_none
from .serialization import get_serializer_settings

T = TypeVar("T")


def use_datetime_types(logger: T) -> T:
    """
    Configure context data serialization to support date/time types.

    Call once during startup, before exceptions are decorated.

    Args:
        logger: The logger (or logger factory) being configured

    Returns:
        The logger unchanged, for chaining

    Raises:
        ArgumentNullError: If logger is None
    """
    ensure_not_none(logger, "logger")

    settings = get_serializer_settings()
    for value_type, converter in datetime_converters().items():
        settings.register_converter(value_type, converter)

    return logger


def datetime_converters() -> Dict[Type[Any], Callable[[Any], Any]]:
    """Get the converters registered by use_datetime_types."""
    return {
        datetime: zoned_datetime_to_string,
        timedelta: timedelta_to_iso8601,
        timezone: timezone_to_string,
        ZoneInfo: zone_to_string,
    }


def zoned_datetime_to_string(value: datetime) -> str:
    """Render a datetime as ISO 8601, followed by its IANA zone when it has one."""
    if isinstance(value.tzinfo, ZoneInfo):
        return f"{value.isoformat()} {value.tzinfo.key}"
    return value.isoformat()


def timedelta_to_iso8601(value: timedelta) -> str:
    """
    Render a timedelta as an ISO 8601 duration.

    Examples:
        timedelta(days=1, hours=2, minutes=3, seconds=4.5) -> "P1DT2H3M4.5S"
        timedelta(minutes=-90) -> "-PT1H30M"
        timedelta(0) -> "PT0S"
    """
    sign = "-" if value < timedelta(0) else ""
    value = abs(value)

    hours, remainder = divmod(value.seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    date_part = f"{value.days}D" if value.days else ""

    time_part = ""
    if hours:
        time_part += f"{hours}H"
    if minutes:
        time_part += f"{minutes}M"
    if seconds or value.microseconds:
        if value.microseconds:
            fraction = f"{value.microseconds:06d}".rstrip("0")
            time_part += f"{seconds}.{fraction}S"
        else:
            time_part += f"{seconds}S"

    if not date_part and not time_part:
        return "PT0S"

    if time_part:
        time_part = f"T{time_part}"

    return f"{sign}P{date_part}{time_part}"


def timezone_to_string(value: timezone) -> str:
    return value.tzname(None)


def zone_to_string(value: ZoneInfo) -> str:
    return value.key
