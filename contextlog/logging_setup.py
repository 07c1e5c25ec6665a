# contextlog/logging_setup.py
"""
Logging setup for loguru.

Installs a console sink whose default format shows the data attached to
logged exceptions, and applies the package settings at startup.
"""

import sys
from typing import Any, Mapping, Optional

from loguru import logger

from .config import Settings, get_settings
from .constants import (
    EXCEPTION_DATA_MAX_VALUE_LENGTH,
    EXCEPTION_DATA_TEXT_PREFIX,
    EXCEPTION_DATA_TEXT_SEPARATOR,
    EXCEPTION_DATA_TRUNCATE_SUFFIX,
)
from .datetime_types import use_datetime_types
from .serialization import set_serializer_settings


def render_exception_data(data: Optional[Mapping[str, Any]]) -> str:
    """
    Render attached exception data as indented key=value lines.

    Args:
        data: The exception data (may be None or empty)

    Returns:
        Text to append to a log line, or an empty string when there is no data
    """
    if not data:
        return ""

    parts = []
    for key, value in data.items():
        text = str(value)
        if len(text) > EXCEPTION_DATA_MAX_VALUE_LENGTH:
            cut = EXCEPTION_DATA_MAX_VALUE_LENGTH - len(EXCEPTION_DATA_TRUNCATE_SUFFIX)
            text = text[:cut] + EXCEPTION_DATA_TRUNCATE_SUFFIX
        parts.append(f"{key}={text}")

    return EXCEPTION_DATA_TEXT_PREFIX + EXCEPTION_DATA_TEXT_SEPARATOR.join(parts)


def patch_record(record) -> None:
    """loguru patcher adding the rendered exception data to every record."""
    extra = record["extra"]
    extra["exception_data_text"] = render_exception_data(extra.get("exception_data"))


def configure_logging(settings: Optional[Settings] = None, sink: Any = None) -> int:
    """
    Replace the loguru sinks with a single console sink.

    Args:
        settings: Package settings (defaults to get_settings())
        sink: loguru sink (defaults to sys.stderr)

    Returns:
        The loguru handler id of the new sink
    """
    if settings is None:
        settings = get_settings()

    logger.remove()
    logger.configure(patcher=patch_record)

    return logger.add(
        sink if sink is not None else sys.stderr,
        level=settings.log_level.value,
        format=settings.log_format,
        colorize=settings.colorize,
        serialize=settings.serialize,
        backtrace=False,
        diagnose=False,
    )


def configure(settings: Optional[Settings] = None, sink: Any = None) -> int:
    """
    Apply package settings: serializer settings, date/time types and logging.

    Returns:
        The loguru handler id of the console sink
    """
    if settings is None:
        settings = get_settings()

    set_serializer_settings(settings.to_serializer_settings())

    if settings.use_datetime_types:
        use_datetime_types(logger)

    handler_id = configure_logging(settings, sink=sink)

    logger.debug(
        f"contextlog configured (level={settings.log_level.value}, "
        f"datetime_types={settings.use_datetime_types})"
    )

    return handler_id
