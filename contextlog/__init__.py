"""
contextlog - exception context data and contextual logging helpers.

Attach JSON serialized context data to exceptions, and log an exception
with its context data in a single call.

Usage:
    from contextlog import configure, get_logger, log_error_with_context

    configure()
    log = get_logger(__name__)

    try:
        charge(payment)
    except PaymentError as e:
        log_error_with_context(log, e, payment, "Payment {0} declined", payment.id)
"""

from .config import Settings, get_settings
from .constants import CONTEXT_DATA_KEY
from .datetime_types import use_datetime_types
from .enums import LogLevel
from .exception_data import (
    add_context_data,
    add_serialized_data,
    get_exception_data,
    has_serialized_data,
)
from .exceptions import (
    ArgumentNullError,
    ContextLogError,
    InvalidArgumentError,
    SerializationError,
)
from .logger_extensions import (
    EventId,
    LogValues,
    StructuredLogger,
    log_critical_with_context,
    log_error_with_context,
    message_formatter,
    write_message,
)
from .logging_setup import configure, configure_logging, render_exception_data
from .loguru_logger import LoguruLogger, get_logger
from .serialization import (
    SerializerSettings,
    default_serializer_settings,
    get_serializer_settings,
    reset_serializer_settings,
    serialize,
    set_serializer_settings,
)

__version__ = "1.0.0"

__all__ = [
    "CONTEXT_DATA_KEY",
    # Exception data
    "add_context_data",
    "add_serialized_data",
    "get_exception_data",
    "has_serialized_data",
    # Logging
    "EventId",
    "LogLevel",
    "LogValues",
    "LoguruLogger",
    "StructuredLogger",
    "get_logger",
    "log_critical_with_context",
    "log_error_with_context",
    "message_formatter",
    "write_message",
    # Serialization
    "SerializerSettings",
    "default_serializer_settings",
    "get_serializer_settings",
    "reset_serializer_settings",
    "serialize",
    "set_serializer_settings",
    "use_datetime_types",
    # Setup
    "Settings",
    "configure",
    "configure_logging",
    "get_settings",
    "render_exception_data",
    # Exceptions
    "ArgumentNullError",
    "ContextLogError",
    "InvalidArgumentError",
    "SerializationError",
]
