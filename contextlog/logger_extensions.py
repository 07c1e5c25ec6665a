# contextlog/logger_extensions.py
"""
Logger Extensions

One-call helpers that attach context data to an exception and write a
single structured log record for it.

Usage:
    from contextlog import get_logger, log_error_with_context

    log = get_logger(__name__)

    try:
        process(order)
    except OrderError as e:
        log_error_with_context(log, e, order, "Order {0} failed", order.id)
"""

import re
from dataclasses import dataclass
from string import Formatter
from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence, Tuple, Union

from .constants import DEFAULT_EVENT_ID, ORIGINAL_FORMAT_KEY
from .enums import LogLevel
from .exception_data import add_context_data
from .exceptions import InvalidArgumentError
from .guards import ensure_instance, ensure_not_none

_FIELD_ROOT_PATTERN = re.compile(r"[.\[]")


@dataclass(frozen=True)
class EventId:
    """Identifies a logging event by number and optional name."""

    id: int = DEFAULT_EVENT_ID
    name: Optional[str] = None

    @classmethod
    def coerce(cls, value: Union["EventId", int, None]) -> "EventId":
        """Build an EventId from an EventId, an int or None."""
        if value is None:
            return cls()
        if isinstance(value, EventId):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)

        raise InvalidArgumentError(
            f"event_id must be an EventId or int, got {type(value).__name__}",
            argument_name="event_id",
        )

    def __str__(self) -> str:
        return self.name or str(self.id)


class LogValues:
    """
    Message template plus arguments, rendered on demand.

    Positional placeholders follow str.format ("{0}-{1}", "{}"). Named
    placeholders ("{order_id}") take the arguments in order of first
    appearance. A template that cannot be rendered with the given arguments
    renders as the raw template.
    """

    def __init__(self, template: str, args: Sequence[Any] = ()):
        self.template = template
        self.args = tuple(args)
        self._names = _placeholder_names(template)

    def render(self) -> str:
        named = dict(zip(self._names, self.args))

        try:
            return self.template.format(*self.args, **named)
        except (IndexError, KeyError, ValueError, AttributeError, TypeError):
            return self.template

    def items(self) -> List[Tuple[str, Any]]:
        """Placeholder/value pairs followed by the original template."""
        pairs: List[Tuple[str, Any]] = []

        if self._names:
            pairs.extend(zip(self._names, self.args))
        else:
            pairs.extend((str(index), arg) for index, arg in enumerate(self.args))

        pairs.append((ORIGINAL_FORMAT_KEY, self.template))

        return pairs

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.items())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"LogValues(template={self.template!r}, args={self.args!r})"


MessageFormatter = Callable[
    [Optional[LogValues], Optional[BaseException]], Optional[str]
]


class StructuredLogger(Protocol):
    """The logger contract written to by the helpers in this module."""

    def log(
        self,
        level: LogLevel,
        event_id: EventId,
        state: Optional[LogValues],
        exception: Optional[BaseException],
        formatter: MessageFormatter,
    ) -> None: ...


def message_formatter(
    state: Optional[LogValues], exception: Optional[BaseException]
) -> Optional[str]:
    """Render the log message from the record state."""
    if state is None:
        return None
    return str(state)


def log_critical_with_context(
    logger: StructuredLogger,
    exception: BaseException,
    context_data: Any,
    message: Optional[str] = None,
    *args: Any,
    event_id: Union[EventId, int, None] = DEFAULT_EVENT_ID,
) -> None:
    """
    Log a critical exception with context data.

    Args:
        logger: The logger
        exception: The exception
        context_data: Context data to attach to the exception (ignored when None)
        message: Optional message template
        *args: Message template arguments
        event_id: The event id

    Raises:
        ArgumentNullError: If logger or exception is None
    """
    _write_message(
        logger, LogLevel.CRITICAL, event_id, exception, context_data, message, args
    )


def log_error_with_context(
    logger: StructuredLogger,
    exception: BaseException,
    context_data: Any,
    message: Optional[str] = None,
    *args: Any,
    event_id: Union[EventId, int, None] = DEFAULT_EVENT_ID,
) -> None:
    """
    Log an error exception with context data.

    Args:
        logger: The logger
        exception: The exception
        context_data: Context data to attach to the exception (ignored when None)
        message: Optional message template
        *args: Message template arguments
        event_id: The event id

    Raises:
        ArgumentNullError: If logger or exception is None
    """
    _write_message(
        logger, LogLevel.ERROR, event_id, exception, context_data, message, args
    )


def write_message(
    logger: StructuredLogger,
    level: LogLevel,
    event_id: Union[EventId, int, None],
    exception: BaseException,
    context_data: Any,
    message: Optional[str] = None,
    args: Sequence[Any] = (),
) -> None:
    """
    Attach context data to an exception and write one log record for it.

    Validation happens before anything is attached or logged, so a bad call
    leaves both the exception and the logger untouched.

    Raises:
        ArgumentNullError: If logger or exception is None
        InvalidArgumentError: If message is not a string or event_id is invalid
        ValueError: If level is not a LogLevel name
    """
    _write_message(logger, level, event_id, exception, context_data, message, args)


def _write_message(
    logger: StructuredLogger,
    level: LogLevel,
    event_id: Union[EventId, int, None],
    exception: BaseException,
    context_data: Any,
    message: Optional[str],
    args: Sequence[Any],
) -> None:
    # Called directly by every public helper so loggers see a fixed call depth
    ensure_not_none(logger, "logger")
    ensure_instance(exception, BaseException, "exception")
    if message is not None:
        ensure_instance(message, str, "message")
    level = LogLevel(level)
    event_id = EventId.coerce(event_id)

    if context_data is not None:
        add_context_data(exception, context_data)

    state = None

    if message is not None and message.strip():
        state = LogValues(message, args or ())

    logger.log(level, event_id, state, exception, message_formatter)


def _placeholder_names(template: str) -> Tuple[str, ...]:
    names: List[str] = []

    try:
        fields = [field for _, field, _, _ in Formatter().parse(template)]
    except ValueError:
        return ()

    for field in fields:
        if not field:
            continue
        root = _FIELD_ROOT_PATTERN.split(field, 1)[0]
        if root and not root.isdigit() and root not in names:
            names.append(root)

    return tuple(names)
