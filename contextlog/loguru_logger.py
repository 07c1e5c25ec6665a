# contextlog/loguru_logger.py
"""
loguru adapter for the structured logger contract.

Records written through LoguruLogger carry the event id, the message
template values and a copy of the exception's attached data in
``record["extra"]``, so sinks and formats can pick them up.
"""

from typing import Any, Dict, Optional

from loguru import logger as loguru_logger

from .constants import EXCEPTION_DATA_ATTRIBUTE
from .enums import LogLevel
from .guards import ensure_not_none
from .logger_extensions import EventId, LogValues, MessageFormatter


class LoguruLogger:
    """
    StructuredLogger implementation that writes to loguru.

    Args:
        logger: loguru logger to write to (defaults to the global loguru logger)
        name: Optional logger name, bound as ``logger_name``
        depth: Stack frames to skip so loguru reports the caller of the
            contextlog helpers rather than this adapter
    """

    # log_*_with_context or write_message -> _write_message -> LoguruLogger.log
    CALLER_DEPTH = 3

    def __init__(
        self,
        logger: Any = None,
        name: Optional[str] = None,
        depth: int = CALLER_DEPTH,
    ):
        base = logger if logger is not None else loguru_logger
        if name:
            base = base.bind(logger_name=name)

        self.name = name
        self.depth = depth
        self._logger = base

    def log(
        self,
        level: LogLevel,
        event_id: EventId,
        state: Optional[LogValues],
        exception: Optional[BaseException],
        formatter: MessageFormatter,
    ) -> None:
        ensure_not_none(formatter, "formatter")

        event_id = EventId.coerce(event_id)
        message = formatter(state, exception)

        self._logger.opt(exception=exception, depth=self.depth).bind(
            event_id=event_id.id,
            event_name=event_id.name,
            log_values=state.to_dict() if state is not None else {},
            exception_data=_exception_data(exception),
        ).log(LogLevel(level).value, message or "")

    def __repr__(self) -> str:
        return f"LoguruLogger(name={self.name!r})"


def get_logger(name: Optional[str] = None) -> LoguruLogger:
    """Get a LoguruLogger writing to the global loguru logger."""
    return LoguruLogger(name=name)


def _exception_data(exception: Optional[BaseException]) -> Dict[str, Any]:
    if exception is None:
        return {}
    data = getattr(exception, EXCEPTION_DATA_ATTRIBUTE, None)
    return dict(data) if isinstance(data, dict) else {}
