# tests/conftest.py
"""
Pytest configuration and shared fixtures for contextlog tests.
"""

import sys
from datetime import date
from typing import Any, List, NamedTuple, Optional

import pytest
from loguru import logger

from contextlog import EventId, LogLevel, LogValues, reset_serializer_settings

from .models import Company, Person


class LogEntry(NamedTuple):
    level: LogLevel
    event_id: EventId
    state: Optional[LogValues]
    exception: Optional[BaseException]
    formatter: Any

    @property
    def message(self) -> Optional[str]:
        return self.formatter(self.state, self.exception)


class RecordingLogger:
    """StructuredLogger fake that keeps every entry written to it."""

    def __init__(self):
        self.entries: List[LogEntry] = []

    def log(self, level, event_id, state, exception, formatter) -> None:
        self.entries.append(LogEntry(level, event_id, state, exception, formatter))

    @property
    def last(self) -> LogEntry:
        return self.entries[-1]


@pytest.fixture(autouse=True)
def fresh_serializer_settings():
    """Give each test the baseline serializer settings."""
    reset_serializer_settings()
    yield
    reset_serializer_settings()


@pytest.fixture
def recording_logger():
    """Provide a logger that records entries instead of writing them."""
    return RecordingLogger()


@pytest.fixture
def loguru_messages():
    """Capture loguru output for the duration of a test."""
    messages = []
    handler_id = logger.add(messages.append, level="TRACE", format="{message}")
    yield messages
    try:
        logger.remove(handler_id)
    except ValueError:
        # Already removed by a test that reconfigured logging
        pass


@pytest.fixture
def restore_loguru():
    """Restore the default loguru sink after tests that replace the sinks."""
    yield
    logger.remove()
    logger.add(sys.stderr)


@pytest.fixture
def person():
    return Person(
        first_name="Ada",
        last_name="Lovelace",
        dob=date(1815, 12, 10),
        work_email="ada@example.com",
        priority=2,
    )


@pytest.fixture
def company(person):
    return Company(
        name="Analytical Engines",
        address="12 St James's Square",
        owner=person,
        staff=[person, Person(first_name="Charles", last_name="Babbage")],
    )
