# contextlog/enums.py
"""Enum definitions shared across the package."""

from enum import Enum


class LogLevel(str, Enum):
    """Log levels, named the way loguru names its built-in levels."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"
