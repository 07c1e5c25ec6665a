# contextlog/constants.py
"""
Package Constants

Centralized constants for exception data storage, serialization
and logging output.
"""

# ====================================================================
# EXCEPTION DATA CONSTANTS
# ====================================================================

# Attribute holding the per-exception side-table
EXCEPTION_DATA_ATTRIBUTE = "_contextlog_data"

# Key used when attaching context data to an exception
CONTEXT_DATA_KEY = "ContextData"

# JSON produced for an object that carries no serializable members
EMPTY_JSON_OBJECT = "{}"

# ====================================================================
# LOGGING CONSTANTS
# ====================================================================

# State key holding the original message template
ORIGINAL_FORMAT_KEY = "{OriginalFormat}"

DEFAULT_EVENT_ID = 0

DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>{extra[exception_data_text]}"
)

# Console rendering of attached exception data
EXCEPTION_DATA_TEXT_PREFIX = "\n  ↳ "
EXCEPTION_DATA_TEXT_SEPARATOR = "\n  ↳ "
EXCEPTION_DATA_MAX_VALUE_LENGTH = 500
EXCEPTION_DATA_TRUNCATE_SUFFIX = "..."

# ====================================================================
# CONFIGURATION CONSTANTS
# ====================================================================

ENV_PREFIX = "CONTEXTLOG_"
