"""
Serialization package.

- SerializerSettings: options and converters used to render JSON
- serialize: converts a value to JSON text
"""

from .serializer import serialize, to_primitive
from .settings import (
    SerializerSettings,
    default_serializer_settings,
    get_serializer_settings,
    reset_serializer_settings,
    set_serializer_settings,
)

__all__ = [
    "SerializerSettings",
    "default_serializer_settings",
    "get_serializer_settings",
    "set_serializer_settings",
    "reset_serializer_settings",
    "serialize",
    "to_primitive",
]
