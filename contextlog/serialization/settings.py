# contextlog/serialization/settings.py
"""
Serializer Settings

Holds the options used to render context data as JSON, along with the
process-wide "current settings" slot read by the exception data helpers.

The slot is not synchronized. Set it once during application startup,
before exceptions are being decorated from multiple threads.
"""

from typing import Any, Callable, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field

from ..guards import ensure_instance, ensure_not_none

Converter = Callable[[Any], Any]


class SerializerSettings(BaseModel):
    """
    Options controlling how values are converted to their JSON form.

    Features:
    - Omission of None members and of members holding their default value
    - Compact output unless an indent is configured
    - Optional depth limit
    - Per-type converters for values the serializer does not understand natively
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, validate_assignment=True)

    exclude_none: bool = Field(
        default=True, description="Omit object members whose value is None"
    )
    exclude_defaults: bool = Field(
        default=True, description="Omit object members holding their default value"
    )
    indent: Optional[int] = Field(
        default=None, ge=0, description="JSON indentation, None for compact output"
    )
    sort_keys: bool = Field(default=False, description="Sort JSON object keys")
    ensure_ascii: bool = Field(default=False, description="Escape non-ASCII text")
    max_depth: Optional[int] = Field(
        default=None, ge=1, description="Maximum nesting depth, None for no limit"
    )
    converters: Dict[Type[Any], Converter] = Field(
        default_factory=dict, description="Converters keyed by value type"
    )

    def register_converter(
        self, value_type: Type[Any], converter: Converter
    ) -> "SerializerSettings":
        """
        Register a converter for a value type.

        The converter receives the value and returns something the serializer
        can handle (a primitive, a container, or another convertible object).

        Args:
            value_type: Type handled by the converter (subclasses included)
            converter: Callable producing a serializable replacement

        Returns:
            These settings, for chaining
        """
        ensure_instance(value_type, type, "value_type")
        ensure_not_none(converter, "converter")

        self.converters[value_type] = converter

        return self

    def find_converter(self, value_type: Type[Any]) -> Optional[Converter]:
        """Return the converter registered for the closest type in the MRO, if any."""
        if not self.converters:
            return None

        for candidate in value_type.__mro__:
            converter = self.converters.get(candidate)
            if converter is not None:
                return converter

        return None

    @property
    def separators(self) -> tuple:
        if self.indent is None:
            return (",", ":")
        return (",", ": ")


def default_serializer_settings() -> SerializerSettings:
    """
    Build the baseline serializer settings.

    Every call returns a new instance, so changes made to one result never
    leak into another or into the settings returned by later calls.
    """
    return SerializerSettings()


_current_settings: SerializerSettings = default_serializer_settings()


def get_serializer_settings() -> SerializerSettings:
    """Get the settings used when no explicit settings are passed."""
    return _current_settings


def set_serializer_settings(settings: SerializerSettings) -> SerializerSettings:
    """
    Replace the settings used when no explicit settings are passed.

    Args:
        settings: The new settings

    Returns:
        The installed settings

    Raises:
        ArgumentNullError: If settings is None
        InvalidArgumentError: If settings is not a SerializerSettings instance
    """
    global _current_settings

    ensure_instance(settings, SerializerSettings, "settings")
    _current_settings = settings

    return settings


def reset_serializer_settings() -> SerializerSettings:
    """Restore a fresh copy of the baseline settings into the current slot."""
    return set_serializer_settings(default_serializer_settings())
