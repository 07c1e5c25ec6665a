# contextlog/serialization/serializer.py
"""
JSON Serializer

Converts arbitrary Python values into JSON text using the standard library
``json`` module. Values json cannot handle natively (dataclasses, pydantic
models, plain objects, dates, UUIDs, ...) are first reduced to primitives
according to the active SerializerSettings.
"""

import dataclasses
import inspect
import json
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Iterator, Optional, Set, Tuple
from uuid import UUID

from pydantic import BaseModel

from ..exceptions import SerializationError
from .settings import SerializerSettings, get_serializer_settings

_PRIMITIVE_TYPES = (str, bool, int, float)
_SEQUENCE_TYPES = (list, tuple, set, frozenset)
_ZERO_VALUE_TYPES = (bool, int, float)


def serialize(value: Any, settings: Optional[SerializerSettings] = None) -> str:
    """
    Serialize a value to JSON text.

    Args:
        value: The value to serialize
        settings: Serializer settings (defaults to the current process-wide settings)

    Returns:
        JSON text

    Raises:
        SerializationError: If the value, or anything it contains, cannot be converted
    """
    if settings is None:
        settings = get_serializer_settings()

    primitive = to_primitive(value, settings)

    try:
        return json.dumps(
            primitive,
            indent=settings.indent,
            separators=settings.separators,
            sort_keys=settings.sort_keys,
            ensure_ascii=settings.ensure_ascii,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to render JSON: {e}") from e


def to_primitive(value: Any, settings: Optional[SerializerSettings] = None) -> Any:
    """Reduce a value to dicts, lists and JSON scalars."""
    if settings is None:
        settings = get_serializer_settings()
    return _PrimitiveConverter(settings).convert(value)


class _PrimitiveConverter:
    """Single-use converter that tracks depth and the objects being visited."""

    def __init__(self, settings: SerializerSettings):
        self.settings = settings
        self._visiting: Set[int] = set()

    def convert(self, value: Any, depth: int = 0) -> Any:
        if value is None:
            return None

        converter = self.settings.find_converter(type(value))
        if converter is not None:
            converted = converter(value)
            if type(converted) is type(value):
                raise SerializationError(
                    f"Converter for {type(value).__name__} returned the same type"
                )
            return self.convert(converted, depth)

        if isinstance(value, Enum):
            return self.convert(value.value, depth)

        if isinstance(value, _PRIMITIVE_TYPES):
            return value

        if isinstance(value, (datetime, date, time)):
            return value.isoformat()

        if isinstance(value, (UUID, Decimal)):
            return str(value)

        if isinstance(value, Mapping):
            with self._visit(value, depth):
                return {
                    _key(key): self.convert(item, depth + 1)
                    for key, item in value.items()
                }

        if isinstance(value, _SEQUENCE_TYPES):
            with self._visit(value, depth):
                return [self.convert(item, depth + 1) for item in value]

        if isinstance(value, BaseModel):
            with self._visit(value, depth):
                dumped = value.model_dump(
                    exclude_none=self.settings.exclude_none,
                    exclude_defaults=self.settings.exclude_defaults,
                )
                return {
                    key: self.convert(item, depth + 1) for key, item in dumped.items()
                }

        if _is_plain_object(value):
            with self._visit(value, depth):
                return {
                    name: self.convert(item, depth + 1)
                    for name, item in self._members(value)
                }

        raise SerializationError(
            f"Object of type {type(value).__name__} is not JSON serializable"
        )

    def _members(self, value: Any) -> Iterator[Tuple[str, Any]]:
        if dataclasses.is_dataclass(value):
            for field in dataclasses.fields(value):
                item = getattr(value, field.name)
                if self._skip(item, _field_default(field)):
                    continue
                yield field.name, item
            return

        for name, item in _public_attributes(value).items():
            if self._skip(item, _zero_value(item)):
                continue
            yield name, item

    def _skip(self, item: Any, default: Any) -> bool:
        if item is None:
            return self.settings.exclude_none
        if self.settings.exclude_defaults and default is not dataclasses.MISSING:
            return type(item) is type(default) and item == default
        return False

    def _visit(self, value: Any, depth: int) -> "_Visit":
        max_depth = self.settings.max_depth
        if max_depth is not None and depth >= max_depth:
            raise SerializationError(f"Maximum depth of {max_depth} exceeded")

        return _Visit(self._visiting, value)


class _Visit:
    """Context manager marking a container as in progress to detect cycles."""

    def __init__(self, visiting: Set[int], value: Any):
        self.visiting = visiting
        self.marker = id(value)

    def __enter__(self):
        if self.marker in self.visiting:
            raise SerializationError("Circular reference detected")
        self.visiting.add(self.marker)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.visiting.discard(self.marker)
        return False


def _key(key: Any) -> str:
    if isinstance(key, Enum):
        return str(key.value)
    if isinstance(key, str):
        return key
    return str(key)


def _is_plain_object(value: Any) -> bool:
    if isinstance(value, type) or inspect.isroutine(value) or inspect.ismodule(value):
        return False
    if dataclasses.is_dataclass(value):
        return True
    return hasattr(value, "__dict__") or _slot_names(type(value)) != ()


def _public_attributes(value: Any) -> Dict[str, Any]:
    attributes = {}

    for name in _slot_names(type(value)):
        if name.startswith("_"):
            continue
        try:
            attributes[name] = getattr(value, name)
        except AttributeError:
            # Unassigned slot
            continue

    for name, item in getattr(value, "__dict__", {}).items():
        if not name.startswith("_"):
            attributes[name] = item

    return attributes


def _slot_names(value_type: type) -> Tuple[str, ...]:
    names = []
    for klass in value_type.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.extend(name for name in slots if name not in ("__dict__", "__weakref__"))
    return tuple(names)


def _field_default(field: dataclasses.Field) -> Any:
    if field.default is not dataclasses.MISSING:
        return field.default
    if field.default_factory is not dataclasses.MISSING:
        return field.default_factory()
    return dataclasses.MISSING


def _zero_value(item: Any) -> Any:
    if isinstance(item, _ZERO_VALUE_TYPES) and not isinstance(item, Enum):
        return type(item)()
    return dataclasses.MISSING
