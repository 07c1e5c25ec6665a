# tests/test_serializer.py
"""
Test suite for the JSON serializer.

Covers primitive handling, object member selection (None and default
omission), containers, converters and the failure modes that make the
exception data helpers fall back to str().
"""

import threading
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from uuid import UUID

import pytest

from contextlog.exceptions import SerializationError
from contextlog.serialization import SerializerSettings, serialize, to_primitive

from .models import (
    Address,
    Company,
    EmptyModel,
    Node,
    Order,
    Person,
    SerializeFailure,
    SlottedPoint,
)


class Color(str, Enum):
    RED = "red"
    BLUE = "blue"


@pytest.mark.unit
@pytest.mark.serialization
class TestSerializePrimitives:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (None, "null"),
            (True, "true"),
            (42, "42"),
            (1.5, "1.5"),
            ("text", '"text"'),
            ("café", '"café"'),
        ],
    )
    def test_scalars(self, value, expected):
        assert serialize(value) == expected

    def test_standard_library_values_render_as_text(self):
        value = [
            UUID("12345678-1234-5678-1234-567812345678"),
            Decimal("1.50"),
            datetime(2024, 1, 2, 3, 4, 5),
            date(2024, 1, 2),
            time(8, 30),
        ]

        assert serialize(value) == (
            '["12345678-1234-5678-1234-567812345678","1.50",'
            '"2024-01-02T03:04:05","2024-01-02","08:30:00"]'
        )

    def test_enum_renders_value(self):
        assert serialize(Color.RED) == '"red"'

    def test_ensure_ascii_escapes_text(self):
        settings = SerializerSettings(ensure_ascii=True)

        assert serialize("café", settings) == '"caf\\u00e9"'


@pytest.mark.unit
@pytest.mark.serialization
class TestSerializeContainers:
    def test_mapping_keeps_none_entries(self):
        assert serialize({"a": None, "b": 1}) == '{"a":null,"b":1}'

    def test_mapping_keys_become_strings(self):
        assert serialize({1: "one", Color.BLUE: "sky"}) == '{"1":"one","blue":"sky"}'

    def test_sequences_become_arrays(self):
        assert serialize((1, 2)) == "[1,2]"
        assert serialize(frozenset({3})) == "[3]"
        assert serialize([]) == "[]"

    def test_empty_mapping(self):
        assert serialize({}) == "{}"

    def test_indent(self):
        assert serialize({"a": 1}, SerializerSettings(indent=2)) == '{\n  "a": 1\n}'

    def test_sort_keys(self):
        assert serialize({"b": 1, "a": 2}, SerializerSettings(sort_keys=True)) == (
            '{"a":2,"b":1}'
        )

    def test_shared_reference_is_not_a_cycle(self, person):
        result = serialize([person, person])

        assert result.count('"first_name":"Ada"') == 2


@pytest.mark.unit
@pytest.mark.serialization
class TestSerializeObjects:
    def test_dataclass_omits_none_and_default_members(self, company):
        expected = (
            '{"name":"Analytical Engines","address":"12 St James\'s Square",'
            '"owner":{"first_name":"Ada","last_name":"Lovelace","dob":"1815-12-10",'
            '"work_email":"ada@example.com","priority":2},'
            '"staff":[{"first_name":"Ada","last_name":"Lovelace","dob":"1815-12-10",'
            '"work_email":"ada@example.com","priority":2},'
            '{"first_name":"Charles","last_name":"Babbage"}]}'
        )

        assert serialize(company) == expected

    def test_dataclass_keeps_defaults_when_configured(self):
        settings = SerializerSettings(exclude_defaults=False)

        result = serialize(Person(first_name="A", last_name="B"), settings)

        assert result == '{"first_name":"A","last_name":"B","priority":0}'

    def test_dataclass_keeps_everything_when_configured(self):
        settings = SerializerSettings(exclude_defaults=False, exclude_none=False)

        result = serialize(Person(first_name="A", last_name="B"), settings)

        assert result == (
            '{"first_name":"A","last_name":"B","dob":null,"gender":null,'
            '"mobile":null,"work_email":null,"priority":0,"time_zone":null}'
        )

    def test_empty_default_factory_member_is_omitted(self):
        assert serialize(Company(name="Solo")) == '{"name":"Solo"}'

    def test_plain_object_uses_public_attributes(self):
        address = Address("1 Main St", "Springfield")

        assert serialize(address) == '{"street":"1 Main St","city":"Springfield"}'

    def test_plain_object_keeps_non_zero_values(self):
        address = Address("1 Main St", "Springfield", unit=4, notes="Back door")

        assert serialize(address) == (
            '{"street":"1 Main St","city":"Springfield","unit":4,"notes":"Back door"}'
        )

    def test_slotted_object_skips_unset_and_zero_slots(self):
        assert serialize(SlottedPoint(1, 0)) == '{"x":1}'

    def test_pydantic_model(self):
        assert serialize(Order(id=7)) == '{"id":7}'
        assert serialize(Order(id=7, status="paid")) == '{"id":7,"status":"paid"}'

    def test_object_without_members_renders_empty_object(self):
        assert serialize(EmptyModel()) == "{}"

    def test_to_primitive_returns_python_structures(self, person):
        result = to_primitive({"owner": person})

        assert result["owner"]["first_name"] == "Ada"
        assert result["owner"]["dob"] == "1815-12-10"


@pytest.mark.unit
@pytest.mark.serialization
class TestSerializeFailures:
    def test_unsupported_member_raises(self):
        with pytest.raises(SerializationError):
            serialize(SerializeFailure(name="x"))

    def test_serialization_error_is_a_type_error(self):
        with pytest.raises(TypeError):
            serialize(threading.Lock())

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_floats_raise(self, value):
        with pytest.raises(SerializationError):
            serialize({"a": value})

    def test_circular_reference_raises(self):
        node = Node("root")
        node.child = node

        with pytest.raises(SerializationError, match="Circular"):
            serialize(node)

    def test_circular_container_raises(self):
        items = []
        items.append(items)

        with pytest.raises(SerializationError):
            serialize(items)

    def test_max_depth(self):
        settings = SerializerSettings(max_depth=1)

        assert serialize({"a": 1}, settings) == '{"a":1}'

        with pytest.raises(SerializationError, match="depth"):
            serialize({"a": {"b": 1}}, settings)

    @pytest.mark.parametrize("value", [len, lambda: 1, Person, threading])
    def test_callables_types_and_modules_raise(self, value):
        with pytest.raises(SerializationError):
            serialize(value)


@pytest.mark.unit
@pytest.mark.serialization
class TestSerializeConverters:
    def test_converter_replaces_value(self):
        settings = SerializerSettings().register_converter(
            Address, lambda a: f"{a.street}, {a.city}"
        )

        assert serialize(Address("1 Main St", "Springfield"), settings) == (
            '"1 Main St, Springfield"'
        )

    def test_converter_applies_to_subclasses(self):
        class Warehouse(Address):
            pass

        settings = SerializerSettings().register_converter(Address, lambda a: a.city)

        assert serialize([Warehouse("Dock 4", "Leeds")], settings) == '["Leeds"]'

    def test_converter_overrides_builtin_handling(self):
        settings = SerializerSettings().register_converter(
            date, lambda d: d.strftime("%d/%m/%Y")
        )

        assert serialize(date(2024, 2, 29), settings) == '"29/02/2024"'

    def test_converter_result_is_converted_again(self, person):
        settings = SerializerSettings().register_converter(
            Address, lambda a: {"resident": person}
        )

        result = serialize(Address("1 Main St", "Springfield"), settings)

        assert result.startswith('{"resident":{"first_name":"Ada"')

    def test_converter_returning_same_type_raises(self):
        settings = SerializerSettings().register_converter(Address, lambda a: a)

        with pytest.raises(SerializationError):
            serialize(Address("1 Main St", "Springfield"), settings)
