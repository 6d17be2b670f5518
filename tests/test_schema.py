from __future__ import annotations

import pytest

from json_typegen.codegen.core.schema import (
    ArrayOf,
    FieldType,
    NamedReference,
    NestingTooDeepError,
    Primitive,
    classify,
    infer_schema,
)


def test_classify_numbers_per_value() -> None:
    assert classify(3) == FieldType.INTEGER
    assert classify(3.0) == FieldType.INTEGER
    assert classify(3.5) == FieldType.FLOAT
    assert classify(True) == FieldType.BOOLEAN
    assert classify(None) == FieldType.UNKNOWN
    assert classify("x") == FieldType.STRING
    assert classify([]) == FieldType.ARRAY
    assert classify({}) == FieldType.OBJECT


def test_field_order_follows_source_keys() -> None:
    root, nested = infer_schema({"zeta": 1, "alpha": "a", "mid": False})

    assert [field.original_name for field in root.fields] == ["zeta", "alpha", "mid"]
    assert nested == []


def test_nested_objects_are_named_from_keys() -> None:
    root, nested = infer_schema(
        {"user": {"name": "x"}, "items": [{"id": 1}], "tags": ["a"], "empty": []}
    )

    assert [schema.name for schema in nested] == ["User", "ItemsItem"]
    assert root.get_field("user").type == NamedReference(nested[0])
    assert root.get_field("items").type == ArrayOf(NamedReference(nested[1]))
    assert root.get_field("tags").type == ArrayOf(Primitive(FieldType.STRING))
    assert root.get_field("empty").type == ArrayOf(Primitive(FieldType.UNKNOWN))


def test_nested_declarations_are_innermost_first() -> None:
    root, nested = infer_schema({"outer": {"inner": {"leaf": 1}}})

    assert [schema.name for schema in nested] == ["Inner", "Outer"]
    assert root.get_max_depth() == 3


def test_one_declaration_per_object_node() -> None:
    _, nested = infer_schema({"a": {"x": 1}, "b": {"x": 1}, "c": 5})

    assert [schema.name for schema in nested] == ["A", "B"]


def test_arrays_are_typed_from_first_element_only() -> None:
    root, nested = infer_schema({"mixed": [1, "two", {"three": 3}], "nulls": [None, 1]})

    assert root.get_field("mixed").type == ArrayOf(Primitive(FieldType.INTEGER))
    assert root.get_field("nulls").type == ArrayOf(Primitive(FieldType.UNKNOWN))
    assert nested == []


def test_nested_arrays() -> None:
    root, nested = infer_schema({"grid": [[{"v": 1}]]})

    assert [schema.name for schema in nested] == ["GridItem"]
    assert root.get_field("grid").type == ArrayOf(ArrayOf(NamedReference(nested[0])))


def test_non_object_root_is_wrapped() -> None:
    root, nested = infer_schema([{"id": 1}], root_name="Payload")

    assert root.name == "Payload"
    assert [field.original_name for field in root.fields] == ["value"]
    assert [schema.name for schema in nested] == ["ValueItem"]

    scalar, _ = infer_schema("text")
    assert scalar.get_field("value").type == Primitive(FieldType.STRING)


def test_nesting_limit_raises_controlled_error() -> None:
    data: dict = {}
    cursor = data
    for _ in range(10):
        cursor["next"] = {}
        cursor = cursor["next"]

    infer_schema(data, max_depth=10)
    with pytest.raises(NestingTooDeepError) as excinfo:
        infer_schema(data, max_depth=5)
    assert excinfo.value.max_depth == 5
    assert isinstance(excinfo.value, ValueError)
