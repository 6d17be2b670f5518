from __future__ import annotations

import json

import pytest

from json_typegen import GenerationResult, convert, generate
from json_typegen.codegen import GeneratorError, NestingTooDeepError


@pytest.mark.parametrize("language", ["typescript", "go", "java", "python", "csharp"])
def test_malformed_input_returns_parser_message(language: str) -> None:
    result = convert("not json", language)

    with pytest.raises(json.JSONDecodeError) as excinfo:
        json.loads("not json")

    assert isinstance(result, GenerationResult)
    assert not result.success
    assert result.code == ""
    assert result.error_message == str(excinfo.value)
    assert isinstance(result.exception, json.JSONDecodeError)


@pytest.mark.parametrize("language", ["typescript", "go", "java", "python", "csharp"])
def test_output_is_deterministic(language: str) -> None:
    text = '{"b": [{"x": null}], "a": {"deep": {"leaf": 1.25}}, "c": "s"}'

    assert convert(text, language).code == convert(text, language).code


@pytest.mark.parametrize("language", ["typescript", "java", "python", "csharp"])
def test_every_object_gets_a_declaration(language: str) -> None:
    result = convert('{"a": {"x": 1}, "b": [{"y": 2}], "c": [1], "d": []}', language)

    assert result.success
    assert result.metadata["schema_count"] == 3


def test_metadata() -> None:
    result = convert('{"user": {"profile": {"bio": null}}}', "typescript")

    assert result.metadata == {
        "language": "typescript",
        "file_extension": ".ts",
        "schema_count": 3,
        "root_schema": "Root",
        "max_depth": 3,
        "has_unknowns": True,
    }
    assert "Unknown type in Profile.bio (null value)" in result.warnings


def test_duplicate_declaration_names_are_reported() -> None:
    result = convert('{"a": {"meta": {}}, "b": {"meta": {}}}', "java")

    assert result.success
    assert "Declaration name 'Meta' is generated 2 times" in result.warnings


def test_deep_input_is_a_controlled_error() -> None:
    text = '{"a":' * 50 + "1" + "}" * 50

    result = convert(text, "typescript", config={"max_depth": 10})

    assert not result.success
    assert isinstance(result.exception, NestingTooDeepError)
    assert "maximum depth of 10" in result.error_message


def test_extremely_deep_input_does_not_crash() -> None:
    text = "[" * 100000 + "]" * 100000

    result = convert(text, "go")

    assert not result.success


def test_generate_raises_on_failure() -> None:
    with pytest.raises(GeneratorError):
        generate({"a": {"b": {"c": 1}}}, "python", config={"max_depth": 1})


def test_header_comment() -> None:
    go = generate({"a": 1}, "go", config={"add_comments": True})
    python = generate({"a": 1}, "python", config={"add_comments": True})

    assert go.startswith("// Code generated by json-typegen. DO NOT EDIT.\n\npackage main\n")
    assert python.startswith("# Code generated by json-typegen. DO NOT EDIT.\n\nfrom pydantic")


@pytest.mark.parametrize("depth", [199, 200])
def test_go_renders_nesting_up_to_the_default_limit(depth: int) -> None:
    text = '{"a":' * depth + "1" + "}" * depth

    result = convert(text, "go")

    assert result.success
    assert result.code.count('`json:"a"`') == depth
    assert result.metadata["max_depth"] == depth


def test_go_inline_structs_close_at_their_field_indentation() -> None:
    code = generate({"a": {"b": {"c": 1}}}, "go")

    assert "\tA struct {\n\t\tB struct {\n\t\t\tC int `json:\"c\"`\n\t\t} `json:\"b\"`\n\t} `json:\"a\"`\n" in code


@pytest.mark.parametrize("language", ["typescript", "go"])
def test_max_depth_beyond_the_stack_is_a_controlled_error(language: str) -> None:
    text = '{"a":' * 900 + "1" + "}" * 900

    result = convert(text, language, config={"max_depth": 5000})

    assert not result.success
    assert isinstance(result.exception, RecursionError)
