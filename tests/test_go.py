from __future__ import annotations

from json_typegen.codegen import convert, generate


def test_array_field_with_tag() -> None:
    code = generate({"a": [1, 2, 3]}, "go")

    assert "A []int `json:\"a\"`" in code
    assert code == 'package main\n\ntype AutoGenerated struct {\n\tA []int `json:"a"`\n}\n'


def test_nested_objects_are_inline_structs() -> None:
    code = generate(
        {"user": {"first_name": "x", "tags": []}, "items": [{"price": 9.5}]},
        "go",
        root_name="Payload",
    )

    assert code == (
        "package main\n"
        "\n"
        "type Payload struct {\n"
        "\tUser struct {\n"
        '\t\tFirstName string `json:"first_name"`\n'
        '\t\tTags []interface{} `json:"tags"`\n'
        '\t} `json:"user"`\n'
        "\tItems []struct {\n"
        '\t\tPrice float64 `json:"price"`\n'
        '\t} `json:"items"`\n'
        "}\n"
    )


def test_no_named_declarations_for_nested_objects() -> None:
    result = convert('{"a": {"x": 1}, "b": {"x": 1}}', "golang")

    assert result.success
    assert result.code.count("type ") == 1
    assert not any("generated 2 times" in warning for warning in result.warnings)


def test_language_options() -> None:
    code = generate(
        {"n": 1, "v": None},
        "go",
        config={"package_name": "models", "int_type": "int64", "unknown_type": "any"},
    )

    assert code.startswith("package models\n")
    assert '\tN int64 `json:"n"`\n' in code
    assert '\tV any `json:"v"`\n' in code


def test_field_name_collisions_are_reported() -> None:
    result = convert('{"user_id": 1, "user-id": 2}', "go")

    assert result.success
    assert any("both map to Go field UserId" in warning for warning in result.warnings)
