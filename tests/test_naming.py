from __future__ import annotations

import re

import pytest

from json_typegen.codegen.core.naming import quote_string, to_camel_case, to_pascal_case


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("user_id", "UserId"),
        ("first name", "FirstName"),
        ("kebab-case-key", "KebabCaseKey"),
        ("helloWorld", "Helloworld"),
        ("URL", "Url"),
        ("123key", "Num123key"),
        ("2 fast", "Num2Fast"),
        ("__private__", "Private"),
    ],
)
def test_to_pascal_case(raw: str, expected: str) -> None:
    assert to_pascal_case(raw) == expected


def test_to_pascal_case_falls_back_when_nothing_is_usable() -> None:
    assert to_pascal_case("") == "UnknownField"
    assert to_pascal_case("   ") == "UnknownField"
    assert to_pascal_case("$%^") == "UnknownField"
    assert to_pascal_case("日本") == "UnknownField"


def test_to_camel_case() -> None:
    assert to_camel_case("user_id") == "userId"
    assert to_camel_case("ID") == "id"
    assert to_camel_case("9lives") == "num9lives"
    assert to_camel_case("") == "unknownField"


def test_identifiers_are_total_and_alphanumeric() -> None:
    samples = ["", "0", "a", "-", "a.b.c", "x y z", "ünïcödé", "1_2_3", "\t\n", "café au lait"]
    for raw in samples:
        pascal = to_pascal_case(raw)
        camel = to_camel_case(raw)
        assert re.fullmatch(r"[A-Za-z][A-Za-z0-9]*", pascal)
        assert re.fullmatch(r"[A-Za-z][A-Za-z0-9]*", camel)


def test_quote_string_uses_json_escaping() -> None:
    assert quote_string("plain") == '"plain"'
    assert quote_string('say "hi"') == '"say \\"hi\\""'
    assert quote_string("café") == '"café"'
