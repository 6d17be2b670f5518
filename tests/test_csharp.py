from __future__ import annotations

from json_typegen.codegen import convert, generate


def test_classes_inside_namespace() -> None:
    code = generate({"items": [{"id": 1.5}], "ok": True}, "csharp")

    assert code == (
        "using System.Collections.Generic;\n"
        "using System.Text.Json.Serialization;\n"
        "\n"
        "namespace JsonToCSharp\n"
        "{\n"
        "    public class Root\n"
        "    {\n"
        '        [JsonPropertyName("items")]\n'
        "        public List<ItemsItem> Items { get; set; }\n"
        '        [JsonPropertyName("ok")]\n'
        "        public bool Ok { get; set; }\n"
        "    }\n"
        "\n"
        "    public class ItemsItem\n"
        "    {\n"
        '        [JsonPropertyName("id")]\n'
        "        public double Id { get; set; }\n"
        "    }\n"
        "}\n"
    )


def test_custom_namespace_and_unknown_type() -> None:
    code = generate({"meta": None}, "cs", config={"package_name": "Acme.Models"})

    assert "namespace Acme.Models\n" in code
    assert "public object Meta { get; set; }" in code


def test_member_named_like_class_is_reported() -> None:
    result = convert('{"root": 1}', "c#")

    assert result.success
    assert any("same name as its enclosing class" in warning for warning in result.warnings)


def test_pascal_case_collision_warning() -> None:
    result = convert('{"user_id": 1, "USER ID": 2}', "csharp")

    assert result.success
    assert "Fields 'user_id' and 'USER ID' in Root both map to C# property UserId" in result.warnings
