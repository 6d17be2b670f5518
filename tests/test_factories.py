from __future__ import annotations

from json_typegen.codegen import generate_code, get_registry, register_generator
from json_typegen.codegen.core.config import ConfigManager
from json_typegen.codegen.languages.csharp import CSharpGenerator, create_csharp_generator
from json_typegen.codegen.languages.go import (
    GoGenerator,
    create_go_generator,
    create_modern_go_generator,
)
from json_typegen.codegen.languages.java import create_java_generator
from json_typegen.codegen.languages.python import create_python_generator
from json_typegen.codegen.languages.typescript import (
    TypeScriptGenerator,
    create_typescript_generator,
)


def test_factories_apply_language_defaults() -> None:
    assert create_typescript_generator().root_name == "Root"
    assert create_java_generator({"package_name": "app"}).config.package_name == "app"
    assert create_python_generator().python_config.base_class == "BaseModel"
    assert create_csharp_generator().config.package_name == "JsonToCSharp"

    go = create_go_generator({"float_type": "float32"})
    assert isinstance(go, GoGenerator)
    assert go.indent == "\t"
    assert go.type_config.float_type == "float32"


def test_modern_go_generator() -> None:
    result = generate_code(create_modern_go_generator(), {"n": 1, "x": None})

    assert result.success
    assert '\tN int64 `json:"n"`\n' in result.code
    assert '\tX any `json:"x"`\n' in result.code


def test_register_custom_generator() -> None:
    class InterfaceOnlyGenerator(TypeScriptGenerator):
        default_root_name = "Document"

    register_generator("ts-document", InterfaceOnlyGenerator, aliases=["tsdoc"])
    try:
        generator = get_registry().create_generator("tsdoc")
        assert isinstance(generator, InterfaceOnlyGenerator)
        assert generate_code(generator, {"a": 1}).code.startswith("export interface Document {")
    finally:
        get_registry().unregister("ts-document")

    assert not get_registry().is_supported("tsdoc")


def test_config_manager_languages() -> None:
    assert ConfigManager().list_languages() == ["typescript", "go", "java", "python", "csharp"]
    assert isinstance(create_csharp_generator(), CSharpGenerator)
