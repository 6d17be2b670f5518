from __future__ import annotations

import pytest

from json_typegen.codegen import (
    RegistryError,
    get_generator,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)
from json_typegen.codegen.languages import (
    CSharpGenerator,
    GoGenerator,
    JavaGenerator,
    PythonGenerator,
    TypeScriptGenerator,
)
from json_typegen.codegen.registry import GeneratorRegistry


def test_all_targets_registered() -> None:
    assert sorted(list_supported_languages()) == ["csharp", "go", "java", "python", "typescript"]


@pytest.mark.parametrize(
    ("name", "generator_class"),
    [
        ("typescript", TypeScriptGenerator),
        ("ts", TypeScriptGenerator),
        ("golang", GoGenerator),
        ("JAVA", JavaGenerator),
        ("pydantic", PythonGenerator),
        ("py", PythonGenerator),
        ("c#", CSharpGenerator),
        ("cs", CSharpGenerator),
    ],
)
def test_aliases_resolve(name: str, generator_class: type) -> None:
    assert isinstance(get_generator(name), generator_class)
    assert is_language_supported(name)


def test_unknown_language() -> None:
    assert not is_language_supported("cobol")
    with pytest.raises(RegistryError, match="cobol"):
        get_generator("cobol")


def test_language_info() -> None:
    info = get_language_info("golang")

    assert info["name"] == "go"
    assert info["file_extension"] == ".go"
    assert info["root_name"] == "AutoGenerated"
    assert info["aliases"] == ["golang"]


def test_register_and_unregister() -> None:
    registry = GeneratorRegistry()
    registry.register("typescript", TypeScriptGenerator, aliases=["tsx"])

    assert registry.resolve_language("tsx") == "typescript"

    registry.unregister("typescript")
    assert not registry.is_supported("tsx")


def test_register_rejects_non_generators() -> None:
    registry = GeneratorRegistry()

    with pytest.raises(RegistryError):
        registry.register("bogus", dict)
