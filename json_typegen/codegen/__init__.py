"""
json_typegen code generation module.

Infers type declarations from JSON documents and renders them in
TypeScript, Go, Java, Python and C#.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_language_info,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
    register_generator,
)
from .core.generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .core.schema import (
    Schema,
    Field,
    FieldType,
    NestingTooDeepError,
    infer_schema,
)
from .core.naming import to_camel_case, to_pascal_case
from .core.config import GeneratorConfig, ConfigManager, ConfigError, load_config
from ..logging_config import get_logger

logger = get_logger(__name__)

ConfigLike = Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]]


def convert(
    text: str,
    language: str = "typescript",
    config: ConfigLike = None,
    root_name: Optional[str] = None,
) -> GenerationResult:
    """
    Convert JSON text into type declarations.

    Malformed JSON does not raise: the result is a failed
    GenerationResult whose ``error_message`` is the parser's message.

    Args:
        text: JSON document
        language: Target language name or alias
        config: Generator configuration (GeneratorConfig, overrides dict or file path)
        root_name: Name for the root declaration

    Returns:
        GenerationResult with the generated code

    Raises:
        RegistryError: If the language is not supported
    """
    generator = get_generator(language, config)

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        logger.warning("Input is not valid JSON: %s", e)
        return GenerationResult.error(str(e), exception=e)

    return generate_code(generator, data, root_name)


def generate(
    data: Any,
    language: str = "typescript",
    config: ConfigLike = None,
    root_name: Optional[str] = None,
) -> str:
    """
    Generate type declarations for an already parsed JSON document.

    Args:
        data: Parsed JSON document (dict/list/scalar)
        language: Target language name or alias
        config: Generator configuration
        root_name: Name for the root declaration

    Returns:
        Generated code string

    Raises:
        GeneratorError: If code generation fails
    """
    result = generate_code(get_generator(language, config), data, root_name)

    if not result.success:
        raise GeneratorError(result.error_message) from result.exception
    return result.code


# Export main interfaces
__all__ = [
    "convert",
    "generate",
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    "Schema",
    "Field",
    "FieldType",
    "NestingTooDeepError",
    "infer_schema",
    "to_pascal_case",
    "to_camel_case",
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    "get_generator",
    "get_registry",
    "get_language_info",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
    "register_generator",
]
