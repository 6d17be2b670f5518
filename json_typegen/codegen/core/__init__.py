"""
Core code generation components.

Provides base classes and utilities used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .schema import (
    Schema,
    Field,
    FieldType,
    Primitive,
    ArrayOf,
    NamedReference,
    InferredType,
    NestingTooDeepError,
    classify,
    resolve_type,
    infer_schema,
)
from .naming import to_pascal_case, to_camel_case, quote_string
from .types import TypeMap, TypeResolver
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Schema system - core data structures
    "Schema",
    "Field",
    "FieldType",
    "Primitive",
    "ArrayOf",
    "NamedReference",
    "InferredType",
    "NestingTooDeepError",
    "classify",
    "resolve_type",
    "infer_schema",
    # Naming utilities - language-agnostic
    "to_pascal_case",
    "to_camel_case",
    "quote_string",
    # Type rendering
    "TypeMap",
    "TypeResolver",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
