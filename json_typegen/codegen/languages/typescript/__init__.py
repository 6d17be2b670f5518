"""
TypeScript code generator module.

Generates exported TypeScript interfaces from JSON documents.
"""

from .generator import (
    TypeScriptGenerator,
    TYPESCRIPT_TYPE_MAP,
    create_typescript_generator,
    format_property_name,
)

__all__ = [
    "TypeScriptGenerator",
    "TYPESCRIPT_TYPE_MAP",
    "create_typescript_generator",
    "format_property_name",
]
