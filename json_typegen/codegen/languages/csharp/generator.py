"""
C# code generator implementation.

Generates classes with System.Text.Json ``[JsonPropertyName]`` bindings,
wrapped in a single namespace.
"""

from typing import Dict, List, Optional, Any
from pathlib import Path

from ...core.config import load_config
from ...core.generator import CodeGenerator, GeneratorError, identifier_collisions
from ...core.naming import to_pascal_case
from ...core.schema import FieldType, Schema
from ...core.types import TypeMap

CSHARP_TYPE_MAP = TypeMap(
    names={
        FieldType.UNKNOWN: "object",
        FieldType.STRING: "string",
        FieldType.INTEGER: "int",
        FieldType.FLOAT: "double",
        FieldType.BOOLEAN: "bool",
    },
    array_format="List<{}>",
)

CSHARP_USINGS = [
    "System.Collections.Generic",
    "System.Text.Json.Serialization",
]

DEFAULT_NAMESPACE = "JsonToCSharp"


class CSharpGenerator(CodeGenerator):
    """Code generator for C# classes."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "csharp"

    @property
    def file_extension(self) -> str:
        """Return C# file extension."""
        return ".cs"

    @property
    def type_map(self) -> TypeMap:
        return CSHARP_TYPE_MAP

    def get_template_directory(self) -> Optional[Path]:
        """Return the C# templates directory."""
        return Path(__file__).parent / "templates"

    def generate(self, root: Schema, nested: List[Schema]) -> str:
        """Generate the root class and nested classes inside one namespace."""
        schemas = [root] + nested
        context = {
            "usings": self.get_import_statements(schemas),
            "namespace": self.config.package_name or DEFAULT_NAMESPACE,
            "declarations": [self.generate_single_schema(schema) for schema in schemas],
        }
        return self.render_template("file.cs.j2", context)

    def generate_single_schema(self, schema: Schema) -> str:
        """Generate one class; property names are PascalCased in the template."""
        if not self.template_exists("class.cs.j2"):
            raise GeneratorError("class.cs.j2 template not found")

        context = {
            "name": schema.name,
            "indent": self.indent,
            "fields": [
                {
                    "original_name": field.original_name,
                    "type": self.type_resolver.render(field.type),
                }
                for field in schema.fields
            ],
        }
        return self.render_template("class.cs.j2", context)

    def get_import_statements(self, schemas: List[Schema]) -> List[str]:
        return list(CSHARP_USINGS)

    def validate_schemas(self, schemas: List[Schema]) -> List[str]:
        """Validate schemas for C# generation."""
        warnings = super().validate_schemas(schemas)

        for schema in schemas:
            for field in schema.fields:
                # A member cannot share its enclosing type's name
                if to_pascal_case(field.original_name) == schema.name:
                    warnings.append(
                        f"Property {schema.name}.{schema.name} has the same name as "
                        f"its enclosing class"
                    )

            properties = [to_pascal_case(field.original_name) for field in schema.fields]
            warnings.extend(identifier_collisions(schema, properties, "C# property"))

        return warnings


def create_csharp_generator(config: Optional[Dict[str, Any]] = None) -> CSharpGenerator:
    """Create a C# generator with default configuration plus overrides."""
    return CSharpGenerator(load_config("csharp", custom_config=config))
