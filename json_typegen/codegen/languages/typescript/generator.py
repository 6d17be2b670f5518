"""
TypeScript code generator implementation.

Generates exported interfaces, one per JSON object shape.
"""

import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator, GeneratorError
from ...core.naming import quote_string
from ...core.schema import Field, FieldType, Schema
from ...core.types import TypeMap

TYPESCRIPT_TYPE_MAP = TypeMap(
    names={
        FieldType.UNKNOWN: "any",
        FieldType.STRING: "string",
        FieldType.INTEGER: "number",
        FieldType.FLOAT: "number",
        FieldType.BOOLEAN: "boolean",
    },
    array_format="{}[]",
)

# Property names that can be written without quotes
_BARE_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


def format_property_name(key: str) -> str:
    """Return the key as-is when it is a bare identifier, quoted otherwise."""
    if _BARE_IDENTIFIER.fullmatch(key):
        return key
    return quote_string(key)


class TypeScriptGenerator(CodeGenerator):
    """Code generator for TypeScript interfaces."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "typescript"

    @property
    def file_extension(self) -> str:
        """Return TypeScript file extension."""
        return ".ts"

    @property
    def type_map(self) -> TypeMap:
        return TYPESCRIPT_TYPE_MAP

    def get_template_directory(self) -> Optional[Path]:
        """Return the TypeScript templates directory."""
        return Path(__file__).parent / "templates"

    def generate(self, root: Schema, nested: List[Schema]) -> str:
        """Generate the root interface followed by nested interfaces."""
        declarations = [self.generate_single_schema(root)]
        declarations.extend(self.generate_single_schema(schema) for schema in nested)

        return self.render_template("file.ts.j2", {"declarations": declarations})

    def generate_single_schema(self, schema: Schema) -> str:
        """Generate one interface."""
        if not self.template_exists("interface.ts.j2"):
            raise GeneratorError("interface.ts.j2 template not found")

        context = {
            "name": schema.name,
            "indent": self.indent,
            "fields": [self._generate_field_data(field) for field in schema.fields],
        }
        return self.render_template("interface.ts.j2", context).rstrip("\n")

    def _generate_field_data(self, field: Field) -> Dict[str, Any]:
        return {
            "name": format_property_name(field.original_name),
            "type": self.type_resolver.render(field.type),
        }

    def validate_schemas(self, schemas: List[Schema]) -> List[str]:
        """Validate schemas for TypeScript generation."""
        warnings = super().validate_schemas(schemas)

        for schema in schemas:
            for field in schema.fields:
                if not _BARE_IDENTIFIER.fullmatch(field.original_name):
                    warnings.append(
                        f"Field {schema.name}.{field.original_name} is not a valid "
                        f"identifier and will be quoted"
                    )

        return warnings


def create_typescript_generator(
    config: Optional[GeneratorConfig] = None,
) -> TypeScriptGenerator:
    """Create a TypeScript generator with default configuration."""
    return TypeScriptGenerator(config or load_config("typescript"))
