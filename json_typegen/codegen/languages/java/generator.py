"""
Java code generator implementation.

Generates public classes with Jackson ``@JsonProperty`` bindings.
"""

from typing import Dict, List, Optional, Any
from pathlib import Path

from ...core.config import load_config
from ...core.generator import CodeGenerator, GeneratorError, identifier_collisions
from ...core.naming import to_camel_case
from ...core.schema import FieldType, Schema
from ...core.types import TypeMap

JAVA_TYPE_MAP = TypeMap(
    names={
        FieldType.UNKNOWN: "Object",
        FieldType.STRING: "String",
        FieldType.INTEGER: "int",
        FieldType.FLOAT: "double",
        FieldType.BOOLEAN: "boolean",
    },
    array_format="List<{}>",
    # Generic type arguments must be boxed
    element_names={
        FieldType.INTEGER: "Integer",
        FieldType.FLOAT: "Double",
        FieldType.BOOLEAN: "Boolean",
    },
)

JAVA_IMPORTS = [
    "com.fasterxml.jackson.annotation.JsonProperty",
    "java.util.List",
]

JAVA_RESERVED_WORDS = {
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null",
}


class JavaGenerator(CodeGenerator):
    """Code generator for Java classes with Jackson annotations."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "java"

    @property
    def file_extension(self) -> str:
        """Return Java file extension."""
        return ".java"

    @property
    def type_map(self) -> TypeMap:
        return JAVA_TYPE_MAP

    def get_template_directory(self) -> Optional[Path]:
        """Return the Java templates directory."""
        return Path(__file__).parent / "templates"

    def generate(self, root: Schema, nested: List[Schema]) -> str:
        """Generate the root class followed by the nested classes."""
        schemas = [root] + nested
        declarations = [self.generate_single_schema(schema) for schema in schemas]

        context = {
            "package_name": self.config.package_name,
            "imports": self.get_import_statements(schemas),
            "declarations": declarations,
        }
        return self.render_template("file.java.j2", context)

    def generate_single_schema(self, schema: Schema) -> str:
        """Generate one class; field names are camelCased in the template."""
        if not self.template_exists("class.java.j2"):
            raise GeneratorError("class.java.j2 template not found")

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
        return self.render_template("class.java.j2", context)

    def get_import_statements(self, schemas: List[Schema]) -> List[str]:
        return list(JAVA_IMPORTS)

    def validate_schemas(self, schemas: List[Schema]) -> List[str]:
        """Validate schemas for Java generation."""
        warnings = super().validate_schemas(schemas)

        for schema in schemas:
            for field in schema.fields:
                java_name = to_camel_case(field.original_name)
                if java_name in JAVA_RESERVED_WORDS:
                    warnings.append(
                        f"Field {schema.name}.{field.original_name} maps to the Java "
                        f"keyword '{java_name}'"
                    )

            java_names = [to_camel_case(field.original_name) for field in schema.fields]
            warnings.extend(identifier_collisions(schema, java_names, "Java field"))

        return warnings


def create_java_generator(config: Optional[Dict[str, Any]] = None) -> JavaGenerator:
    """Create a Java generator with default configuration plus overrides."""
    return JavaGenerator(load_config("java", custom_config=config))
