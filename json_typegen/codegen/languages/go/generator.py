"""
Go code generator implementation.

Generates a single Go struct with JSON tags; nested objects become
inline anonymous structs.
"""

from typing import Dict, List, Optional, Any
from pathlib import Path

from ...core.config import GeneratorConfig, load_config
from ...core.generator import CodeGenerator, GeneratorError, identifier_collisions
from ...core.naming import to_pascal_case
from ...core.schema import Field, Schema, referenced_schema
from ...core.types import TypeMap
from .types import GoTypeConfig, GoTypeResolver, create_modern_go_type_config


class GoGenerator(CodeGenerator):
    """Code generator for Go structs with JSON tags."""

    default_root_name = "AutoGenerated"
    named_nested_declarations = False

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Go generator with configuration."""
        config = config or GeneratorConfig(use_tabs=True)
        self.type_config = self._build_type_config(config)
        super().__init__(config)

    def get_template_directory(self) -> Optional[Path]:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    def _build_type_config(self, config: GeneratorConfig) -> GoTypeConfig:
        """Build GoTypeConfig from generator config."""
        options = config.language_config
        defaults = GoTypeConfig()

        return GoTypeConfig(
            int_type=options.get("int_type", defaults.int_type),
            float_type=options.get("float_type", defaults.float_type),
            string_type=options.get("string_type", defaults.string_type),
            bool_type=options.get("bool_type", defaults.bool_type),
            unknown_type=options.get("unknown_type", defaults.unknown_type),
        )

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    @property
    def type_map(self) -> TypeMap:
        return self.type_config.to_type_map()

    def create_type_resolver(self) -> GoTypeResolver:
        return GoTypeResolver(self.type_map, self.indent, self._render_field_lines)

    def generate(self, root: Schema, nested: List[Schema]) -> str:
        """
        Generate the root struct.

        Nested schemas are rendered inline through the root's fields. Their
        bodies are rendered innermost first, so each struct literal only
        looks up the already rendered bodies one level below it.
        """
        levels = self._field_levels(root)
        self.type_resolver.clear_bodies()
        try:
            for schema in nested:
                lines = self._render_field_lines(schema, levels.get(id(schema), 1))
                self.type_resolver.store_body(schema, lines)
            return self.generate_single_schema(root)
        finally:
            self.type_resolver.clear_bodies()

    @staticmethod
    def _field_levels(root: Schema) -> Dict[int, int]:
        """Indentation level of the fields of every schema below ``root``."""
        levels = {id(root): 1}
        pending = [(root, 1)]
        while pending:
            schema, level = pending.pop()
            for field in schema.fields:
                reference = referenced_schema(field.type)
                if reference is not None and id(reference) not in levels:
                    levels[id(reference)] = level + 1
                    pending.append((reference, level + 1))
        return levels

    def generate_single_schema(self, schema: Schema) -> str:
        """Generate Go struct for a single schema using templates."""
        if not self.template_exists("struct.go.j2"):
            raise GeneratorError("struct.go.j2 template not found")

        template_context = {
            "package_name": self.config.package_name,
            "struct_name": schema.name,
            "lines": self._render_field_lines(schema, 1),
        }

        return self.render_template("struct.go.j2", template_context)

    def _render_field_lines(self, schema: Schema, level: int) -> List[str]:
        """Render every field of a schema at the given indentation level."""
        return [
            self.render_template("field.go.j2", self._generate_field_data(field, level))
            for field in schema.fields
        ]

    def _generate_field_data(self, field: Field, level: int) -> Dict[str, Any]:
        """Generate field data for template using type system."""
        return {
            "indent": self.indent * level,
            "name": to_pascal_case(field.original_name),
            "type": self.type_resolver.render(field.type, level),
            "original_name": field.original_name,
        }

    def validate_schemas(self, schemas: List[Schema]) -> List[str]:
        """Validate schemas for Go generation."""
        warnings = super().validate_schemas(schemas)

        for schema in schemas:
            go_names = [to_pascal_case(field.original_name) for field in schema.fields]
            warnings.extend(identifier_collisions(schema, go_names, "Go field"))

        return warnings


# Factory functions
def create_go_generator(config: Optional[Dict[str, Any]] = None) -> GoGenerator:
    """Create a Go generator with default configuration plus overrides."""
    return GoGenerator(load_config("go", custom_config=config))


def create_modern_go_generator() -> GoGenerator:
    """Create generator using modern Go 1.18+ features."""
    type_config = create_modern_go_type_config()
    return create_go_generator(
        {
            "unknown_type": type_config.unknown_type,
            "int_type": type_config.int_type,
        }
    )
