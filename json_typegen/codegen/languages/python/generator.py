"""
Python code generator implementation.

Generates Pydantic models using templates. Nested models are emitted
before the models that reference them.
"""

from typing import Dict, List, Any, Optional
from pathlib import Path

from ...core.config import load_config
from ...core.generator import CodeGenerator, GeneratorError, identifier_collisions
from ...core.schema import Schema
from ...core.types import TypeMap
from .config import PythonConfig, PYTHON_TYPE_MAP, TYPING_NAMES
from .naming import FieldNameAllocator, sanitize_field_name


class PythonGenerator(CodeGenerator):
    """Code generator for Pydantic models."""

    comment_prefix = "#"

    def __init__(self, config=None):
        """Initialize Python generator with configuration."""
        super().__init__(config)

        self.python_config = PythonConfig(**self.config.language_config)

        # State tracking
        self.types_used = set()
        self.uses_alias = False

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    @property
    def type_map(self) -> TypeMap:
        return PYTHON_TYPE_MAP

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def generate(self, root: Schema, nested: List[Schema]) -> str:
        """Generate complete Python code for all schemas."""
        # Reset state
        self.types_used.clear()
        self.uses_alias = False

        # Nested schemas are already innermost first
        classes = [self.generate_single_schema(schema) for schema in nested + [root]]

        context = {
            "imports": self.get_import_statements(nested + [root]),
            "declarations": classes,
        }
        return self.render_template("file.py.j2", context)

    def generate_single_schema(self, schema: Schema) -> str:
        """Generate one model class."""
        if not self.template_exists("class.py.j2"):
            raise GeneratorError("class.py.j2 template not found")

        allocator = FieldNameAllocator()
        fields = [
            self._generate_field_data(field.original_name, field.type, allocator, position)
            for position, field in enumerate(schema.fields, start=1)
        ]

        context = {
            "name": schema.name,
            "base_class": self.python_config.base_class,
            "indent": self.indent,
            "fields": fields,
        }
        return self.render_template("class.py.j2", context).rstrip("\n")

    def _generate_field_data(
        self, key: str, inferred, allocator: FieldNameAllocator, position: int
    ) -> Dict[str, Any]:
        """Generate field data for template."""
        field_name = allocator.allocate(key, position)
        python_type = self.type_resolver.render(inferred)
        self.types_used.add(python_type)

        alias = None
        if field_name != key:
            alias = key
            self.uses_alias = True

        return {"name": field_name, "type": python_type, "alias": alias}

    def get_import_statements(self, schemas: List[Schema]) -> List[str]:
        """Get required import statements for the classes rendered so far."""
        return self.python_config.get_required_imports(self.types_used, self.uses_alias)

    def validate_schemas(self, schemas: List[Schema]) -> List[str]:
        """Validate schemas for Python generation."""
        warnings = super().validate_schemas(schemas)
        imported_names = {self.python_config.base_class, "Field", *TYPING_NAMES}

        for schema in schemas:
            if schema.name in imported_names:
                warnings.append(f"Class name {schema.name} shadows an imported name")

            attribute_names = []
            for field in schema.fields:
                name = sanitize_field_name(field.original_name)
                attribute_names.append(name if name not in ("", "_") else None)
            warnings.extend(identifier_collisions(schema, attribute_names, "Python attribute"))

            allocator = FieldNameAllocator()
            for position, field in enumerate(schema.fields, start=1):
                name = allocator.allocate(field.original_name, position)
                if name != field.original_name:
                    warnings.append(
                        f"Field {schema.name}.{field.original_name} renamed to {name}"
                    )
                if name.startswith("_"):
                    warnings.append(
                        f"Field {schema.name}.{name} starts with an underscore and "
                        f"is treated as private by Pydantic"
                    )

        return warnings


def create_python_generator(config: Optional[Dict[str, Any]] = None) -> PythonGenerator:
    """Create a Python generator with default configuration plus overrides."""
    return PythonGenerator(load_config("python", custom_config=config))
