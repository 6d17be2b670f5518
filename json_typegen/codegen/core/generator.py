"""
Generator base class and the generation pipeline.

A language generator turns a root Schema plus its nested Schemas into
source text. :func:`generate_code` runs inference, validation, rendering
and formatting, and turns failures into a :class:`GenerationResult`.
"""

from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, List, Any, Optional
from pathlib import Path

from .config import GeneratorConfig, get_config_manager
from .schema import FieldType, NestingTooDeepError, Schema, infer_schema
from .templates import TemplateError, create_template_engine
from .types import TypeMap, TypeResolver
from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_ROOT_NAME = "Root"

# Upper bound on consecutive blank lines kept by format_code
MAX_BLANK_LINES = 2


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Base class for the per-language generators."""

    default_root_name = DEFAULT_ROOT_NAME
    # False when nested objects are rendered inline instead of by name
    named_nested_declarations = True
    comment_prefix = "//"

    def __init__(self, config: Optional[GeneratorConfig] = None):
        self.config = config or GeneratorConfig()
        self.type_resolver = self.create_type_resolver()
        self.templates = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Canonical target name, also used as the syntax highlighting lexer."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extension for generated files, with the leading dot."""

    @property
    @abstractmethod
    def type_map(self) -> TypeMap:
        """Primitive names and array syntax of the target."""

    @abstractmethod
    def generate(self, root: Schema, nested: List[Schema]) -> str:
        """
        Render a whole document.

        Args:
            root: Root declaration
            nested: Nested declarations, innermost first

        Returns:
            Source text (formatting is applied afterwards)
        """

    @abstractmethod
    def generate_single_schema(self, schema: Schema) -> str:
        """Render one declaration."""

    def create_type_resolver(self) -> TypeResolver:
        return TypeResolver(self.type_map)

    def get_template_directory(self) -> Optional[Path]:
        """Directory holding this generator's ``*.j2`` templates, if any."""
        return None

    @property
    def indent(self) -> str:
        return self.config.indent

    @property
    def root_name(self) -> str:
        return self.config.root_name or self.default_root_name

    def get_import_statements(self, schemas: List[Schema]) -> List[str]:
        """Import/using lines the generated file needs."""
        return []

    def validate_schemas(self, schemas: List[Schema]) -> List[str]:
        """
        Collect warnings about the declarations about to be rendered.

        Subclasses extend this with target-specific naming checks.

        Args:
            schemas: Every declaration, nested ones included

        Returns:
            Warning messages (empty if nothing looks wrong)
        """
        warnings = []

        for schema in schemas:
            if not schema.fields:
                warnings.append(f"Schema '{schema.name}' has no fields")

            warnings.extend(
                f"Unknown type in {schema.name}.{field.original_name} (null value)"
                for field in schema.fields
                if field.kind == FieldType.UNKNOWN
            )

        if self.named_nested_declarations:
            # Shapes are never merged, so equal names produce duplicate declarations
            counts = Counter(schema.name for schema in schemas)
            warnings.extend(
                f"Declaration name '{name}' is generated {count} times"
                for name, count in counts.items()
                if count > 1
            )

        return warnings

    def header_comment(self) -> str:
        """Comment line marking the output as generated."""
        return f"{self.comment_prefix} Code generated by json-typegen. DO NOT EDIT.\n\n"

    def format_code(self, code: str) -> str:
        """
        Normalize whitespace of generated code.

        Strips trailing spaces, collapses runs of blank lines and ends the
        text with exactly one newline.
        """
        lines: List[str] = []
        blank_run = 0

        for line in code.split("\n"):
            line = line.rstrip()
            blank_run = blank_run + 1 if not line else 0
            if blank_run <= MAX_BLANK_LINES:
                lines.append(line)

        return "\n".join(lines).strip("\n") + "\n"

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.templates.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        return self.templates.template_exists(template_name)


def identifier_collisions(
    schema: Schema, identifiers: List[Optional[str]], target: str
) -> List[str]:
    """
    Warn about fields of one declaration that get the same identifier.

    Args:
        schema: Declaration whose fields are checked
        identifiers: Target identifier of each field, in field order;
            None skips the field
        target: What the identifier is, e.g. ``"Go field"``

    Returns:
        One warning per field whose identifier was already taken
    """
    warnings = []
    seen: Dict[str, str] = {}

    for field, identifier in zip(schema.fields, identifiers):
        if identifier is None:
            continue
        if identifier in seen:
            warnings.append(
                f"Fields {seen[identifier]!r} and {field.original_name!r} in "
                f"{schema.name} both map to {target} {identifier}"
            )
        else:
            seen[identifier] = field.original_name

    return warnings


class GenerationResult:
    """Outcome of one conversion: code or an error, plus warnings and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed result; ``code`` is empty."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def _collect_metadata(
    generator: CodeGenerator, root: Schema, schemas: List[Schema]
) -> Dict[str, Any]:
    return {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "schema_count": len(schemas),
        "root_schema": root.name,
        "max_depth": root.get_max_depth(),
        "has_unknowns": any(
            field.kind == FieldType.UNKNOWN for schema in schemas for field in schema.fields
        ),
    }


def generate_code(
    generator: CodeGenerator, data: Any, root_name: Optional[str] = None
) -> GenerationResult:
    """
    Infer declarations for a parsed JSON document and render them.

    Args:
        generator: Code generator instance
        data: Parsed JSON document
        root_name: Name of the root declaration (None uses the generator's default)

    Returns:
        GenerationResult with code, warnings, and metadata; failures are
        returned as error results rather than raised
    """
    root_name = root_name or generator.root_name

    try:
        root, nested = infer_schema(data, root_name, generator.config.max_depth)
        schemas = nested + [root]

        warnings = get_config_manager().validate_config(
            generator.config, generator.language_name
        )
        warnings.extend(generator.validate_schemas(schemas))

        code = generator.format_code(generator.generate(root, nested))
        if generator.config.add_comments:
            code = generator.header_comment() + code

        metadata = _collect_metadata(generator, root, schemas)

    except (GeneratorError, TemplateError, NestingTooDeepError) as e:
        logger.error("%s generation failed: %s", generator.language_name, e)
        return GenerationResult.error(f"Code generation failed: {e}", exception=e)
    except RecursionError as e:
        # max_depth set above what the interpreter's stack can hold
        logger.error("%s generation failed: nesting too deep to process", generator.language_name)
        return GenerationResult.error(
            "Code generation failed: JSON nesting is too deep to process", exception=e
        )

    logger.info(
        "Generated %s code: %d declaration(s), %d warning(s)",
        generator.language_name,
        len(schemas),
        len(warnings),
    )
    return GenerationResult(code, warnings, metadata)
