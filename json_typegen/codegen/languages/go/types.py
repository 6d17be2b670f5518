"""
Go-specific type system for code generation.

Maps inferred types to Go types. Nested objects are rendered as inline
anonymous structs instead of named declarations.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List

from ...core.schema import FieldType, NamedReference, Schema
from ...core.types import TypeMap, TypeResolver


@dataclass
class GoTypeConfig:
    """Configuration for Go type mapping behavior."""

    # Numeric type preferences
    int_type: str = "int"
    float_type: str = "float64"

    # String and basic types
    string_type: str = "string"
    bool_type: str = "bool"

    # Interface types
    unknown_type: str = "interface{}"  # or "any" for Go 1.18+

    def to_type_map(self) -> TypeMap:
        """Build the primitive naming table for these preferences."""
        return TypeMap(
            names={
                FieldType.UNKNOWN: self.unknown_type,
                FieldType.STRING: self.string_type,
                FieldType.INTEGER: self.int_type,
                FieldType.FLOAT: self.float_type,
                FieldType.BOOLEAN: self.bool_type,
            },
            array_format="[]{}",
        )


class GoTypeResolver(TypeResolver):
    """
    Resolver that expands nested objects into anonymous struct literals.

    ``render_fields`` renders the field lines of a schema at a given
    indentation level; the generator supplies it so that nested structs
    use the same field layout as the root struct. Bodies stored with
    :meth:`store_body` are reused instead of being rendered again.
    """

    def __init__(
        self,
        type_map: TypeMap,
        indent: str,
        render_fields: Callable[[Schema, int], List[str]],
    ):
        super().__init__(type_map)
        self.indent = indent
        self.render_fields = render_fields
        self._bodies: Dict[int, str] = {}

    def store_body(self, schema: Schema, lines: List[str]):
        """Remember the rendered field lines of a nested struct."""
        self._bodies[id(schema)] = "".join(f"{line}\n" for line in lines)

    def clear_bodies(self):
        self._bodies.clear()

    def render_reference(self, reference: NamedReference, level: int) -> str:
        """Render ``struct { ... }`` with fields one level deeper."""
        body = self._bodies.get(id(reference.schema))
        if body is None:
            lines = self.render_fields(reference.schema, level + 1)
            body = "".join(f"{line}\n" for line in lines)
        return f"struct {{\n{body}{self.indent * level}}}"


def create_modern_go_type_config() -> GoTypeConfig:
    """Type preferences for Go 1.18+ (``any`` instead of ``interface{}``)."""
    return GoTypeConfig(unknown_type="any", int_type="int64")
