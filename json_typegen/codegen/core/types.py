"""
Language-neutral type rendering.

A single resolver turns inferred types into target syntax. Each language
only supplies a TypeMap with its primitive names and array syntax.
"""

from dataclasses import dataclass, field
from typing import Dict

from .schema import (
    ArrayOf,
    FieldType,
    InferredType,
    NamedReference,
    Primitive,
    PRIMITIVE_TYPES,
)


@dataclass(frozen=True)
class TypeMap:
    """Primitive names and collection syntax for one target language."""

    names: Dict[FieldType, str]
    array_format: str  # "{}" is replaced by the element type
    # Names used when the primitive appears as an array element
    element_names: Dict[FieldType, str] = field(default_factory=dict)

    def __post_init__(self):
        missing = [kind.value for kind in PRIMITIVE_TYPES if kind not in self.names]
        if missing:
            raise ValueError(f"TypeMap is missing primitive types: {missing}")

    def primitive(self, kind: FieldType, element: bool = False) -> str:
        """Get the name of a primitive type."""
        if element and kind in self.element_names:
            return self.element_names[kind]
        return self.names[kind]

    def array(self, element_type: str) -> str:
        """Wrap an element type in the language's array syntax."""
        return self.array_format.format(element_type)


class TypeResolver:
    """Renders InferredType values using a TypeMap."""

    def __init__(self, type_map: TypeMap):
        self.type_map = type_map

    def render(self, inferred: InferredType, level: int = 0, element: bool = False) -> str:
        """
        Render an inferred type.

        Args:
            inferred: Type to render
            level: Indentation level of the field being rendered
            element: True when the type sits inside an array

        Returns:
            Type expression in the target language
        """
        if isinstance(inferred, Primitive):
            return self.type_map.primitive(inferred.kind, element=element)
        if isinstance(inferred, ArrayOf):
            return self.type_map.array(self.render(inferred.element, level, element=True))
        if isinstance(inferred, NamedReference):
            return self.render_reference(inferred, level)
        raise TypeError(f"Unsupported inferred type: {inferred!r}")

    def render_reference(self, reference: NamedReference, level: int) -> str:
        """Render a reference to a nested declaration."""
        return reference.name
