"""
Core schema representation for code generation.

Walks a parsed JSON value and infers one declaration per object node,
using an internal format that every language generator renders the
same way.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union
from enum import Enum

from .naming import to_pascal_case
from ...logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_DEPTH = 200

# Field name used when the document root is not an object
ROOT_VALUE_FIELD = "value"


class FieldType(Enum):
    """Kinds of JSON values, shared by all target languages."""

    UNKNOWN = "unknown"  # null
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


PRIMITIVE_TYPES = (
    FieldType.UNKNOWN,
    FieldType.STRING,
    FieldType.INTEGER,
    FieldType.FLOAT,
    FieldType.BOOLEAN,
)


class NestingTooDeepError(ValueError):
    """Raised when a document nests deeper than the configured limit."""

    def __init__(self, max_depth: int):
        super().__init__(f"JSON nesting exceeds the maximum depth of {max_depth}")
        self.max_depth = max_depth


@dataclass(frozen=True)
class Primitive:
    """A scalar type such as string or integer."""

    kind: FieldType


@dataclass(frozen=True)
class ArrayOf:
    """A homogeneous array of ``element``."""

    element: "InferredType"


@dataclass(frozen=True)
class NamedReference:
    """A reference to a nested declaration."""

    schema: "Schema"

    @property
    def name(self) -> str:
        return self.schema.name


InferredType = Union[Primitive, ArrayOf, NamedReference]


@dataclass
class Field:
    """A single field of a declaration."""

    original_name: str  # JSON key, kept verbatim for tags/annotations
    type: InferredType

    @property
    def kind(self) -> FieldType:
        """Top-level kind of this field's type."""
        if isinstance(self.type, ArrayOf):
            return FieldType.ARRAY
        if isinstance(self.type, NamedReference):
            return FieldType.OBJECT
        return self.type.kind


@dataclass
class Schema:
    """One declaration: a named, ordered group of fields."""

    name: str
    original_name: str
    fields: List[Field] = field(default_factory=list)

    def add_field(self, field: Field) -> None:
        """Add a field to this schema."""
        self.fields.append(field)

    def get_field(self, original_name: str) -> Optional[Field]:
        """Get field by its JSON key."""
        for field in self.fields:
            if field.original_name == original_name:
                return field
        return None

    def get_max_depth(self, current_depth: int = 1) -> int:
        """Get maximum nesting depth of declarations below this one."""
        max_depth = current_depth
        pending = [(self, current_depth)]

        while pending:
            schema, depth = pending.pop()
            max_depth = max(max_depth, depth)
            for field in schema.fields:
                reference = referenced_schema(field.type)
                if reference is not None:
                    pending.append((reference, depth + 1))

        return max_depth


def referenced_schema(inferred: InferredType) -> Optional[Schema]:
    """Unwrap arrays and return the schema a type points to, if any."""
    while isinstance(inferred, ArrayOf):
        inferred = inferred.element
    if isinstance(inferred, NamedReference):
        return inferred.schema
    return None


def classify(value: Any) -> FieldType:
    """
    Classify a parsed JSON value.

    Numbers are decided per value: ``3`` and ``3.0`` are integers,
    ``3.5`` is a float.
    """
    if value is None:
        return FieldType.UNKNOWN
    # bool is a subclass of int, so it must be checked first
    if isinstance(value, bool):
        return FieldType.BOOLEAN
    if isinstance(value, int):
        return FieldType.INTEGER
    if isinstance(value, float):
        return FieldType.INTEGER if value.is_integer() else FieldType.FLOAT
    if isinstance(value, str):
        return FieldType.STRING
    if isinstance(value, list):
        return FieldType.ARRAY
    if isinstance(value, dict):
        return FieldType.OBJECT
    return FieldType.UNKNOWN


def resolve_type(
    value: Any, key: str, depth: int = 0, max_depth: int = DEFAULT_MAX_DEPTH
) -> Tuple[InferredType, List[Schema]]:
    """
    Infer the type of one JSON value found under ``key``.

    Only the first element of an array is inspected; the rest are assumed
    to share its type.

    Args:
        value: Parsed JSON value
        key: Field key, used to name nested declarations
        depth: Current nesting depth
        max_depth: Nesting limit

    Returns:
        The inferred type and the nested declarations it introduced,
        innermost first
    """
    if depth > max_depth:
        raise NestingTooDeepError(max_depth)

    kind = classify(value)

    if kind == FieldType.OBJECT:
        schema, nested = _infer_object(
            value, to_pascal_case(key), key, depth + 1, max_depth
        )
        return NamedReference(schema), nested + [schema]

    if kind == FieldType.ARRAY:
        if not value:
            return ArrayOf(Primitive(FieldType.UNKNOWN)), []

        first = value[0]
        if classify(first) == FieldType.OBJECT:
            schema, nested = _infer_object(
                first, f"{to_pascal_case(key)}Item", key, depth + 1, max_depth
            )
            return ArrayOf(NamedReference(schema)), nested + [schema]

        element, nested = resolve_type(first, key, depth + 1, max_depth)
        return ArrayOf(element), nested

    return Primitive(kind), []


def _infer_object(
    obj: dict, name: str, original_name: str, depth: int, max_depth: int
) -> Tuple[Schema, List[Schema]]:
    """Build the declaration for one JSON object."""
    if depth > max_depth:
        raise NestingTooDeepError(max_depth)

    schema = Schema(name=name, original_name=original_name)
    nested: List[Schema] = []

    for key, value in obj.items():
        field_type, field_nested = resolve_type(value, key, depth, max_depth)
        nested.extend(field_nested)
        schema.add_field(Field(original_name=key, type=field_type))

    return schema, nested


def infer_schema(
    data: Any, root_name: str = "Root", max_depth: int = DEFAULT_MAX_DEPTH
) -> Tuple[Schema, List[Schema]]:
    """
    Infer declarations for a whole JSON document.

    A root that is not an object is wrapped in a declaration with a single
    ``value`` field.

    Args:
        data: Parsed JSON document
        root_name: Name for the root declaration
        max_depth: Nesting limit

    Returns:
        Tuple of (root schema, nested schemas in post-order)
    """
    if classify(data) == FieldType.OBJECT:
        root, nested = _infer_object(data, root_name, root_name, 0, max_depth)
    else:
        root = Schema(name=root_name, original_name=root_name)
        value_type, nested = resolve_type(data, ROOT_VALUE_FIELD, 0, max_depth)
        root.add_field(Field(original_name=ROOT_VALUE_FIELD, type=value_type))

    logger.debug(
        "Inferred schema %s with %d nested declaration(s)", root_name, len(nested)
    )
    return root, nested
