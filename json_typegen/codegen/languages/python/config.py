"""
Python-specific configuration and type mappings.

Provides the Pydantic type table and import resolution for generated
models.
"""

import re
from typing import Iterable, List, Set

from ...core.schema import FieldType
from ...core.types import TypeMap

PYTHON_TYPE_MAP = TypeMap(
    names={
        FieldType.UNKNOWN: "Optional[Any]",
        FieldType.STRING: "str",
        FieldType.INTEGER: "int",
        FieldType.FLOAT: "float",
        FieldType.BOOLEAN: "bool",
    },
    array_format="List[{}]",
    element_names={
        FieldType.UNKNOWN: "Any",
    },
)

# Names from typing that generated annotations may use
TYPING_NAMES = ("Any", "List", "Optional")


class PythonConfig:
    """Python-specific configuration."""

    def __init__(self, **kwargs):
        """Initialize Python configuration."""
        self.base_class = kwargs.get("base_class", "BaseModel")
        self.pydantic_module = kwargs.get("pydantic_module", "pydantic")

    def get_required_imports(self, types_used: Iterable[str], uses_alias: bool) -> List[str]:
        """Get import statements for the given annotations."""
        pydantic_names = [self.base_class]
        if uses_alias:
            pydantic_names.append("Field")

        imports = [f"from {self.pydantic_module} import {', '.join(pydantic_names)}"]

        typing_names = sorted(
            name
            for name in TYPING_NAMES
            if any(name in _extract_base_types(python_type) for python_type in types_used)
        )
        if typing_names:
            imports.append(f"from typing import {', '.join(typing_names)}")

        return imports


def _extract_base_types(type_string: str) -> Set[str]:
    """Extract capitalized identifiers from a type annotation."""
    return set(re.findall(r"\b([A-Z][a-zA-Z0-9_]*)\b", type_string))
