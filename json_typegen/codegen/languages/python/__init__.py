"""
Python code generator module.

Generates Pydantic models from JSON documents.
"""

from .generator import PythonGenerator, create_python_generator
from .naming import (
    FieldNameAllocator,
    PYTHON_RESERVED_WORDS,
    sanitize_field_name,
)
from .config import PythonConfig, PYTHON_TYPE_MAP

__all__ = [
    # Generator
    "PythonGenerator",
    "create_python_generator",
    # Naming
    "FieldNameAllocator",
    "PYTHON_RESERVED_WORDS",
    "sanitize_field_name",
    # Configuration
    "PythonConfig",
    "PYTHON_TYPE_MAP",
]
