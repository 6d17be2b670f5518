"""
Go code generator module.

Generates Go structs with JSON tags from JSON documents.
"""

from .generator import GoGenerator, create_go_generator, create_modern_go_generator
from .types import GoTypeConfig, GoTypeResolver, create_modern_go_type_config

__all__ = [
    "GoGenerator",
    "GoTypeConfig",
    "GoTypeResolver",
    "create_go_generator",
    "create_modern_go_generator",
    "create_modern_go_type_config",
]
