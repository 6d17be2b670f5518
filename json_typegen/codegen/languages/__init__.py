"""
Language-specific code generators.

This module contains generators for different programming languages.
"""

from .typescript import TypeScriptGenerator
from .go import GoGenerator
from .java import JavaGenerator
from .python import PythonGenerator
from .csharp import CSharpGenerator

__all__ = [
    "TypeScriptGenerator",
    "GoGenerator",
    "JavaGenerator",
    "PythonGenerator",
    "CSharpGenerator",
]
