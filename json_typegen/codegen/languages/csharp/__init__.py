"""
C# code generator module.

Generates System.Text.Json-annotated C# classes from JSON documents.
"""

from .generator import CSharpGenerator, CSHARP_TYPE_MAP, create_csharp_generator

__all__ = [
    "CSharpGenerator",
    "CSHARP_TYPE_MAP",
    "create_csharp_generator",
]
