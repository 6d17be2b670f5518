"""
Java code generator module.

Generates Jackson-annotated Java classes from JSON documents.
"""

from .generator import JavaGenerator, JAVA_TYPE_MAP, create_java_generator

__all__ = [
    "JavaGenerator",
    "JAVA_TYPE_MAP",
    "create_java_generator",
]
