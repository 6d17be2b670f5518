"""Generate type declarations from sample JSON documents."""

__version__ = "0.1.0"

from .codegen import convert, generate, GenerationResult, list_supported_languages

__all__ = [
    "__version__",
    "convert",
    "generate",
    "GenerationResult",
    "list_supported_languages",
]
