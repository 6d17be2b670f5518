"""
Python-specific naming utilities and sanitization.

Handles Python reserved words and turns JSON keys into attribute names
for Pydantic models.
"""

import re
from typing import Set

# Python reserved keywords
PYTHON_RESERVED_WORDS = {
    "False",
    "None",
    "True",
    "and",
    "as",
    "assert",
    "async",
    "await",
    "break",
    "class",
    "continue",
    "def",
    "del",
    "elif",
    "else",
    "except",
    "finally",
    "for",
    "from",
    "global",
    "if",
    "import",
    "in",
    "is",
    "lambda",
    "nonlocal",
    "not",
    "or",
    "pass",
    "raise",
    "return",
    "try",
    "while",
    "with",
    "yield",
}

# Prefix for keys that cannot be turned into a name at all
FALLBACK_PREFIX = "field_"

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_INVALID_CHARACTER = re.compile(r"[^A-Za-z0-9_]")


def sanitize_field_name(key: str) -> str:
    """
    Turn a JSON key into a Python attribute name.

    Invalid characters become ``_``, a leading digit gets a ``_`` prefix
    and reserved words get a ``_`` suffix. The result may still be empty
    or a bare ``_``; see :class:`FieldNameAllocator`.
    """
    name = key
    if not _IDENTIFIER.fullmatch(name):
        name = _INVALID_CHARACTER.sub("_", name)
        if name[:1].isdigit():
            name = f"_{name}"

    if name in PYTHON_RESERVED_WORDS:
        name = f"{name}_"

    return name


class FieldNameAllocator:
    """Assigns attribute names for the fields of one class."""

    def __init__(self):
        self._used_names: Set[str] = set()

    def allocate(self, key: str, position: int) -> str:
        """
        Get the attribute name for the field at ``position`` (1-based).

        Unusable names fall back to ``field_<position>``, bumped until the
        name is free within this class. A name already taken by an earlier
        field gets a ``_2``, ``_3``, ... suffix.
        """
        name = sanitize_field_name(key)

        if not name or name == "_":
            counter = position
            name = f"{FALLBACK_PREFIX}{counter}"
            while name in self._used_names:
                counter += 1
                name = f"{FALLBACK_PREFIX}{counter}"
        elif name in self._used_names:
            counter = 2
            while f"{name}_{counter}" in self._used_names:
                counter += 1
            name = f"{name}_{counter}"

        self._used_names.add(name)
        return name
