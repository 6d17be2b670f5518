"""
Naming utilities for safe code generation.

Turns arbitrary JSON keys into identifiers that every target language
accepts, and quotes keys back into string literals for tags/annotations.
"""

import json
import re

# Identifier used when a key contains no usable characters at all
FALLBACK_IDENTIFIER = "UnknownField"

# Prefix for identifiers that would otherwise start with a digit
DIGIT_PREFIX = "Num"

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


def to_pascal_case(raw: str) -> str:
    """
    Convert an arbitrary string to a PascalCase identifier.

    Every character outside ``[A-Za-z0-9]`` acts as a word separator, so
    ``"user_id"`` becomes ``UserId`` and ``"123key"`` becomes ``Num123key``.

    Args:
        raw: Original JSON key (may be empty)

    Returns:
        Identifier made only of ASCII letters and digits, never starting
        with a digit
    """
    words = _NON_ALPHANUMERIC.sub(" ", raw).split()
    if not words:
        return FALLBACK_IDENTIFIER

    pascal = "".join(word[0].upper() + word[1:].lower() for word in words)

    if pascal[0].isdigit():
        pascal = f"{DIGIT_PREFIX}{pascal}"

    return pascal


def to_camel_case(raw: str) -> str:
    """Convert an arbitrary string to a camelCase identifier."""
    pascal = to_pascal_case(raw)
    return pascal[:1].lower() + pascal[1:]


def quote_string(value: str) -> str:
    """Render a string as a double-quoted literal (JSON escaping rules)."""
    return json.dumps(value, ensure_ascii=False)
