"""Alternate spellings for extra-keys identifiers.

People write the same key in different ways ("ESCAPE", "PAGE_UP", ...).
Every token of a parsed layout goes through ``resolve_alias`` once before
any glyph lookup.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from extrakeys.models import KeyMatrix

CONTROL_CHAR_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        "ESCAPE": "ESC",
        "CONTROL": "CTRL",
        "RETURN": "ENTER",  # different keys, but applications rarely tell them apart
        "FUNCTION": "FN",
        # first and last letter
        "LT": "LEFT",
        "RT": "RIGHT",
        "DN": "DOWN",
        "PAGEUP": "PGUP",
        "PAGE_UP": "PGUP",
        "PAGE UP": "PGUP",
        "PAGE-UP": "PGUP",
        "PAGEDOWN": "PGDN",
        "PAGE_DOWN": "PGDN",
        "PAGE-DOWN": "PGDN",
        "DELETE": "DEL",
        "BACKSPACE": "BKSP",
        # easier to write in a properties file
        "BACKSLASH": "\\",
        "QUOTE": '"',
        "APOSTROPHE": "'",
    }
)


def resolve_alias(token: str) -> str:
    """Return the canonical identifier for ``token`` (itself if unknown)."""
    return CONTROL_CHAR_ALIASES.get(token, token)


def resolve_matrix(matrix: KeyMatrix) -> KeyMatrix:
    """Return a new matrix with every token alias-resolved."""
    return [[resolve_alias(token) for token in row] for row in matrix]
