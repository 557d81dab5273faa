"""Glyph catalog and per-style display lookup.

Keys are shown in a natural looking way, like "→" for RIGHT or "↲" for
ENTER. A style picks which catalog entries are active; anything not in the
active map is displayed as itself.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Mapping, cast, get_args

from extrakeys.models import DEFAULT_STYLE, KeyMatrix, Style

logger = logging.getLogger(__name__)

GlyphMap = Mapping[str, str]

CLASSIC_ARROWS: GlyphMap = MappingProxyType(
    {
        "LEFT": "←",  # U+2190 LEFTWARDS ARROW
        "RIGHT": "→",  # U+2192 RIGHTWARDS ARROW
        "UP": "↑",  # U+2191 UPWARDS ARROW
        "DOWN": "↓",  # U+2193 DOWNWARDS ARROW
    }
)

WELL_KNOWN_CHARS: GlyphMap = MappingProxyType(
    {
        "ENTER": "↲",  # U+21B2 DOWNWARDS ARROW WITH TIP LEFTWARDS
        "TAB": "↹",  # U+21B9 LEFTWARDS ARROW TO BAR OVER RIGHTWARDS ARROW TO BAR
        "BKSP": "⌫",  # U+232B ERASE TO THE LEFT
        "DEL": "⌦",  # U+2326 ERASE TO THE RIGHT
        "KEYBOARD": "⌨",  # U+2328 KEYBOARD
    }
)

LESSER_KNOWN_CHARS: GlyphMap = MappingProxyType(
    {
        # HOME may mean start of line or first page, hence the diagonal
        "HOME": "⇱",  # U+21F1 NORTH WEST ARROW TO CORNER (IEC 9995)
        "END": "⇲",  # U+21F2 SOUTH EAST ARROW TO CORNER (IEC 9995)
        "PGUP": "⇑",  # U+21D1, no ISO symbol exists
        "PGDN": "⇓",  # U+21D3, no ISO symbol exists
    }
)

ARROW_TRIANGLE_VARIATION: GlyphMap = MappingProxyType(
    {
        "LEFT": "◀",  # U+25C0
        "RIGHT": "▶",  # U+25B6
        "UP": "▲",  # U+25B2
        "DOWN": "▼",  # U+25BC
    }
)

ISO_CONTROL_SYMBOLS: GlyphMap = MappingProxyType(
    {
        # FN has no ISO symbol
        "CTRL": "⎈",  # U+2388 HELM SYMBOL
        "ALT": "⎇",  # U+2387 ALTERNATIVE KEY SYMBOL
        "ESC": "⎋",  # U+238B BROKEN CIRCLE WITH NORTHWEST ARROW
    }
)

COSMETIC: GlyphMap = MappingProxyType(
    {
        "-": "―",  # U+2015 HORIZONTAL BAR
    }
)

# Later components override earlier ones on collision.
STYLE_COMPONENTS: Mapping[str, tuple[GlyphMap, ...]] = MappingProxyType(
    {
        "default": (CLASSIC_ARROWS, WELL_KNOWN_CHARS, COSMETIC),
        "arrows-only": (CLASSIC_ARROWS, COSMETIC),
        "arrows-all": (CLASSIC_ARROWS, WELL_KNOWN_CHARS, LESSER_KNOWN_CHARS, COSMETIC),
        "all": (
            CLASSIC_ARROWS,
            WELL_KNOWN_CHARS,
            LESSER_KNOWN_CHARS,
            COSMETIC,
            ISO_CONTROL_SYMBOLS,
        ),
        "none": (),
    }
)

STYLES: tuple[str, ...] = get_args(Style)


def normalize_style(name: str | None) -> Style:
    """Return ``name`` if it is a known style, else the default style."""
    if name in STYLES:
        return cast(Style, name)
    if name is not None:
        logger.debug("Unknown extra-keys style %r, using %r", name, DEFAULT_STYLE)
    return DEFAULT_STYLE


@lru_cache(maxsize=None)
def glyph_map(style: str) -> GlyphMap:
    """Build the union glyph map for ``style`` (memoized, read-only)."""
    merged: dict[str, str] = {}
    for component in STYLE_COMPONENTS[normalize_style(style)]:
        merged.update(component)
    return MappingProxyType(merged)


def display(style: str, token: str) -> str:
    """Return the glyph to show for ``token``, or ``token`` itself."""
    return glyph_map(style).get(token, token)


def display_matrix(style: str, matrix: KeyMatrix) -> list[list[str]]:
    """Apply ``display`` to every cell of ``matrix``."""
    glyphs = glyph_map(style)
    return [[glyphs.get(token, token) for token in row] for row in matrix]
