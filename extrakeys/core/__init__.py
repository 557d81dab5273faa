"""Parsing and lookup logic for extra keys and shortcuts."""

from .aliases import resolve_alias, resolve_matrix
from .errors import (
    ExtraKeysError,
    MalformedExtraKeysError,
    MixedTypeError,
    PerKeyConfigNotImplementedError,
    UnsupportedShapeError,
)
from .glyphs import display, display_matrix, glyph_map, normalize_style
from .matrix import default_extra_keys, parse_extra_keys, try_parse_extra_keys
from .preferences import ReloadReport, TerminalPreferences
from .properties import find_properties_file, load_properties, parse_properties
from .result import Err, Ok
from .shortcuts import SHORTCUT_KEYS, parse_shortcut, parse_shortcuts

__all__ = [
    "Err",
    "ExtraKeysError",
    "MalformedExtraKeysError",
    "MixedTypeError",
    "Ok",
    "PerKeyConfigNotImplementedError",
    "ReloadReport",
    "SHORTCUT_KEYS",
    "TerminalPreferences",
    "UnsupportedShapeError",
    "default_extra_keys",
    "display",
    "display_matrix",
    "find_properties_file",
    "glyph_map",
    "load_properties",
    "normalize_style",
    "parse_extra_keys",
    "parse_properties",
    "parse_shortcut",
    "parse_shortcuts",
    "resolve_alias",
    "resolve_matrix",
    "try_parse_extra_keys",
]
