"""Locate and read ``termux.properties``-style files.

The format is Java properties text, decoded as UTF-8. Lines end at
``\\n``, ``\\r`` or ``\\r\\n`` only. An escaped surrogate pair such as
``\\ud83d\\ude00`` becomes one character; unpaired halves are kept as-is.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

PROPERTIES_CANDIDATES: tuple[Path, ...] = (
    Path(".termux") / "termux.properties",
    Path(".config") / "termux" / "termux.properties",
)

_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_UNICODE_ESCAPE_RE = re.compile(r"[0-9a-fA-F]{4}")
_SEPARATORS = "=: \t\f"
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def find_properties_file(home: Path) -> Optional[Path]:
    """Return the first existing properties file under ``home``."""
    for candidate in PROPERTIES_CANDIDATES:
        path = home / candidate
        if path.exists():
            return path
    return None


def _logical_lines(text: str) -> list[str]:
    """Join backslash-continued lines and drop blanks and comments."""
    lines: list[str] = []
    pending = ""
    for physical in _LINE_BREAK_RE.split(text):
        line = physical.lstrip(" \t\f") if pending else physical
        if not pending:
            stripped = line.lstrip(" \t\f")
            if not stripped or stripped[0] in "#!":
                continue
            line = stripped
        trailing = len(line) - len(line.rstrip("\\"))
        if trailing % 2 == 1:
            pending += line[:-1]
            continue
        lines.append(pending + line)
        pending = ""
    if pending:
        lines.append(pending)
    return lines


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char != "\\" or i + 1 == len(text):
            out.append(char)
            i += 1
            continue
        nxt = text[i + 1]
        if nxt == "u" and _UNICODE_ESCAPE_RE.match(text, i + 2):
            out.append(chr(int(text[i + 2 : i + 6], 16)))
            i += 6
            continue
        out.append(_ESCAPES.get(nxt, nxt))
        i += 2
    return _join_surrogate_pairs("".join(out))


def _join_surrogate_pairs(text: str) -> str:
    """Combine high+low surrogate pairs into one code point."""
    return text.encode("utf-16-le", "surrogatepass").decode(
        "utf-16-le", "surrogatepass"
    )


def _split_entry(line: str) -> tuple[str, str]:
    """Split a logical line at the first unescaped separator."""
    i = 0
    while i < len(line):
        char = line[i]
        if char == "\\":
            i += 2
            continue
        if char in _SEPARATORS:
            break
        i += 1
    key, rest = line[:i], line[i:]
    rest = rest.lstrip(" \t\f")
    if rest[:1] in ("=", ":"):
        rest = rest[1:].lstrip(" \t\f")
    return _unescape(key), _unescape(rest)


def parse_properties(text: str) -> dict[str, str]:
    """Parse properties text into a dict; later keys override earlier ones."""
    props: dict[str, str] = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        props[key] = value
    return props


def load_properties(path: Optional[Path]) -> dict[str, str]:
    """Read ``path``; a missing or unreadable file yields no properties."""
    if path is None or not path.is_file():
        return {}
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Could not read properties file %s: %s", path, e)
        return {}
    return parse_properties(text)
