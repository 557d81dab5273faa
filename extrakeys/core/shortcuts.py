"""Parse ``shortcut.*`` properties into Ctrl key bindings.

A shortcut value looks like ``ctrl+n``. Case and whitespace around the
parts are ignored. Anything else is logged and skipped; a bad shortcut
never fails a reload.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from extrakeys.models import Shortcut, ShortcutAction

logger = logging.getLogger(__name__)

SHORTCUT_KEYS: Mapping[str, ShortcutAction] = MappingProxyType(
    {
        "shortcut.create-session": ShortcutAction.CREATE_SESSION,
        "shortcut.next-session": ShortcutAction.NEXT_SESSION,
        "shortcut.previous-session": ShortcutAction.PREVIOUS_SESSION,
        "shortcut.rename-session": ShortcutAction.RENAME_SESSION,
    }
)

_HIGH_SURROGATES = range(0xD800, 0xDC00)
_LOW_SURROGATES = range(0xDC00, 0xE000)


def _is_surrogate(char: str) -> bool:
    return 0xD800 <= ord(char) <= 0xDFFF


def _decode_code_point(text: str) -> Optional[int]:
    """Return the leading code point of ``text``.

    ``text`` may still hold a UTF-16 surrogate pair when the caller passes
    raw code units; it must be high half first. Returns None for a malformed
    pair.
    """
    first = text[0]
    if not _is_surrogate(first):
        return ord(first)
    if (
        len(text) != 2
        or ord(first) not in _HIGH_SURROGATES
        or ord(text[1]) not in _LOW_SURROGATES
    ):
        return None
    return 0x10000 + ((ord(first) - 0xD800) << 10) + (ord(text[1]) - 0xDC00)


def parse_shortcut(
    name: str, raw: Optional[str], action: ShortcutAction
) -> Optional[Shortcut]:
    """Parse one ``ctrl+<key>`` value.

    Returns None (and logs) when the value is absent or malformed.
    """
    if raw is None:
        return None

    parts = raw.lower().strip().split("+")
    key = parts[1].strip() if len(parts) == 2 else ""
    if len(parts) != 2 or parts[0].strip() != "ctrl" or not 1 <= len(key) <= 2:
        logger.error("Keyboard shortcut '%s' is not Ctrl+<something>", name)
        return None

    code_point = _decode_code_point(key)
    if code_point is None:
        logger.error("Keyboard shortcut '%s' is not Ctrl+<something>", name)
        return None

    return Shortcut(code_point=code_point, action=action)


def parse_shortcuts(props: Mapping[str, str]) -> frozenset[Shortcut]:
    """Build a fresh shortcut set from every ``shortcut.*`` property."""
    shortcuts = set()
    for name, action in SHORTCUT_KEYS.items():
        shortcut = parse_shortcut(name, props.get(name), action)
        if shortcut is not None:
            shortcuts.add(shortcut)
    return frozenset(shortcuts)
