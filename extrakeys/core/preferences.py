"""Terminal preferences reloaded from a properties file.

``TerminalPreferences.reload`` computes a complete new state and swaps it in
one assignment. A failed ``extra-keys`` parse keeps the previous layout and
reports the error; bad shortcuts are logged and left unbound. Callers must
not run two reloads at once.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Mapping, Optional

from extrakeys.core.glyphs import display, normalize_style
from extrakeys.core.matrix import default_extra_keys, try_parse_extra_keys
from extrakeys.core.properties import find_properties_file, load_properties
from extrakeys.core.result import Err
from extrakeys.core.shortcuts import parse_shortcuts
from extrakeys.models import DEFAULT_STYLE, KeyMatrix, Shortcut, ShortcutAction, Style

logger = logging.getLogger(__name__)

EXTRA_KEYS_KEY = "extra-keys"
EXTRA_KEYS_STYLE_KEY = "extra-keys-style"
BACK_KEY_KEY = "back-key"


@dataclass(frozen=True)
class _State:
    extra_keys: tuple[tuple[str, ...], ...]
    extra_keys_style: Style
    shortcuts: frozenset[Shortcut]
    # same shortcuts, in create, next, previous, rename order
    bindings: tuple[Shortcut, ...]
    back_is_escape: bool


@dataclass
class ReloadReport:
    """Outcome of one reload: one message per failed setting."""

    errors: list[str] = field(default_factory=list)
    source: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return not self.errors


def _freeze(matrix: KeyMatrix) -> tuple[tuple[str, ...], ...]:
    return tuple(tuple(row) for row in matrix)


class TerminalPreferences:
    """Active extra-keys layout, glyph style, shortcuts and back-key mode."""

    def __init__(self) -> None:
        self._state = _State(
            extra_keys=_freeze(default_extra_keys()),
            extra_keys_style=DEFAULT_STYLE,
            shortcuts=frozenset(),
            bindings=(),
            back_is_escape=False,
        )

    @property
    def extra_keys(self) -> KeyMatrix:
        """A copy of the active layout."""
        return [list(row) for row in self._state.extra_keys]

    @property
    def extra_keys_style(self) -> Style:
        return self._state.extra_keys_style

    @property
    def shortcuts(self) -> frozenset[Shortcut]:
        return self._state.shortcuts

    @property
    def back_is_escape(self) -> bool:
        return self._state.back_is_escape

    def display(self, token: str) -> str:
        """Glyph for ``token`` in the active style."""
        return display(self._state.extra_keys_style, token)

    def shortcut_for(self, code_point: int) -> Optional[ShortcutAction]:
        """Action bound to Ctrl+``code_point``, if any.

        When several actions share a key, the first in ``SHORTCUT_KEYS`` order wins.
        """
        for shortcut in self._state.bindings:
            if shortcut.code_point == code_point:
                return shortcut.action
        return None

    def reload(self, props: Mapping[str, str]) -> ReloadReport:
        """Rebuild every setting from ``props`` and swap them in together."""
        report = ReloadReport()
        previous = self._state

        extra_keys = previous.extra_keys
        parsed = try_parse_extra_keys(props.get(EXTRA_KEYS_KEY))
        if isinstance(parsed, Err):
            message = f"Error loading properties: {parsed.message}"
            # the report carries the message to the user
            logger.info("Keeping previous extra-keys layout: %s", parsed.message)
            report.errors.append(message)
        else:
            extra_keys = _freeze(parsed.value)

        shortcuts = parse_shortcuts(props)
        self._state = _State(
            extra_keys=extra_keys,
            extra_keys_style=normalize_style(props.get(EXTRA_KEYS_STYLE_KEY)),
            shortcuts=shortcuts,
            bindings=tuple(sorted(shortcuts, key=lambda s: s.action)),
            back_is_escape=props.get(BACK_KEY_KEY, "back") == "escape",
        )
        logger.info(
            "Reloaded preferences: %d row(s), %d shortcut(s)",
            len(self._state.extra_keys),
            len(self._state.shortcuts),
        )
        return report

    def reload_from_file(
        self, path: Optional[Path] = None, home: Optional[Path] = None
    ) -> ReloadReport:
        """Reload from ``path``, or from the properties file found under ``home``."""
        if path is None:
            path = find_properties_file(home or Path.home())
        report = self.reload(load_properties(path))
        report.source = path
        return report
