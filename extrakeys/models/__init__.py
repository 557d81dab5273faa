"""Domain models."""

from .keys import DEFAULT_STYLE, KeyMatrix, Shortcut, ShortcutAction, Style

__all__ = ["DEFAULT_STYLE", "KeyMatrix", "Shortcut", "ShortcutAction", "Style"]
