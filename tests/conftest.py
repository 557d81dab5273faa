"""Global fixtures: properties files and a clean preferences object."""

from pathlib import Path

import pytest

from extrakeys.core.preferences import TerminalPreferences


@pytest.fixture
def prefs() -> TerminalPreferences:
    """Preferences with default layout and no shortcuts."""
    return TerminalPreferences()


@pytest.fixture
def termux_home(tmp_path: Path) -> Path:
    """Home directory with an empty ~/.termux/ folder."""
    (tmp_path / ".termux").mkdir()
    return tmp_path


@pytest.fixture
def write_props(termux_home: Path):
    """Write ~/.termux/termux.properties and return its path."""

    def _write(text: str) -> Path:
        path = termux_home / ".termux" / "termux.properties"
        path.write_text(text, encoding="utf-8")
        return path

    return _write
