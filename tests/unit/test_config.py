"""Unit tests for environment-driven settings."""

from pathlib import Path

import pytest

from extrakeys.config import get_settings


def test_settings_read_prefixed_environment(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("EXTRAKEYS_HOME", str(tmp_path))
    monkeypatch.setenv("EXTRAKEYS_STYLE_OVERRIDE", "none")
    monkeypatch.setenv("EXTRAKEYS_LOG_LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.home == tmp_path
    assert settings.style_override == "none"
    assert settings.log_level == "DEBUG"
    assert settings.properties_path is None
