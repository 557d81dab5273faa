"""Environment and settings (Pydantic Settings)."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_data_dir = Path.home() / ".extrakeys"


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    The terminal properties themselves live in ``termux.properties``; these
    settings only control where to find it and how the CLI behaves.
    """

    model_config = SettingsConfigDict(
        env_prefix="EXTRAKEYS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Properties discovery: explicit path wins over lookup under home
    home: Path = Field(default_factory=Path.home)
    properties_path: Optional[Path] = None

    # Overrides extra-keys-style from the properties file when set
    style_override: Optional[str] = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_file: Path = _data_dir / "extrakeys.log"


def get_settings() -> Settings:
    """Return application settings (singleton-like)."""
    return Settings()
