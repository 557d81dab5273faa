"""Schema for extra-keys layouts and keyboard shortcuts."""

from enum import IntEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Style = Literal["default", "arrows-only", "arrows-all", "all", "none"]
KeyMatrix = list[list[str]]

DEFAULT_STYLE: Style = "default"


class ShortcutAction(IntEnum):
    """Session actions a Ctrl shortcut can be bound to."""

    CREATE_SESSION = 1
    NEXT_SESSION = 2
    PREVIOUS_SESSION = 3
    RENAME_SESSION = 4


class Shortcut(BaseModel):
    """A Ctrl+<code point> binding to a session action."""

    model_config = ConfigDict(frozen=True)

    code_point: int = Field(ge=0, le=0x10FFFF, description="Unicode scalar value")
    action: ShortcutAction = Field(description="Session action to dispatch")

    @property
    def label(self) -> str:
        """Human-readable form, e.g. ``ctrl+n``."""
        return f"ctrl+{chr(self.code_point)}"
