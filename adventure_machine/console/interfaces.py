"""
Console Interfaces for AdventureMachine.

The console is the engine's only output channel. The display kind
governs presentation, never game logic.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class DisplayKind(str, Enum):
    """Presentation categories for console output."""

    MESSAGE = "message"
    TITLE = "title"
    SECTION = "section"
    SUBSECTION = "subsection"
    DESCRIPTION = "description"
    COMMAND = "command"
    ERROR = "error"
    INFORMATION = "information"


class Console(Protocol):
    """Interface for anything that can show game output."""

    def display(self, message: str, kind: DisplayKind = DisplayKind.MESSAGE) -> None:
        """Show a message to the player."""
        ...
