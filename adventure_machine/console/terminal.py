"""
Plain-text terminal console.

Renders each display kind with simple text decoration.
"""

from __future__ import annotations

import sys
from typing import TextIO

from adventure_machine.console.interfaces import DisplayKind


class TerminalConsole:
    """Writes game output to a text stream (stdout by default)."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def display(self, message: str, kind: DisplayKind = DisplayKind.MESSAGE) -> None:
        self.stream.write(self.format(message, DisplayKind(kind)) + "\n")
        self.stream.flush()

    def format(self, message: str, kind: DisplayKind) -> str:
        if kind == DisplayKind.TITLE:
            return f"\n{message.upper()}\n{'=' * len(message)}"
        if kind == DisplayKind.SECTION:
            return f"\n== {message} =="
        if kind == DisplayKind.SUBSECTION:
            return f"-- {message} --"
        if kind == DisplayKind.ERROR:
            return f"! {message}"
        if kind == DisplayKind.COMMAND:
            return f"> {message}"
        return message
