"""
In-memory console for testing and embedding.

Records every displayed message so callers can inspect what the
engine said without a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from adventure_machine.console.interfaces import DisplayKind


@dataclass
class MemoryConsole:
    """Console that keeps output as (message, kind) pairs."""

    output: list[tuple[str, DisplayKind]] = field(default_factory=list)

    def display(self, message: str, kind: DisplayKind = DisplayKind.MESSAGE) -> None:
        self.output.append((message, DisplayKind(kind)))

    def messages(self, kind: DisplayKind | None = None) -> list[str]:
        """All messages, optionally only those of one kind."""
        return [message for message, shown in self.output if kind is None or shown == kind]

    def errors(self) -> list[str]:
        return self.messages(DisplayKind.ERROR)

    @property
    def text(self) -> str:
        return "\n".join(message for message, _ in self.output)

    def clear(self) -> None:
        self.output.clear()
