"""
Commands for AdventureMachine.

Every active command is offered every input line and decides for
itself whether to act. Two matching strategies are provided:
- CallbackCommand: the first token names the command
- RegexCallbackCommand: "<name> <target> [<preposition> <target>]"
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from adventure_machine.engine.game import Game

logger = logging.getLogger(__name__)

CommandCallback = Callable[..., Any]
"""Called as callback(command, raw_text, tokens)."""

TargetCallback = Callable[..., Any]
"""Called as callback(command, raw_text, target1, target2); target2 may be None."""


@dataclass
class Command:
    """
    Base command.

    `game` is set by the engine each time the active command set is
    rebuilt.
    """

    short_name: str
    description: str
    game: Game | None = field(default=None, init=False, repr=False, compare=False)

    def execute(self, raw_text: str, tokens: list[str]) -> None:
        raise NotImplementedError("Cannot execute base command")

    def get_short_name(self) -> str:
        return self.short_name

    def get_description(self) -> str:
        return self.description

    def print_usage(self) -> None:
        if self.game is not None:
            self.game.print_information(f"Usage:\n{self.description}")


@dataclass
class CallbackCommand(Command):
    """Runs its callback when the first token equals its name or an alias."""

    callback: CommandCallback | None = None
    aliases: list[str] = field(default_factory=list)

    def names(self) -> list[str]:
        return [self.short_name.lower(), *(alias.lower() for alias in self.aliases)]

    def matches(self, raw_text: str, tokens: list[str] | None) -> bool:
        words = tokens if tokens else raw_text.split()
        if not words:
            return False
        return words[0].strip().lower() in self.names()

    def execute(self, raw_text: str, tokens: list[str]) -> None:
        if not self.matches(raw_text, tokens):
            return
        logger.debug("Command '%s' matched %r", self.short_name, raw_text)
        if self.callback is not None:
            self.callback(self, raw_text, list(tokens or raw_text.split()))


@dataclass
class RegexCallbackCommand(Command):
    """
    A command taking one target, or two targets joined by a preposition.

    With name "use" and preposition "on":
        "use gold key on blue door" -> ("gold key", "blue door")
        "use flashlight"            -> ("flashlight", None)
        "use"                       -> usage text, callback not run

    Target capture is greedy, so the split happens at the last
    occurrence of the preposition: "use key on door on wall" gives
    ("key on door", "wall").
    """

    callback: TargetCallback | None = None
    preposition: str | None = None
    short_pattern: re.Pattern = field(init=False, repr=False, compare=False)
    long_pattern: re.Pattern | None = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        name = re.escape(self.short_name)
        self.short_pattern = re.compile(rf"^{name}\s+(.+)", re.I)
        self.long_pattern = None
        if self.preposition:
            preposition = re.escape(self.preposition)
            self.long_pattern = re.compile(rf"^{name}\s+(.+)\s+{preposition}\s+(.+)", re.I)

    def parse_targets(self, raw_text: str) -> tuple[str | None, str | None]:
        """Extract (target1, target2) from a line that starts with the name."""
        text = raw_text.strip()
        if self.long_pattern is not None:
            match = self.long_pattern.match(text)
            if match:
                return match.group(1).strip(), match.group(2).strip()
        match = self.short_pattern.match(text)
        if match:
            return match.group(1).strip(), None
        return None, None

    def execute(self, raw_text: str, tokens: list[str]) -> None:
        if not raw_text.strip().lower().startswith(self.short_name.lower()):
            return

        target1, target2 = self.parse_targets(raw_text)
        if target1 is None:
            self.print_usage()
            return

        logger.debug("Command '%s' targets %r, %r", self.short_name, target1, target2)
        if self.callback is not None:
            self.callback(self, raw_text, target1, target2)
