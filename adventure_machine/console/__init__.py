"""
Console layer for AdventureMachine.

Provides the output interface the engine writes to, the input
tokenizer, and two implementations:
- MemoryConsole: records output (tests, embedding)
- TerminalConsole: prints plain text
"""

from adventure_machine.console.interfaces import Console, DisplayKind
from adventure_machine.console.memory import MemoryConsole
from adventure_machine.console.terminal import TerminalConsole
from adventure_machine.console.tokenizer import tokenize

__all__ = [
    "Console",
    "DisplayKind",
    "MemoryConsole",
    "TerminalConsole",
    "tokenize",
]
