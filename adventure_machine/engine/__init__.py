"""
Core Engine for AdventureMachine.

The engine orchestrates:
- Command matching (callback and regex-targeted commands)
- World state transitions (navigation, items, NPC dialogue)
- Location-local ticks (cooperative scheduler)
"""

from __future__ import annotations

from adventure_machine.engine.builtins import default_commands
from adventure_machine.engine.commands import (
    CallbackCommand,
    Command,
    RegexCallbackCommand,
)
from adventure_machine.engine.game import Game
from adventure_machine.engine.models import GameConfig, StoryData
from adventure_machine.engine.scheduler import TickScheduler

__all__ = [
    # Main engine
    "Game",
    # Commands
    "Command",
    "CallbackCommand",
    "RegexCallbackCommand",
    "default_commands",
    # Models
    "GameConfig",
    "StoryData",
    # Scheduling
    "TickScheduler",
]
