"""
Engine Data Models for AdventureMachine.

Defines the records the engine consumes:
- GameConfig: engine behavior settings
- StoryData: the declarative world a game is started from
"""

from __future__ import annotations

import os
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from adventure_machine.models import NPC, Item, Location


def _env_flag(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


class GameConfig(BaseModel):
    """
    Engine configuration.

    Configuration via environment variables:
        ADVENTURE_TICK_INTERVAL: Seconds between scheduler ticks (default: 1.0)
        ADVENTURE_SHOW_HELP_HINT: Print the help hint on start (default: true)
        ADVENTURE_LOG_LEVEL: Logging level for the CLI (default: WARNING)
    """

    tick_interval: float = Field(
        default=1.0, ge=0, description="Seconds between ticks; 0 runs on the next loop turn"
    )
    show_help_hint: bool = True
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, **overrides: Any) -> GameConfig:
        """Build a config from environment variables, then apply overrides."""
        values: dict[str, Any] = {}
        if os.getenv("ADVENTURE_TICK_INTERVAL"):
            values["tick_interval"] = float(os.getenv("ADVENTURE_TICK_INTERVAL", "1.0"))
        if os.getenv("ADVENTURE_SHOW_HELP_HINT"):
            values["show_help_hint"] = _env_flag(os.getenv("ADVENTURE_SHOW_HELP_HINT", "true"))
        if os.getenv("ADVENTURE_LOG_LEVEL"):
            values["log_level"] = os.getenv("ADVENTURE_LOG_LEVEL", "WARNING").upper()
        values.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**values)


class StoryData(BaseModel):
    """
    A story: everything needed to start a new game.

    Locations carry their own item_codes and npc_codes, which are
    resolved against the items and npcs catalogs at game start.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(description="Story title")
    locations: list[Location] = Field(default_factory=list)
    items: list[Item] = Field(default_factory=list, description="Master item catalog")
    inventory: list[str] = Field(
        default_factory=list, description="Item codes the player starts with"
    )
    npcs: list[NPC] = Field(default_factory=list, description="Master NPC catalog")
    commands: list[Any] = Field(default_factory=list, description="Story-specific commands")
    start_location: str = Field(description="Id of the first location")
