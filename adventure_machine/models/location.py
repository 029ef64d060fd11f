"""
Location Models for AdventureMachine.

Locations are the nodes of the world graph. Each owns its exits,
the items lying in it and the NPCs present, and counts how often
the player has arrived there.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from adventure_machine.models.entity import Entity, TextSource, TickCallback
from adventure_machine.models.inventory import Inventory


class Exit(BaseModel):
    """A named, directed edge to another location."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    exit_name: str = Field(min_length=1, description="Matched case-insensitively")
    destination_location_id: str = Field(
        description="Location id; not checked until the exit is taken"
    )
    on_exit: Callable[..., Any] | None = Field(
        default=None, description="Hook for traversal; navigation does not call it"
    )

    def matches(self, name: str) -> bool:
        return self.exit_name.strip().lower() == name.strip().lower()


class Location(Entity):
    """A place in the world the player can explore."""

    exits: list[Exit] = Field(default_factory=list)
    item_codes: list[str] = Field(default_factory=list, description="Catalog ids placed here")
    npc_codes: list[str] = Field(default_factory=list, description="NPC ids placed here")
    items: Inventory = Field(default_factory=Inventory, exclude=True, repr=False)
    npcs: Inventory = Field(default_factory=Inventory, exclude=True, repr=False)
    visits: int = Field(default=0, ge=0)
    commands: list[Any] = Field(
        default_factory=list, description="Commands only active while here"
    )

    def bind(self, game: Any) -> None:
        """Attach this location and its inventories to a game."""
        self.game = game
        self.items.game = game
        self.npcs.game = game

    def add_exit(
        self,
        exit_name: str,
        destination_location_id: str,
        on_exit: Callable[..., Any] | None = None,
    ) -> Exit:
        exit_ = Exit(
            exit_name=exit_name,
            destination_location_id=destination_location_id,
            on_exit=on_exit,
        )
        self.exits.append(exit_)
        return exit_

    def get_exit(self, exit_name: str) -> Exit | None:
        """Find an exit by name; the first declared match wins."""
        for exit_ in self.exits:
            if exit_.matches(exit_name):
                return exit_
        return None

    def get_commands(self) -> list[Any]:
        return list(self.commands)

    def add_item(self, item: Entity) -> None:
        self.items.add_item(item)

    def add_npc(self, npc: Entity) -> None:
        self.npcs.add_item(npc)


def create_location(
    location_id: str,
    title: TextSource,
    description: TextSource = "",
    item_codes: list[str] | None = None,
    npc_codes: list[str] | None = None,
    tick: TickCallback | None = None,
) -> Location:
    """Factory function to create a location."""
    return Location(
        id=location_id,
        title=title,
        description=description,
        item_codes=item_codes or [],
        npc_codes=npc_codes or [],
        tick_callback=tick,
    )
