"""
Item Models for AdventureMachine.

Items can be examined and used, and collectable ones can be picked
up. Fixtures are items that belong to a location for good, such as
a filing cabinet or a control panel.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import Any

from pydantic import Field, model_validator

from adventure_machine.models.entity import Entity, TextSource, TickCallback
from adventure_machine.models.npc import NPC

UseCallback = Callable[[Any, Any], Any]
"""Called as callback(item, target); target may be None."""


class ItemKind(str, Enum):
    """Kinds of item."""

    ITEM = "item"
    FIXTURE = "fixture"


class Item(Entity):
    """Something the player can examine, use and possibly collect."""

    kind: ItemKind = ItemKind.ITEM
    on_use_callback: UseCallback | None = None
    usable: bool = Field(default=True, description="Advisory only")
    collectable: bool = Field(default=True, description="Can be taken by the player")

    @model_validator(mode="after")
    def _fixtures_stay_put(self) -> Item:
        if self.kind == ItemKind.FIXTURE and self.collectable:
            raise ValueError(f"Fixture '{self.id}' cannot be collectable")
        return self

    def is_fixture(self) -> bool:
        return self.kind == ItemKind.FIXTURE

    def is_collectable(self) -> bool:
        return self.collectable

    def is_usable(self) -> bool:
        return self.usable

    def on_use(self, target: Entity | None = None) -> Any:
        """
        Use this item, optionally on a target.

        Runs the item's own callback if it has one; otherwise an NPC
        target gets to react; otherwise nothing happens.
        """
        if self.on_use_callback is not None:
            return self.on_use_callback(self, target)
        if isinstance(target, NPC):
            return target.on_use(self)
        return None


def create_item(
    item_id: str,
    title: TextSource,
    description: TextSource = "",
    on_use: UseCallback | None = None,
    usable: bool = True,
    collectable: bool = True,
    tick: TickCallback | None = None,
) -> Item:
    """Factory function to create an item."""
    return Item(
        id=item_id,
        title=title,
        description=description,
        on_use_callback=on_use,
        usable=usable,
        collectable=collectable,
        tick_callback=tick,
    )


def create_fixture(
    item_id: str,
    title: TextSource,
    description: TextSource = "",
    on_use: UseCallback | None = None,
    usable: bool = True,
    tick: TickCallback | None = None,
) -> Item:
    """Factory function to create a fixture, an item that can never be taken."""
    return Item(
        id=item_id,
        title=title,
        description=description,
        kind=ItemKind.FIXTURE,
        on_use_callback=on_use,
        usable=usable,
        collectable=False,
        tick_callback=tick,
    )
