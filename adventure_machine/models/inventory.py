"""
Inventory for AdventureMachine.

A keyed container of entities, reused for the player's bag,
per-location items and NPCs, and the master catalogs.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from adventure_machine.models.entity import Entity

logger = logging.getLogger(__name__)


class Inventory:
    """
    Mapping from entity id to entity.

    Removing an entity leaves its key in place with a None slot:
    lookups by id return None and iteration skips the slot.
    """

    def __init__(
        self,
        game: Any = None,
        entities: Entity | Iterable[Entity] | None = None,
    ) -> None:
        self.game = game
        self.items: dict[str, Entity | None] = {}
        self._frozen = False

        if isinstance(entities, Entity):
            self.add_item(entities)
        elif entities is not None:
            self.add_items(entities)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject any further additions or removals."""
        self._frozen = True

    def _check_mutable(self) -> None:
        if self._frozen:
            raise RuntimeError("Inventory is frozen and cannot be modified")

    def add_item(self, entity: Any) -> None:
        """Add an entity, binding it to this inventory's game. Non-entities are ignored."""
        if not isinstance(entity, Entity):
            logger.debug("Ignoring non-entity value added to inventory: %r", entity)
            return
        self._check_mutable()
        if self.game is not None:
            entity.game = self.game
        self.items[entity.id] = entity

    def add_items(self, entities: Iterable[Any]) -> None:
        for entity in entities:
            self.add_item(entity)

    def get_item(self, item_id: str) -> Entity | None:
        return self.items.get(item_id)

    def remove_item(self, item_id: str) -> None:
        self._check_mutable()
        self.items[item_id] = None

    def take_item(self, item_id: str) -> Entity | None:
        """Remove an entity and return it."""
        entity = self.get_item(item_id)
        self.remove_item(item_id)
        return entity

    def find_item_by_name(self, name: str) -> Entity | None:
        """
        Find an entity by display title.

        Case-insensitive exact match on the trimmed title; the first
        match in insertion order wins.
        """
        for entity in self:
            if entity.matches_name(name):
                return entity
        return None

    def titles(self) -> list[str]:
        return [entity.title for entity in self]

    def __iter__(self) -> Iterator[Entity]:
        for entity in list(self.items.values()):
            if entity is not None:
                yield entity

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return any(True for _ in self)

    def __contains__(self, item_id: object) -> bool:
        return isinstance(item_id, str) and self.items.get(item_id) is not None

    def __repr__(self) -> str:
        return f"Inventory({[entity.id for entity in self]!r})"


def find_by_name(name: str, *inventories: Inventory | None) -> Entity | None:
    """Search several inventories in order; the first match wins."""
    for inventory in inventories:
        if inventory is None:
            continue
        entity = inventory.find_item_by_name(name)
        if entity is not None:
            return entity
    return None
