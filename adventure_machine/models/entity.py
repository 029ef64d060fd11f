"""
Entity Model for AdventureMachine.

Defines the base addressable game object shared by locations,
items and NPCs: a stable id, a title and description that may be
static or computed, and an optional tick behavior.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

TextSource = str | Callable[[Any], str]
"""A fixed string, or a callable taking the entity and returning text."""

TickCallback = Callable[[Any], Any]
"""Called with the entity once per scheduler tick. Return False to stop."""


def resolve_text(source: TextSource, entity: Entity) -> str:
    """Evaluate a text source against the entity's current state."""
    if callable(source):
        return source(entity)
    return source


class Entity(BaseModel):
    """
    Base game object.

    `title` and `description` are re-evaluated on every read, so a
    callable source can reflect the current world state.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        populate_by_name=True,
        validate_assignment=True,
    )

    id: str = Field(min_length=1, frozen=True, description="Stable unique key")
    title_source: TextSource = Field(default="", alias="title")
    description_source: TextSource = Field(default="", alias="description")
    tick_callback: TickCallback | None = Field(
        default=None, description="Invoked every tick while the owning location is active"
    )
    game: Any = Field(default=None, exclude=True, repr=False)

    @property
    def title(self) -> str:
        """Current display title."""
        return resolve_text(self.title_source, self)

    @property
    def description(self) -> str:
        """Current description."""
        return resolve_text(self.description_source, self)

    def has_tick(self) -> bool:
        return self.tick_callback is not None

    def tick(self) -> Any:
        """Run the tick callback once; its result is handed to the scheduler."""
        if self.tick_callback is None:
            return False
        return self.tick_callback(self)

    def matches_name(self, name: str) -> bool:
        """Case-insensitive exact match on the trimmed title."""
        return self.title.strip().lower() == name.strip().lower()
