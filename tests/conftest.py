"""Shared fixtures: a two-room world and a game bound to a recording console."""

from __future__ import annotations

import pytest

from adventure_machine.console import MemoryConsole
from adventure_machine.engine import Game, GameConfig, StoryData
from adventure_machine.models import (
    NPC,
    create_fixture,
    create_item,
    create_location,
    create_npc,
)


def _guard_ask(npc: NPC, topic: str) -> str:
    if npc.speaking_about(["party"]):
        return "The party was cancelled."
    return "Move along."


def _guard_give(npc: NPC, item) -> tuple[str, bool]:
    if item.id == "coin":
        return ("The guard pockets the coin.", True)
    return ("The guard waves it away.", False)


def build_story() -> StoryData:
    """Hall (lamp, statue, guard) with a South exit to a cellar (coin)."""
    hall = create_location(
        "hall",
        "Great Hall",
        lambda location: "A vast hall." if location.visits <= 1 else "The hall again.",
        item_codes=["lamp", "statue"],
        npc_codes=["guard"],
    )
    hall.add_exit("South", "cellar")

    cellar = create_location("cellar", "Cellar", "A damp cellar.", item_codes=["coin"])
    cellar.add_exit("North", "hall")

    items = [
        create_item("lamp", "Brass Lamp", "An old brass lamp."),
        create_fixture("statue", "Statue", "A marble statue of a knight."),
        create_item("coin", "Gold Coin", "A single gold coin."),
        create_item("key", "Iron Key", "A heavy iron key."),
    ]
    npcs = [
        create_npc(
            "guard",
            "Guard",
            "A bored guard leaning on a spear.",
            ask=_guard_ask,
            give=_guard_give,
        )
    ]

    return StoryData(
        name="Test Story",
        locations=[hall, cellar],
        items=items,
        inventory=["key"],
        npcs=npcs,
        commands=[],
        start_location="hall",
    )


@pytest.fixture
def console() -> MemoryConsole:
    """Create a console that records output."""
    return MemoryConsole()


@pytest.fixture
def config() -> GameConfig:
    """Engine config with immediate ticks and the help hint on."""
    return GameConfig(tick_interval=0)


@pytest.fixture
def game(console: MemoryConsole, config: GameConfig) -> Game:
    """Create a game that has not loaded a story yet."""
    return Game(console, config)


@pytest.fixture
def story() -> StoryData:
    """Create a fresh copy of the test story."""
    return build_story()


@pytest.fixture
def started(game: Game, story: StoryData, console: MemoryConsole) -> Game:
    """A game with the test story loaded and the console cleared."""
    game.new_game(story)
    console.clear()
    return game
