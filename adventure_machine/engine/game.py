"""
Game Engine for AdventureMachine.

The orchestration layer that owns the world and applies player
commands to it. Coordinates:
- Story loading (catalogs, locations, starting inventory)
- Command dispatch (every active command sees every line)
- Navigation (rebuilding the active command set per location)
- Location-local ticks via the cooperative scheduler
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from adventure_machine.console import Console, DisplayKind, tokenize
from adventure_machine.engine.builtins import default_commands
from adventure_machine.engine.commands import Command
from adventure_machine.engine.models import GameConfig, StoryData
from adventure_machine.engine.scheduler import TickScheduler
from adventure_machine.models import Inventory, Location

logger = logging.getLogger(__name__)


class Game:
    """
    A single play session.

    Constructed once; `new_game` loads a story and may be called again
    to restart.
    """

    def __init__(self, console: Console, config: GameConfig | None = None) -> None:
        self.console = console
        self.config = config or GameConfig()
        self.name: str | None = None

        self.locations: dict[str, Location] = {}
        self.current_location: Location | None = None
        self.available_items = Inventory(self)
        self.inventory = Inventory(self)
        self.npcs = Inventory(self)

        self.available_commands: list[Command] = []
        self.story_commands: list[Command] = []
        self._global_commands: list[Command] = default_commands()

        self.scheduler = TickScheduler(interval=self.config.tick_interval)

    # =========================================================================
    # Output
    # =========================================================================

    def print(self, message: str, kind: DisplayKind = DisplayKind.MESSAGE) -> None:
        self.console.display(message, kind)

    def print_message(self, message: str) -> None:
        self.print(message, DisplayKind.MESSAGE)

    def print_information(self, message: str) -> None:
        self.print(message, DisplayKind.INFORMATION)

    def print_error(self, message: str) -> None:
        self.print(message, DisplayKind.ERROR)

    def print_game_title(self, message: str) -> None:
        self.print(message, DisplayKind.TITLE)

    def print_section_title(self, message: str) -> None:
        self.print(message, DisplayKind.SECTION)

    def print_subsection_title(self, message: str) -> None:
        self.print(message, DisplayKind.SUBSECTION)

    def print_description(self, message: str) -> None:
        self.print(message, DisplayKind.DESCRIPTION)

    def print_command(self, message: str) -> None:
        self.print(message, DisplayKind.COMMAND)

    # =========================================================================
    # Commands
    # =========================================================================

    def get_commands(self) -> list[Command]:
        """Commands that apply to all games."""
        return list(self._global_commands)

    def clear_commands(self) -> None:
        self.available_commands = []

    def add_command(self, command: Command) -> None:
        command.game = self
        self.available_commands.append(command)

    def parse_command(self, raw_text: str, tokens: list[str] | None = None) -> None:
        """
        Offer a line of input to every active command.

        Commands run in list order and dispatch never stops early: every
        command whose name matches acts. The list is snapshotted first,
        so a command that changes location does not alter who sees this
        line. Exceptions from a command are reported and do not escape.
        """
        if tokens is None:
            tokens = tokenize(raw_text)
        logger.debug("Parsing %r as %r", raw_text, tokens)

        for command in list(self.available_commands):
            if not isinstance(command, Command):
                continue
            try:
                command.execute(raw_text, tokens)
            except Exception:
                logger.exception("Command '%s' failed on %r", command.short_name, raw_text)
                self.print_error("Something went wrong running that command.")

    # =========================================================================
    # Navigation
    # =========================================================================

    def add_location(self, location: Any) -> None:
        if isinstance(location, Location):
            location.bind(self)
            self.locations[location.id] = location

    def go_to(self, location_id: str) -> bool:
        """Move the player to a location. Returns False if it does not exist."""
        location = self.locations.get(location_id)
        if location is None:
            logger.warning("Navigation to unknown location %r", location_id)
            self.print_error(f'Error: "{location_id}" is not a valid location!')
            return False

        self.current_location = location
        location.visits += 1
        logger.info("Entered %s (visit %d)", location.id, location.visits)

        self.available_commands = [
            *self.get_commands(),
            *self.story_commands,
            *location.get_commands(),
        ]
        for command in self.available_commands:
            command.game = self

        self.display_current_location_info()
        self._load_ticks(location)
        return True

    def display_current_location_info(self) -> None:
        location = self.current_location
        if location is None:
            return

        self.print_section_title(location.title)
        self.print_description(location.description)

        if location.exits:
            exits = "\n".join(exit_.exit_name for exit_ in location.exits)
            self.print_information(f"Available exits:\n{exits}")

        items = location.items.titles()
        if items:
            self.print_information("Items:\n" + "\n".join(items))

        people = location.npcs.titles()
        if people:
            self.print_information("People here:\n" + "\n".join(people))

    # =========================================================================
    # Ticks
    # =========================================================================

    def _load_ticks(self, location: Location) -> None:
        self.scheduler.clear()
        for entity in [location, *location.npcs, *location.items]:
            if entity.has_tick():
                self.scheduler.add(entity.tick)
        if self.scheduler.callbacks:
            self.scheduler.start()

    def tick(self) -> None:
        """Run one scheduler iteration now."""
        self.scheduler.run_once()

    # =========================================================================
    # Story loading
    # =========================================================================

    def new_game(self, data: StoryData | dict[str, Any]) -> None:
        """
        Start a new game from story data.

        Raises:
            ValueError: If the story declares no locations, or its start
                location is not one of them.
        """
        story = data if isinstance(data, StoryData) else StoryData.model_validate(data)

        self.clear_commands()
        self.scheduler.clear()
        self.current_location = None
        self.locations = {}

        self.name = story.name
        self.story_commands = list(story.commands)
        self.npcs = Inventory(self, story.npcs)
        self.available_items = Inventory(self, story.items)
        self.inventory = Inventory(self)
        self.add_items_to_inventory(story.inventory)

        if not story.locations:
            self.print_error("There was a problem starting this game.")
            raise ValueError(f'Location data empty for story "{self.name}"')

        for location in story.locations:
            location.bind(self)
            self.add_items_to_location(location, location.item_codes)
            self.add_npcs_to_location(location, location.npc_codes)
            self.locations[location.id] = location

        if story.start_location not in self.locations:
            self.print_error("There was a problem starting this game.")
            raise ValueError(
                f'Start location "{story.start_location}" not found in story "{self.name}"'
            )

        self.available_items.freeze()
        logger.info("Starting '%s' with %d location(s)", self.name, len(self.locations))

        self.print_game_title(story.name)
        if self.config.show_help_hint:
            self.print_information('Type "help" for a list of commands')
        self.go_to(story.start_location)

    def add_item_to_inventory(self, item_code: str) -> None:
        item = self.available_items.get_item(item_code)
        if item is None:
            logger.warning("Unknown item code %r for inventory", item_code)
            self.print_error(
                f'Unable to add item "{item_code}" to inventory; Item does not exist.'
            )
            return
        self.inventory.add_item(item)

    def add_items_to_inventory(self, item_codes: Iterable[str] | None) -> None:
        for item_code in item_codes or []:
            self.add_item_to_inventory(item_code)

    def add_item_to_current_location(self, item_code: str) -> None:
        self.add_items_to_current_location([item_code])

    def add_items_to_current_location(self, item_codes: Iterable[str]) -> None:
        self.add_items_to_location(self.current_location, item_codes)

    def add_items_to_location(
        self, location: Location | None, item_codes: Iterable[str] | None
    ) -> None:
        if not isinstance(location, Location):
            self.print_error("Unable to add items to location; Location does not exist")
            return
        if item_codes is None:
            self.print_error("Unable to add items to location; No items defined")
            return

        for item_code in item_codes:
            item = self.available_items.get_item(item_code)
            if item is None:
                logger.warning("Unknown item code %r for location %s", item_code, location.id)
                self.print_error(
                    f'Unable to add item "{item_code}" to location; Item does not exist.'
                )
            else:
                location.add_item(item)

    def add_npcs_to_location(
        self, location: Location | None, npc_codes: Iterable[str] | None
    ) -> None:
        if not isinstance(location, Location):
            self.print_error("Unable to add people to location; Location does not exist")
            return

        for npc_code in npc_codes or []:
            npc = self.npcs.get_item(npc_code)
            if npc is None:
                logger.warning("Unknown NPC code %r for location %s", npc_code, location.id)
                self.print_error(
                    f'Unable to add person "{npc_code}" to location; Person does not exist.'
                )
            else:
                location.add_npc(npc)
