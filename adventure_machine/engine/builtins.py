"""
Built-in commands available in every game.

Search order for names, per command:
- examine: player inventory, location items, location NPCs
- take: location items
- drop: player inventory
- use: item from player inventory, then location items; target from
  player inventory, location items, then location NPCs
- ask / tell / talk: location NPCs
- give: item from player inventory, NPC from location NPCs
"""

from __future__ import annotations

import re
from typing import Any

from adventure_machine.engine.commands import CallbackCommand, Command, RegexCallbackCommand
from adventure_machine.models import NPC, Item, find_by_name

TALK_PREFIX = re.compile(r"^(?:to|with)\s+", re.I)


def _joined_args(tokens: list[str]) -> str:
    return " ".join(token for token in tokens[1:] if token)


def _say(game: Any, reply: Any) -> None:
    if isinstance(reply, str) and reply:
        game.print_message(reply)


def _find_npc(game: Any, name: str) -> NPC | None:
    npc = game.current_location.npcs.find_item_by_name(name)
    if npc is None:
        game.print_error(f'There is nobody called "{name}" here.')
    return npc


# =============================================================================
# Callback commands
# =============================================================================


def _cmd_help(command: CallbackCommand, raw_text: str, tokens: list[str]) -> None:
    game = command.game
    commands = game.available_commands

    if len(tokens) > 1:
        wanted = tokens[1].lower()
        for other in commands:
            if isinstance(other, Command) and other.get_short_name().lower() == wanted:
                game.print_information(other.get_description())
        return

    lines = ["Help:", "Type one of the following commands:"]
    for other in commands:
        if isinstance(other, Command) and other.get_short_name() != command.get_short_name():
            lines.append(other.get_short_name())
    lines.append(command.get_description())
    game.print_information("\n".join(lines))


def _cmd_go(command: CallbackCommand, raw_text: str, tokens: list[str]) -> None:
    game = command.game
    if len(tokens) == 1:
        command.print_usage()
        return

    destination = _joined_args(tokens)
    exit_ = game.current_location.get_exit(destination)
    if exit_ is None:
        game.print_error(f'"{destination}" is not an exit.')
        return
    game.go_to(exit_.destination_location_id)


def _cmd_examine(command: CallbackCommand, raw_text: str, tokens: list[str]) -> None:
    game = command.game
    if len(tokens) == 1:
        command.print_usage()
        return

    name = _joined_args(tokens)
    location = game.current_location
    entity = find_by_name(name, game.inventory, location.items, location.npcs)
    if entity is None:
        game.print_error(f"Unknown item: {name}")
        return
    game.print_description(entity.description)


def _cmd_take(command: CallbackCommand, raw_text: str, tokens: list[str]) -> None:
    game = command.game
    if len(tokens) == 1:
        command.print_usage()
        return

    name = _joined_args(tokens)
    items = game.current_location.items
    item = items.find_item_by_name(name)
    if item is None:
        game.print_error(f"Unknown item: {name}")
    elif not isinstance(item, Item) or not item.is_collectable():
        game.print_error("You cannot take this item")
    else:
        items.take_item(item.id)
        game.inventory.add_item(item)
        game.print_information(f'"{item.title}" added to inventory.')


def _cmd_drop(command: CallbackCommand, raw_text: str, tokens: list[str]) -> None:
    game = command.game
    if len(tokens) == 1:
        command.print_usage()
        return

    name = _joined_args(tokens)
    item = game.inventory.find_item_by_name(name)
    if item is None:
        game.print_error(f'You don\'t have: "{name}"')
        return
    game.inventory.take_item(item.id)
    game.current_location.add_item(item)
    game.print_information(f'"{item.title}" dropped.')


def _cmd_inventory(command: CallbackCommand, raw_text: str, tokens: list[str]) -> None:
    game = command.game
    lines = ["Inventory:"]
    titles = game.inventory.titles()
    if titles:
        lines.extend(titles)
    else:
        lines.append("You don't have any items in your inventory yet.")
    game.print_information("\n".join(lines))


def _cmd_look(command: CallbackCommand, raw_text: str, tokens: list[str]) -> None:
    command.game.display_current_location_info()


# =============================================================================
# Targeted commands
# =============================================================================


def _cmd_use(
    command: RegexCallbackCommand, raw_text: str, item_name: str, target_name: str | None
) -> None:
    game = command.game
    location = game.current_location

    item = find_by_name(item_name, game.inventory, location.items)
    target = None
    if target_name is not None:
        target = find_by_name(target_name, game.inventory, location.items, location.npcs)

    if not isinstance(item, Item):
        game.print_error(f'Can\'t find: "{item_name}"')
    elif target_name is not None and target is None:
        game.print_error(f'Can\'t find: "{target_name}"')
    else:
        _say(game, item.on_use(target))


def _cmd_ask(
    command: RegexCallbackCommand, raw_text: str, npc_name: str, topic: str | None
) -> None:
    game = command.game
    npc = _find_npc(game, npc_name)
    if npc is None:
        return
    if not topic:
        game.print_error(f"What do you want to ask {npc.title} about?")
        return
    _say(game, npc.on_ask(topic))


def _cmd_tell(
    command: RegexCallbackCommand, raw_text: str, npc_name: str, topic: str | None
) -> None:
    game = command.game
    npc = _find_npc(game, npc_name)
    if npc is None:
        return
    if not topic:
        game.print_error(f"What do you want to tell {npc.title} about?")
        return
    _say(game, npc.on_tell(topic))


def _cmd_talk(
    command: RegexCallbackCommand, raw_text: str, npc_name: str, _unused: str | None
) -> None:
    game = command.game
    npc = _find_npc(game, TALK_PREFIX.sub("", npc_name))
    if npc is None:
        return
    _say(game, npc.on_talk())


def _cmd_give(
    command: RegexCallbackCommand, raw_text: str, item_name: str, npc_name: str | None
) -> None:
    game = command.game
    item = game.inventory.find_item_by_name(item_name)
    if item is None:
        game.print_error(f'You don\'t have: "{item_name}"')
        return
    if not npc_name:
        game.print_error(f"Give {item.title} to whom?")
        return
    npc = _find_npc(game, npc_name)
    if npc is None:
        return

    result = npc.on_give(item)
    accepted = False
    if isinstance(result, tuple):
        result, accepted = result
    elif result is True:
        result, accepted = None, True

    _say(game, result)
    if accepted:
        game.inventory.take_item(item.id)


def default_commands() -> list[Command]:
    """Build the global command set, in dispatch order."""
    return [
        CallbackCommand(
            "help",
            'help <command> - help on a specific command, e.g. "help go"',
            _cmd_help,
        ),
        CallbackCommand(
            "go",
            'go <destination> - leave through an exit, e.g. "go south"',
            _cmd_go,
            aliases=["exit", "leave"],
        ),
        CallbackCommand(
            "examine",
            'examine <item> - examine an item, e.g. "examine cupboard"',
            _cmd_examine,
        ),
        CallbackCommand(
            "take",
            'take <item> - take an item, e.g. "take key"',
            _cmd_take,
        ),
        CallbackCommand(
            "drop",
            'drop <item> - drop an item you are carrying, e.g. "drop key"',
            _cmd_drop,
        ),
        RegexCallbackCommand(
            "use",
            'use <item> - use an item, e.g. "use gold key" or "use key on blue door"',
            _cmd_use,
            preposition="on",
        ),
        CallbackCommand(
            "inventory",
            "inventory - display the items currently in your possession",
            _cmd_inventory,
            aliases=["i"],
        ),
        CallbackCommand(
            "look",
            "look - display information about the current location",
            _cmd_look,
        ),
        RegexCallbackCommand(
            "ask",
            'ask <person> about <topic> - e.g. "ask guard about the party"',
            _cmd_ask,
            preposition="about",
        ),
        RegexCallbackCommand(
            "tell",
            'tell <person> about <topic> - e.g. "tell guard about the lift"',
            _cmd_tell,
            preposition="about",
        ),
        RegexCallbackCommand(
            "talk",
            'talk to <person> - strike up a conversation, e.g. "talk to guard"',
            _cmd_talk,
        ),
        RegexCallbackCommand(
            "give",
            'give <item> to <person> - e.g. "give keycard to guard"',
            _cmd_give,
            preposition="to",
        ),
    ]
