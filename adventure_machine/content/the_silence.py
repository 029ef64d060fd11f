"""
The Silence: a short sample story for AdventureMachine.

An empty office building on the night of the Christmas party.
Provides locations, items, fixtures and an NPC so players can
start exploring immediately.
"""

from __future__ import annotations

from typing import Any

from adventure_machine.engine.models import StoryData
from adventure_machine.models import (
    NPC,
    Item,
    Location,
    create_fixture,
    create_item,
    create_location,
    create_npc,
)

FLICKER_LIMIT = 3


# =============================================================================
# Item behavior
# =============================================================================


def _keycard_found(game: Any) -> bool:
    """The keycard has left the cupboard once it is carried or lying anywhere."""
    if game.inventory.get_item("lift-keycard") is not None:
        return True
    return any(
        location.items.get_item("lift-keycard") is not None
        for location in game.locations.values()
    )


def _use_flashlight(item: Item, target: Any) -> str | None:
    game = item.game
    if target is None:
        return "You click the flashlight on and off. What do you want to use it on?"
    if target.id == "dark-cupboard":
        if _keycard_found(game):
            return "Nothing else of interest hides in the cupboard."
        game.print_message(
            "The light of the torch reveals a plastic key card, which you pick up "
            "and place in your pocket."
        )
        game.add_item_to_inventory("lift-keycard")
        return None
    return f"You can't use this item on {target.title}"


def _use_keycard(item: Item, target: Any) -> str | None:
    game = item.game
    if target is None:
        return "The keycard needs to be swiped through something."
    if target.id == "lift-control-panel":
        location = game.current_location
        if location.get_exit("Lift") is None:
            location.add_exit("Lift", "corridor-1")
        return (
            'You swipe the keycard through the control panel, which promptly makes an '
            'electronic chirp and displays the message "Access Granted" as the lift '
            "doors slide quietly open."
        )
    return f"You can't use this item on {target.title}"


# =============================================================================
# NPC behavior
# =============================================================================


def _worker_ask(npc: NPC, topic: str) -> str:
    if npc.speaking_about(["party", "christmas"]):
        return (
            '"The party? It was upstairs. Everyone was there... and then the lights '
            'went out. When they came back, everyone was gone."'
        )
    if npc.speaking_about(["lift", "keycard", "key"]):
        return '"The lift needs a keycard. Facilities keep a spare somewhere down here."'
    return f'{npc.title} stares at you blankly. "I don\'t know anything about {topic}."'


def _worker_give(npc: NPC, item: Any) -> tuple[str, bool]:
    if item.id == "flashlight":
        return ("The worker clutches the flashlight gratefully.", True)
    return (f"{npc.title} shakes their head at the {item.title}.", False)


# =============================================================================
# Location behavior
# =============================================================================


def _conference_description(location: Location) -> str:
    if location.visits > 1:
        return (
            "The conference room is as you left it: toppled chairs, scattered papers "
            "and the narrow doorway to the service cupboard."
        )
    return (
        "You enter a conference room, and are greeted by rows of neatly-placed chairs "
        "illuminated by flickering lights. At the front of the room is a podium for the "
        "speaker. Loose papers are scattered on the floor next to the podium, gently "
        "fluttering in the wake of a lacklustre ceiling fan. Some of the chairs have been "
        "knocked over in the front row. Near the entrance is a narrow doorway, presumably "
        "leading to a service cupboard."
    )


def _make_flicker() -> Any:
    flickers = 0

    def flicker(location: Location) -> bool | None:
        nonlocal flickers
        flickers += 1
        location.game.print_message("The overhead lights flicker.")
        if flickers >= FLICKER_LIMIT:
            location.game.print_message("The lights steady, humming quietly.")
            return False
        return None

    return flicker


# =============================================================================
# Story
# =============================================================================


def create_the_silence() -> StoryData:
    """
    Create a fresh copy of "The Silence".

    Returns new objects every call, so several games can run side by
    side without sharing state.
    """
    items = [
        create_item(
            "flashlight",
            "Flashlight",
            "A cracked flashlight that gives off fractured but adequate lighting.",
            on_use=_use_flashlight,
        ),
        create_item(
            "lift-keycard",
            "Keycard",
            "An electronic keycard, presumably this used to belong to an employee "
            "working in the building, and is used to gain access to authorised areas "
            "of the office.",
            on_use=_use_keycard,
        ),
        create_fixture(
            "dark-cupboard",
            "Dark cupboard",
            "A service cupboard of some kind. The light is broken. You can just about "
            "make out some mops and dusty shelves in the gloom, but it is too dark to "
            "see properly.",
        ),
        create_fixture(
            "lift-control-panel",
            "Lift Control Panel",
            "Next to the lifts is a control panel, the soft blue light emitted by the "
            "LCD display giving an ethereal quality to the area. It looks like some kind "
            "of key card needs to be swiped through a card reader on the side of the "
            "panel to open the lift doors.",
        ),
        create_item(
            "party-poster",
            "Poster",
            "A poster for the Christmas party, with a prize for the best costume.",
        ),
    ]

    npcs = [
        create_npc(
            "office-worker",
            "Office Worker",
            "A pale office worker in a paper party hat, hiding under a desk.",
            ask=_worker_ask,
            talk=lambda npc: '"Shh! Did you hear that? Keep your voice down."',
            give=_worker_give,
        ),
    ]

    atrium = create_location(
        "atrium",
        "Atrium",
        "You are standing in the atrium of an office building. The room is deserted. "
        "You see some frosted glass doors to the south, and some lift doors illuminated "
        "by the soft blue light of a control panel on the east wall.",
        item_codes=["flashlight", "lift-control-panel"],
    )
    atrium.add_exit("South", "conference-room")

    conference_room = create_location(
        "conference-room",
        "Conference Room",
        _conference_description,
        item_codes=["dark-cupboard"],
        tick=_make_flicker(),
    )
    conference_room.add_exit("North", "atrium")

    corridor = create_location(
        "corridor-1",
        "Upstairs Corridor",
        "You emerge into a corridor. Cork boards line the walls, covered with pieces of "
        'paper and notices like "Staff Christmas Party". A number of doors lead off '
        "either side of the space.",
    )
    corridor.add_exit("Lifts", "atrium")
    corridor.add_exit("Door 1", "room1")
    corridor.add_exit("Door 2", "room2")

    room1 = create_location(
        "room1",
        "Office Space",
        "You spy a deserted office. One of the computers has been left on, illuminating "
        "a mug that says \"You don't have to be mad to work here, but it sure helps!\"",
        npc_codes=["office-worker"],
    )
    room1.add_exit("Out", "corridor-1")

    room2 = create_location(
        "room2",
        "More Office Space",
        "You spy another deserted office. Tacked to a notice board is a poster for the "
        "christmas party. The party should be in full swing - where is everyone?",
        item_codes=["party-poster"],
    )
    room2.add_exit("Out", "corridor-1")

    return StoryData(
        name="The Silence",
        locations=[atrium, conference_room, corridor, room1, room2],
        items=items,
        inventory=[],
        npcs=npcs,
        commands=[],
        start_location=atrium.id,
    )
