"""
World Models for AdventureMachine.

These models define the world graph the engine operates on:
locations joined by exits, items and fixtures, NPCs, and the
inventories that hold them.
"""

from adventure_machine.models.entity import Entity, TextSource, TickCallback, resolve_text
from adventure_machine.models.inventory import Inventory, find_by_name
from adventure_machine.models.item import Item, ItemKind, create_fixture, create_item
from adventure_machine.models.location import Exit, Location, create_location
from adventure_machine.models.npc import NPC, create_npc

__all__ = [
    # Entity
    "Entity",
    "TextSource",
    "TickCallback",
    "resolve_text",
    # Inventory
    "Inventory",
    "find_by_name",
    # Item
    "Item",
    "ItemKind",
    "create_item",
    "create_fixture",
    # Location
    "Exit",
    "Location",
    "create_location",
    # NPC
    "NPC",
    "create_npc",
]
