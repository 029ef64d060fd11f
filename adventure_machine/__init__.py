"""
AdventureMachine: a text-adventure engine.

A command console parses free-text player input, matches it against
the active commands, and mutates a small world of locations, exits,
items, NPCs and inventories.
"""

__version__ = "0.2.0"
