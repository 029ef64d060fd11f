"""Tests for world models."""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from pydantic import ValidationError

from adventure_machine.models import (
    NPC,
    Entity,
    Exit,
    Item,
    ItemKind,
    create_fixture,
    create_item,
    create_location,
    create_npc,
    resolve_text,
)

# --- Entity Tests ---


class TestEntity:
    """Tests for the Entity base model."""

    def test_static_text(self):
        entity = Entity(id="thing", title="Thing", description="Just a thing.")
        assert entity.title == "Thing"
        assert entity.description == "Just a thing."

    def test_dynamic_text_is_reevaluated_on_every_read(self):
        state = {"lit": False}
        entity = Entity(
            id="lamp",
            title="Lamp",
            description=lambda e: "It glows." if state["lit"] else "It is dark.",
        )
        assert entity.description == "It is dark."
        state["lit"] = True
        assert entity.description == "It glows."

    def test_dynamic_text_receives_entity(self):
        entity = Entity(id="door", title=lambda e: e.id.upper())
        assert entity.title == "DOOR"

    def test_resolve_text_passes_strings_through(self):
        entity = Entity(id="x", title="X")
        assert resolve_text("plain", entity) == "plain"

    def test_id_is_immutable(self):
        entity = Entity(id="thing", title="Thing")
        with pytest.raises(ValidationError):
            entity.id = "other"

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            Entity(id="", title="Nothing")

    def test_tick_without_callback_returns_false(self):
        entity = Entity(id="thing", title="Thing")
        assert entity.has_tick() is False
        assert entity.tick() is False

    def test_tick_calls_callback_with_entity(self):
        callback = Mock(return_value=None)
        entity = Entity(id="clock", title="Clock", tick_callback=callback)
        entity.tick()
        callback.assert_called_once_with(entity)

    def test_matches_name_trims_and_ignores_case(self):
        entity = Entity(id="key", title="  Gold Key ")
        assert entity.matches_name("gold key")
        assert entity.matches_name("GOLD KEY  ")
        assert not entity.matches_name("gold")


# --- Item Tests ---


class TestItem:
    """Tests for items and fixtures."""

    def test_item_defaults(self):
        item = create_item("key", "Key")
        assert item.kind == ItemKind.ITEM
        assert item.is_collectable()
        assert item.is_usable()
        assert not item.is_fixture()

    def test_fixture_is_not_collectable(self):
        fixture = create_fixture("cabinet", "Filing Cabinet")
        assert fixture.is_fixture()
        assert not fixture.is_collectable()

    def test_fixture_cannot_be_made_collectable(self):
        fixture = create_fixture("cabinet", "Filing Cabinet")
        with pytest.raises(ValidationError):
            fixture.collectable = True

    def test_fixture_kind_with_collectable_rejected(self):
        with pytest.raises(ValidationError):
            Item(id="cabinet", title="Cabinet", kind=ItemKind.FIXTURE, collectable=True)

    def test_on_use_runs_callback_with_target(self):
        callback = Mock(return_value="Click.")
        item = create_item("key", "Key", on_use=callback)
        target = create_fixture("door", "Door")

        assert item.on_use(target) == "Click."
        callback.assert_called_once_with(item, target)

    def test_on_use_without_callback_delegates_to_npc(self):
        reaction = Mock(return_value="Thanks!")
        npc = create_npc("bob", "Bob", use=reaction)
        item = create_item("cake", "Cake")

        assert item.on_use(npc) == "Thanks!"
        reaction.assert_called_once_with(npc, item)

    def test_on_use_without_callback_or_npc_does_nothing(self):
        item = create_item("rock", "Rock")
        assert item.on_use() is None
        assert item.on_use(create_fixture("wall", "Wall")) is None


# --- NPC Tests ---


class TestNPC:
    """Tests for NPC reactions and topic matching."""

    def test_on_ask_records_topic_exactly(self):
        npc = create_npc("ann", "Ann")
        npc.on_ask("the party plans")
        assert npc.current_topic == "the party plans"

    def test_on_tell_records_topic(self):
        npc = create_npc("ann", "Ann")
        npc.on_tell("The Lift")
        assert npc.current_topic == "The Lift"

    def test_speaking_about_is_case_insensitive_substring(self):
        npc = create_npc("ann", "Ann")
        npc.on_ask("the PARTY plans")
        assert npc.speaking_about(["party"])
        assert npc.speaking_about(["lift", "Party"])
        assert not npc.speaking_about(["lift"])

    def test_speaking_about_with_no_topic(self):
        npc = create_npc("ann", "Ann")
        assert not npc.speaking_about(["party"])

    def test_default_replies(self):
        npc = create_npc("ann", "Ann")
        assert npc.on_ask("x") == "Ann has nothing to say about that."
        assert npc.on_tell("x") == "Ann listens, but says nothing."
        assert npc.on_talk() == "Ann doesn't seem interested in talking."
        assert npc.on_give(create_item("rock", "Rock")) == "Ann doesn't want that."
        assert npc.on_use(create_item("rock", "Rock")) == "Nothing happens."

    def test_callbacks_see_current_topic(self):
        seen = []
        npc = create_npc("ann", "Ann", ask=lambda n, topic: seen.append(n.current_topic))
        npc.on_ask("weather")
        assert seen == ["weather"]

    def test_is_entity(self):
        assert isinstance(create_npc("ann", "Ann"), NPC)
        assert isinstance(create_npc("ann", "Ann"), Entity)


# --- Location Tests ---


class TestLocation:
    """Tests for locations and exits."""

    def test_add_and_get_exit_case_insensitive(self):
        location = create_location("hall", "Hall")
        location.add_exit("South", "cellar")
        exit_ = location.get_exit("south")
        assert exit_ is not None
        assert exit_.destination_location_id == "cellar"

    def test_get_exit_missing(self):
        location = create_location("hall", "Hall")
        assert location.get_exit("north") is None

    def test_first_matching_exit_wins(self):
        location = create_location("hall", "Hall")
        location.add_exit("Door", "a")
        location.add_exit("door", "b")
        assert location.get_exit("DOOR").destination_location_id == "a"

    def test_exit_destination_not_validated(self):
        exit_ = Exit(exit_name="Portal", destination_location_id="nowhere-yet")
        assert exit_.destination_location_id == "nowhere-yet"

    def test_local_commands_default_empty(self):
        location = create_location("hall", "Hall")
        assert location.get_commands() == []

    def test_inventories_are_separate_per_location(self):
        first = create_location("a", "A")
        second = create_location("b", "B")
        first.add_item(create_item("key", "Key"))
        assert "key" in first.items
        assert "key" not in second.items

    def test_bind_sets_game_on_inventories(self):
        location = create_location("a", "A")
        game = object()
        location.bind(game)
        location.add_item(create_item("key", "Key"))
        assert location.game is game
        assert location.items.get_item("key").game is game
