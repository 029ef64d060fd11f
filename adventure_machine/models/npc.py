"""
NPC Model for AdventureMachine.

Non-player characters react to being asked, told, talked to,
given items and having items used on them. Each reaction is an
optional callback; missing ones fall back to a canned reply.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from pydantic import Field

from adventure_machine.models.entity import Entity, TextSource, TickCallback

TopicReaction = Callable[[Any, str], Any]
"""Called as reaction(npc, topic)."""

TalkReaction = Callable[[Any], Any]
"""Called as reaction(npc)."""

ItemReaction = Callable[[Any, Any], Any]
"""Called as reaction(npc, item)."""


class NPC(Entity):
    """A character the player can converse and trade with."""

    ask_callback: TopicReaction | None = None
    tell_callback: TopicReaction | None = None
    talk_callback: TalkReaction | None = None
    give_callback: ItemReaction | None = None
    use_callback: ItemReaction | None = None

    current_topic: str = Field(default="", description="Last topic passed to ask/tell")

    def on_ask(self, topic: str) -> Any:
        self.current_topic = topic
        if self.ask_callback is not None:
            return self.ask_callback(self, topic)
        return f"{self.title} has nothing to say about that."

    def on_tell(self, topic: str) -> Any:
        self.current_topic = topic
        if self.tell_callback is not None:
            return self.tell_callback(self, topic)
        return f"{self.title} listens, but says nothing."

    def on_talk(self) -> Any:
        if self.talk_callback is not None:
            return self.talk_callback(self)
        return f"{self.title} doesn't seem interested in talking."

    def on_give(self, item: Entity) -> Any:
        """
        React to being offered an item.

        The callback may return a reply string, True to accept the item
        silently, or a (reply, accepted) pair.
        """
        if self.give_callback is not None:
            return self.give_callback(self, item)
        return f"{self.title} doesn't want that."

    def on_use(self, item: Entity) -> Any:
        if self.use_callback is not None:
            return self.use_callback(self, item)
        return "Nothing happens."

    def speaking_about(self, keywords: Iterable[str]) -> bool:
        """True if the current topic contains any keyword, ignoring case."""
        topic = self.current_topic.lower()
        return any(keyword.lower() in topic for keyword in keywords)


def create_npc(
    npc_id: str,
    title: TextSource,
    description: TextSource = "",
    *,
    ask: TopicReaction | None = None,
    tell: TopicReaction | None = None,
    talk: TalkReaction | None = None,
    give: ItemReaction | None = None,
    use: ItemReaction | None = None,
    tick: TickCallback | None = None,
) -> NPC:
    """Factory function to create an NPC."""
    return NPC(
        id=npc_id,
        title=title,
        description=description,
        ask_callback=ask,
        tell_callback=tell,
        talk_callback=talk,
        give_callback=give,
        use_callback=use,
        tick_callback=tick,
    )
