"""In-memory shared data store for content adapters."""

from dataclasses import dataclass, field

from termshapes.domain.content import ContentItem


@dataclass(slots=True)
class InMemoryContentData:
    """Shared in-memory backing store for the in-memory content adapters.

    A single instance should be passed to the content manager, alias manager
    and term lookup so they resolve against the same content.
    """

    # keyed by content_item_id
    items: dict[str, ContentItem] = field(default_factory=dict)

    # alias -> content_item_id
    aliases: dict[str, str] = field(default_factory=dict)

    def add(self, item: ContentItem, alias: str | None = None) -> None:
        """Store *item*, optionally registering *alias* for it."""
        self.items[item.content_item_id] = item
        if alias is not None:
            self.aliases[alias] = item.content_item_id
