"""Content records consumed by the term shape handlers.

A taxonomy is a content item carrying a ``taxonomy_part``; its terms are
content items themselves, each holding its children under ``terms`` in its
raw payload:

```json
{
  "content_item_id": "tax-1",
  "content_type": "Taxonomy",
  "display_text": "Categories",
  "content": {
    "taxonomy_part": {
      "term_content_type": "Category",
      "terms": [
        {"content_item_id": "t-1", "content_type": "Category",
         "display_text": "Travel", "content": {"terms": []}}
      ]
    }
  }
}
```
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import Any

from .errors import InvalidContentItemError

TAXONOMY_PART_KEY = "taxonomy_part"
TERMS_KEY = "terms"
TERM_CONTENT_TYPE_KEY = "term_content_type"


@dataclass(frozen=True)
class ContentItem:
    """An externally owned content item, read-only for the duration of a pass."""

    content_item_id: str
    content_type: str
    display_text: str = ""
    content: Mapping[str, Any] = field(default_factory=dict, hash=False)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> ContentItem:
        """Build a content item from its JSON form.

        Raises:
            InvalidContentItemError: If ``content_item_id`` or ``content_type``
                is missing.
        """
        for required in ("content_item_id", "content_type"):
            if not values.get(required):
                raise InvalidContentItemError(required, values)
        content = values.get("content")
        if not isinstance(content, Mapping):
            content = {}
        return cls(
            content_item_id=str(values["content_item_id"]),
            content_type=str(values["content_type"]),
            display_text=str(values.get("display_text") or ""),
            content=MappingProxyType(dict(content)),
        )

    @cached_property
    def child_terms(self) -> tuple[ContentItem, ...]:
        """Child terms parsed from the raw payload; empty when absent or malformed."""
        return parse_terms(self.content.get(TERMS_KEY))

    @cached_property
    def taxonomy_part(self) -> TaxonomyPart | None:
        """The taxonomy structure of this item, or None if it is not a taxonomy."""
        return TaxonomyPart.from_payload(self.content.get(TAXONOMY_PART_KEY))


@dataclass(frozen=True)
class TaxonomyPart:
    """Taxonomy structure: the type of its terms and the top-level terms in order."""

    term_content_type: str
    terms: tuple[ContentItem, ...] = ()

    @classmethod
    def from_payload(cls, payload: Any) -> TaxonomyPart | None:
        """Parse a raw ``taxonomy_part`` payload.

        Returns:
            The part, or None when the payload has no usable term content type.
        """
        if not isinstance(payload, Mapping):
            return None
        term_content_type = payload.get(TERM_CONTENT_TYPE_KEY)
        if not isinstance(term_content_type, str) or not term_content_type:
            return None
        return cls(
            term_content_type=term_content_type,
            terms=parse_terms(payload.get(TERMS_KEY)),
        )


def parse_terms(payload: Any) -> tuple[ContentItem, ...]:
    """Parse a raw term list into content items.

    Anything that is not a sequence of content items (or of their JSON form)
    yields no terms at all.
    """
    if isinstance(payload, (str, bytes)) or not isinstance(payload, Sequence):
        return ()
    terms: list[ContentItem] = []
    for entry in payload:
        if isinstance(entry, ContentItem):
            terms.append(entry)
        elif isinstance(entry, Mapping):
            try:
                terms.append(ContentItem.from_dict(entry))
            except InvalidContentItemError:
                return ()
        else:
            return ()
    return tuple(terms)
