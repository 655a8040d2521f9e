"""Typed shape records handed to the host renderer.

Each shape kind is a dataclass with statically declared fields. Shapes carry
two ordered name collections (``alternates`` and ``classes``) and an ordered
list of child shapes (``items``). Child order is the order of ``append``;
nothing re-sorts it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

from .content import ContentItem

# pylint: disable=too-many-instance-attributes


class ShapeKind(Enum):
    """Shape types handled by the term shape handlers."""

    TERM = "Term"
    TERM_ITEM = "TermItem"
    TERM_CONTENT_ITEM = "TermContentItem"
    TERM_PART = "TermPart"


class OrderedNames:
    """Insertion-ordered collection of names without duplicates.

    Adding a name that is already present is a no-op, so previously added
    names are never removed or reordered.
    """

    def __init__(self, names: Iterable[str] = ()) -> None:
        self._names: dict[str, None] = {}
        self.extend(names)

    def add(self, name: str) -> None:
        """Append *name* unless it is already present."""
        self._names.setdefault(name, None)

    def extend(self, names: Iterable[str]) -> None:
        """Append each of *names* in order, skipping those already present."""
        for name in names:
            self.add(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __eq__(self, other: object) -> bool:
        if isinstance(other, OrderedNames):
            return list(self) == list(other)
        if isinstance(other, (list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


@dataclass(eq=False, kw_only=True)
class Shape:
    """Base record shared by every shape kind."""

    KIND: ClassVar[ShapeKind]

    alternates: OrderedNames = field(default_factory=OrderedNames)
    classes: OrderedNames = field(default_factory=OrderedNames)
    items: list[Shape] = field(default_factory=list)
    populated: bool = False

    @property
    def kind(self) -> ShapeKind:
        """The kind used to look up this shape's handlers."""
        return self.KIND


@dataclass(eq=False, kw_only=True)
class TermShape(Shape):
    """Root shape of a taxonomy render pass.

    The request fields identify the taxonomy (by content item id or alias)
    and optionally a term within it. The remaining fields are cached by the
    populate phase.
    """

    KIND = ShapeKind.TERM

    taxonomy_content_item_id: str | None = None
    alias: str | None = None
    term_content_item_id: str | None = None

    taxonomy_content_item: ContentItem | None = None
    term_name: str | None = None
    term_content_type: str | None = None
    differentiator: str | None = None


@dataclass(eq=False, kw_only=True)
class TermItemShape(Shape):
    """One term of the rendered hierarchy, with its raw children."""

    KIND = ShapeKind.TERM_ITEM

    level: int
    term_content_item: ContentItem
    taxonomy_content_item: ContentItem
    terms: tuple[ContentItem, ...] = ()
    differentiator: str | None = None
    content_shape: TermContentItemShape | None = None

    @property
    def term_content_type(self) -> str | None:
        """The taxonomy's term content type."""
        part = self.taxonomy_content_item.taxonomy_part
        return part.term_content_type if part is not None else None


@dataclass(eq=False, kw_only=True)
class TermContentItemShape(Shape):
    """The content of a single term item."""

    KIND = ShapeKind.TERM_CONTENT_ITEM

    level: int
    term_content_item: ContentItem
    differentiator: str | None = None


@dataclass(eq=False, kw_only=True)
class TermPartShape(Shape):
    """A term content item rendered on its own, in a given display type."""

    KIND = ShapeKind.TERM_PART

    content_item: ContentItem
    display_type: str


SHAPE_TYPES: dict[ShapeKind, type[Shape]] = {
    ShapeKind.TERM: TermShape,
    ShapeKind.TERM_ITEM: TermItemShape,
    ShapeKind.TERM_CONTENT_ITEM: TermContentItemShape,
    ShapeKind.TERM_PART: TermPartShape,
}
