"""Term shape handlers.

Every shape kind has two phases:

- ``populate`` (async, optional) fetches data and builds child shapes. It
  runs once per shape and caches its result on the shape.
- ``tag_alternates`` reads what populate cached and adds alternates and
  class tags. It never fetches anything.

The root ``Term`` shape only materializes the first level of term items.
Each ``TermItem`` builds the next level when it is itself populated, so
branches the host never renders are never built.

Missing data (unknown alias, taxonomy or term, content without taxonomy
structure) is not an error: the handler returns and the shape renders
nothing.
"""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from termshapes.domain import alternates
from termshapes.domain.content import ContentItem
from termshapes.domain.shapes import (
    ShapeKind,
    TermContentItemShape,
    TermItemShape,
    TermPartShape,
    TermShape,
)
from termshapes.interfaces.content import AliasManager, ContentManager, TaxonomyTerms
from termshapes.interfaces.shape_factory import ShapeFactory
from termshapes.utils.naming import to_pascal_identifier

logger = logging.getLogger(__name__)

TERM_CLASS = "term"


@dataclass(frozen=True)
class ShapeHandlers:
    """The two phases registered for a shape kind."""

    tag_alternates: Callable[..., None]
    populate: Callable[..., Awaitable[None]] | None = None


# ============================================================================
#                               Term
# ============================================================================


async def populate_term(  # pylint: disable=too-many-return-statements
    shape: TermShape,
    contents: ContentManager,
    aliases: AliasManager,
    terms: TaxonomyTerms,
    shapes: ShapeFactory,
) -> None:
    """Resolve the taxonomy of a Term shape and build its first level of items."""

    identifier = (
        shape.taxonomy_content_item_id
        if shape.taxonomy_content_item_id is not None
        else shape.alias
    )
    if not identifier:
        return

    shapes.add_class(shape, TERM_CLASS)

    taxonomy_content_item_id = (
        await aliases.get_content_item_id(shape.alias)
        if shape.alias is not None
        else shape.taxonomy_content_item_id
    )
    if taxonomy_content_item_id is None:
        return

    taxonomy = await contents.get(taxonomy_content_item_id)
    if taxonomy is None:
        return

    shape.taxonomy_content_item = taxonomy

    taxonomy_part = taxonomy.taxonomy_part
    if taxonomy_part is None:
        return

    # A targeted term renders its inherited hierarchy inside the taxonomy.
    term_items: list[ContentItem] | tuple[ContentItem, ...] | None
    if shape.term_content_item_id:
        term = await terms.get_term(
            taxonomy.content_item_id, shape.term_content_item_id
        )
        if term is None:
            return
        # The taxonomy name differentiates sub-branches too, not the term's.
        shape.term_name = taxonomy.display_text
        term_items = await terms.get_inherited_terms(
            taxonomy.content_item_id, shape.term_content_item_id
        )
    else:
        term_items = taxonomy_part.terms
        shape.term_name = taxonomy.display_text

    if term_items is None:
        return

    differentiator = to_pascal_identifier(shape.term_name)
    shape.differentiator = differentiator
    shape.term_content_type = taxonomy_part.term_content_type

    # Children are attached only once every one of them was created.
    items = [
        await shapes.create(
            ShapeKind.TERM_ITEM,
            level=0,
            term_content_item=term_content_item,
            terms=term_content_item.child_terms,
            taxonomy_content_item=taxonomy,
            differentiator=differentiator,
        )
        for term_content_item in term_items
    ]
    for item in items:
        shapes.add(shape, item)

    logger.debug(
        "Term %s: %d term items at level 0",
        taxonomy.content_item_id,
        len(term_items),
    )


def tag_term(shape: TermShape, shapes: ShapeFactory) -> None:
    """Tag a resolved Term shape with its classes and alternates."""

    if shape.term_content_type is None:
        return

    for class_name in alternates.build_term_classes(
        shape.term_content_type, shape.differentiator
    ):
        shapes.add_class(shape, class_name)

    for alternate in alternates.build_term_alternates(
        shape.term_content_type, shape.differentiator
    ):
        shapes.add_alternate(shape, alternate)


# ============================================================================
#                               TermItem
# ============================================================================


async def populate_term_item(shape: TermItemShape, shapes: ShapeFactory) -> None:
    """Build the next level of term items and the shape of the item's content."""

    items = [
        await shapes.create(
            ShapeKind.TERM_ITEM,
            level=shape.level + 1,
            taxonomy_content_item=shape.taxonomy_content_item,
            differentiator=shape.differentiator,
            term_content_item=term_content_item,
            terms=term_content_item.child_terms,
        )
        for term_content_item in shape.terms
    ]
    content_shape = await shapes.create(
        ShapeKind.TERM_CONTENT_ITEM,
        level=shape.level,
        term_content_item=shape.term_content_item,
        differentiator=shape.differentiator,
    )

    for item in items:
        shapes.add(shape, item)
    shape.content_shape = content_shape


def tag_term_item(shape: TermItemShape, shapes: ShapeFactory) -> None:
    """Tag a TermItem with level, content type and differentiator alternates."""

    content_type = shape.term_content_type
    if content_type is None:
        return

    for class_name in alternates.build_term_item_classes(
        content_type, shape.differentiator
    ):
        shapes.add_class(shape, class_name)

    for alternate in alternates.build_term_item_alternates(
        content_type, shape.level, shape.differentiator
    ):
        shapes.add_alternate(shape, alternate)


# ============================================================================
#                           TermContentItem / TermPart
# ============================================================================


def tag_term_content_item(shape: TermContentItemShape, shapes: ShapeFactory) -> None:
    """Tag a TermContentItem using the term's own content type."""

    for alternate in alternates.build_term_content_item_alternates(
        shape.term_content_item.content_type, shape.level, shape.differentiator
    ):
        shapes.add_alternate(shape, alternate)


def tag_term_part(shape: TermPartShape, shapes: ShapeFactory) -> None:
    """Tag a TermPart with display type and content type alternates."""

    for alternate in alternates.build_term_part_alternates(
        shape.content_item.content_type, shape.display_type
    ):
        shapes.add_alternate(shape, alternate)


SHAPE_HANDLERS: dict[ShapeKind, ShapeHandlers] = {
    ShapeKind.TERM: ShapeHandlers(populate=populate_term, tag_alternates=tag_term),
    ShapeKind.TERM_ITEM: ShapeHandlers(
        populate=populate_term_item, tag_alternates=tag_term_item
    ),
    ShapeKind.TERM_CONTENT_ITEM: ShapeHandlers(tag_alternates=tag_term_content_item),
    ShapeKind.TERM_PART: ShapeHandlers(tag_alternates=tag_term_part),
}
