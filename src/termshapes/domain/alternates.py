"""Alternate name and class tag derivation for term shapes.

Alternates are joined with the ``__`` separator and encode depth with a
literal ``level__<N>`` segment. Names are listed from least to most specific;
every builder returns a fresh list and performs no I/O.

Examples for a ``Category`` term at level 2 of the "Travel" taxonomy:

    TermItem__level__2
    TermItem__Category
    TermItem__Category__level__2
    TermItem__Travel
    TermItem__Travel__level__2
    TermItem__Travel__Category
    TermItem__Travel__Category__level__2
"""

from termshapes.utils.naming import (
    ALTERNATE_SEPARATOR,
    encode_alternate_element,
    html_classify,
)

from .shapes import ShapeKind


def _join(*segments: object) -> str:
    return ALTERNATE_SEPARATOR.join(str(segment) for segment in segments)


def build_level_alternates(
    kind: ShapeKind, content_type: str, level: int, differentiator: str | None
) -> list[str]:
    """Build the level-aware alternates for a term item style shape.

    Args:
        kind: The shape kind used as the first segment.
        content_type: Content type name; encoded before use.
        level: Depth of the shape within the taxonomy, root level being 0.
        differentiator: Optional PascalCase token scoping names to a taxonomy.

    Returns:
        Three alternates, or seven when a differentiator is given.
    """
    name = kind.value
    encoded_content_type = encode_alternate_element(content_type)

    alternates = [
        _join(name, "level", level),
        _join(name, encoded_content_type),
        _join(name, encoded_content_type, "level", level),
    ]

    if differentiator:
        alternates += [
            _join(name, differentiator),
            _join(name, differentiator, "level", level),
            _join(name, differentiator, encoded_content_type),
            _join(name, differentiator, encoded_content_type, "level", level),
        ]

    return alternates


def build_term_item_alternates(
    content_type: str, level: int, differentiator: str | None
) -> list[str]:
    """Alternates of a ``TermItem`` shape, e.g. ``TermItem__Category__level__2``."""
    return build_level_alternates(
        ShapeKind.TERM_ITEM, content_type, level, differentiator
    )


def build_term_content_item_alternates(
    content_type: str, level: int, differentiator: str | None
) -> list[str]:
    """Alternates of a ``TermContentItem`` shape, e.g. ``TermContentItem__Travel``."""
    return build_level_alternates(
        ShapeKind.TERM_CONTENT_ITEM, content_type, level, differentiator
    )


def build_term_alternates(content_type: str, differentiator: str | None) -> list[str]:
    """Alternates of the taxonomy root ``Term`` shape.

    ``Term__<differentiator>`` (when given) followed by ``Term__<content type>``.
    """
    name = ShapeKind.TERM.value
    alternates = []
    if differentiator:
        alternates.append(_join(name, differentiator))
    alternates.append(_join(name, encode_alternate_element(content_type)))
    return alternates


def build_term_part_alternates(content_type: str, display_type: str) -> list[str]:
    """Alternates of a ``TermPart`` shape rendered in *display_type*.

    e.g. ``TermPart_Detail``, ``Category__TermPart``, ``Category_Detail__TermPart``.
    """
    name = ShapeKind.TERM_PART.value
    alternates = [f"{name}_{display_type}"]
    for suffix in ("", f"_{display_type}"):
        alternates.append(_join(f"{content_type}{suffix}", name))
    return alternates


def build_term_classes(content_type: str, differentiator: str | None) -> list[str]:
    """CSS class tags of the ``Term`` shape, e.g. ``term-categories``."""
    classes = []
    if differentiator:
        classes.append(html_classify(f"term-{differentiator}"))
    classes.append(html_classify(f"term-{content_type}"))
    return classes


def build_term_item_classes(content_type: str, differentiator: str | None) -> list[str]:
    """CSS class tags of a ``TermItem`` shape, e.g. ``term-item-category``."""
    classes = []
    if differentiator:
        classes.append(html_classify(f"term-item-{differentiator}"))
    classes.append(html_classify(f"term-item-{content_type}"))
    return classes
