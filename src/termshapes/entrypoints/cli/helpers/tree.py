"""Presentation of shape trees as JSON-ready dicts and Rich trees."""

from typing import Any

from rich.markup import escape
from rich.tree import Tree

from termshapes.domain.shapes import (
    Shape,
    TermContentItemShape,
    TermItemShape,
    TermPartShape,
    TermShape,
)


def shape_to_dict(shape: Shape) -> dict[str, Any]:
    """Serialize a shape and its materialized children.

    Unprocessed term items are included with ``"populated": false`` and no
    alternates; their children were never built.
    """
    data: dict[str, Any] = {"kind": shape.kind.value}

    if isinstance(shape, TermShape):
        taxonomy = shape.taxonomy_content_item
        data["taxonomy_content_item_id"] = (
            taxonomy.content_item_id if taxonomy is not None else None
        )
        data["differentiator"] = shape.differentiator
    elif isinstance(shape, (TermItemShape, TermContentItemShape)):
        data["level"] = shape.level
        data["content_item_id"] = shape.term_content_item.content_item_id
        data["display_text"] = shape.term_content_item.display_text
    elif isinstance(shape, TermPartShape):
        data["content_item_id"] = shape.content_item.content_item_id
        data["display_type"] = shape.display_type

    data["populated"] = shape.populated
    data["alternates"] = list(shape.alternates)
    data["classes"] = list(shape.classes)

    if isinstance(shape, TermItemShape) and shape.content_shape is not None:
        data["content"] = shape_to_dict(shape.content_shape)

    data["items"] = [shape_to_dict(child) for child in shape.items]
    return data


def _label(shape: Shape) -> str:
    if isinstance(shape, TermShape):
        taxonomy = shape.taxonomy_content_item
        name = taxonomy.display_text if taxonomy is not None else "?"
        return f"[bold]{shape.kind.value}[/bold] {escape(name)}"
    if isinstance(shape, TermItemShape):
        name = escape(shape.term_content_item.display_text)
        suffix = "" if shape.populated else " [dim](not rendered)[/dim]"
        return (
            f"[bold]{shape.kind.value}[/bold] {name} "
            f"[cyan]level {shape.level}[/cyan]{suffix}"
        )
    return f"[bold]{shape.kind.value}[/bold]"


def shape_to_tree(shape: Shape, tree: Tree | None = None) -> Tree:
    """Build a Rich tree listing each shape with its alternates and classes."""
    node = Tree(_label(shape)) if tree is None else tree.add(_label(shape))

    if len(shape.alternates):
        alternates = node.add("[magenta]alternates[/magenta]")
        for alternate in shape.alternates:
            alternates.add(escape(alternate))
    if len(shape.classes):
        node.add(f"[green]classes[/green] {escape(' '.join(shape.classes))}")

    if isinstance(shape, TermItemShape) and shape.content_shape is not None:
        shape_to_tree(shape.content_shape, node)

    for child in shape.items:
        shape_to_tree(child, node)
    return node
