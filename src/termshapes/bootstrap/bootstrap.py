"""Wire the term shape handlers to their collaborators."""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from functools import partial
from typing import TYPE_CHECKING

from termshapes.adapters.content import (
    InMemoryAliasManager,
    InMemoryContentData,
    InMemoryContentManager,
    InMemoryTaxonomyTerms,
    load_content_data,
)
from termshapes.adapters.shape_factory import DefaultShapeFactory
from termshapes.service_layer.display import ShapeDisplayManager
from termshapes.service_layer.handlers import SHAPE_HANDLERS, ShapeHandlers

if TYPE_CHECKING:
    from pathlib import Path

    from termshapes.domain.shapes import ShapeKind
    from termshapes.interfaces.content import (
        AliasManager,
        ContentManager,
        TaxonomyTerms,
    )
    from termshapes.interfaces.shape_factory import ShapeFactory


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    display_manager: ShapeDisplayManager
    content_data: InMemoryContentData


def build_display_manager(  # pylint: disable=too-many-arguments
    *,
    contents: ContentManager,
    aliases: AliasManager,
    terms: TaxonomyTerms,
    shapes: ShapeFactory,
    shape_handlers: dict[ShapeKind, ShapeHandlers] | None = None,
) -> ShapeDisplayManager:
    """Build a display manager with injected dependencies."""
    dependencies = {
        "contents": contents,
        "aliases": aliases,
        "terms": terms,
        "shapes": shapes,
    }
    handlers = SHAPE_HANDLERS if shape_handlers is None else shape_handlers
    injected_shape_handlers = {
        kind: replace(
            kind_handlers,
            tag_alternates=inject_dependencies(
                kind_handlers.tag_alternates, dependencies
            ),
            populate=(
                inject_dependencies(kind_handlers.populate, dependencies)
                if kind_handlers.populate is not None
                else None
            ),
        )
        for kind, kind_handlers in handlers.items()
    }

    return ShapeDisplayManager(shapes, shape_handlers=injected_shape_handlers)


def bootstrap_in_memory(data: InMemoryContentData | None = None) -> AppContainer:
    """Wire the display manager to in-memory content collaborators."""
    data = InMemoryContentData() if data is None else data
    display_manager = build_display_manager(
        contents=InMemoryContentManager(data),
        aliases=InMemoryAliasManager(data),
        terms=InMemoryTaxonomyTerms(data),
        shapes=DefaultShapeFactory(),
    )

    return AppContainer(display_manager=display_manager, content_data=data)


def bootstrap_from_file(path: Path) -> AppContainer:
    """Load a JSON content export and wire the in-memory collaborators over it.

    Raises:
        ContentFileError: If the file cannot be loaded.
    """
    return bootstrap_in_memory(load_content_data(path))


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
