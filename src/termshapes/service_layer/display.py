"""Display manager dispatching shapes to their handlers."""

import logging
from collections.abc import Callable

from termshapes.domain.shapes import Shape, ShapeKind, TermItemShape, TermShape
from termshapes.interfaces.shape_factory import ShapeFactory

from .handlers import ShapeHandlers

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForShape(LookupError):
    """Exception raised when no handlers are registered for a shape kind."""

    def __init__(self, kind: ShapeKind) -> None:
        super().__init__(f"No handler found for shape {kind.value}")


class ShapeDisplayManager:
    """Route shapes to the handlers registered for their kind.

    Processing a shape runs its ``populate`` phase once, caching the result on
    the shape, and then its ``tag_alternates`` phase. Processing the same
    shape again only re-runs tagging, which adds nothing new. A populate
    phase that raises is not retried.

    Args:
        shapes: The shape factory the handlers were wired with. Exposed here
            for convenience; handlers should still receive it by injection.
        shape_handlers: A mapping of shape kinds to their (injected) handlers.
            Handler callables accept a single shape argument.
    """

    def __init__(
        self,
        shapes: ShapeFactory,
        shape_handlers: dict[ShapeKind, ShapeHandlers],
    ) -> None:
        self.shapes = shapes
        self._shape_handlers = shape_handlers

    async def process(self, shape: Shape) -> None:
        """Populate (once) and tag a single shape.

        Args:
            shape: The shape to process.

        Raises:
            NoHandlerForShape: If no handlers are registered for the shape kind.
            Exception: If a handler raises an exception.
        """

        if (handlers := self._shape_handlers.get(shape.kind)) is None:
            logger.error("No handler found for shape %s", shape.kind.value)
            raise NoHandlerForShape(shape.kind)

        try:
            if not shape.populated:
                # Populate is attempted once, even when it fails.
                shape.populated = True
                if handlers.populate is not None:
                    logger.debug(
                        "Populating shape %s with handler %s",
                        shape.kind.value,
                        self._get_handler_name(handlers.populate),
                    )
                    await handlers.populate(shape)
            handlers.tag_alternates(shape)
        except Exception:  # pylint: disable=broad-except
            logger.exception("Exception processing shape %s", shape.kind.value)
            raise

    async def display(self, shape: Shape, max_depth: int | None = None) -> None:
        """Process a shape and walk its children depth-first.

        Args:
            shape: The shape to display.
            max_depth: Number of term item levels to process. Term items at or
                below this level are left unprocessed, so their own children
                are never built. None processes the whole hierarchy.
        """

        await self.process(shape)
        if isinstance(shape, TermItemShape) and shape.content_shape is not None:
            await self.process(shape.content_shape)

        for child in list(shape.items):
            if (
                max_depth is not None
                and isinstance(child, TermItemShape)
                and child.level >= max_depth
            ):
                continue
            await self.display(child, max_depth)

    async def display_term(
        self,
        *,
        taxonomy_content_item_id: str | None = None,
        alias: str | None = None,
        term_content_item_id: str | None = None,
        max_depth: int | None = None,
    ) -> TermShape:
        """Create a Term shape for a taxonomy reference and display it.

        Returns:
            The displayed Term shape. When the reference does not resolve the
            shape has no items and no alternates.
        """

        shape = await self.shapes.create(
            ShapeKind.TERM,
            taxonomy_content_item_id=taxonomy_content_item_id,
            alias=alias,
            term_content_item_id=term_content_item_id,
        )
        assert isinstance(shape, TermShape)
        await self.display(shape, max_depth)
        return shape

    @staticmethod
    def _get_handler_name(fn: Callable[..., object]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
