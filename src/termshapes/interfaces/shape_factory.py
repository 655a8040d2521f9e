"""Interface for creating and decorating shapes."""

import abc
from typing import Any

from termshapes.domain.shapes import Shape, ShapeKind


class ShapeFactory(abc.ABC):
    """Contract for the host's shape factory.

    Handlers never build or mutate shape collections directly; they go
    through the factory so a host can observe or veto each step.
    """

    @abc.abstractmethod
    async def create(self, kind: ShapeKind, **properties: Any) -> Shape:
        """Create a shape of *kind* initialized with *properties*.

        Args:
            kind: The shape kind to create.
            **properties: Field values of the shape record.

        Returns:
            The new shape.
        """

    @abc.abstractmethod
    def add(self, parent: Shape, child: Shape) -> None:
        """Append *child* to *parent*'s items, after any existing children."""

    @abc.abstractmethod
    def add_class(self, shape: Shape, class_name: str) -> None:
        """Tag *shape* with a CSS class name."""

    @abc.abstractmethod
    def add_alternate(self, shape: Shape, alternate: str) -> None:
        """Tag *shape* with an alternate name."""
