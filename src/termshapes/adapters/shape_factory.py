"""Default shape factory building the typed shape records."""

from typing import Any

from termshapes.domain.shapes import SHAPE_TYPES, Shape, ShapeKind
from termshapes.interfaces.shape_factory import ShapeFactory


class UnknownShapeKindError(LookupError):
    """Raised when no shape record is registered for a kind."""

    def __init__(self, kind: ShapeKind) -> None:
        super().__init__(f"No shape type registered for {kind.value}")


class DefaultShapeFactory(ShapeFactory):
    """Create shapes from a kind-to-record table and mutate them in place.

    Args:
        shape_types: Mapping of shape kinds to their record classes. Defaults
            to the records defined in :mod:`termshapes.domain.shapes`.
    """

    def __init__(self, shape_types: dict[ShapeKind, type[Shape]] | None = None) -> None:
        self._shape_types = SHAPE_TYPES if shape_types is None else shape_types

    async def create(self, kind: ShapeKind, **properties: Any) -> Shape:
        if (shape_type := self._shape_types.get(kind)) is None:
            raise UnknownShapeKindError(kind)
        return shape_type(**properties)

    def add(self, parent: Shape, child: Shape) -> None:
        parent.items.append(child)

    def add_class(self, shape: Shape, class_name: str) -> None:
        if class_name:
            shape.classes.add(class_name)

    def add_alternate(self, shape: Shape, alternate: str) -> None:
        shape.alternates.add(alternate)
