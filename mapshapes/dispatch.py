"""Exhaustive dispatch over shape variants.

Three ways to branch on a shape, all of which break loudly when a new
ShapeType member is added:

1. ShapeDispatcher — a handler per ShapeType, checked when the dispatcher is built:

    render = ShapeDispatcher({
        ShapeType.GEO_CIRCLE: draw_circle,
        ...
    })
    render(shape)

2. ShapeVisitor — one abstract visit_<type> method per variant; a subclass
   missing one cannot be instantiated.

3. match statement ending in unhandled(), which type checkers reject unless
   every variant is covered:

    match shape:
        case GeoCircle():
            ...
        case _:
            unhandled(shape)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Generic, Never, NoReturn, TypeVar

from mapshapes.errors import UnhandledShapeError
from mapshapes.models.paint import Paint
from mapshapes.models.primitives import Colour
from mapshapes.models.shape_type import ShapeType
from mapshapes.models.shapes import (
    GeoCircle,
    GeoPolygon,
    GeoPolyline,
    GeoRelativeCircle,
    GeoRelativePolygon,
    GeoRelativePolyline,
    Shape,
)

R = TypeVar("R")


def unhandled(value: Never) -> NoReturn:
    """Default arm of an exhaustive match. Reaching it at runtime is a bug."""
    raise UnhandledShapeError(getattr(value, "type", type(value).__name__))


class ShapeDispatcher(Generic[R]):
    """Routes a shape to the handler registered for its ShapeType."""

    def __init__(self, handlers: Mapping[ShapeType, Callable[[Any], R]]) -> None:
        missing = [t for t in ShapeType if t not in handlers]
        if missing:
            raise UnhandledShapeError(
                missing[0],
                "Dispatcher has no handler for: " + ", ".join(t.value for t in missing),
            )
        self._handlers = dict(handlers)

    def __call__(self, shape: Shape) -> R:
        handler = self._handlers.get(getattr(shape, "type", None))
        if handler is None:
            raise UnhandledShapeError(getattr(shape, "type", type(shape).__name__))
        return handler(shape)


def dispatch(shape: Shape, handlers: Mapping[ShapeType, Callable[[Any], R]]) -> R:
    return ShapeDispatcher(handlers)(shape)


class ShapeVisitor(ABC, Generic[R]):
    """Double-dispatch base. Subclasses implement every visit_<type> method."""

    def visit(self, shape: Shape) -> R:
        shape_type = getattr(shape, "type", None)
        if not isinstance(shape_type, ShapeType):
            raise UnhandledShapeError(shape_type)
        method = getattr(self, f"visit_{shape_type.value}", None)
        if method is None:
            raise UnhandledShapeError(shape_type)
        return method(shape)

    @abstractmethod
    def visit_geo_circle(self, shape: GeoCircle) -> R: ...

    @abstractmethod
    def visit_geo_polygon(self, shape: GeoPolygon) -> R: ...

    @abstractmethod
    def visit_geo_polyline(self, shape: GeoPolyline) -> R: ...

    @abstractmethod
    def visit_geo_relative_circle(self, shape: GeoRelativeCircle) -> R: ...

    @abstractmethod
    def visit_geo_relative_polygon(self, shape: GeoRelativePolygon) -> R: ...

    @abstractmethod
    def visit_geo_relative_polyline(self, shape: GeoRelativePolyline) -> R: ...


def missing_visit_methods(
    visitor: type[ShapeVisitor[Any]], shape_types: Iterable[ShapeType] = ShapeType
) -> list[ShapeType]:
    """Shape types with no abstract visit_<type> method on ``visitor``."""
    return [t for t in shape_types if f"visit_{t.value}" not in visitor.__abstractmethods__]


# A ShapeType member without an abstract visit_ method would let existing
# visitors instantiate without handling it.
_uncovered = missing_visit_methods(ShapeVisitor)
if _uncovered:
    raise UnhandledShapeError(
        _uncovered[0],
        "ShapeVisitor has no visit method for: " + ", ".join(t.value for t in _uncovered),
    )


def style_of(shape: Shape) -> Paint | Colour:
    """The Paint of a filled variant, or the bare colour of a line variant."""
    match shape:
        case GeoCircle() | GeoPolygon() | GeoRelativeCircle() | GeoRelativePolygon():
            return shape.paint
        case GeoPolyline() | GeoRelativePolyline():
            return shape.colour
        case _:
            unhandled(shape)
