"""mapshapes — immutable drawable shape primitives for map renderers."""

from mapshapes.dispatch import ShapeDispatcher, ShapeVisitor, dispatch, style_of, unhandled
from mapshapes.errors import (
    InvalidGeometryError,
    InvalidPaintError,
    ShapeError,
    UnhandledShapeError,
)
from mapshapes.models import (
    Colour,
    GeoCircle,
    GeoPolygon,
    GeoPolyline,
    GeoRelativeCircle,
    GeoRelativePolygon,
    GeoRelativePolyline,
    LatLong,
    Length,
    LengthUnit,
    Paint,
    PaintLayer,
    Shape,
    ShapeType,
    Vector2d,
)
from mapshapes.registry import ShapeRegistry, ShapeVariant, get_registry

__all__ = [
    "Colour",
    "LatLong",
    "Length",
    "LengthUnit",
    "Vector2d",
    "Paint",
    "PaintLayer",
    "ShapeType",
    "Shape",
    "GeoCircle",
    "GeoPolygon",
    "GeoPolyline",
    "GeoRelativeCircle",
    "GeoRelativePolygon",
    "GeoRelativePolyline",
    "ShapeRegistry",
    "ShapeVariant",
    "get_registry",
    "ShapeDispatcher",
    "ShapeVisitor",
    "dispatch",
    "style_of",
    "unhandled",
    "ShapeError",
    "InvalidGeometryError",
    "InvalidPaintError",
    "UnhandledShapeError",
]

__version__ = "0.1.0"
