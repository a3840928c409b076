"""Shape, style and primitive value models."""

from mapshapes.models.paint import Paint, PaintLayer
from mapshapes.models.primitives import Colour, LatLong, Length, LengthUnit, Vector2d
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
]
