"""Shape discriminant."""

from __future__ import annotations

import enum


# Planned, not yet defined:
#   GEO_ARC, GEO_TEXT, GEO_SYMBOL
#   GEO_RELATIVE_ARC, GEO_RELATIVE_TEXT, GEO_RELATIVE_SYMBOL
#   CANVAS_ARC, CANVAS_CIRCLE, CANVAS_POLYGON, CANVAS_POLYLINE, CANVAS_TEXT, CANVAS_SYMBOL
# Adding a member here breaks every ShapeDispatcher and ShapeVisitor until they
# handle it, and ShapeRegistry.missing() reports it until a model is registered.
class ShapeType(str, enum.Enum):
    GEO_CIRCLE = "geo_circle"
    GEO_POLYGON = "geo_polygon"
    GEO_POLYLINE = "geo_polyline"
    GEO_RELATIVE_CIRCLE = "geo_relative_circle"
    GEO_RELATIVE_POLYGON = "geo_relative_polygon"
    GEO_RELATIVE_POLYLINE = "geo_relative_polyline"
