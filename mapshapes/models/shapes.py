"""Drawable shape variants and the Shape union.

Absolute shapes are defined entirely in latitude/longitude and scale with the
map. Relative shapes anchor pixel geometry to one latitude/longitude and keep a
constant on-screen size. Pixel offsets are x right, y down.
"""

from __future__ import annotations

import logging
from typing import Annotated, Literal, Union

from pydantic import Field, field_validator

from mapshapes.config import get_settings
from mapshapes.errors import InvalidGeometryError
from mapshapes.models.base import FrozenModel
from mapshapes.models.paint import Paint
from mapshapes.models.primitives import Colour, LatLong, Length, Vector2d
from mapshapes.models.shape_type import ShapeType
from mapshapes.registry import shape_variant
from mapshapes.utils.geometry import all_finite, as_array, bbox, circle_bbox

logger = logging.getLogger(__name__)

PixelBounds = tuple[float, float, float, float]


def _reject(shape: str, message: str) -> None:
    if get_settings().strict_geometry:
        raise InvalidGeometryError(f"{shape}: {message}")
    logger.warning("Accepting invalid %s: %s", shape, message)


def _check_not_empty(shape: str, field: str, items: tuple) -> None:
    if len(items) == 0:
        _reject(shape, f"{field} must not be empty")


class _ShapeModel(FrozenModel):
    """Base of every shape variant."""


@shape_variant(ShapeType.GEO_CIRCLE, relative=False, description="Circle centred on a lat/long")
class GeoCircle(_ShapeModel):
    """Circle whose centre is a latitude/longitude and whose radius is a physical length."""

    type: Literal[ShapeType.GEO_CIRCLE] = ShapeType.GEO_CIRCLE
    centre: LatLong
    radius: Length
    paint: Paint

    @field_validator("radius")
    @classmethod
    def _non_negative_radius(cls, v: Length) -> Length:
        if v.metres < 0:
            _reject("GeoCircle", f"radius must be >= 0, got {v.metres} m")
        return v


@shape_variant(ShapeType.GEO_POLYGON, relative=False, description="Polygon with lat/long vertices")
class GeoPolygon(_ShapeModel):
    """Polygon whose vertices are latitude/longitude.

    Vertex order defines the edges; the last vertex joins the first.
    """

    type: Literal[ShapeType.GEO_POLYGON] = ShapeType.GEO_POLYGON
    vertices: tuple[LatLong, ...]
    paint: Paint

    @field_validator("vertices")
    @classmethod
    def _has_vertices(cls, v: tuple[LatLong, ...]) -> tuple[LatLong, ...]:
        _check_not_empty("GeoPolygon", "vertices", v)
        return v


@shape_variant(
    ShapeType.GEO_POLYLINE,
    relative=False,
    styled_by="colour",
    description="Open line through lat/long points",
)
class GeoPolyline(_ShapeModel):
    """Polyline whose points are latitude/longitude.

    A line has no interior, so it takes a single colour rather than a Paint.
    """

    type: Literal[ShapeType.GEO_POLYLINE] = ShapeType.GEO_POLYLINE
    points: tuple[LatLong, ...]
    colour: Colour

    @field_validator("points")
    @classmethod
    def _has_points(cls, v: tuple[LatLong, ...]) -> tuple[LatLong, ...]:
        _check_not_empty("GeoPolyline", "points", v)
        return v


@shape_variant(
    ShapeType.GEO_RELATIVE_CIRCLE,
    relative=True,
    description="Fixed pixel-size circle offset from a lat/long",
)
class GeoRelativeCircle(_ShapeModel):
    """Circle whose centre is a pixel offset from a reference latitude/longitude.

    The radius is in pixels, not a Length.
    """

    type: Literal[ShapeType.GEO_RELATIVE_CIRCLE] = ShapeType.GEO_RELATIVE_CIRCLE
    centre_ref: LatLong
    centre_offset: Vector2d
    radius: float = Field(strict=True)
    paint: Paint

    @field_validator("radius")
    @classmethod
    def _valid_pixel_radius(cls, v: float) -> float:
        if not all_finite([v]):
            _reject("GeoRelativeCircle", f"radius must be finite, got {v}")
        elif v < 0:
            _reject("GeoRelativeCircle", f"radius must be >= 0, got {v} px")
        return v

    def pixel_bounds(self) -> PixelBounds:
        """(xmin, ymin, xmax, ymax) in pixels relative to centre_ref."""
        return circle_bbox(self.centre_offset, self.radius)


@shape_variant(
    ShapeType.GEO_RELATIVE_POLYGON,
    relative=True,
    description="Fixed pixel-size polygon anchored to a lat/long",
)
class GeoRelativePolygon(_ShapeModel):
    """Polygon whose vertices are pixel offsets from a reference latitude/longitude."""

    type: Literal[ShapeType.GEO_RELATIVE_POLYGON] = ShapeType.GEO_RELATIVE_POLYGON
    ref: LatLong
    vertices: tuple[Vector2d, ...]
    paint: Paint

    @field_validator("vertices")
    @classmethod
    def _has_vertices(cls, v: tuple[Vector2d, ...]) -> tuple[Vector2d, ...]:
        _check_not_empty("GeoRelativePolygon", "vertices", v)
        return v

    def pixel_bounds(self) -> PixelBounds:
        return bbox(as_array(self.vertices))


@shape_variant(
    ShapeType.GEO_RELATIVE_POLYLINE,
    relative=True,
    styled_by="colour",
    description="Fixed pixel-size line anchored to a lat/long",
)
class GeoRelativePolyline(_ShapeModel):
    """Polyline whose points are pixel offsets from a reference latitude/longitude."""

    type: Literal[ShapeType.GEO_RELATIVE_POLYLINE] = ShapeType.GEO_RELATIVE_POLYLINE
    ref: LatLong
    points: tuple[Vector2d, ...]
    colour: Colour

    @field_validator("points")
    @classmethod
    def _has_points(cls, v: tuple[Vector2d, ...]) -> tuple[Vector2d, ...]:
        _check_not_empty("GeoRelativePolyline", "points", v)
        return v

    def pixel_bounds(self) -> PixelBounds:
        return bbox(as_array(self.points))


Shape = Annotated[
    Union[
        GeoCircle,
        GeoPolygon,
        GeoPolyline,
        GeoRelativeCircle,
        GeoRelativePolygon,
        GeoRelativePolyline,
    ],
    Field(discriminator="type"),
]
