"""Exceptions raised by shape construction and dispatch.

None of these subclass ValueError: pydantic wraps ValueError raised inside a
validator into a ValidationError, and these must reach the caller as-is.
"""

from __future__ import annotations

from typing import Any


class ShapeError(Exception):
    """Base class for every error raised by mapshapes."""


class InvalidGeometryError(ShapeError):
    """A radius is negative or a vertex/point sequence is empty."""


class InvalidPaintError(ShapeError):
    """A Paint with neither stroke nor fill."""


class UnhandledShapeError(ShapeError):
    """A dispatcher was asked to handle a variant it has no case for."""

    def __init__(self, shape_type: Any, message: str | None = None) -> None:
        self.shape_type = shape_type
        super().__init__(message or f"No handler for shape type {shape_type!r}")
