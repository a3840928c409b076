"""Paint — the stroke/fill style of a shape."""

from __future__ import annotations

from typing import Literal, NamedTuple

from pydantic import model_validator

from mapshapes.errors import InvalidPaintError
from mapshapes.models.base import FrozenModel
from mapshapes.models.primitives import Colour


class PaintLayer(NamedTuple):
    kind: Literal["fill", "stroke"]
    colour: Colour


class Paint(FrozenModel):
    """Stroke and/or fill colour. At least one is always set.

    Build with the factories:

        Paint.stroked(RED)
        Paint.filled(BLUE)
        Paint.complete(stroke=BLACK, fill=WHITE)

    A complete paint is drawn fill first, so the stroke appears on top.
    """

    stroke: Colour | None = None
    fill: Colour | None = None

    @model_validator(mode="after")
    def _require_stroke_or_fill(self) -> Paint:
        if self.stroke is None and self.fill is None:
            raise InvalidPaintError("Paint needs a stroke, a fill, or both")
        return self

    @classmethod
    def stroked(cls, colour: Colour) -> Paint:
        return cls(stroke=colour)

    @classmethod
    def filled(cls, colour: Colour) -> Paint:
        return cls(fill=colour)

    @classmethod
    def complete(cls, stroke: Colour, fill: Colour) -> Paint:
        """Paint with both a fill and a stroke. Fill is drawn first so the stroke sits on top."""
        return cls(stroke=stroke, fill=fill)

    @property
    def has_stroke(self) -> bool:
        return self.stroke is not None

    @property
    def has_fill(self) -> bool:
        return self.fill is not None

    def layers(self) -> tuple[PaintLayer, ...]:
        """Parts of this paint in draw order: fill, then stroke."""
        out: list[PaintLayer] = []
        if self.fill is not None:
            out.append(PaintLayer("fill", self.fill))
        if self.stroke is not None:
            out.append(PaintLayer("stroke", self.stroke))
        return tuple(out)
