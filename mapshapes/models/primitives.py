"""Value types the shapes are built from: coordinates, lengths, pixel vectors, colours."""

from __future__ import annotations

import enum

from pydantic import Field

from mapshapes.models.base import FrozenModel


class LatLong(FrozenModel):
    """A geographic position in degrees."""

    latitude: float = Field(strict=True, ge=-90.0, le=90.0)
    longitude: float = Field(strict=True, ge=-180.0, le=180.0)

    @classmethod
    def of(cls, latitude: float, longitude: float) -> LatLong:
        return cls(latitude=latitude, longitude=longitude)


class LengthUnit(str, enum.Enum):
    METRES = "m"
    KILOMETRES = "km"
    FEET = "ft"
    STATUTE_MILES = "mi"
    NAUTICAL_MILES = "nm"

    @property
    def metres(self) -> float:
        """Length of one unit in metres."""
        return _METRES_PER_UNIT[self]


_METRES_PER_UNIT = {
    LengthUnit.METRES: 1.0,
    LengthUnit.KILOMETRES: 1000.0,
    LengthUnit.FEET: 0.3048,
    LengthUnit.STATUTE_MILES: 1609.344,
    LengthUnit.NAUTICAL_MILES: 1852.0,
}


class Length(FrozenModel):
    """A physical distance, stored in metres.

    Two lengths built from different units compare equal when they describe
    the same distance. The magnitude may be negative (e.g. a difference of two
    lengths); shapes that need a non-negative length check it themselves.
    """

    metres: float = Field(strict=True, allow_inf_nan=False)

    @classmethod
    def of(cls, value: float, unit: LengthUnit = LengthUnit.METRES) -> Length:
        return cls(metres=value * unit.metres)

    @classmethod
    def of_metres(cls, value: float) -> Length:
        return cls(metres=value)

    def to(self, unit: LengthUnit) -> float:
        return self.metres / unit.metres

    def __add__(self, other: Length) -> Length:
        return Length(metres=self.metres + other.metres)

    def __sub__(self, other: Length) -> Length:
        return Length(metres=self.metres - other.metres)


class Vector2d(FrozenModel):
    """Pixel offset. x is right-positive, y is down-positive."""

    x: float = Field(strict=True, allow_inf_nan=False)
    y: float = Field(strict=True, allow_inf_nan=False)

    @classmethod
    def of(cls, x: float, y: float) -> Vector2d:
        return cls(x=x, y=y)

    def __add__(self, other: Vector2d) -> Vector2d:
        return Vector2d(x=self.x + other.x, y=self.y + other.y)

    def __sub__(self, other: Vector2d) -> Vector2d:
        return Vector2d(x=self.x - other.x, y=self.y - other.y)


class Colour(FrozenModel):
    """sRGB colour with 8-bit channels and a [0, 1] alpha."""

    red: int = Field(strict=True, ge=0, le=255)
    green: int = Field(strict=True, ge=0, le=255)
    blue: int = Field(strict=True, ge=0, le=255)
    alpha: float = Field(default=1.0, strict=True, ge=0.0, le=1.0)

    @classmethod
    def rgb(cls, red: int, green: int, blue: int) -> Colour:
        return cls(red=red, green=green, blue=blue)

    @classmethod
    def rgba(cls, red: int, green: int, blue: int, alpha: float) -> Colour:
        return cls(red=red, green=green, blue=blue, alpha=alpha)

    @classmethod
    def from_hex(cls, value: str) -> Colour:
        """Parse ``#rrggbb`` or ``#rrggbbaa`` (leading ``#`` optional)."""
        s = value.strip().lstrip("#")
        if len(s) not in (6, 8):
            raise ValueError(f"Hex colour must have 6 or 8 digits: {value!r}")
        try:
            channels = [int(s[i : i + 2], 16) for i in range(0, len(s), 2)]
        except ValueError as exc:
            raise ValueError(f"Hex colour has non-hex digits: {value!r}") from exc
        alpha = channels[3] / 255.0 if len(channels) == 4 else 1.0
        return cls(red=channels[0], green=channels[1], blue=channels[2], alpha=alpha)

    def to_hex(self) -> str:
        """``#rrggbb`` when opaque, ``#rrggbbaa`` otherwise."""
        out = f"#{self.red:02x}{self.green:02x}{self.blue:02x}"
        if self.alpha < 1.0:
            out += f"{round(self.alpha * 255):02x}"
        return out


BLACK = Colour.rgb(0, 0, 0)
WHITE = Colour.rgb(255, 255, 255)
RED = Colour.rgb(255, 0, 0)
GREEN = Colour.rgb(0, 255, 0)
BLUE = Colour.rgb(0, 0, 255)
TRANSPARENT = Colour.rgba(0, 0, 0, 0.0)
