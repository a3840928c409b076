"""Shape variant registry — every shape model registers itself via decorator.

Usage:
    @shape_variant(ShapeType.GEO_CIRCLE, relative=False, description="Circle around a lat/long")
    class GeoCircle(BaseModel):
        type: Literal[ShapeType.GEO_CIRCLE] = ShapeType.GEO_CIRCLE
        ...

Adding a variant = a new ShapeType member plus one decorated model. The
registry reports members with no model through missing().
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Literal

from mapshapes.models.shape_type import ShapeType

logger = logging.getLogger(__name__)

StyledBy = Literal["paint", "colour"]


@dataclass(frozen=True)
class ShapeVariant:
    type: ShapeType
    model: type[Any]
    relative: bool
    styled_by: StyledBy
    description: str = ""


class ShapeRegistry:
    """Singleton registry of all shape variants."""

    def __init__(self) -> None:
        self._variants: dict[ShapeType, ShapeVariant] = {}

    def register(self, variant: ShapeVariant) -> None:
        if variant.type in self._variants:
            raise ValueError(f"Duplicate shape type: {variant.type.value}")
        self._variants[variant.type] = variant
        logger.debug(
            "Registered shape %s -> %s (%s)",
            variant.type.value,
            variant.model.__name__,
            "relative" if variant.relative else "absolute",
        )

    def get(self, shape_type: ShapeType) -> ShapeVariant:
        return self._variants[shape_type]

    def variant_of(self, shape: Any) -> ShapeVariant:
        return self._variants[shape.type]

    def all(self) -> list[ShapeVariant]:
        # Enum declaration order
        return [self._variants[t] for t in ShapeType if t in self._variants]

    def absolute(self) -> list[ShapeVariant]:
        return [v for v in self.all() if not v.relative]

    def relative(self) -> list[ShapeVariant]:
        return [v for v in self.all() if v.relative]

    def missing(self) -> list[ShapeType]:
        """ShapeType members with no registered model."""
        return [t for t in ShapeType if t not in self._variants]

    @property
    def types(self) -> type[ShapeType]:
        return ShapeType

    @property
    def count(self) -> int:
        return len(self._variants)


# Module-level singleton
_registry = ShapeRegistry()


def get_registry() -> ShapeRegistry:
    return _registry


def shape_variant(
    shape_type: ShapeType,
    *,
    relative: bool,
    styled_by: StyledBy = "paint",
    description: str = "",
):
    """Decorator to register a shape model class."""

    def decorator(cls: type[Any]) -> type[Any]:
        _registry.register(
            ShapeVariant(
                type=shape_type,
                model=cls,
                relative=relative,
                styled_by=styled_by,
                description=description,
            )
        )
        return cls

    return decorator
