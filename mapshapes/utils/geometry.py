"""Leaf-node pixel geometry helpers. No model imports."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

import numpy as np
from numpy.typing import NDArray


class _XY(Protocol):
    x: float
    y: float


def as_array(vectors: Iterable[_XY]) -> NDArray[np.float64]:
    """Nx2 array of (x, y) pixel offsets, in input order."""
    pts = np.array([(v.x, v.y) for v in vectors], dtype=np.float64)
    return pts.reshape(-1, 2)


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def circle_bbox(centre: _XY, radius: float) -> tuple[float, float, float, float]:
    return (centre.x - radius, centre.y - radius, centre.x + radius, centre.y + radius)


def all_finite(values: Sequence[float] | NDArray[np.float64]) -> bool:
    return bool(np.all(np.isfinite(np.asarray(values, dtype=np.float64))))
