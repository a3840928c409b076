"""Shared test fixtures."""

from __future__ import annotations

import pytest

from mapshapes.config import get_settings
from mapshapes.models import LatLong, Length, LengthUnit, Paint, Vector2d
from mapshapes.models.primitives import BLACK, BLUE, GREEN, RED, WHITE

LONDON = LatLong.of(51.5, -0.12)
PARIS = LatLong.of(48.8566, 2.3522)
BERLIN = LatLong.of(52.52, 13.405)

TRIANGLE_PX = [Vector2d.of(0, 0), Vector2d.of(10, 0), Vector2d.of(10, 10)]

COLOURS = [BLACK, WHITE, RED, GREEN, BLUE]


@pytest.fixture
def london() -> LatLong:
    return LONDON


@pytest.fixture
def hundred_metres() -> Length:
    return Length.of(100, LengthUnit.METRES)


@pytest.fixture
def outline() -> Paint:
    return Paint.complete(stroke=BLACK, fill=WHITE)


@pytest.fixture
def lenient_geometry(monkeypatch):
    """Turn off construction-time geometry checks for one test."""
    monkeypatch.setattr(get_settings(), "strict_geometry", False)
