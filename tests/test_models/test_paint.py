"""Tests for Paint."""

import pytest
from pydantic import ValidationError

from tests.conftest import COLOURS

from mapshapes.errors import InvalidPaintError
from mapshapes.models import Paint, PaintLayer
from mapshapes.models.primitives import BLACK, BLUE, RED, WHITE


@pytest.mark.parametrize("colour", COLOURS)
def test_stroked_sets_stroke_only(colour):
    paint = Paint.stroked(colour)
    assert paint.stroke == colour
    assert paint.fill is None


@pytest.mark.parametrize("colour", COLOURS)
def test_filled_sets_fill_only(colour):
    paint = Paint.filled(colour)
    assert paint.fill == colour
    assert paint.stroke is None


def test_stroked_red():
    paint = Paint.stroked(RED)
    assert paint.stroke == RED
    assert paint.fill is None
    assert paint.has_stroke
    assert not paint.has_fill


def test_complete_sets_both():
    paint = Paint.complete(BLACK, WHITE)
    assert paint.stroke == BLACK
    assert paint.fill == WHITE


def test_complete_draws_fill_before_stroke():
    paint = Paint.complete(stroke=BLACK, fill=WHITE)
    assert paint.layers() == (PaintLayer("fill", WHITE), PaintLayer("stroke", BLACK))


def test_layers_single_part():
    assert Paint.stroked(RED).layers() == (PaintLayer("stroke", RED),)
    assert Paint.filled(BLUE).layers() == (PaintLayer("fill", BLUE),)


def test_no_stroke_no_fill_rejected():
    with pytest.raises(InvalidPaintError):
        Paint()
    with pytest.raises(InvalidPaintError):
        Paint(stroke=None, fill=None)
    with pytest.raises(InvalidPaintError):
        Paint.model_validate({})


def test_paint_is_frozen():
    paint = Paint.stroked(RED)
    with pytest.raises(ValidationError):
        paint.stroke = BLUE
    with pytest.raises(ValidationError):
        paint.fill = BLUE
    assert paint.stroke == RED
    assert paint.fill is None


def test_value_equality():
    assert Paint.stroked(RED) == Paint.stroked(RED)
    assert Paint.stroked(RED) != Paint.filled(RED)
    assert hash(Paint.complete(BLACK, WHITE)) == hash(Paint.complete(BLACK, WHITE))


def test_copy_cannot_empty_paint():
    with pytest.raises(InvalidPaintError):
        Paint.stroked(RED).model_copy(update={"stroke": None})
    with pytest.raises(InvalidPaintError):
        Paint.complete(BLACK, WHITE).model_copy(update={"stroke": None, "fill": None})


def test_copy_with_valid_update():
    paint = Paint.stroked(RED).model_copy(update={"fill": BLUE})
    assert paint == Paint.complete(stroke=RED, fill=BLUE)
    assert Paint.filled(BLUE).model_copy() == Paint.filled(BLUE)
    assert Paint.filled(BLUE).model_copy(deep=True) == Paint.filled(BLUE)
