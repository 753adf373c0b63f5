#
# test_scaler.py: shape rescaling between canvas sizes
#

import pytest

from tracepaint_zone import Rect, Circle, Polygon, ShapeValidationError, scale_shape, scale_to_canvas
from tracepaint_zone.geometry.scaler import canvas_scale_factors


def assert_same_shape(a, b):
    da, db = a.to_dict(), b.to_dict()
    assert da.keys() == db.keys()
    for key in da:
        if key == "points":
            assert len(da[key]) == len(db[key])
            for pa, pb in zip(da[key], db[key]):
                assert pa == pytest.approx(pb)
        else:
            assert da[key] == pytest.approx(db[key])


def test_rect_scaled_per_axis():
    assert scale_shape(Rect(10, 20, 30, 40), 2, 3) == Rect(20, 60, 60, 120)


def test_circle_radius_uses_smaller_factor():
    assert scale_shape(Circle(10, 20, 5), 2, 3) == Circle(20, 60, 10)
    assert scale_shape(Circle(10, 20, 5), 3, 0.5) == Circle(30, 10, 2.5)


def test_polygon_points_scaled(l_shape):
    scaled = scale_shape(l_shape, 0.5, 2)
    assert scaled.points[2] == (50.0, 80.0)
    assert len(scaled.points) == len(l_shape.points)


def test_input_is_not_mutated(square, origin_circle, l_shape):
    for shape in (square, origin_circle, l_shape):
        before = shape.to_dict()
        scaled = scale_shape(shape, 2.5, 0.75)
        assert scaled is not shape
        assert shape.to_dict() == before


def test_identity_scale(l_shape, square):
    assert scale_shape(l_shape, 1, 1) == l_shape
    assert scale_shape(square, 1, 1) == square


@pytest.mark.parametrize("a, b, c, d", [(2, 0.5, 0.25, 4), (0.5, 8, 2, 0.125)])
def test_composition_exact_for_rect_and_polygon(square, l_shape, a, b, c, d):
    for shape in (Rect(3, 5, 7, 11), l_shape):
        assert scale_shape(scale_shape(shape, a, b), c, d) == scale_shape(shape, a * c, b * d)


@pytest.mark.parametrize("a, b, c, d", [(1.3, 0.7, 2.1, 1.9), (0.9, 1.1, 0.6, 3.3)])
def test_composition_non_uniform_rect_and_polygon(l_shape, a, b, c, d):
    for shape in (Rect(3, 5, 7, 11), l_shape):
        assert_same_shape(scale_shape(scale_shape(shape, a, b), c, d), scale_shape(shape, a * c, b * d))


def test_circle_composition_holds_for_uniform_scaling():
    circle = Circle(40, 60, 25)
    assert_same_shape(scale_shape(scale_shape(circle, 1.5, 1.5), 2, 2), scale_shape(circle, 3, 3))


def test_circle_composition_breaks_for_non_uniform_scaling():
    circle = Circle(40, 60, 25)
    composed = scale_shape(scale_shape(circle, 2, 1), 1, 2)
    direct = scale_shape(circle, 2, 2)
    assert (composed.cx, composed.cy) == (direct.cx, direct.cy)
    assert composed.r == 25
    assert direct.r == 50


def test_negative_factor_rejected_for_rect():
    with pytest.raises(ShapeValidationError):
        scale_shape(Rect(0, 0, 10, 10), -1, 1)


def test_scale_to_canvas():
    shape = scale_to_canvas(Rect(100, 100, 200, 100), (350, 250), (700, 500))
    assert shape == Rect(50, 50, 100, 50)


def test_scale_to_canvas_polygon_and_circle():
    poly = Polygon(points=[(0, 0), (700, 0), (700, 500)])
    assert scale_to_canvas(poly, (1400, 250), (700, 500)).points[2] == (1400.0, 250.0)
    assert scale_to_canvas(Circle(350, 250, 100), (1400, 250), (700, 500)) == Circle(700, 125, 50)


def test_canvas_scale_factors_validation():
    assert canvas_scale_factors((700, 500), (700, 500)) == (1.0, 1.0)
    with pytest.raises(ValueError):
        canvas_scale_factors((700, 500), (0, 500))
