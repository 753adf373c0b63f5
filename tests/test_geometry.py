#
# test_geometry.py: shape model, containment and outline distance
#

import dataclasses
import math

import numpy as np
import pytest
import supervision as sv

from tracepaint_zone import (
    Rect,
    Circle,
    Polygon,
    ShapeType,
    ShapeValidationError,
    shape_from_dict,
    point_in_shape,
    distance_to_outline,
    point_to_segment_distance,
)


def P(x, y):
    return sv.Point(x=x, y=y)


class TestShapeModel:
    def test_rect_is_immutable(self, square):
        with pytest.raises(dataclasses.FrozenInstanceError):
            square.width = 5

    def test_polygon_points_normalized_to_float_tuples(self):
        poly = Polygon(points=[[0, 0], [10, 0], [10, 10]])
        assert poly.points == ((0.0, 0.0), (10.0, 0.0), (10.0, 10.0))
        assert isinstance(poly.points, tuple)

    def test_polygon_accepts_numpy_vertices(self):
        poly = Polygon(points=np.array([[0, 0], [10, 0], [10, 10]]))
        assert poly.points[1] == (10.0, 0.0)
        assert poly.vertices.shape == (3, 2)
        assert not poly.vertices.flags.writeable

    def test_shape_type_tags(self, square, origin_circle, l_shape):
        assert square.shape_type is ShapeType.RECT
        assert origin_circle.shape_type is ShapeType.CIRCLE
        assert l_shape.shape_type is ShapeType.POLYGON

    @pytest.mark.parametrize(
        "factory",
        [
            lambda: Polygon(points=[(0, 0), (1, 1)]),
            lambda: Polygon(points=[]),
            lambda: Polygon(points=[(0, 0), (1, 1), (2,)]),
            lambda: Polygon(points=np.zeros((4, 3))),
            lambda: Rect(x=0, y=0, width=-1, height=10),
            lambda: Rect(x=0, y=0, width=10, height=-0.5),
            lambda: Circle(cx=0, cy=0, r=-1),
            lambda: Circle(cx=float("nan"), cy=0, r=1),
            lambda: Rect(x="a", y=0, width=1, height=1),
        ],
    )
    def test_degenerate_shapes_rejected(self, factory):
        with pytest.raises(ShapeValidationError):
            factory()

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            Circle(cx=0, cy=0, r=-3)

    def test_zero_sized_shapes_allowed(self):
        assert Rect(x=5, y=5, width=0, height=0).width == 0
        assert Circle(cx=0, cy=0, r=0).r == 0

    def test_shape_from_dict(self):
        assert shape_from_dict({"type": "rect", "x": 1, "y": 2, "width": 3, "height": 4}) == Rect(1, 2, 3, 4)
        assert shape_from_dict({"type": "circle", "cx": 1, "cy": 2, "r": 3, "id": "c"}) == Circle(1, 2, 3)
        poly = shape_from_dict({"type": "polygon", "points": [[0, 0], [4, 0], [0, 3]]})
        assert poly == Polygon(points=[(0, 0), (4, 0), (0, 3)])

    def test_shape_from_dict_errors(self):
        with pytest.raises(ShapeValidationError, match="Invalid shape type"):
            shape_from_dict({"type": "ellipse"})
        with pytest.raises(ShapeValidationError, match="Missing required circle field"):
            shape_from_dict({"type": "circle", "cx": 0, "cy": 0})
        with pytest.raises(ShapeValidationError):
            shape_from_dict(["rect"])

    def test_to_dict_layout(self, l_shape):
        assert Circle(1, 2, 3).to_dict() == {"type": "circle", "cx": 1.0, "cy": 2.0, "r": 3.0}
        assert shape_from_dict(l_shape.to_dict()) == l_shape


class TestPointInShape:
    @pytest.mark.parametrize("x, y", [(0, 0), (100, 100), (100, 50), (50, 0), (50, 50)])
    def test_rect_inclusive_edges(self, square, x, y):
        assert point_in_shape(P(x, y), square)

    @pytest.mark.parametrize("x, y", [(100.0001, 50), (-0.0001, 50), (50, 100.5), (150, 50)])
    def test_rect_outside(self, square, x, y):
        assert not point_in_shape(P(x, y), square)

    def test_circle_boundary_inclusive(self, origin_circle):
        eps = 1e-6
        assert point_in_shape(P(10 - eps, 0), origin_circle)
        assert point_in_shape(P(10, 0), origin_circle)
        assert point_in_shape(P(6, 8), origin_circle)
        assert not point_in_shape(P(10 + eps, 0), origin_circle)

    def test_polygon_square(self):
        poly = Polygon(points=[(0, 0), (100, 0), (100, 100), (0, 100)])
        assert point_in_shape(P(50, 50), poly)
        assert not point_in_shape(P(150, 50), poly)
        assert not point_in_shape(P(50, -1), poly)

    def test_polygon_non_convex(self, l_shape):
        assert point_in_shape(P(20, 70), l_shape)
        assert point_in_shape(P(70, 20), l_shape)
        assert not point_in_shape(P(70, 70), l_shape)

    def test_polygon_vertex_order_does_not_matter(self, l_shape):
        reversed_l = Polygon(points=list(reversed(l_shape.points)))
        for pt in [P(20, 70), P(70, 20), P(70, 70), P(-5, 5)]:
            assert point_in_shape(pt, reversed_l) == point_in_shape(pt, l_shape)

    def test_far_points_do_not_raise(self, square, origin_circle, l_shape):
        for shape in (square, origin_circle, l_shape):
            assert not point_in_shape(P(1e12, -1e12), shape)


class TestDistanceToOutline:
    def test_rect_side(self, square):
        assert distance_to_outline(P(150, 50), square) == 50

    def test_rect_corner(self, square):
        assert distance_to_outline(P(103, 104), square) == pytest.approx(5)

    def test_rect_inside_is_zero(self, square):
        assert distance_to_outline(P(50, 50), square) == 0

    def test_circle(self, origin_circle):
        assert distance_to_outline(P(0, 25), origin_circle) == pytest.approx(15)
        assert distance_to_outline(P(0, 0), origin_circle) == pytest.approx(10)
        assert distance_to_outline(P(6, 8), origin_circle) == pytest.approx(0)

    def test_polygon_edge_and_vertex(self):
        poly = Polygon(points=[(0, 0), (100, 0), (100, 100), (0, 100)])
        assert distance_to_outline(P(150, 50), poly) == pytest.approx(50)
        assert distance_to_outline(P(-3, -4), poly) == pytest.approx(5)

    def test_polygon_notch(self, l_shape):
        assert distance_to_outline(P(70, 70), l_shape) == pytest.approx(30)

    def test_polygon_closing_edge_counts(self):
        # Closing edge (0,100)->(0,0) is the nearest one
        poly = Polygon(points=[(0, 0), (100, 0), (100, 100), (0, 100)])
        assert distance_to_outline(P(-7, 50), poly) == pytest.approx(7)

    def test_polygon_with_zero_length_edge(self):
        poly = Polygon(points=[(0, 0), (0, 0), (10, 0), (10, 10)])
        assert distance_to_outline(P(-3, -4), poly) == pytest.approx(5)

    def test_never_negative_and_finite_far_away(self, square, origin_circle, l_shape):
        for shape in (square, origin_circle, l_shape):
            d = distance_to_outline(P(-1e9, 3e9), shape)
            assert d >= 0 and math.isfinite(d)


class TestPointToSegment:
    def test_projection_inside_segment(self):
        assert point_to_segment_distance(P(5, 3), (0, 0), (10, 0)) == pytest.approx(3)

    def test_clamped_to_endpoints(self):
        assert point_to_segment_distance(P(-5, 0), (0, 0), (10, 0)) == pytest.approx(5)
        assert point_to_segment_distance(P(13, 4), (0, 0), (10, 0)) == pytest.approx(5)

    def test_zero_length_segment(self):
        assert point_to_segment_distance(P(3, 4), (0, 0), (0, 0)) == pytest.approx(5)
