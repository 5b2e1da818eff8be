import math

import numpy as np
import pytest

from geometry.bbox import BoundingBox, bbox
from geometry.primitives import Line, Point, angle_of, as_point, cross, is_point_on_segment
from geometry.topology import Order, angular_sweep, as_order, ensure_closed, order_of, signed_area


# ---- primitives ----

def test_point_arithmetic_and_cross():
    p = Point(3.0, 4.0)
    assert p - (1, 1) == (2.0, 3.0)
    assert p + (1, 1) == (4.0, 5.0)
    assert Point(1, 0).cross((0, 1)) == 1.0
    assert Point(0, 1).cross((1, 0)) == -1.0


def test_as_point_accepts_sequences_and_rejects_bad_shape():
    assert as_point([1, 2]) == Point(1.0, 2.0)
    assert as_point(np.array([1.5, -2.0])) == Point(1.5, -2.0)
    with pytest.raises(ValueError):
        as_point((1, 2, 3))


def test_cross_sign_is_left_turn_positive():
    assert cross((0, 0), (1, 0), (0, 1)) > 0
    assert cross((0, 0), (0, 1), (1, 0)) < 0
    assert cross((0, 0), (1, 1), (2, 2)) == 0


def test_is_point_on_segment():
    seg = Line(Point(0, 0), Point(10, 0))
    assert is_point_on_segment((5, 0), seg)
    assert is_point_on_segment((0, 0), seg)
    assert is_point_on_segment((10, 0), seg)
    assert not is_point_on_segment((11, 0), seg)
    assert not is_point_on_segment((5, 0.5), seg)


def test_angle_of_and_zero_length():
    assert angle_of((0, 0), (1, 0)) == 0.0
    assert math.isclose(angle_of((0, 0), (0, 1)), math.pi / 2)
    with pytest.raises(ValueError):
        angle_of((1, 1), (1, 1))


# ---- bbox ----

def test_bbox_min_max():
    assert bbox([(1, 1), (5, 2), (-3, 9)]) == (-3, 1, 5, 9)


def test_bbox_single_and_empty():
    assert bbox([(2, 3)]) == BoundingBox(2, 3, 2, 3)
    assert bbox([]) == BoundingBox(0, 0, 0, 0)


def test_bbox_contains_is_closed():
    bb = bbox(np.array([[0.0, 0.0], [2.0, 1.0]]))
    assert bb.contains((2, 1))
    assert bb.contains((1, 0.5))
    assert not bb.contains((2.1, 0.5))


# ---- winding ----

SQUARE_CCW = [(0, 0), (1, 0), (1, 1), (0, 1)]


def test_signed_area_and_order():
    assert signed_area(SQUARE_CCW) == pytest.approx(1.0)
    assert signed_area(SQUARE_CCW[::-1]) == pytest.approx(-1.0)
    assert order_of(SQUARE_CCW) is Order.COUNTER_CLOCKWISE
    assert order_of(SQUARE_CCW[::-1]) is Order.CLOCKWISE


def test_order_of_y_flip_mirrors():
    assert order_of(SQUARE_CCW, y_flip=True) is Order.CLOCKWISE


def test_order_of_degenerate_is_colinear():
    assert order_of([(0, 0), (1, 1)]) is Order.COLINEAR
    assert order_of([(0, 0), (1, 1), (2, 2)]) is Order.COLINEAR


def test_signed_area_needs_three_points():
    with pytest.raises(ValueError):
        signed_area([(0, 0), (1, 0)])


def test_as_order_and_str_enum():
    assert as_order("ccw") is Order.COUNTER_CLOCKWISE
    assert as_order(Order.CLOCKWISE) is Order.CLOCKWISE
    assert Order.CLOCKWISE == "CW"
    assert str(Order.COUNTER_CLOCKWISE) == "CCW"
    assert Order.CLOCKWISE.reverse() is Order.COUNTER_CLOCKWISE
    with pytest.raises(ValueError):
        as_order("sideways")


def test_angular_sweep_senses():
    q = math.pi / 2
    assert angular_sweep(0.0, q, Order.COUNTER_CLOCKWISE) == pytest.approx(q)
    assert angular_sweep(0.0, q, Order.CLOCKWISE) == pytest.approx(3 * q)
    assert angular_sweep(1.0, 1.0, Order.COUNTER_CLOCKWISE) == 0.0
    with pytest.raises(ValueError):
        angular_sweep(0.0, q, Order.COLINEAR)


def test_ensure_closed():
    closed = ensure_closed(SQUARE_CCW)
    assert closed.shape == (5, 2)
    assert np.array_equal(closed[0], closed[-1])
    assert ensure_closed(closed).shape == (5, 2)


def test_point_sequences_are_shape_checked():
    with pytest.raises(ValueError):
        bbox([(0.0, 0.0), (float("nan"), 1.0)])
    with pytest.raises(ValueError):
        bbox([(1, 2, 3)])
    with pytest.raises(ValueError):
        signed_area([(0, 0), (1, 0), (float("inf"), 1)])
    with pytest.raises(ValueError):
        order_of(None)
