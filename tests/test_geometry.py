"""
Tests for geometry helpers.

Covers:
- Pointer clamping
- Up-zero rotation angles
- Affine composition with a snapshotted transform
- Shape to QPainterPath conversion
"""
import math

import pytest
from PyQt5.QtCore import QPointF
from PyQt5.QtGui import QTransform

from models.shapes import (
    Vec2, LineShape, RectShape, CircleShape, PolylineShape, CrosshairShape
)
from utils.geometry import (
    clamp_point, up_angle, rotation_angle, translate_affine, rotate_affine,
    pre_concatenate, shape_to_path
)


def assert_maps(transform, src, expected):
    mapped = transform.map(QPointF(*src))
    assert mapped.x() == pytest.approx(expected[0], abs=1e-9)
    assert mapped.y() == pytest.approx(expected[1], abs=1e-9)


# ══════════════════════════════════════════════════════════════════════════
# Clamping
# ══════════════════════════════════════════════════════════════════════════

class TestClampPoint:

    @pytest.mark.parametrize("raw, expected", [
        ((-5, 50), (0, 50)),
        ((150, 50), (99, 50)),
        ((50, -1), (50, 0)),
        ((50, 100), (50, 99)),
        ((-10, 200), (0, 99)),
        ((42, 17), (42, 17)),
    ])
    def test_nearest_in_bounds(self, raw, expected):
        assert clamp_point(*raw, 100, 100) == Vec2(*expected)

    def test_idempotent(self):
        once = clamp_point(-30, 500, 80, 60)
        assert clamp_point(once.x, once.y, 80, 60) == once


# ══════════════════════════════════════════════════════════════════════════
# Angles and affines
# ══════════════════════════════════════════════════════════════════════════

class TestAngles:

    def test_up_is_zero(self):
        assert up_angle(Vec2(50, 0), Vec2(50, 50)) == pytest.approx(0.0)

    def test_right_is_quarter_turn(self):
        assert up_angle(Vec2(100, 50), Vec2(50, 50)) == pytest.approx(math.pi / 2)

    def test_rotation_angle(self):
        theta = rotation_angle(Vec2(50, 50), Vec2(50, 0), Vec2(100, 50))
        assert theta == pytest.approx(math.pi / 2)


class TestAffines:

    def test_translate_alone(self):
        assert_maps(translate_affine(5, -3), (1, 1), (6, -2))

    def test_translate_after_initial(self):
        initial = QTransform.fromScale(2, 2)
        # Scale first, then translate
        assert_maps(translate_affine(5, 0, initial), (1, 1), (7, 2))

    def test_rotate_about_center(self):
        rotation = rotate_affine(math.pi / 2, Vec2(50, 50))
        assert_maps(rotation, (50, 50), (50, 50))
        assert_maps(rotation, (50, 0), (100, 50))

    def test_rotate_after_initial(self):
        initial = QTransform.fromTranslate(10, 0)
        rotation = rotate_affine(math.pi, Vec2(0, 0), initial)
        assert_maps(rotation, (0, 0), (-10, 0))

    def test_pre_concatenate_order(self):
        scale = QTransform.fromScale(3, 3)
        move = QTransform.fromTranslate(1, 0)
        assert_maps(pre_concatenate(scale, move), (1, 0), (4, 0))
        assert_maps(pre_concatenate(move, scale), (1, 0), (6, 0))


# ══════════════════════════════════════════════════════════════════════════
# Painter paths
# ══════════════════════════════════════════════════════════════════════════

class TestShapeToPath:

    def test_none(self):
        assert shape_to_path(None) is None

    def test_rect_bounds(self):
        rect = shape_to_path(RectShape(10, 5, 40, 5)).boundingRect()
        assert (rect.x(), rect.y(), rect.width(), rect.height()) == (10, 5, 40, 5)

    def test_circle_bounds(self):
        rect = shape_to_path(CircleShape(Vec2(0, 0), 5.0)).boundingRect()
        assert rect.width() == pytest.approx(10.0)
        assert rect.center().x() == pytest.approx(0.0)

    def test_line_and_polyline(self):
        line = shape_to_path(LineShape(Vec2(0, 0), Vec2(10, 10)))
        assert line.elementCount() == 2
        poly = shape_to_path(PolylineShape((Vec2(0, 0), Vec2(10, 0), Vec2(10, 10))))
        assert poly.elementCount() == 3

    def test_crosshair_has_four_strokes(self):
        path = shape_to_path(CrosshairShape.around(Vec2(50, 50), 10))
        assert path.elementCount() == 8

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            shape_to_path("not a shape")
