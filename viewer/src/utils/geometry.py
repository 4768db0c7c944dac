"""Geometry utilities for the light table.

Provides:
- Pointer clamping to the base component bounds
- Up-zero angle measurement for image rotation
- Affine builders composing with a snapshotted transform
- Conversion of shape values to QPainterPath for painting
"""

import math

from PyQt5.QtCore import QPointF, QRectF
from PyQt5.QtGui import QPainterPath, QTransform

from models.shapes import (
	Vec2, LineShape, RectShape, CircleShape, PolylineShape, CrosshairShape
)


def clamp_point(x, y, width, height):
	"""Clamp a pointer position to the pixels of a component.

	Event capture can report positions slightly outside the component edge;
	gesture geometry must never reference those.

	Args:
		x, y: Pointer position in component pixels
		width, height: Component size in pixels

	Returns:
		Vec2 with 0 <= x <= width-1 and 0 <= y <= height-1
	"""
	return Vec2(
		max(0, min(width - 1, x)),
		max(0, min(height - 1, y)),
	)


def up_angle(point, center):
	"""Angle of the vector center -> point, zero pointing up, clockwise positive.

	Args:
		point: Vec2 in Y-down pixel coordinates
		center: Vec2 rotation center

	Returns:
		Angle in radians
	"""
	return math.atan2(point.x - center.x, -(point.y - center.y))


def rotation_angle(center, start, current):
	"""Signed angle swept about center going from start to current (radians)."""
	return up_angle(current, center) - up_angle(start, center)


def translate_affine(dx, dy, initial=None):
	"""Translation by (dx, dy) applied after an optional initial transform.

	Args:
		dx, dy: Translation in component pixels
		initial: QTransform captured when the drag started, or None

	Returns:
		QTransform
	"""
	translation = QTransform.fromTranslate(dx, dy)
	if initial is None:
		return translation
	# Qt multiplies left to right: initial is applied first
	return initial * translation


def rotate_affine(theta, center, initial=None):
	"""Rotation by theta about center applied after an optional initial transform.

	Args:
		theta: Angle in radians (clockwise on screen)
		center: Vec2 rotation center in component pixels
		initial: QTransform captured when the drag started, or None

	Returns:
		QTransform
	"""
	rotation = QTransform()
	rotation.translate(center.x, center.y)
	rotation.rotateRadians(theta)
	rotation.translate(-center.x, -center.y)
	if initial is None:
		return rotation
	return initial * rotation


def pre_concatenate(transform, other):
	"""Return a transform applying `transform` first, then `other`."""
	return transform * other


def to_qpointf(point):
	"""Convert a Vec2 to QPointF."""
	return QPointF(point.x, point.y)


def to_qrectf(rect):
	"""Convert a RectShape to QRectF."""
	return QRectF(rect.x, rect.y, rect.width, rect.height)


def shape_to_path(shape):
	"""Convert a light table shape to a QPainterPath.

	Args:
		shape: One of the models.shapes types, or None

	Returns:
		QPainterPath, or None if shape is None
	"""
	if shape is None:
		return None

	path = QPainterPath()
	if isinstance(shape, LineShape):
		path.moveTo(to_qpointf(shape.p1))
		path.lineTo(to_qpointf(shape.p2))
	elif isinstance(shape, RectShape):
		path.addRect(to_qrectf(shape))
	elif isinstance(shape, CircleShape):
		path.addEllipse(to_qpointf(shape.center), shape.radius, shape.radius)
	elif isinstance(shape, PolylineShape):
		if shape.points:
			path.moveTo(to_qpointf(shape.points[0]))
			for point in shape.points[1:]:
				path.lineTo(to_qpointf(point))
	elif isinstance(shape, CrosshairShape):
		for stroke in shape.strokes:
			path.moveTo(to_qpointf(stroke.p1))
			path.lineTo(to_qpointf(stroke.p2))
	else:
		raise TypeError(f"Unsupported shape type: {type(shape).__name__}")
	return path
