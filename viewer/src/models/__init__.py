"""
Light Table - Data Models

Toolkit-neutral values describing gestures and their results. Nothing in
this package touches Qt widgets, so the gesture logic built on it can be
tested without a display.

Public API: GestureMode, GestureSession, CursorKind and the shape types.
"""

from .gesture import (
    GestureMode, GestureSession, CursorKind,
    IMAGE_MODES, TRANSFORM_MODES, cursor_for, instruction_for, mode_label,
)
from .shapes import (
    Vec2, LineShape, RectShape, CircleShape, PolylineShape, CrosshairShape,
)
from .transformable import TransformableImage

__all__ = [
    'GestureMode', 'GestureSession', 'CursorKind',
    'IMAGE_MODES', 'TRANSFORM_MODES', 'cursor_for', 'instruction_for', 'mode_label',
    'Vec2', 'LineShape', 'RectShape', 'CircleShape', 'PolylineShape', 'CrosshairShape',
    'TransformableImage',
]
