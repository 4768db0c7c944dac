"""Gesture modes, cursor policy, and per-gesture session state."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional

from .shapes import Vec2


class GestureMode(Enum):
    """Drawing modes supported by the light table."""
    NONE = 'none'
    POINT = 'point'
    LINE = 'line'
    POLYLINE = 'polyline'
    BOX = 'box'
    BOX_ZOOM = 'box_zoom'
    CIRCLE = 'circle'
    GENERAL_PATH = 'general_path'
    IMAGE = 'image'
    IMAGE_TRANSLATE = 'image_translate'
    IMAGE_ROTATE = 'image_rotate'

    @property
    def is_poly(self) -> bool:
        """True for the click-driven multi-segment mode."""
        return self is GestureMode.POLYLINE

    @property
    def is_image(self) -> bool:
        """True if the base component itself is the rubber-band feedback."""
        return self in IMAGE_MODES

    @property
    def needs_transformable(self) -> bool:
        """True if the base component must be a TransformableImage."""
        return self in TRANSFORM_MODES


IMAGE_MODES = frozenset({
    GestureMode.IMAGE,
    GestureMode.IMAGE_TRANSLATE,
    GestureMode.IMAGE_ROTATE,
})

TRANSFORM_MODES = frozenset({
    GestureMode.IMAGE_TRANSLATE,
    GestureMode.IMAGE_ROTATE,
})


def mode_label(mode: Enum) -> str:
    """Display name for a mode enum value ('box_zoom' -> 'Box Zoom')."""
    return mode.value.replace('_', ' ').title()


class CursorKind(Enum):
    """Toolkit-neutral cursor choice; the widget maps it to a Qt cursor."""
    DEFAULT = 'default'
    CROSSHAIR = 'crosshair'
    MOVE = 'move'
    HAND = 'hand'


_CURSORS = {
    GestureMode.POINT: CursorKind.CROSSHAIR,
    GestureMode.LINE: CursorKind.CROSSHAIR,
    GestureMode.POLYLINE: CursorKind.CROSSHAIR,
    GestureMode.BOX: CursorKind.CROSSHAIR,
    GestureMode.BOX_ZOOM: CursorKind.CROSSHAIR,
    GestureMode.CIRCLE: CursorKind.CROSSHAIR,
    GestureMode.GENERAL_PATH: CursorKind.MOVE,
    GestureMode.IMAGE: CursorKind.MOVE,
    GestureMode.IMAGE_TRANSLATE: CursorKind.HAND,
    GestureMode.IMAGE_ROTATE: CursorKind.HAND,
}


def cursor_for(mode):
    """Get the cursor appropriate for a drawing mode.

    Args:
        mode: GestureMode

    Returns:
        CursorKind (DEFAULT for NONE)
    """
    return _CURSORS.get(mode, CursorKind.DEFAULT)


# (instruction, object) pairs shown to the user when a shape is requested
_INSTRUCTIONS = {
    GestureMode.POINT: ("Single click", "point"),
    GestureMode.LINE: ("Click and drag", "line"),
    GestureMode.POLYLINE: ("Click each point then double-click", "line segments"),
    GestureMode.BOX_ZOOM: ("Click and drag", "zoom rectangle"),
    GestureMode.BOX: ("Click and drag", "rectangle"),
    GestureMode.CIRCLE: ("Click and drag", "circle"),
    GestureMode.GENERAL_PATH: ("Click and drag", "line path"),
    GestureMode.IMAGE_TRANSLATE: ("Click and drag", "image translation"),
    GestureMode.IMAGE_ROTATE: ("Click and drag", "image rotation"),
}


def instruction_for(mode, verb="specify", purpose=None):
    """Build the short prompt telling the user how to draw for a mode.

    Args:
        mode: GestureMode
        verb: action word, e.g. "specify" or "draw"
        purpose: optional qualifier such as "survey" or "annotation"

    Returns:
        str, or None when the mode needs no prompt (NONE, IMAGE)
    """
    entry = _INSTRUCTIONS.get(mode)
    if entry is None:
        return None
    action, target = entry
    qualifier = f"{purpose} " if purpose else ""
    return f"{action} to {verb} the {qualifier}{target}"


@dataclass
class GestureSession:
    """Ephemeral state for the gesture in progress.

    Replaces the set of loose fields the handlers used to share. A fresh
    session is idle: nothing is being dragged and no feedback is drawn.
    """
    active: bool = False
    dragging: bool = False
    base_point: Optional[Vec2] = None
    transient_shape: Any = None  # shape currently drawn as feedback
    polyline_path: Optional[List[Vec2]] = None
    polyline_started: bool = False
    initial_affine: Any = None  # QTransform snapshot for image transform modes

    def clear_gesture(self):
        """Drop everything belonging to the current gesture, keep `active`."""
        self.dragging = False
        self.base_point = None
        self.transient_shape = None
        self.polyline_path = None
        self.polyline_started = False
        self.initial_affine = None
