"""Gesture engine - mode-dependent pointer gesture state machine.

The engine turns clamped pointer positions into shapes. It knows nothing
about Qt widgets: everything it needs from the surface it is attached to
goes through a GestureTarget (component size, the transformable image,
repaint requests), which keeps the state machine testable without a
window system.

Protocols:
- Simple modes (everything but POLYLINE): press -> drag* -> release
- POLYLINE: click (start) -> move* / click (append)* -> double or right click
"""

import logging

from constants import CROSSHAIR_RADIUS
from models.gesture import GestureMode, GestureSession
from models.shapes import (
    Vec2, LineShape, RectShape, CircleShape, PolylineShape, CrosshairShape
)
from utils.geometry import clamp_point, rotation_angle, rotate_affine, translate_affine

logger = logging.getLogger(__name__)


class InvalidModeError(ValueError):
    """Raised when a mode is selected that the base component cannot support."""


class GestureTarget:
    """Mixin for the surface a GestureEngine drives.

    Expected methods (implemented by the main class):
    - component_size() -> (width, height) of the base component
    Optional overrides (defaults do nothing):
    - transformable_component() -> TransformableImage or None
    - move_component(dx, dy): offset the base component on screen
    - restore_component_bounds(): snap the base component back in place
    - repaint_feedback(): redraw the rubber-band layer
    - repaint_component(): redraw the base component
    """

    def component_size(self):
        raise NotImplementedError(f"{type(self).__name__} must implement component_size()")

    def transformable_component(self):
        return None

    def move_component(self, dx, dy):
        pass

    def restore_component_bounds(self):
        pass

    def repaint_feedback(self):
        pass

    def repaint_component(self):
        pass


def construct_shape(mode, p1, p2, crosshair_radius=CROSSHAIR_RADIUS):
    """Build the rubber-band feedback shape for a mode.

    Args:
        mode: GestureMode
        p1: Base point (where the drag started)
        p2: Current point
        crosshair_radius: Radius of the point-pick glyph

    Returns:
        Shape value, or None for modes without drawn feedback
    """
    if mode is GestureMode.POINT:
        return CrosshairShape.around(p2, crosshair_radius)
    if mode in (GestureMode.LINE, GestureMode.POLYLINE):
        return LineShape(p1, p2)
    if mode in (GestureMode.BOX, GestureMode.BOX_ZOOM):
        return RectShape.from_corners(p1, p2)
    if mode is GestureMode.CIRCLE:
        return CircleShape(p1, p1.distance(p2))
    # GENERAL_PATH and the image modes: the component itself is the feedback
    return None


def construct_user_shape(mode, p1, p2):
    """Build the shape reported to listeners when a simple gesture finishes.

    Differs from the feedback shape for POINT (degenerate line at p2) and for
    the path/image modes (press -> release line summarising the movement).
    """
    if mode is GestureMode.POINT:
        return LineShape(p2, p2)
    if mode in (GestureMode.GENERAL_PATH, GestureMode.IMAGE,
                GestureMode.IMAGE_TRANSLATE, GestureMode.IMAGE_ROTATE):
        return LineShape(p1, p2)
    return construct_shape(mode, p1, p2)


class GestureEngine:
    """State machine behind the light table.

    All entry points take raw component pixel positions, clamp them, and
    silently ignore events that do not fit the current state (stray
    releases, a second press mid-drag, input while inactive).
    """

    def __init__(self, target, mode=GestureMode.POINT):
        self.target = target
        self.session = GestureSession()
        self._mode = GestureMode.NONE
        self._listeners = []
        self.last_shape = None
        self.set_mode(mode)

    # ========================================
    # Configuration
    # ========================================

    @property
    def mode(self):
        return self._mode

    def set_mode(self, mode):
        """Select the gesture protocol.

        A gesture in progress is aborted first (listeners are not notified).

        Raises:
            InvalidModeError: mode needs a TransformableImage the target lacks
        """
        if mode.needs_transformable and self.target.transformable_component() is None:
            logger.warning("Rejected mode %s: component is not transformable", mode.name)
            raise InvalidModeError(f"Component is not transformable, cannot use {mode.name}")
        if mode is not self._mode:
            self.abort()
        self._mode = mode

    @property
    def active(self):
        return self.session.active

    def set_active(self, flag):
        """Enable or disable event handling; deactivating aborts any gesture."""
        if not flag:
            self.abort()
        self.session.active = bool(flag)

    @property
    def in_progress(self):
        return self.session.dragging

    def add_listener(self, listener):
        """Register a callable invoked with each completed shape."""
        self._listeners.append(listener)

    def remove_listener(self, listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def point(self, x, y):
        """Clamp a raw position to the base component."""
        width, height = self.target.component_size()
        return clamp_point(x, y, width, height)

    # ========================================
    # Simple press/drag/release modes
    # ========================================

    def press(self, x, y):
        if self._accepts_simple():
            self._start(self.point(x, y))

    def drag(self, x, y):
        if self._accepts_simple():
            self._update(self.point(x, y))

    def release(self, x, y):
        """Finish a simple gesture.

        Returns:
            The completed shape, or None if nothing was being drawn
        """
        if self._accepts_simple():
            return self._finish(self.point(x, y))
        return None

    # ========================================
    # Polyline click/click/click mode
    # ========================================

    def click(self, x, y, click_count=1, right_button=False):
        """Handle a click in POLYLINE mode.

        The first click starts the path, plain clicks append vertices, and a
        double click or right click finishes it.

        Returns:
            The completed PolylineShape, or None while still building
        """
        if not self._accepts_poly():
            return None
        p = self.point(x, y)
        if not self.session.polyline_started:
            self._start_poly(p)
            return None
        if click_count >= 2 or right_button:
            return self._finish_poly(p)
        self._append_poly(p)
        return None

    def move(self, x, y):
        """Pointer moved in POLYLINE mode: update the candidate segment."""
        if self._accepts_poly() and self.session.polyline_started:
            self._update(self.point(x, y))

    # ========================================
    # Abort
    # ========================================

    def abort(self):
        """Drop the gesture in progress without notifying listeners.

        The image modes put the component back the way it was when the
        gesture started.

        Returns:
            True if a gesture was aborted
        """
        s = self.session
        if not (s.dragging or s.polyline_started):
            return False

        if self._mode is GestureMode.IMAGE:
            self.target.restore_component_bounds()
            self.target.repaint_component()
        elif self._mode.needs_transformable and s.initial_affine is not None:
            component = self.target.transformable_component()
            if component is not None:
                component.set_image_affine(s.initial_affine)
                self.target.repaint_component()

        s.clear_gesture()
        self.target.repaint_feedback()
        logger.debug("Aborted %s gesture", self._mode.name)
        return True

    # ========================================
    # State transitions
    # ========================================

    def _accepts_simple(self):
        return self.session.active and self._mode is not GestureMode.NONE and not self._mode.is_poly

    def _accepts_poly(self):
        return self.session.active and self._mode.is_poly

    def _start(self, p):
        s = self.session
        if s.dragging:
            return

        self.last_shape = None
        if not self._mode.is_image:
            s.transient_shape = construct_shape(self._mode, p, p)
        if self._mode.needs_transformable:
            s.initial_affine = self.target.transformable_component().image_affine()

        s.base_point = p
        s.dragging = True
        self.target.repaint_feedback()
        logger.debug("Started %s gesture at (%s, %s)", self._mode.name, p.x, p.y)

    def _update(self, p):
        s = self.session
        if not s.dragging:
            return

        base = s.base_point
        dx = p.x - base.x
        dy = p.y - base.y

        if self._mode is GestureMode.IMAGE:
            # Move the whole component with the pointer
            self.target.move_component(dx, dy)
            self.target.repaint_component()

        elif self._mode is GestureMode.IMAGE_TRANSLATE:
            affine = translate_affine(dx, dy, s.initial_affine)
            self.target.transformable_component().set_image_affine(affine)
            self.target.repaint_component()

        elif self._mode is GestureMode.IMAGE_ROTATE:
            width, height = self.target.component_size()
            center = Vec2(width // 2, height // 2)
            theta = rotation_angle(center, base, p)
            affine = rotate_affine(theta, center, s.initial_affine)
            self.target.transformable_component().set_image_affine(affine)
            self.target.repaint_component()

        else:
            s.transient_shape = construct_shape(self._mode, base, p)
            self.target.repaint_feedback()

    def _finish(self, p):
        s = self.session
        if not s.dragging:
            return None

        shape = construct_user_shape(self._mode, s.base_point, p)

        if self._mode is GestureMode.IMAGE:
            self.target.restore_component_bounds()
            self.target.repaint_component()

        s.clear_gesture()
        self.target.repaint_feedback()
        return self._complete(shape)

    def _start_poly(self, p):
        self._start(p)
        self.session.polyline_path = [p]
        self.session.polyline_started = True

    def _append_poly(self, p):
        s = self.session
        s.polyline_path.append(p)
        s.base_point = p
        s.transient_shape = LineShape(p, p)
        self.target.repaint_feedback()

    def _finish_poly(self, p):
        s = self.session
        if s.polyline_path[-1] != p:
            s.polyline_path.append(p)
        shape = PolylineShape(tuple(s.polyline_path))

        s.clear_gesture()
        self.target.repaint_feedback()
        return self._complete(shape)

    def _complete(self, shape):
        self.last_shape = shape
        logger.debug("Completed %s gesture: %s", self._mode.name, shape)
        for listener in list(self._listeners):
            listener(shape)
        return shape
