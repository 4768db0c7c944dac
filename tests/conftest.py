"""
Shared fixtures for Light Table tests.

Provides fake gesture targets for driving the engine without widgets, and
small Qt helpers for sending pointer events the way the window system would.
"""
import sys
import os
import pytest

# Run Qt headless when no display is available
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')

# Ensure viewer/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'viewer', 'src'))

from PyQt5.QtCore import Qt, QEvent, QPoint
from PyQt5.QtGui import QTransform, QMouseEvent
from PyQt5.QtWidgets import QApplication

from models.transformable import TransformableImage
from services.gesture_engine import GestureEngine, GestureTarget


# ── Fake targets ─────────────────────────────────────────────────────────

class FakeImage(TransformableImage):
    """TransformableImage holding a bare QTransform"""

    def __init__(self):
        self.affine = QTransform()

    def image_affine(self):
        return QTransform(self.affine)

    def set_image_affine(self, transform):
        self.affine = QTransform(transform)


class FakeTarget(GestureTarget):
    """GestureTarget recording what the engine asked of it"""

    def __init__(self, width=100, height=100, image=None):
        self.size = (width, height)
        self.image = image
        self.moves = []
        self.restores = 0
        self.feedback_repaints = 0
        self.component_repaints = 0

    def component_size(self):
        return self.size

    def transformable_component(self):
        return self.image

    def move_component(self, dx, dy):
        self.moves.append((dx, dy))

    def restore_component_bounds(self):
        self.restores += 1

    def repaint_feedback(self):
        self.feedback_repaints += 1

    def repaint_component(self):
        self.component_repaints += 1


@pytest.fixture
def target():
    """100x100 target without an image transform"""
    return FakeTarget()


@pytest.fixture
def image_target():
    """100x100 target whose component is a TransformableImage"""
    return FakeTarget(image=FakeImage())


@pytest.fixture
def make_engine(target):
    """Factory for an active engine in a given mode, collecting completed shapes"""
    def _make(mode, gesture_target=None):
        engine = GestureEngine(gesture_target or target, mode)
        engine.set_active(True)
        engine.completed = []
        engine.add_listener(engine.completed.append)
        return engine
    return _make


# ── Qt event helpers ─────────────────────────────────────────────────────

def send_mouse(widget, event_type, x, y, button=Qt.LeftButton, buttons=None):
    """Deliver a synthetic mouse event straight to a widget"""
    if buttons is None:
        buttons = button if event_type != QEvent.MouseButtonRelease else Qt.NoButton
    pos = QPoint(x, y)
    event = QMouseEvent(event_type, pos, widget.mapToGlobal(pos), button, buttons, Qt.NoModifier)
    QApplication.sendEvent(widget, event)


def drag(widget, start, end, button=Qt.LeftButton):
    """Press at start, move to end with the button held, release at end"""
    send_mouse(widget, QEvent.MouseButtonPress, *start, button=button)
    send_mouse(widget, QEvent.MouseMove, *end, button=Qt.NoButton, buttons=button)
    send_mouse(widget, QEvent.MouseButtonRelease, *end, button=button)


def click(widget, x, y, button=Qt.LeftButton):
    """Press and release at (x, y); unlike QTest, (0, 0) is a real position"""
    send_mouse(widget, QEvent.MouseButtonPress, x, y, button=button)
    send_mouse(widget, QEvent.MouseButtonRelease, x, y, button=button)
