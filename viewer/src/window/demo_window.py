"""
Light Table demo window

Shows a light table over either a plain drawing canvas or an image view,
with a mode toolbar on top and a status bar reporting instructions and
completed shapes.
"""

import os
import logging

from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QStatusBar

from constants import DEMO_WINDOW_SIZE, CONFIG_DIR_NAME, CONFIG_FILE_NAME
from models.gesture import GestureMode, instruction_for
from models.shapes import LineShape, RectShape, CircleShape, PolylineShape
from components.light_table import LightTable
from components.drawing_canvas import DrawingCanvas
from components.image_view_panel import ImageViewPanel, ViewMode
from components.mode_toolbar import ModeToolbar
from utils.logger import set_main_window
from .config_mixin import ConfigMixin

logger = logging.getLogger(__name__)

# Modes offered over the drawing canvas (it carries no image transform)
DRAWING_MODES = [
    GestureMode.POINT, GestureMode.LINE, GestureMode.POLYLINE, GestureMode.BOX,
    GestureMode.BOX_ZOOM, GestureMode.CIRCLE, GestureMode.GENERAL_PATH, GestureMode.IMAGE,
]
VIEW_MODES = [ViewMode.NOOP, ViewMode.ZOOM, ViewMode.PAN, ViewMode.TRANSLATE, ViewMode.ROTATE]


def parse_mode(name, modes):
    """Look up a mode by its value (case-insensitive).

    Raises:
        ValueError: name is not one of the offered modes
    """
    key = str(name).strip().lower()
    for mode in modes:
        if mode.value == key:
            return mode
    choices = ', '.join(mode.value for mode in modes)
    raise ValueError(f"Unknown mode '{name}' (choose from: {choices})")


def describe_shape(shape):
    """One-line human readable summary of a completed shape"""
    if isinstance(shape, LineShape):
        if shape.is_degenerate:
            return f"Point ({shape.p1.x:g}, {shape.p1.y:g})"
        return f"Line ({shape.p1.x:g}, {shape.p1.y:g}) -> ({shape.p2.x:g}, {shape.p2.y:g})"
    if isinstance(shape, RectShape):
        return f"Box at ({shape.x:g}, {shape.y:g}) size {shape.width:g}x{shape.height:g}"
    if isinstance(shape, CircleShape):
        return f"Circle at ({shape.center.x:g}, {shape.center.y:g}) radius {shape.radius:.1f}"
    if isinstance(shape, PolylineShape):
        return f"Polyline with {shape.vertex_count} vertices"
    return repr(shape)


class DemoWindow(ConfigMixin, QMainWindow):
    """Main window of the light table demo.

    With an image the view panel is shown and the toolbar offers view modes;
    otherwise the drawing canvas is shown with the drawing modes.
    """

    def __init__(self, image=None, mode=None, config_dir=None):
        super().__init__()
        self.setWindowTitle("Light Table")
        self.resize(*DEMO_WINDOW_SIZE)

        self.config_dir = config_dir or os.path.join(os.path.expanduser("~"), CONFIG_DIR_NAME)
        self.config_file = os.path.join(self.config_dir, CONFIG_FILE_NAME)
        self._load_config()

        set_main_window(self)

        self.image_view = None
        self.canvas = None
        if image is not None:
            self.image_view = ImageViewPanel()
            self.image_view.set_image(image)
            self.light_table = self.image_view.light_table
            self.modes = VIEW_MODES
            surface = self.image_view
        else:
            self.canvas = DrawingCanvas()
            self.light_table = LightTable(self.canvas)
            self.light_table.add_completion_listener(self.canvas.add_shape)
            self.modes = DRAWING_MODES
            surface = self.light_table

        self.light_table.shapeCompleted.connect(self._on_shape_completed)

        self.setup_ui(surface)
        self.set_mode(mode if mode is not None else self._initial_mode())
        if self.image_view is None:
            self.light_table.set_active(True)

    # ============= UI Setup =============

    def setup_ui(self, surface):
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self.toolbar = ModeToolbar(self.modes)
        self.toolbar.mode_changed.connect(self.set_mode)
        if self.image_view is not None:
            self.toolbar.active_toggled.connect(self.image_view.set_input_enabled)
        else:
            self.toolbar.active_toggled.connect(self.light_table.set_active)
        layout.addWidget(self.toolbar)
        layout.addWidget(surface, 1)

        self.setStatusBar(QStatusBar())

    def _initial_mode(self):
        try:
            return parse_mode(self.last_mode, self.modes)
        except ValueError:
            fallback = ViewMode.ZOOM if self.image_view is not None else GestureMode.POINT
            logger.info(f"Stored mode '{self.last_mode}' not available here, using {fallback.value}")
            return fallback

    # ============= Mode handling =============

    def set_mode(self, mode):
        """Switch the drawing or view mode and remember it"""
        if self.image_view is not None:
            self.image_view.set_view_mode(mode)
            gesture_mode = self.light_table.mode()
        else:
            self.light_table.set_mode(mode)
            gesture_mode = mode

        self.toolbar.set_mode(mode)
        self.toolbar.set_instruction(instruction_for(gesture_mode))

        self.last_mode = mode.value
        self._save_config()

    def _on_shape_completed(self, shape):
        message = describe_shape(shape)
        logger.info(f"Shape completed: {message}")
        self.statusBar().showMessage(message)
