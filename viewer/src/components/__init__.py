"""UI components for the light table

- light_table: LightTable drawing surface overlay
- image_view_panel: image display driven by a light table
- mode_toolbar: mode selection toolbar
- drawing_canvas: plain base component for the demo
"""

from .light_table import LightTable
from .image_view_panel import ImagePanel, ImageViewPanel, ViewMode
from .mode_toolbar import ModeToolbar
from .drawing_canvas import DrawingCanvas

__all__ = [
    'LightTable',
    'ImagePanel',
    'ImageViewPanel',
    'ViewMode',
    'ModeToolbar',
    'DrawingCanvas',
]
