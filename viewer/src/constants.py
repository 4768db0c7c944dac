"""
Light Table - Constants and Configuration

This module contains all constant values used throughout the application:
- Rubber-band feedback styling (strokes and colors)
- Point-pick crosshair geometry
- Wheel zoom timing
- Image view defaults
- Demo application settings
"""

# ======================================================================
# FEEDBACK STYLING
# ======================================================================
# Feedback shapes are drawn twice: a wide translucent shadow, then a thin
# light line on top, so they stay visible over any image content.

LINE_STROKE_WIDTH = 1
SHADOW_STROKE_WIDTH = 3

# RGBA tuples (0-255)
LINE_COLOR = (255, 255, 255, 255)
SHADOW_COLOR = (0, 0, 0, 150)

# Box zoom: area outside the drag rectangle is dimmed
OUT_ZOOM_COLOR = (0, 0, 0, 128)

# ======================================================================
# POINT PICK
# ======================================================================

# Radius of the point selection crosshairs in pixels (gap is radius/2)
CROSSHAIR_RADIUS = 10

# ======================================================================
# WHEEL ZOOM
# ======================================================================

# Wheel events closer together than this are summed into one zoom event
WHEEL_ZOOM_DELAY_MS = 300

# Qt reports wheel rotation in eighths of a degree; one notch is 15 degrees
WHEEL_NOTCH_UNITS = 120

# ======================================================================
# IMAGE VIEW
# ======================================================================

# Magnification per wheel notch in the image view panel
WHEEL_MAGNIFY_STEP = 1.25

# Background behind the image (RGB)
VIEW_BACKGROUND_COLOR = (0, 0, 0)

# ======================================================================
# DEMO APPLICATION
# ======================================================================

DEFAULT_MODE_NAME = 'point'
DEMO_WINDOW_SIZE = (640, 480)
CONFIG_DIR_NAME = '.lighttable'
CONFIG_FILE_NAME = 'config.json'
