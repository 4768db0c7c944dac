"""
Image View Panel - Image display with light-table driven zoom and pan

Components:
- ImagePanel: paints a QImage through an affine transform (TransformableImage)
- ImageViewPanel: ImagePanel wrapped in a LightTable with view modes
  (box zoom, pan, translate, rotate) and wheel magnification
"""

import logging
from enum import Enum

from PyQt5.QtWidgets import QWidget, QVBoxLayout
from PyQt5.QtCore import pyqtSignal
from PyQt5.QtGui import QPainter, QColor, QTransform

from constants import VIEW_BACKGROUND_COLOR, WHEEL_MAGNIFY_STEP
from models.gesture import GestureMode
from models.shapes import RectShape, LineShape
from models.transformable import TransformableImage
from components.light_table import LightTable
from utils.geometry import pre_concatenate

logger = logging.getLogger(__name__)


class ViewMode(Enum):
	"""Interaction modes offered by the image view"""
	NOOP = 'noop'
	ZOOM = 'zoom'
	PAN = 'pan'
	TRANSLATE = 'translate'
	ROTATE = 'rotate'


_GESTURE_MODES = {
	ViewMode.ZOOM: GestureMode.BOX_ZOOM,
	ViewMode.PAN: GestureMode.IMAGE,
	ViewMode.TRANSLATE: GestureMode.IMAGE_TRANSLATE,
	ViewMode.ROTATE: GestureMode.IMAGE_ROTATE,
}


def _about_center(transform, center_x, center_y):
	"""Conjugate a transform so it acts about (center_x, center_y)"""
	return QTransform.fromTranslate(-center_x, -center_y) * transform * QTransform.fromTranslate(center_x, center_y)


class ImagePanel(TransformableImage, QWidget):
	"""Widget painting an image through an image-to-panel affine transform"""

	def __init__(self, parent=None):
		super().__init__(parent)
		self.image = None
		self._affine = QTransform()
		self.background = QColor(*VIEW_BACKGROUND_COLOR)

	def has_image(self):
		return self.image is not None and not self.image.isNull()

	def set_image(self, image):
		"""Show a new QImage (or None) fitted to the panel"""
		self.image = image
		self.reset_transform()

	def image_affine(self):
		return QTransform(self._affine)

	def set_image_affine(self, transform):
		self._affine = QTransform(transform)
		self.update()

	def reset_transform(self):
		"""Fit the whole image in the panel, centred, keeping its aspect ratio"""
		if not self.has_image() or self.width() <= 0 or self.height() <= 0:
			self.set_image_affine(QTransform())
			return

		image_w, image_h = self.image.width(), self.image.height()
		scale = min(self.width() / image_w, self.height() / image_h)
		offset_x = (self.width() - image_w * scale) / 2
		offset_y = (self.height() - image_h * scale) / 2
		self.set_image_affine(QTransform.fromScale(scale, scale) * QTransform.fromTranslate(offset_x, offset_y))

	def resizeEvent(self, event):
		self.reset_transform()
		super().resizeEvent(event)

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.fillRect(self.rect(), self.background)
		if self.has_image():
			painter.setRenderHint(QPainter.SmoothPixmapTransform)
			painter.setTransform(self._affine)
			painter.drawImage(0, 0, self.image)
		painter.end()


class ImageViewPanel(QWidget):
	"""Image panel with a light table on top for interactive zoom and pan.

	Completed light table gestures are turned into changes of the image
	transform according to the current view mode.
	"""

	# Signals
	transformChanged = pyqtSignal()  # Emitted when a gesture or wheel changed the view

	def __init__(self, parent=None):
		super().__init__(parent)
		self.image_panel = ImagePanel()
		self.light_table = LightTable(self.image_panel, mode=GestureMode.NONE)
		self.light_table.add_completion_listener(self._on_shape_completed)
		self.light_table.wheelZoomed.connect(self._on_wheel_zoomed)
		self.view_mode = ViewMode.NOOP
		self.input_enabled = True

		layout = QVBoxLayout(self)
		layout.setContentsMargins(0, 0, 0, 0)
		layout.addWidget(self.light_table)

	# ========================================
	# Image and view mode
	# ========================================

	def set_image(self, image):
		"""Display an image, fitted to the panel.

		The light table is off while the image is swapped and comes back on
		for the current view mode once an image is present.
		"""
		self.light_table.set_active(False)
		self.image_panel.set_image(image)
		self._update_activation()

	def set_view_mode(self, mode):
		"""Select how pointer gestures act on the image"""
		if mode is not ViewMode.NOOP:
			self.light_table.set_mode(_GESTURE_MODES[mode])
		else:
			self.light_table.set_mode(GestureMode.NONE)
		self.view_mode = mode
		self._update_activation()

	def set_input_enabled(self, enabled):
		"""Allow or block pointer gestures regardless of the view mode"""
		self.input_enabled = bool(enabled)
		self._update_activation()

	def _update_activation(self):
		ready = (self.input_enabled and self.view_mode is not ViewMode.NOOP
			and self.image_panel.has_image())
		self.light_table.set_active(ready)

	# ========================================
	# Transform operations
	# ========================================

	def _panel_center(self):
		return (self.image_panel.width() - 1) / 2, (self.image_panel.height() - 1) / 2

	def magnify(self, factor):
		"""Scale the view about the panel centre"""
		center_x, center_y = self._panel_center()
		scale = _about_center(QTransform.fromScale(factor, factor), center_x, center_y)
		self._apply(scale)

	def reset(self):
		"""Fit the whole image in the panel again"""
		self.image_panel.reset_transform()
		self.transformChanged.emit()

	def zoom_to_box(self, box):
		"""Bring a panel-space rectangle to the centre and fill the panel with it.

		Empty boxes are ignored.
		"""
		if box.is_empty:
			return
		logger.debug(f"Zoom to box {box}")
		box_center = box.center
		center_x, center_y = self._panel_center()
		scale = min(self.image_panel.width() / box.width, self.image_panel.height() / box.height)
		zoom = (QTransform.fromTranslate(-box_center.x, -box_center.y)
			* QTransform.fromScale(scale, scale)
			* QTransform.fromTranslate(center_x, center_y))
		self._apply(zoom)

	def pan(self, dx, dy):
		self._apply(QTransform.fromTranslate(dx, dy))

	def _apply(self, transform):
		affine = pre_concatenate(self.image_panel.image_affine(), transform)
		self.image_panel.set_image_affine(affine)
		self.transformChanged.emit()

	# ========================================
	# Light table callbacks
	# ========================================

	def _on_shape_completed(self, shape):
		if self.view_mode is ViewMode.ZOOM and isinstance(shape, RectShape):
			self.zoom_to_box(shape)
		elif self.view_mode is ViewMode.PAN and isinstance(shape, LineShape):
			self.pan(shape.p2.x - shape.p1.x, shape.p2.y - shape.p1.y)
		elif self.view_mode in (ViewMode.TRANSLATE, ViewMode.ROTATE):
			# Affine already pushed live during the drag
			self.transformChanged.emit()

	def _on_wheel_zoomed(self, point, notches):
		if self.image_panel.has_image():
			self.magnify(WHEEL_MAGNIFY_STEP ** notches)
