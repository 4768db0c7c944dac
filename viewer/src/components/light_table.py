"""
Light Table - Drawing surface overlay for an arbitrary base component

Places an invisible drawing table on top of another widget so it becomes a
drawing surface:
- Transparent glass pane that captures pointer events while active
- Rubber-band feedback for the current drawing mode
- Completed shapes reported to listeners and via a signal
- Direct pan/rotate of a TransformableImage in the image modes
- Every captured pointer event is also forwarded to the base component
"""

import logging

from PyQt5.QtWidgets import QWidget, QApplication
from PyQt5.QtCore import Qt, QEvent, QPointF, QRectF, QTimer, pyqtSignal
from PyQt5.QtGui import QPainter, QPainterPath, QPen, QColor, QMouseEvent

from constants import (
	LINE_STROKE_WIDTH, SHADOW_STROKE_WIDTH, LINE_COLOR, SHADOW_COLOR,
	OUT_ZOOM_COLOR, WHEEL_ZOOM_DELAY_MS, WHEEL_NOTCH_UNITS
)
from models.gesture import GestureMode, CursorKind, cursor_for
from models.shapes import PolylineShape
from models.transformable import TransformableImage
from services.gesture_engine import GestureEngine, GestureTarget
from utils.geometry import shape_to_path

logger = logging.getLogger(__name__)

_QT_CURSORS = {
	CursorKind.DEFAULT: Qt.ArrowCursor,
	CursorKind.CROSSHAIR: Qt.CrossCursor,
	CursorKind.MOVE: Qt.SizeAllCursor,
	CursorKind.HAND: Qt.PointingHandCursor,
}


class LightTable(GestureTarget, QWidget):
	"""Container that turns its base component into a drawing surface.

	The base component and the glass pane both fill the table. While
	inactive the glass pane is hidden and the base component receives
	pointer events directly.
	"""

	# Signals
	shapeCompleted = pyqtSignal(object)  # Emitted after listeners with the finished shape
	wheelZoomed = pyqtSignal(QPointF, float)  # Last wheel position, summed notches (+ = away from user)

	def __init__(self, component, parent=None, mode=GestureMode.POINT):
		super().__init__(parent)

		# Gesture state machine, validating the mode before the component is adopted
		self.component = component
		self.engine = GestureEngine(self, mode)

		# Base layer
		self.component.setParent(self)

		# Glass pane floats over the base layer, hidden until activated
		self.glass_pane = _GlassPane(self)
		self.glass_pane.setVisible(False)

		# Wheel rotation accumulator
		self._wheel_total = 0.0
		self._wheel_point = None
		self._wheel_timer = QTimer(self)
		self._wheel_timer.setSingleShot(True)
		self._wheel_timer.setInterval(WHEEL_ZOOM_DELAY_MS)
		self._wheel_timer.timeout.connect(self._fire_wheel_zoom)

		self._apply_cursor()
		self._layout_children()

	def resizeEvent(self, event):
		"""Keep base layer and glass pane covering the table"""
		self._layout_children()
		super().resizeEvent(event)

	def _layout_children(self):
		self.component.setGeometry(0, 0, self.width(), self.height())
		self.glass_pane.setGeometry(0, 0, self.width(), self.height())
		self.glass_pane.raise_()

	# ========================================
	# Public API
	# ========================================

	def surface_component(self):
		"""Get the component used as the base layer"""
		return self.component

	def is_active(self):
		return self.engine.active

	def set_active(self, active):
		"""Start or stop responding to pointer events.

		Deactivating mid-gesture aborts the gesture without notification.
		"""
		self.engine.set_active(active)
		self.glass_pane.setVisible(bool(active))
		if active:
			self.glass_pane.raise_()
		else:
			self._reset_wheel()

	def mode(self):
		return self.engine.mode

	def set_mode(self, mode):
		"""Set the drawing mode.

		Raises:
			InvalidModeError: IMAGE_TRANSLATE/IMAGE_ROTATE over a component
				that is not a TransformableImage
		"""
		self.engine.set_mode(mode)
		self._apply_cursor()

	@staticmethod
	def cursor_for(mode):
		"""Cursor kind for a drawing mode (no state involved)"""
		return cursor_for(mode)

	def qt_cursor(self):
		"""Qt cursor shape for the current drawing mode"""
		return _QT_CURSORS[cursor_for(self.engine.mode)]

	def add_completion_listener(self, listener):
		"""Add a callable invoked with each finished shape"""
		self.engine.add_listener(listener)

	def remove_completion_listener(self, listener):
		self.engine.remove_listener(listener)

	def last_shape(self):
		"""Get the most recently completed shape, or None.

		The shape type depends on the mode that produced it:
		POINT, LINE, GENERAL_PATH, IMAGE* -> LineShape; POLYLINE ->
		PolylineShape; BOX, BOX_ZOOM -> RectShape; CIRCLE -> CircleShape.
		"""
		return self.engine.last_shape

	def abort_gesture(self):
		"""Drop the gesture in progress without notifying listeners"""
		return self.engine.abort()

	@property
	def session(self):
		return self.engine.session

	# ========================================
	# GestureTarget
	# ========================================

	def component_size(self):
		return self.component.width(), self.component.height()

	def transformable_component(self):
		if isinstance(self.component, TransformableImage):
			return self.component
		return None

	def move_component(self, dx, dy):
		self.component.move(int(dx), int(dy))

	def restore_component_bounds(self):
		self.component.setGeometry(0, 0, self.width(), self.height())

	def repaint_feedback(self):
		self.glass_pane.update()

	def repaint_component(self):
		self.component.update()

	# ========================================
	# Internal
	# ========================================

	def _apply_cursor(self):
		self.glass_pane.setCursor(self.qt_cursor())

	def _emit_completed(self, shape):
		if shape is not None:
			self.shapeCompleted.emit(shape)

	def _accumulate_wheel(self, event):
		"""Sum wheel rotation until the wheel has been idle for a moment"""
		delta = event.angleDelta().y()
		if delta == 0:
			return
		self._wheel_total += delta / WHEEL_NOTCH_UNITS
		self._wheel_point = QPointF(event.pos())
		self._wheel_timer.start()

	def _fire_wheel_zoom(self):
		point, total = self._wheel_point, self._wheel_total
		self._reset_wheel()
		if point is not None and total != 0:
			logger.debug("Wheel zoom %.2f notches at (%s, %s)", total, point.x(), point.y())
			self.wheelZoomed.emit(point, total)

	def _reset_wheel(self):
		self._wheel_timer.stop()
		self._wheel_total = 0.0
		self._wheel_point = None


class _GlassPane(QWidget):
	"""Transparent panel drawn over the base component.

	Receives pointer events while the table is active, feeds them to the
	gesture engine, forwards them to the base component, and paints the
	rubber-band feedback.
	"""

	def __init__(self, table):
		super().__init__(table)
		self.table = table
		self.setAttribute(Qt.WA_NoSystemBackground)
		self.setAttribute(Qt.WA_TranslucentBackground)
		self.setMouseTracking(True)  # Polyline candidate segment follows the pointer
		self.setFocusPolicy(Qt.ClickFocus)

		# Qt delivers press, release, double-click, release: the release that
		# trails a polyline-finishing double-click must not start a new one.
		# Cleared on the next press in case no trailing release arrives.
		self._suppress_release = False

	# ========================================
	# Pointer events
	# ========================================

	def mousePressEvent(self, event):
		self._forward(event)
		self._suppress_release = False
		if event.button() == Qt.LeftButton:
			self.table.engine.press(event.x(), event.y())
		event.accept()

	def mouseMoveEvent(self, event):
		self._forward(event)
		engine = self.table.engine
		if engine.mode.is_poly:
			engine.move(event.x(), event.y())
		elif event.buttons() & Qt.LeftButton:
			engine.drag(event.x(), event.y())
		event.accept()

	def mouseReleaseEvent(self, event):
		self._forward(event)
		if self._suppress_release:
			self._suppress_release = False
			event.accept()
			return

		engine = self.table.engine
		shape = None
		if engine.mode.is_poly:
			if event.button() in (Qt.LeftButton, Qt.RightButton):
				shape = engine.click(event.x(), event.y(),
					right_button=(event.button() == Qt.RightButton))
		elif event.button() == Qt.LeftButton:
			shape = engine.release(event.x(), event.y())
		self.table._emit_completed(shape)
		event.accept()

	def mouseDoubleClickEvent(self, event):
		self._forward(event)
		engine = self.table.engine
		if event.button() != Qt.LeftButton:
			event.accept()
			return

		if engine.mode.is_poly:
			shape = engine.click(event.x(), event.y(), click_count=2)
			self._suppress_release = True
			self.table._emit_completed(shape)
		else:
			# Second press of a double click starts a new drag as usual
			engine.press(event.x(), event.y())
		event.accept()

	def wheelEvent(self, event):
		self.table._accumulate_wheel(event)
		event.accept()

	def enterEvent(self, event):
		QApplication.sendEvent(self.table.component, QEvent(QEvent.Enter))
		super().enterEvent(event)

	def leaveEvent(self, event):
		QApplication.sendEvent(self.table.component, QEvent(QEvent.Leave))
		super().leaveEvent(event)

	def keyPressEvent(self, event):
		if event.key() == Qt.Key_Escape and self.table.abort_gesture():
			event.accept()
			return
		super().keyPressEvent(event)

	def _forward(self, event):
		"""Re-dispatch a pointer event to the base component"""
		component = self.table.component
		canvas_pos = component.mapFromGlobal(self.mapToGlobal(event.pos()))
		canvas_event = QMouseEvent(
			event.type(),
			canvas_pos,
			event.globalPos(),
			event.button(),
			event.buttons(),
			event.modifiers()
		)
		QApplication.sendEvent(component, canvas_event)

	# ========================================
	# Painting
	# ========================================

	def paintEvent(self, event):
		"""Draw the rubber-band feedback"""
		session = self.table.session
		if session.transient_shape is None:
			return

		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)

		shape_path = shape_to_path(session.transient_shape)
		committed_path = None
		if session.polyline_path:
			committed_path = shape_to_path(PolylineShape(tuple(session.polyline_path)))

		# Dim everything outside the zoom box
		if self.table.mode() is GestureMode.BOX_ZOOM:
			outside = QPainterPath()
			outside.addRect(QRectF(self.rect()))
			outside = outside.subtracted(shape_path)
			painter.fillPath(outside, QColor(*OUT_ZOOM_COLOR))

		# Shadow first, then the line on top
		painter.setBrush(Qt.NoBrush)
		for width, color in ((SHADOW_STROKE_WIDTH, SHADOW_COLOR), (LINE_STROKE_WIDTH, LINE_COLOR)):
			painter.setPen(QPen(QColor(*color), width))
			if committed_path is not None:
				painter.drawPath(committed_path)
			painter.drawPath(shape_path)

		painter.end()
