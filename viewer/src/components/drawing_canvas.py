"""Plain drawing area that keeps and paints the shapes drawn on it."""

from PyQt5.QtWidgets import QWidget
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPainter, QPen, QColor

from models.shapes import LineShape
from utils.geometry import shape_to_path, to_qpointf


class DrawingCanvas(QWidget):
	"""Base component for the demo: a grid background plus committed shapes"""

	GRID_STEP = 40

	def __init__(self, parent=None):
		super().__init__(parent)
		self.shapes = []
		self.background = QColor(40, 44, 52)
		self.grid_color = QColor(60, 66, 78)
		self.shape_color = QColor(255, 200, 60)

	def add_shape(self, shape):
		"""Keep a completed shape (usable directly as a completion listener)"""
		self.shapes.append(shape)
		self.update()

	def clear_shapes(self):
		self.shapes = []
		self.update()

	def paintEvent(self, event):
		painter = QPainter(self)
		painter.setRenderHint(QPainter.Antialiasing)
		painter.fillRect(self.rect(), self.background)

		painter.setPen(QPen(self.grid_color, 1))
		for x in range(0, self.width(), self.GRID_STEP):
			painter.drawLine(x, 0, x, self.height())
		for y in range(0, self.height(), self.GRID_STEP):
			painter.drawLine(0, y, self.width(), y)

		painter.setBrush(Qt.NoBrush)
		painter.setPen(QPen(self.shape_color, 2))
		for shape in self.shapes:
			if isinstance(shape, LineShape) and shape.is_degenerate:
				# Picked point
				painter.drawEllipse(to_qpointf(shape.p1), 3, 3)
			else:
				painter.drawPath(shape_to_path(shape))
		painter.end()
