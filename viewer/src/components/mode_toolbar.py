"""Mode toolbar widget with drawing mode selection."""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QComboBox, QLabel, QCheckBox
from PyQt5.QtCore import pyqtSignal

from models.gesture import mode_label


class ModeToolbar(QWidget):
	"""Toolbar with a mode dropdown, an active toggle and an instruction label"""

	mode_changed = pyqtSignal(object)  # Emits the selected mode enum value
	active_toggled = pyqtSignal(bool)

	def __init__(self, modes, parent=None):
		super().__init__(parent)
		self.modes = list(modes)

		layout = QHBoxLayout()
		layout.setContentsMargins(4, 2, 4, 2)
		layout.setSpacing(6)

		# Active toggle
		self.active_check = QCheckBox("Draw")
		self.active_check.setToolTip("Capture pointer input on the drawing surface")
		self.active_check.setChecked(True)
		self.active_check.toggled.connect(self.active_toggled.emit)
		layout.addWidget(self.active_check)

		# Mode dropdown
		self.mode_combo = QComboBox()
		self.mode_combo.setEditable(False)
		self.mode_combo.setMinimumWidth(120)
		for mode in self.modes:
			self.mode_combo.addItem(mode_label(mode), mode)
		self.mode_combo.currentIndexChanged.connect(self._on_combo_changed)
		layout.addWidget(self.mode_combo)

		# What to do in the selected mode
		self.instruction_label = QLabel("")
		layout.addWidget(self.instruction_label, 1)

		self.setLayout(layout)

	def _on_combo_changed(self, index):
		"""Handle combo box selection change"""
		if index >= 0:
			self.mode_changed.emit(self.mode_combo.itemData(index))

	def set_mode(self, mode):
		"""Select a mode (updates combo box without triggering signal)"""
		self.mode_combo.blockSignals(True)
		self.mode_combo.setCurrentIndex(self.modes.index(mode))
		self.mode_combo.blockSignals(False)

	def get_mode(self):
		"""Get the currently selected mode"""
		return self.mode_combo.currentData()

	def set_instruction(self, text):
		self.instruction_label.setText(text or "")
