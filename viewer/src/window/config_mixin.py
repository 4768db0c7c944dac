"""Configuration management for the light table demo"""

import os
import json
import logging

from constants import DEFAULT_MODE_NAME
from utils.logger import loggerRaise

logger = logging.getLogger(__name__)


class ConfigMixin:
	"""Configuration file operations

	Expected state variables (initialized in main class):
	- self.config_dir: directory holding the config file
	- self.config_file: path of the JSON config file
	- self.last_mode: name of the last selected mode
	"""

	def _load_config(self):
		"""Load settings from config file, keeping defaults if it is unreadable"""
		self.last_mode = DEFAULT_MODE_NAME
		if not os.path.exists(self.config_file):
			return
		try:
			with open(self.config_file, 'r', encoding='utf-8') as f:
				config = json.load(f)
			self.last_mode = config.get('last_mode', DEFAULT_MODE_NAME)
		except (OSError, ValueError, AttributeError) as e:
			logger.warning(f"Ignoring unreadable config {self.config_file}: {e}")

	def _save_config(self):
		"""Save settings to config file"""
		try:
			os.makedirs(self.config_dir, exist_ok=True)
			config = {
				'last_mode': self.last_mode
			}
			with open(self.config_file, 'w', encoding='utf-8') as f:
				json.dump(config, f, indent=2)
		except OSError as e:
			loggerRaise(e, "Error saving config")
