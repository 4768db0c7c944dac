"""Image loading for the image view panel.

Files are decoded with Pillow and handed to Qt through a numpy RGBA buffer.
"""

import logging

import numpy as np
from PIL import Image
from PyQt5.QtGui import QImage

logger = logging.getLogger(__name__)


def array_to_qimage(rgba):
	"""Convert an (height, width, 4) uint8 RGBA array to a QImage.

	The returned image owns its pixels (the array can be discarded).
	"""
	rgba = np.ascontiguousarray(rgba, dtype=np.uint8)
	if rgba.ndim != 3 or rgba.shape[2] != 4:
		raise ValueError(f"Expected an RGBA array, got shape {rgba.shape}")
	height, width = rgba.shape[:2]
	image = QImage(rgba.data, width, height, width * 4, QImage.Format_RGBA8888)
	return image.copy()


def load_image(path):
	"""Load an image file as a QImage.

	Raises:
		OSError: file missing or not a readable image
	"""
	img = Image.open(path).convert('RGBA')
	img_data = np.array(img)
	logger.info(f"Loaded image {path} ({img.width}x{img.height})")
	return array_to_qimage(img_data)


def checker_pattern(width, height, cell=32):
	"""Build a checkerboard with a colour gradient, for viewing without a file.

	Returns:
		(height, width, 4) uint8 RGBA array
	"""
	ys, xs = np.mgrid[0:height, 0:width]
	checker = ((xs // cell) + (ys // cell)) % 2
	rgba = np.empty((height, width, 4), dtype=np.uint8)
	rgba[..., 0] = (xs * 255 // max(1, width - 1)).astype(np.uint8)
	rgba[..., 1] = (ys * 255 // max(1, height - 1)).astype(np.uint8)
	rgba[..., 2] = np.where(checker, 200, 60).astype(np.uint8)
	rgba[..., 3] = 255
	return rgba
