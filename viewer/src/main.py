"""
Light Table demo

Usage:
    python main.py [--mode MODE] [--image PATH | --pattern] [-v]

Without an image the light table sits over a plain drawing canvas and every
completed shape is kept on it. With an image (or the generated pattern) the
image view panel is shown and the modes act on the view instead.
"""

import sys
import os
import argparse
import logging

# Add viewer/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt
from PyQt5.QtGui import QPalette, QColor

from constants import DEMO_WINDOW_SIZE
from utils.image_io import load_image, array_to_qimage, checker_pattern
from utils.logger import loggerRaise
from window.demo_window import DemoWindow, DRAWING_MODES, VIEW_MODES, parse_mode

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description='Draw points, lines, boxes and circles on a light table overlay.',
    )
    parser.add_argument(
        '-m', '--mode',
        help='Initial mode (drawing mode, or view mode with an image). '
             'Defaults to the last mode used.',
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '-i', '--image',
        help='Image file to show in the image view.',
    )
    source.add_argument(
        '-p', '--pattern',
        action='store_true',
        help='Show a generated test pattern in the image view.',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose logging.',
    )
    return parser


def apply_dark_palette(app):
    """Use Fusion style with dark palette"""
    app.setStyle("Fusion")

    dark_palette = QPalette()
    dark_palette.setColor(QPalette.Window, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.WindowText, Qt.white)
    dark_palette.setColor(QPalette.Base, QColor(25, 25, 25))
    dark_palette.setColor(QPalette.Text, Qt.white)
    dark_palette.setColor(QPalette.Button, QColor(53, 53, 53))
    dark_palette.setColor(QPalette.ButtonText, Qt.white)
    dark_palette.setColor(QPalette.Highlight, QColor(42, 130, 218))
    dark_palette.setColor(QPalette.HighlightedText, Qt.black)
    app.setPalette(dark_palette)


def main(argv=None):
    """Main entry point for the light table demo"""
    args = build_parser().parse_args(argv)

    # Logging
    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    logger.debug(f"Starting light table demo with {args}")

    app = QApplication(sys.argv[:1])
    apply_dark_palette(app)

    image = None
    if args.image:
        try:
            image = load_image(os.path.abspath(args.image))
        except OSError as e:
            loggerRaise(e, f"Cannot open image: {args.image}")
    elif args.pattern:
        width, height = DEMO_WINDOW_SIZE
        image = array_to_qimage(checker_pattern(width, height))

    mode = None
    if args.mode:
        try:
            mode = parse_mode(args.mode, VIEW_MODES if image is not None else DRAWING_MODES)
        except ValueError as e:
            loggerRaise(e, str(e), title="Invalid mode")

    window = DemoWindow(image=image, mode=mode)
    window.show()
    return app.exec_()


if __name__ == "__main__":
    sys.exit(main())
