"""
Open an image, display it and wait for a key press.

    binarizer-show [PATH]
"""

import argparse
import sys

from .common import DEFAULT_INPUT, configure_logging
from ..pipeline.image_viewer import view_image


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Display an image until a key is pressed")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT,
                        help=f"Image to open (default: {DEFAULT_INPUT})")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    configure_logging()
    args = parse_args(argv)
    return 0 if view_image(args.path) else 1


if __name__ == "__main__":
    sys.exit(main())
