"""
Binarize a JPEG photograph and save ``binary_<stem>.png`` beside it.

    binarizer-threshold [PATH] [--threshold N] [--show]

Without --threshold (and without FIXED_THRESHOLD in the environment) the
cut point is chosen with Otsu's method.
"""

import argparse
import sys

from .common import DEFAULT_INPUT, configure_logging, default_threshold
from ..pipeline.binarize_file import binarize_image


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Binarize a JPEG image via global thresholding")
    parser.add_argument("path", nargs="?", default=DEFAULT_INPUT,
                        help=f"JPEG image to binarize (default: {DEFAULT_INPUT})")
    parser.add_argument("--threshold", type=float, default=None,
                        help="Fixed 0-255 threshold; Otsu is used when omitted")
    parser.add_argument("--show", action="store_true",
                        help="Display the original and the annotated result")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    configure_logging()
    args = parse_args(argv)
    threshold = args.threshold if args.threshold is not None else default_threshold()

    output = binarize_image(args.path, threshold, show=args.show)
    if output:
        print(f"Success: binary image saved to {output}")
    else:
        print(f"Failure: could not binarize {args.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
