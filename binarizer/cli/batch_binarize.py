"""
Binarize every JPEG in a folder.

    binarizer-batch FOLDER [--threshold N] [--recursive]
"""

import argparse
import sys

from .common import configure_logging, default_threshold
from ..pipeline.batch_binarizer import binarize_gallery


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Binarize all JPEG images in a folder")
    parser.add_argument("folder", help="Folder containing .jpg/.jpeg images")
    parser.add_argument("--threshold", type=float, default=None,
                        help="Fixed 0-255 threshold; Otsu is used per image when omitted")
    parser.add_argument("--recursive", action="store_true", help="Include sub-folders")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    configure_logging()
    args = parse_args(argv)
    threshold = args.threshold if args.threshold is not None else default_threshold()

    try:
        written = binarize_gallery(args.folder, threshold, recursive=args.recursive)
    except NotADirectoryError as err:
        print(f"Failure: not a folder: {err}")
        return 0
    except ValueError as err:
        print(f"Failure: bad configuration: {err}")
        return 0

    print(f"Binarized {len(written)} image(s) in {args.folder}")
    for path in written:
        print(f"  {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
