"""
Binarize File Pipeline
Loads a JPEG photograph, binarizes it with a global threshold (Otsu or fixed)
and writes ``binary_<stem>.png`` next to it.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from ..models.binarized_image import BinarizedImage
from ..services.image_service import ImageService
from ..services.threshold_service import ThresholdService
from ..services.display_service import DisplayService

logger = logging.getLogger(__name__)


def binarize_image(
    input_path: Union[str, Path],
    threshold: float | None = None,
    *,
    show: bool = False,
    image_service: ImageService | None = None,
    threshold_service: ThresholdService | None = None,
    display_service: DisplayService | None = None,
) -> str:
    """
    Binarize a JPEG file and save the result as a PNG beside it.

    Args:
        input_path: Path to a ``.jpg``/``.jpeg`` file.
        threshold: Fixed cut point in [0, 255]; None selects Otsu.
        show: Display the original and the annotated result, then block
            until a key is pressed.

    Returns:
        str: The written output path, or "" when nothing was written.
    """
    input_path = Path(input_path)

    try:
        image_service = image_service or ImageService()
        threshold_service = threshold_service or ThresholdService(image_service)

        if not image_service.is_supported(input_path):
            logger.error(f"Unsupported file extension '{input_path.suffix}': {input_path}")
            return ""
        if not input_path.is_file():
            logger.error(f"Input image does not exist: {input_path}")
            return ""

        binarized = _run(input_path, threshold, image_service, threshold_service)

        if show:
            (display_service or DisplayService()).show_comparison(binarized)
    except Exception:
        logger.exception(f"Binarization failed for {input_path}")
        return ""

    return str(binarized.image.path)


def _run(
    input_path: Path,
    threshold: float | None,
    image_service: ImageService,
    threshold_service: ThresholdService,
) -> BinarizedImage:
    img = image_service.load(input_path)
    height, width = img.pixels.shape[:2]
    logger.info(f"Loaded {input_path} ({width}x{height})")

    binarized = threshold_service.binarize(img, threshold)
    logger.info(f"Binarized {input_path.name} with {binarized.label}")

    # Retarget the save; the decoded pixels stay on the image for display
    binarized.image.path = image_service.binary_output_path(input_path)

    image_service.save(binarized.image)
    logger.info(f"Saved binary image to {binarized.image.path}")
    return binarized
