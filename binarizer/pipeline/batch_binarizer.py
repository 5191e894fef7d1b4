"""
Batch Binarizer Pipeline
Runs the single-file binarizer over every JPEG in a folder.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

from tqdm import tqdm

from ..services.image_service import ImageService
from ..services.threshold_service import ThresholdService
from .binarize_file import binarize_image

logger = logging.getLogger(__name__)


def binarize_gallery(
    folder: Union[str, Path],
    threshold: float | None = None,
    *,
    recursive: bool = False,
    image_service: ImageService | None = None,
    threshold_service: ThresholdService | None = None,
) -> List[str]:
    """
    Binarize each supported image under *folder*, one at a time.

    Args:
        folder: Directory to scan.
        threshold: Fixed cut point for every image; None selects Otsu per image.
        recursive: Descend into sub-directories.

    Returns:
        List[str]: Output paths of the images that were written.
            Failed images are logged and left out.
    """
    image_service = image_service or ImageService()
    threshold_service = threshold_service or ThresholdService(image_service)

    paths = list(image_service.iter_supported_paths(folder, recursive=recursive))
    if not paths:
        logger.warning(f"No supported images found in {folder}")
        return []

    written = []
    for path in tqdm(paths, desc="binarize", ncols=70):
        out = binarize_image(
            path,
            threshold,
            image_service=image_service,
            threshold_service=threshold_service,
        )
        if out:
            written.append(out)

    logger.info(f"Binarized {len(written)}/{len(paths)} images in {folder}")
    return written
