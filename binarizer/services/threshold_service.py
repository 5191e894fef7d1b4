from __future__ import annotations
import logging

import cv2
import numpy as np

from ..models.image import Image
from ..models.binarized_image import BinarizedImage, ThresholdMethod
from .image_service import ImageService

logger = logging.getLogger(__name__)

MAX_VALUE = 255


class ThresholdService:
    """
    Global binarization of Image objects.
    *   No I/O here, works only with Image objects.
    *   Output pixels are exactly {0, 255}; a pixel becomes 255 when it is
        strictly greater than the threshold.
    """

    def __init__(self, image_service: ImageService | None = None):
        self.img_svc = image_service or ImageService()

    # ─── Public API ────────────────────────────────────────────────
    def binarize(self, img: Image, threshold: float | None = None) -> BinarizedImage:
        """
        Binarize *img* with Otsu's method, or with *threshold* when given.

        Args:
            img: Color (RGB) or grayscale Image.
            threshold: Fixed cut point in [0, 255]; None selects Otsu.

        Returns:
            BinarizedImage: a new Image (same path, input pixels kept as
            original_pixels) plus the cut point used.
        """
        gray = self.img_svc.to_grayscale(img.pixels)

        if threshold is None:
            used, binary = cv2.threshold(
                gray, 0, MAX_VALUE, cv2.THRESH_BINARY | cv2.THRESH_OTSU
            )
            method = ThresholdMethod.OTSU
        else:
            self._check_threshold(threshold)
            used, binary = cv2.threshold(gray, float(threshold), MAX_VALUE, cv2.THRESH_BINARY)
            method = ThresholdMethod.FIXED

        logger.debug(f"{method.value} threshold {used:.1f} on {gray.shape[1]}x{gray.shape[0]} image")
        # New Image carrying the binary pixels; the input pixels become its original
        result = self.img_svc.create_image(img.pixels, img.path)
        self.img_svc.apply_pipeline_modification(result, binary)

        return BinarizedImage(
            image=result,
            threshold=float(used),
            method=method,
        )

    def otsu_threshold(self, gray: np.ndarray) -> float:
        """Return the cut point Otsu's method picks for a grayscale array."""
        used, _ = cv2.threshold(
            self.img_svc.to_grayscale(gray), 0, MAX_VALUE,
            cv2.THRESH_BINARY | cv2.THRESH_OTSU,
        )
        return float(used)

    # ─── Internal helpers ──────────────────────────────────────────
    @staticmethod
    def _check_threshold(threshold: float) -> None:
        if not 0 <= threshold <= MAX_VALUE:
            raise ValueError(f"threshold must be between 0 and {MAX_VALUE}; got {threshold}")
