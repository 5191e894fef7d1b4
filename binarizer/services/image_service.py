from __future__ import annotations
from pathlib import Path
from typing import Iterator, Union
import os

import cv2
import numpy as np
from dotenv import load_dotenv

from ..models.image import Image
from ..repositories.image_repository import ImageRepository

# Load environment variables
load_dotenv()


class ImageService:
    """I/O helpers and color-space conversion.  No thresholding here."""
    def __init__(self, image_repository: ImageRepository | None = None):
        self.LOAD_TIMEOUT = int(os.getenv("IMAGE_LOAD_TIMEOUT", "5"))
        self.BINARY_PREFIX = os.getenv("BINARY_PREFIX", "binary_")
        self.image_repository = image_repository or ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: str | Path) -> Image:
        """Load a single image from disk into an Image object (RGB pixels)."""
        return self.image_repository.load(path, timeout=self.LOAD_TIMEOUT)

    def save(self, image: Image) -> None:
        """
        Business-level method to save the image to its path as PNG.
        """
        self.image_repository.save(image)

    def is_supported(self, path: str | Path) -> bool:
        return self.image_repository.has_valid_extension(path)

    def binary_output_path(self, path: str | Path) -> Path:
        """
        Sibling path of *path* named ``<prefix><stem>.png``, e.g.
        pics/car.jpg -> pics/binary_car.png and car.jpg -> binary_car.png.
        """
        path = Path(path)
        return path.parent / f"{self.BINARY_PREFIX}{path.stem}.png"

    def iter_supported_paths(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
    ) -> Iterator[Path]:
        return self.image_repository.iter_paths(folder, recursive=recursive)

    @staticmethod
    def to_grayscale(img_pixels: np.ndarray) -> np.ndarray:
        """
        Luma-weighted conversion (Y = 0.299 R + 0.587 G + 0.114 B).
        Single-channel input is returned unchanged.
        """
        if img_pixels.ndim == 2:
            return img_pixels
        return cv2.cvtColor(img_pixels, cv2.COLOR_RGB2GRAY)

    def apply_pipeline_modification(self, image: Image, new_pixels: np.ndarray) -> None:
        """
        Apply a pipeline modification while preserving original for comparison.
        """
        self.image_repository.update_pixels_preserve_original(image, new_pixels)
