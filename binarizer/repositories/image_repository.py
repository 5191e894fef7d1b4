from __future__ import annotations
from pathlib import Path
from typing import Union, Iterable, Iterator
import logging
import os
import signal

import numpy as np
import cv2
from PIL import Image as PILImage
from dotenv import load_dotenv

from ..models.image import Image

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles file I/O and pixel updates for Image entities.
    """
    def __init__(self, valid_exts: Iterable[str] | None = None, png_compression: int | None = None):
        if valid_exts is None:
            valid_exts = os.getenv("VALID_IMAGE_EXTENSIONS", ".jpg,.jpeg").split(",")
        self.VALID_EXTS = {ext.strip().lower() for ext in valid_exts if ext.strip()}
        if png_compression is None:
            png_compression = int(os.getenv("PNG_COMPRESSION_LEVEL", "5"))
        if not 0 <= png_compression <= 9:
            raise ValueError(f"PNG compression level must be in [0, 9]; got {png_compression}")
        self.png_compression = png_compression

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    def has_valid_extension(self, path: Union[str, Path]) -> bool:
        return Path(path).suffix.lower() in self.VALID_EXTS

    @staticmethod
    def load(path: Union[str, Path], rgb: bool = True, timeout: int = 5) -> Image:
        """
        Decode *path* with OpenCV, RGB order unless rgb=False.

        The SIGALRM timeout cannot interrupt cv2.imread while it is inside
        native code; the handler runs once the call returns, so a decode
        that overran *timeout* raises TimeoutError afterwards instead of
        being cut short.  Main thread only.
        """
        path = Path(path)

        # ─── timeout wrapper (5 s default) ────────────────────────────────
        def _handler(signum, frame):
            raise TimeoutError(f"cv2.imread timed-out after {timeout}s: {path}")

        previous = signal.signal(signal.SIGALRM, _handler)
        signal.alarm(timeout)
        try:
            arr_bgr = cv2.imread(str(path), cv2.IMREAD_COLOR)
        finally:
            signal.alarm(0)  # always disarm
            signal.signal(signal.SIGALRM, previous)
        # ──────────────────────────────────────────────────────────────────

        if arr_bgr is None:
            raise FileNotFoundError(f"Image not found or unreadable: {path}")

        arr = cv2.cvtColor(arr_bgr, cv2.COLOR_BGR2RGB) if rgb else arr_bgr
        return Image(pixels=arr, path=path)

    def save(self, image: Image) -> None:
        """Encode as PNG; the path suffix is not consulted."""
        if image.path is None:
            raise ValueError("Image has no destination path")
        PILImage.fromarray(image.pixels).save(
            image.path, format="PNG", compress_level=self.png_compression
        )

    @staticmethod
    def update_pixels_preserve_original(image: Image, new_pixels: np.ndarray) -> None:
        """Update pixels while preserving original for comparison"""
        if image.original_pixels is None:
            image.original_pixels = image.pixels.copy()
        image.pixels = new_pixels

    def iter_paths(
        self,
        folder: Union[str, Path],
        *,
        recursive: bool = False,
    ) -> Iterator[Path]:
        """
        Yield the files in *folder* whose extension is allowed, in sorted order.
        """
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(folder)

        pattern = "**/*" if recursive else "*"

        for p in sorted(folder.glob(pattern)):
            if not self.has_valid_extension(p):
                logger.debug(f"Skipping due to extension: {p}")
                continue
            if not p.is_file():
                logger.debug(f"Skipping because not file: {p}")
                continue
            yield p
