from __future__ import annotations
import logging
import os

import cv2
import numpy as np
from dotenv import load_dotenv

from ..models.binarized_image import BinarizedImage

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

TEXT_OUTLINE = (0, 0, 0)
TEXT_FILL = (50, 230, 50)   # BGR


class DisplayService:
    """
    On-screen rendering through OpenCV HighGUI windows.
    Images larger than the display bounds are shown downscaled.
    """

    def __init__(self, max_width: int | None = None, max_height: int | None = None):
        self.max_width = max_width or int(os.getenv("DISPLAY_MAX_WIDTH", "1280"))
        self.max_height = max_height or int(os.getenv("DISPLAY_MAX_HEIGHT", "720"))

    # ---------- pure helpers ----------
    @staticmethod
    def fit_to_screen(pixels: np.ndarray, max_width: int, max_height: int) -> np.ndarray:
        """
        Shrink *pixels* so that it fits inside max_width x max_height,
        keeping the aspect ratio.  Never upscales.
        """
        height, width = pixels.shape[:2]
        scale = min(1.0, max_width / width, max_height / height)
        if scale >= 1.0:
            return pixels
        new_size = (max(1, int(round(width * scale))), max(1, int(round(height * scale))))
        return cv2.resize(pixels, new_size, interpolation=cv2.INTER_AREA)

    @staticmethod
    def annotate(binarized: BinarizedImage) -> np.ndarray:
        """
        BGR copy of the binary image with the method and cut point written
        in the top-left corner.
        """
        binary = binarized.image.pixels
        out = cv2.cvtColor(binary, cv2.COLOR_GRAY2BGR) if binary.ndim == 2 else binary.copy()

        width = out.shape[1]
        font_scale = max(0.4, width / 1000)
        thickness = max(1, int(round(font_scale * 2)))
        origin = (10, 10 + int(round(25 * font_scale)))

        text = binarized.label
        cv2.putText(out, text, origin, cv2.FONT_HERSHEY_SIMPLEX, font_scale,
                    TEXT_OUTLINE, thickness + 2, cv2.LINE_AA)
        cv2.putText(out, text, origin, cv2.FONT_HERSHEY_SIMPLEX, font_scale,
                    TEXT_FILL, thickness, cv2.LINE_AA)
        return out

    # ---------- windows ----------
    def show(self, window_name: str, pixels: np.ndarray, *, rgb: bool = True) -> None:
        """
        Open (or reuse) *window_name* and draw *pixels* into it.
        RGB color arrays are converted to BGR; gray and BGR arrays are shown as-is.
        """
        frame = cv2.cvtColor(pixels, cv2.COLOR_RGB2BGR) if rgb and pixels.ndim == 3 else pixels
        frame = self.fit_to_screen(frame, self.max_width, self.max_height)
        cv2.namedWindow(window_name, cv2.WINDOW_AUTOSIZE)
        cv2.imshow(window_name, frame)
        logger.debug(f"Showing '{window_name}' at {frame.shape[1]}x{frame.shape[0]}")

    @staticmethod
    def wait_for_key() -> int:
        """Block until a key is pressed, then close every window."""
        key = cv2.waitKey(0)
        cv2.destroyAllWindows()
        return key

    def show_comparison(self, binarized: BinarizedImage) -> int:
        """Original next to the annotated result; blocks for a key press."""
        original = binarized.image.original_pixels
        if original is not None:
            self.show("Original", original)
        self.show("Binary", self.annotate(binarized), rgb=False)
        return self.wait_for_key()
