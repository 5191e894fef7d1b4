from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
import numpy as np


@dataclass
class Image:
    """
    Simple data object: pixels (+ optional path for bookkeeping).
    No OpenCV logic outside the repository/service layer.
    """
    pixels: np.ndarray # Shape (H, W, 3) RGB or (H, W) gray/binary, dtype uint8.
    path: Path | None = None # Source of the image, or its destination once processed.
    original_pixels: np.ndarray | None = None # Decoded pixels kept for before/after display
