from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from .image import Image


class ThresholdMethod(str, Enum):
    OTSU = "otsu"
    FIXED = "fixed"


@dataclass
class BinarizedImage:
    """
    Data object containing a binarized Image and how its cut point was chosen.
    Pixels above `threshold` are 255, all others 0.
    """
    image: Image
    threshold: float          # cut point actually used (0-255)
    method: ThresholdMethod   # OTSU or FIXED

    @property
    def label(self) -> str:
        name = "Otsu" if self.method is ThresholdMethod.OTSU else "Fixed"
        return f"{name} T={self.threshold:.0f}"
