from pathlib import Path

import cv2
import numpy as np
import pytest

DARK = 30
LIGHT = 220


def write_jpeg(path: Path, bgr: np.ndarray) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    assert cv2.imwrite(str(path), bgr, [cv2.IMWRITE_JPEG_QUALITY, 100])
    return path


def two_tone_pixels(size: int = 32) -> np.ndarray:
    """Gray BGR image: left half DARK, right half LIGHT (8x8-block aligned)."""
    bgr = np.full((size, size, 3), DARK, dtype=np.uint8)
    bgr[:, size // 2:] = LIGHT
    return bgr


@pytest.fixture
def two_tone_jpg(tmp_path) -> Path:
    return write_jpeg(tmp_path / "pics" / "plate.jpg", two_tone_pixels())


@pytest.fixture
def gradient_jpg(tmp_path) -> Path:
    row = np.linspace(0, 255, 64).astype(np.uint8)
    gray = np.tile(row, (48, 1))
    return write_jpeg(tmp_path / "pics" / "gradient.jpeg", cv2.merge([gray, gray, gray]))


@pytest.fixture
def gui_calls(monkeypatch):
    """Replace HighGUI calls with recorders; returns the list of recorded calls."""
    calls = []

    monkeypatch.setattr(cv2, "namedWindow", lambda name, flags=None: calls.append(("namedWindow", name)))
    monkeypatch.setattr(cv2, "imshow", lambda name, frame: calls.append(("imshow", name, frame)))
    monkeypatch.setattr(cv2, "waitKey", lambda delay=0: calls.append(("waitKey", delay)) or 32)
    monkeypatch.setattr(cv2, "destroyAllWindows", lambda: calls.append(("destroyAllWindows",)))
    return calls


def otsu_reference(gray: np.ndarray) -> int:
    """Plain histogram Otsu: first cut point maximising between-class variance."""
    hist = np.bincount(gray.ravel(), minlength=256).astype(np.float64)
    total = hist.sum()
    levels = np.arange(256, dtype=np.float64)
    sum_all = float(np.dot(levels, hist))

    best_t, best_sigma = 0, -1.0
    w0 = sum0 = 0.0
    for t in range(256):
        w0 += hist[t]
        sum0 += t * hist[t]
        w1 = total - w0
        if w0 == 0 or w1 == 0:
            continue
        mu0 = sum0 / w0
        mu1 = (sum_all - sum0) / w1
        sigma = w0 * w1 * (mu0 - mu1) ** 2
        if sigma > best_sigma:
            best_t, best_sigma = t, sigma
    return best_t
