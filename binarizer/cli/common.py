from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

DEFAULT_INPUT = os.getenv("INPUT_IMAGE_PATH", "../pics/WechatIMG25.jpg")

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def default_threshold() -> float | None:
    """FIXED_THRESHOLD from the environment, or None for Otsu."""
    value = os.getenv("FIXED_THRESHOLD", "").strip()
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        logger.error(f"Ignoring FIXED_THRESHOLD={value!r}: not a number, using Otsu")
        return None
