"""
Image Viewer Pipeline
Opens an image, shows it in a window and waits for a key press.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from ..services.image_service import ImageService
from ..services.display_service import DisplayService

logger = logging.getLogger(__name__)

WINDOW_NAME = "Display"


def view_image(
    path: Union[str, Path],
    *,
    image_service: ImageService | None = None,
    display_service: DisplayService | None = None,
) -> bool:
    """
    Returns:
        bool: False when the image could not be loaded, True once a key
        has been pressed on the window.
    """
    image_service = image_service or ImageService()
    display_service = display_service or DisplayService()

    try:
        img = image_service.load(path)
    except (FileNotFoundError, TimeoutError) as err:
        logger.error(f"Error: Image not found! ({err})")
        return False

    logger.info("Find the image.")
    display_service.show(WINDOW_NAME, img.pixels)
    display_service.wait_for_key()
    return True
