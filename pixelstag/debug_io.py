"""
Helpers to write intermediate images to disk while debugging or testing.
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

from .color import ColorSequenceTypes, colors_to_array
from .config import settings
from .image import Image

logger = logging.getLogger(__name__)


def color_bands(*sequences: ColorSequenceTypes, band_height: int = 12) -> Image:
    """
    Renders color sequences as horizontal bands stacked from top to bottom.

    Each color becomes one column of its band. Gray colors are repeated in
    all three channels, shorter sequences leave the remaining columns black.

    :param sequences: The color sequences to draw
    :param band_height: The height of each band in pixels
    :return: A uint8 RGB image
    """
    width = max([len(seq) for seq in sequences] + [1])
    image = Image(width, band_height * max(len(sequences), 1), channels=3)
    for index, seq in enumerate(sequences):
        if len(seq) == 0:
            continue
        values = colors_to_array(seq).astype(np.float64)
        if values.shape[1] == 1:
            values = np.repeat(values, 3, axis=1)
        values = np.clip(np.rint(values), 0, 255).astype(np.uint8)
        top = index * band_height
        image.pixels[top:top + band_height, : len(seq)] = values[np.newaxis, :, :]
    return image


def dump_image(path: str | Path, image: Image) -> Path:
    """
    Stores an image as PNG file, creating missing parent directories.

    :param path: The target file
    :param image: The image. Data other than uint8 is clipped to 0..255.
    :return: The path written
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    image.to_pil().save(path, format="PNG")
    return path


def dump_debug_image(name: str, image: Image) -> Path | None:
    """
    Stores an image in the debug directory if debug dumps are enabled.

    :param name: The file name relative to ``settings.DEBUG_DIR``
    :param image: The image
    :return: The path written or None if dumps are disabled
    """
    if not settings.DEBUG_DUMP:
        return None
    path = dump_image(Path(settings.DEBUG_DIR) / name, image)
    logger.info("Dumped debug image %s", path)
    return path
