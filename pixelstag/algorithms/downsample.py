"""
Index mapped downsampling for images and color sequences.

Every target sample is an exact copy of one source sample, no interpolation
takes place. See :func:`pixelstag.algorithms.axis.sample_indices` for the
mapping.
"""

from __future__ import annotations

import logging
from typing import overload

import numpy as np

from pixelstag.color import SUPPORTED_CHANNEL_COUNTS, ColorSequence, ColorSequenceTypes
from pixelstag.errors import require
from pixelstag.image import Image

from .axis import sample_indices

logger = logging.getLogger(__name__)


def downsample_image(image: Image, width: int, height: int) -> Image:
    """
    Resamples an image to ``width`` x ``height`` pixels.

    Corner pixels are preserved exactly. A target width or height of 1
    samples the source's middle column or row. Targets larger than the source
    are valid and repeat source pixels.

    :param image: The source image
    :param width: The target width, at least 1
    :param height: The target height, at least 1
    :return: The new image with the same channel count and element type
    """
    require(width > 0 and height > 0, "Invalid target size %dx%d", width, height)
    require(
        image.width > 0 and image.height > 0,
        "Invalid image size %dx%d",
        image.width,
        image.height,
    )
    require(
        image.channels in SUPPORTED_CHANNEL_COUNTS,
        "Downsample supports 1 or 3 channels, got %d",
        image.channels,
    )
    logger.debug(
        "Downsampling %dx%d image to %dx%d", image.width, image.height, width, height
    )
    rows = sample_indices(height, image.height)
    columns = sample_indices(width, image.width)
    pixels = image.pixels[np.ix_(rows, columns)]
    return Image.from_array(pixels, copy=False)


def downsample_colors(colors: ColorSequenceTypes, count: int) -> ColorSequence:
    """
    Reduces a color sequence to ``count`` colors.

    The first and last color are preserved. This is a reduction only: if
    ``count`` is not smaller than the sequence's length the colors are
    returned unchanged.

    :param colors: The source colors
    :param count: The target length. Non-positive values yield an empty list,
        1 yields the middle color.
    :return: A new list of colors
    """
    if count <= 0 or len(colors) == 0:
        return []
    if count >= len(colors):
        return list(colors)
    logger.debug("Downsampling %d colors to %d", len(colors), count)
    return [colors[int(index)] for index in sample_indices(count, len(colors))]


@overload
def downsample(source: Image, width: int, height: int) -> Image: ...


@overload
def downsample(source: ColorSequenceTypes, count: int) -> ColorSequence: ...


def downsample(source, *size):
    """
    Downsamples an :class:`Image` to (width, height) or a color sequence to
    a given number of colors.

    See :func:`downsample_image` and :func:`downsample_colors`.

    :param source: The image or color sequence
    :param size: ``width, height`` for images, ``count`` for color sequences
    :return: The resampled copy, of the same type as ``source``
    """
    if isinstance(source, Image):
        require(len(size) == 2, "Images are downsampled to (width, height)")
        return downsample_image(source, *size)
    require(len(size) == 1, "Color sequences are downsampled to a single count")
    return downsample_colors(source, size[0])
