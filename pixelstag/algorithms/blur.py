"""
Separable Gaussian blur for images and color sequences.
"""

from __future__ import annotations

import logging
from typing import overload

from pixelstag.color import (
    SUPPORTED_CHANNEL_COUNTS,
    ColorSequence,
    ColorSequenceTypes,
    colors_from_array,
    colors_to_array,
)
from pixelstag.element_type import accumulator_dtype, from_accumulator, to_accumulator
from pixelstag.errors import require
from pixelstag.image import Image

from .axis import convolve_axis
from .kernel import gaussian_kernel

logger = logging.getLogger(__name__)


def blur_image(image: Image, strength: float) -> Image:
    """
    Blurs an image with a Gaussian of standard deviation ``strength``.

    The kernel is applied horizontally into a float buffer and then vertically,
    with clamp-to-edge boundaries on both axes. The result is converted back
    to the image's element type (uint8 is clamped and rounded, other integers
    rounded, floating types stored as they are).

    :param image: The source image, which is not modified
    :param strength: The blur strength (sigma). Non-positive values return
        an unmodified copy.
    :return: The blurred image with the same size, channels and element type
    """
    if not (strength > 0.0):
        logger.debug("Blur strength %g, returning a copy of the image", strength)
        return image.copy()
    require(
        image.width > 0 and image.height > 0,
        "Invalid image size %dx%d",
        image.width,
        image.height,
    )
    require(
        image.channels in SUPPORTED_CHANNEL_COUNTS,
        "Blur supports 1 or 3 channels, got %d",
        image.channels,
    )
    acc_type = accumulator_dtype(image.dtype)
    kernel = gaussian_kernel(strength, acc_type)
    if kernel.is_identity:
        logger.debug("Identity kernel for strength %g, returning a copy of the image", strength)
        return image.copy()
    logger.debug(
        "Blurring %dx%dx%d image, sigma=%g, radius=%d",
        image.width,
        image.height,
        image.channels,
        float(strength),
        kernel.radius,
    )
    # pixels are stored as (row, column, channel)
    horizontal = convolve_axis(to_accumulator(image.pixels, acc_type), kernel, axis=1)
    vertical = convolve_axis(horizontal, kernel, axis=0)
    return Image.from_array(from_accumulator(vertical, image.dtype), copy=False)


def blur_colors(colors: ColorSequenceTypes, strength: float) -> ColorSequence:
    """
    Blurs a sequence of colors along its index with a Gaussian of standard
    deviation ``strength``.

    The first and last color are repeated beyond the sequence's ends. Every
    channel is blurred independently.

    :param colors: The source colors, all with the same channel count
    :param strength: The blur strength (sigma). Non-positive values return
        an unmodified copy.
    :return: A new list of the same length, channel count and element type
    """
    if not (strength > 0.0):
        logger.debug("Blur strength %g, returning a copy of the colors", strength)
        return list(colors)
    if len(colors) == 0:
        return []
    dtype = colors[0].dtype
    acc_type = accumulator_dtype(dtype)
    kernel = gaussian_kernel(strength, acc_type)
    if kernel.is_identity:
        logger.debug("Identity kernel for strength %g, returning a copy of the colors", strength)
        return list(colors)
    require(
        colors[0].channels in SUPPORTED_CHANNEL_COUNTS,
        "Blur supports 1 or 3 channels, got %d",
        colors[0].channels,
    )
    logger.debug(
        "Blurring %d colors, sigma=%g, radius=%d", len(colors), float(strength), kernel.radius
    )
    values = colors_to_array(colors, dtype=acc_type)
    blurred = convolve_axis(values, kernel, axis=0)
    return colors_from_array(from_accumulator(blurred, dtype), dtype=dtype)


@overload
def blur(source: Image, strength: float) -> Image: ...


@overload
def blur(source: ColorSequenceTypes, strength: float) -> ColorSequence: ...


def blur(source, strength):
    """
    Blurs an :class:`Image` or a sequence of colors.

    See :func:`blur_image` and :func:`blur_colors`.

    :param source: The image or color sequence
    :param strength: The blur strength (sigma)
    :return: The blurred copy, of the same type as ``source``
    """
    if isinstance(source, Image):
        return blur_image(source, strength)
    return blur_colors(source, strength)
