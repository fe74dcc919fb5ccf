# PixelStag Filters - Geometric Transforms
"""
Index mapped downsampling filter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pixelstag.algorithms import downsample_colors, downsample_image
from pixelstag.color import Color, ColorSequence
from pixelstag.errors import require
from pixelstag.image import Image

from .base import Filter, register_alias, register_filter


@register_filter
@dataclass
class Downsample(Filter):
    """Resample to a target size by copying the nearest mapped source samples.

    width, height: Target size for images. Color sequences are reduced to
    ``width`` colors, ``height`` is ignored for them.

    Example:
        'downsample 64 48' or 'resample(width=16, height=16)'
    """

    width: int = 1
    height: int | None = None
    _primary_param = 'width'

    def apply(self, image: Image) -> Image:
        require(self.height is not None, "Downsampling an image requires a height")
        return downsample_image(image, self.width, self.height)

    def apply_colors(self, colors: Sequence[Color]) -> ColorSequence:
        return downsample_colors(colors, self.width)


register_alias('resample', Downsample)
