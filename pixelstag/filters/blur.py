# PixelStag Filters - Blur
"""
Gaussian blur filter.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pixelstag.algorithms import blur_colors, blur_image
from pixelstag.color import Color, ColorSequence
from pixelstag.image import Image

from .base import Filter, register_alias, register_filter


@register_filter
@dataclass
class GaussianBlur(Filter):
    """Separable Gaussian blur with clamp-to-edge borders.

    strength: The Gaussian's standard deviation (sigma). 0 disables the blur.

    Example:
        'blur 2.5' or 'gaussianblur(strength=1)'
    """

    strength: float = 2.0
    _primary_param = 'strength'

    def apply(self, image: Image) -> Image:
        return blur_image(image, self.strength)

    def apply_colors(self, colors: Sequence[Color]) -> ColorSequence:
        return blur_colors(colors, self.strength)


register_alias('blur', GaussianBlur)
