"""
Implements the class :class:`.Image`, PixelStag's container for rectangular
grayscale and three channel pixel data.
"""

from __future__ import annotations

import PIL.Image
import numpy as np

from .color import SUPPORTED_CHANNEL_COUNTS, Color
from .element_type import check_element_type
from .errors import require


class Image:
    """
    A rectangular image of width x height pixels with 1 or 3 channels.

    The pixels are stored in a numpy array of shape (height, width, channels),
    so that ``image[row, column]`` and ``image[row, column, channel]`` address
    single pixels and channels. The element type can be any numpy integer or
    floating type.
    """

    def __init__(self, width: int, height: int, channels: int = 3, dtype=np.uint8):
        """
        Creates a blank (zero filled) image.

        :param width: The width in pixels, at least 1
        :param height: The height in pixels, at least 1
        :param channels: The number of channels, 1 or 3
        :param dtype: The element type, uint8 by default
        """
        require(width > 0 and height > 0, "Invalid image size %dx%d", width, height)
        require(
            channels in SUPPORTED_CHANNEL_COUNTS,
            "An image requires 1 or 3 channels, got %d",
            channels,
        )
        self._pixels = np.zeros(
            (int(height), int(width), int(channels)), dtype=check_element_type(dtype)
        )

    @classmethod
    def from_array(cls, pixels: np.ndarray, copy: bool = True) -> Image:
        """
        Creates an image from a numpy array.

        :param pixels: Array of shape (height, width) for grayscale or
            (height, width, channels)
        :param copy: Defines if the data shall be copied. If False the image
            references the passed array (or a reshaped view of it).
        :return: The new image
        """
        pixels = np.asarray(pixels)
        if pixels.ndim == 2:
            pixels = pixels[:, :, np.newaxis]
        require(pixels.ndim == 3, "Invalid pixel array shape %s", pixels.shape)
        height, width, channels = pixels.shape
        require(width > 0 and height > 0, "Invalid image size %dx%d", width, height)
        require(
            channels in SUPPORTED_CHANNEL_COUNTS,
            "An image requires 1 or 3 channels, got %d",
            channels,
        )
        check_element_type(pixels.dtype)
        image = cls.__new__(cls)
        image._pixels = pixels.copy() if copy else pixels
        return image

    @classmethod
    def from_pil(cls, pil_image: PIL.Image.Image, dtype=None) -> Image:
        """
        Creates an image from a PIL image.

        Grayscale (L) images keep a single channel, all other modes are
        converted to RGB.

        :param pil_image: The PIL image
        :param dtype: Optional target element type. uint8 by default.
        :return: The new image
        """
        if pil_image.mode != "L":
            pil_image = pil_image.convert("RGB")
        pixels = np.asarray(pil_image)
        if dtype is not None:
            pixels = pixels.astype(dtype)
        return cls.from_array(pixels, copy=True)

    def to_pil(self) -> PIL.Image.Image:
        """
        Converts the image to a PIL image of mode L or RGB.

        Non uint8 data is clipped to 0..255 and rounded.

        :return: The PIL image
        """
        pixels = self._pixels
        if pixels.dtype != np.uint8:
            pixels = np.clip(np.rint(pixels.astype(np.float64)), 0, 255).astype(np.uint8)
        if self.channels == 1:
            return PIL.Image.fromarray(np.ascontiguousarray(pixels[:, :, 0]))
        return PIL.Image.fromarray(np.ascontiguousarray(pixels))

    @property
    def width(self) -> int:
        """The image's width in pixels"""
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        """The image's height in pixels"""
        return int(self._pixels.shape[0])

    @property
    def channels(self) -> int:
        """The number of channels per pixel"""
        return int(self._pixels.shape[2])

    @property
    def dtype(self) -> np.dtype:
        """The element type"""
        return self._pixels.dtype

    @property
    def size(self) -> tuple[int, int]:
        """The image's size as (width, height) tuple"""
        return self.width, self.height

    @property
    def pixels(self) -> np.ndarray:
        """The backing array of shape (height, width, channels)"""
        return self._pixels

    def get_pixels(self) -> np.ndarray:
        """
        Returns a copy of the pixel data.

        :return: Array of shape (height, width, channels)
        """
        return self._pixels.copy()

    def get_color(self, row: int, column: int) -> Color:
        """
        Returns the pixel at given position as :class:`Color`.

        :param row: The row (y)
        :param column: The column (x)
        :return: The color
        """
        return Color(self._pixels[row, column], dtype=self.dtype)

    def fill(self, value) -> Image:
        """
        Sets all pixels to ``value``, a scalar or one value per channel.

        :return: The image itself
        """
        if isinstance(value, Color):
            value = value.values
        self._pixels[...] = value
        return self

    def copy(self) -> Image:
        """
        Returns a deep copy of this image.
        """
        return Image.from_array(self._pixels, copy=True)

    def _key(self, key):
        if not isinstance(key, tuple) or len(key) not in (2, 3):
            raise IndexError("Pixels are addressed as [row, column] or [row, column, channel]")
        if len(key) == 2 and self.channels == 1:
            return key + (0,)
        return key

    def __getitem__(self, key):
        return self._pixels[self._key(key)]

    def __setitem__(self, key, value):
        self._pixels[self._key(key)] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Image):
            return NotImplemented
        return (
            self._pixels.shape == other._pixels.shape
            and self.dtype == other.dtype
            and bool(np.array_equal(self._pixels, other._pixels))
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Image(width={self.width}, height={self.height}, "
            f"channels={self.channels}, dtype={self.dtype.name})"
        )
