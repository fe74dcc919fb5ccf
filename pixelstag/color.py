"""
Implements :class:`.Color`, a small fixed-arity value of 1 (gray) or 3
(e.g. RGB) channels, and helpers to convert color sequences to and from
numpy arrays.
"""

from __future__ import annotations

from typing import Iterator, Sequence, Union

import numpy as np

from .element_type import check_element_type
from .errors import require

SUPPORTED_CHANNEL_COUNTS = (1, 3)
"Channel counts supported by colors and images"


class Color:
    """
    An immutable color with 1 or 3 numeric channels of a fixed element type.

    Colors can either be created from single values or from one sequence:

    >>> Color(255, 0, 0)
    >>> Color([0.5], dtype=np.float32)
    """

    __slots__ = ("_values",)

    def __init__(self, *values, dtype=np.uint8):
        """
        :param values: The channel values, either as separate arguments or as
            a single sequence or numpy array
        :param dtype: The element type of the channels. uint8 by default.
        """
        if len(values) == 1 and isinstance(values[0], (Sequence, np.ndarray)):
            values = values[0]
        dtype = check_element_type(dtype)
        data = np.array(values, dtype=dtype).reshape(-1)
        require(
            data.shape[0] in SUPPORTED_CHANNEL_COUNTS,
            "A color requires 1 or 3 channels, got %d",
            data.shape[0],
        )
        data.flags.writeable = False
        self._values = data

    @classmethod
    def from_array(cls, values: np.ndarray) -> Color:
        """
        Creates a color from a 1D array, keeping the array's element type.

        :param values: The channel values
        :return: The new color
        """
        values = np.asarray(values)
        return cls(values, dtype=values.dtype)

    @property
    def channels(self) -> int:
        """The number of channels (1 or 3)"""
        return int(self._values.shape[0])

    @property
    def dtype(self) -> np.dtype:
        """The channels' element type"""
        return self._values.dtype

    @property
    def values(self) -> np.ndarray:
        """Read-only view of the channel values"""
        return self._values

    def to_tuple(self) -> tuple:
        """
        Returns the channel values as tuple of Python numbers.
        """
        return tuple(self._values.tolist())

    def __getitem__(self, channel: int):
        return self._values[channel]

    def __iter__(self) -> Iterator:
        return iter(self._values.tolist())

    def __len__(self) -> int:
        return self.channels

    def __eq__(self, other) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.channels == other.channels and bool(
            np.array_equal(self._values, other._values)
        )

    def __hash__(self) -> int:
        return hash(self.to_tuple())

    def __repr__(self) -> str:
        values = ", ".join(str(v) for v in self.to_tuple())
        return f"Color({values}, dtype={self.dtype.name})"


ColorSequence = list[Color]
"An ordered list of colors sharing the same channel count"

ColorSequenceTypes = Union[Sequence[Color], ColorSequence]


def colors_to_array(colors: ColorSequenceTypes, dtype=None) -> np.ndarray:
    """
    Stacks a color sequence into an array of shape (N, channels).

    :param colors: The colors. All must share the same channel count.
    :param dtype: The target element type. The first color's type by default.
    :return: The new array
    """
    require(len(colors) > 0, "Can not stack an empty color sequence")
    channels = colors[0].channels
    for index, color in enumerate(colors):
        require(
            color.channels == channels,
            "Color %d has %d channels, expected %d",
            index,
            color.channels,
            channels,
        )
    if dtype is None:
        dtype = colors[0].dtype
    return np.stack([color.values for color in colors]).astype(dtype)


def colors_from_array(values: np.ndarray, dtype=None) -> ColorSequence:
    """
    Converts an array of shape (N, channels) into a list of colors.

    :param values: The color values, one row per color
    :param dtype: The colors' element type. The array's type by default.
    :return: The colors
    """
    values = np.asarray(values)
    if dtype is None:
        dtype = values.dtype
    return [Color(row, dtype=dtype) for row in values]
