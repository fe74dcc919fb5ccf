"""
Element type handling: the float accumulator used by the kernels and the
conversion back to the storage type of an image or color.
"""

from __future__ import annotations

import numpy as np

from .config import settings
from .errors import require


def check_element_type(dtype) -> np.dtype:
    """
    Validates that ``dtype`` is a supported pixel element type.

    :param dtype: Any numpy dtype-like
    :return: The normalized numpy dtype
    """
    dtype = np.dtype(dtype)
    require(
        np.issubdtype(dtype, np.integer) or np.issubdtype(dtype, np.floating),
        "Unsupported element type %s, expected an integer or floating type",
        dtype,
    )
    return dtype


def accumulator_dtype(storage=None) -> np.dtype:
    """
    Returns the floating point type values are accumulated in.

    :param storage: The storage element type. Floating types wider than the
        configured accumulator promote it.
    :return: The accumulator dtype
    """
    acc = np.dtype(settings.ACCUMULATOR_DTYPE)
    if storage is not None and np.issubdtype(np.dtype(storage), np.floating):
        return np.promote_types(acc, storage)
    return acc


def to_accumulator(values: np.ndarray, dtype: np.dtype | None = None) -> np.ndarray:
    """Converts stored values to a fresh float array."""
    if dtype is None:
        dtype = accumulator_dtype(values.dtype)
    return np.asarray(values).astype(dtype, copy=True)


def round_half_away(values: np.ndarray) -> np.ndarray:
    """
    Rounds to the nearest integer, ties away from zero (0.5 -> 1, -0.5 -> -1).

    Evaluated in float64 so that values just below .5 stored as float32 are
    not pushed across the tie by the addition.
    """
    values = np.asarray(values, dtype=np.float64)
    return np.sign(values) * np.floor(np.abs(values) + 0.5)


def from_accumulator(values: np.ndarray, dtype) -> np.ndarray:
    """
    Converts accumulated float values back to a storage element type.

    - uint8: clamped to [0, 255] and rounded
    - other integer types: rounded, not clamped
    - floating types: stored as they are

    :param values: The accumulated values
    :param dtype: The target element type
    :return: A new array of the target type
    """
    dtype = check_element_type(dtype)
    if dtype == np.uint8:
        return round_half_away(np.clip(values, 0.0, 255.0)).astype(np.uint8)
    if np.issubdtype(dtype, np.integer):
        return round_half_away(values).astype(dtype)
    return np.asarray(values).astype(dtype)
