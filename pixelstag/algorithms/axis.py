"""
Per-axis building blocks shared by the image and the color sequence variants
of the blur and downsample operations.
"""

from __future__ import annotations

import numpy as np

from .kernel import GaussianKernel


def clamp_indices(positions: np.ndarray, length: int) -> np.ndarray:
    """Clamps indices into [0, length - 1] (clamp-to-edge boundary)."""
    return np.clip(positions, 0, length - 1)


def convolve_axis(data: np.ndarray, kernel: GaussianKernel, axis: int) -> np.ndarray:
    """
    Convolves float ``data`` with ``kernel`` along one axis.

    Samples outside of the axis are replaced by the nearest edge sample. The
    taps are accumulated in order from -radius to +radius in the data's
    floating point type.

    :param data: Floating point array of any dimensionality
    :param kernel: The 1D kernel
    :param axis: The axis to convolve along
    :return: A new array of the same shape and type as ``data``
    """
    length = data.shape[axis]
    positions = np.arange(length)
    weights = kernel.weights.astype(data.dtype, copy=False)
    result = np.zeros_like(data)
    for offset, weight in zip(kernel.offsets(), weights):
        indices = clamp_indices(positions + offset, length)
        result += weight * np.take(data, indices, axis=axis)
    return result


def sample_indices(target: int, source: int) -> np.ndarray:
    """
    Maps each target position to the source position it samples.

    For a target size of at least 2, target index ``i`` maps to
    ``round(i * (source - 1) / (target - 1))`` with ties rounded up, so the
    first and the last target position always hit the first and the last
    source position. A target size of 1 samples the middle, ``source // 2``.

    :param target: The number of target positions, at least 1
    :param source: The number of source positions, at least 1
    :return: Integer array of ``target`` source indices
    """
    if target == 1:
        return np.array([source // 2], dtype=np.intp)
    positions = np.arange(target, dtype=np.int64)
    # integer form of floor(i * (n - 1) / (m - 1) + 1/2)
    indices = (2 * positions * (source - 1) + (target - 1)) // (2 * (target - 1))
    return clamp_indices(indices, source).astype(np.intp)
