"""
Discrete Gaussian kernels for separable blurring.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from pixelstag.element_type import accumulator_dtype

logger = logging.getLogger(__name__)

MIN_SIGMA = 0.001
"Lower bound the blur strength is clamped to before building a kernel"

RADIUS_PER_SIGMA = 3.0
"The kernel's support radius in multiples of sigma"


@dataclass(frozen=True, eq=False)
class GaussianKernel:
    """A normalized, odd-length 1D weight vector of length 2 * radius + 1.

    :ivar weights: The weights for the offsets -radius..radius, summing up to 1
    :ivar radius: The half-width of the kernel support
    """

    weights: np.ndarray
    radius: int = 0

    @property
    def size(self) -> int:
        """Number of taps, 2 * radius + 1."""
        return 2 * self.radius + 1

    @property
    def is_identity(self) -> bool:
        """True if convolving with this kernel leaves the data unchanged."""
        return self.radius == 0

    def offsets(self) -> range:
        """The sample offsets -radius..radius matching :attr:`weights`."""
        return range(-self.radius, self.radius + 1)


def identity_kernel(dtype=None) -> GaussianKernel:
    """Returns the radius 0 kernel with the single weight 1."""
    if dtype is None:
        dtype = accumulator_dtype()
    weights = np.ones(1, dtype=dtype)
    weights.flags.writeable = False
    return GaussianKernel(weights=weights, radius=0)


def gaussian_kernel(sigma: float, dtype=None) -> GaussianKernel:
    """
    Builds the Gaussian kernel for the blur strength ``sigma``.

    Non-positive (or NaN) strengths yield the identity kernel. Otherwise the
    radius is ``ceil(3 * sigma)`` and the weights ``exp(-i^2 / (2 * sigma^2))``
    are renormalized to sum up to 1.

    :param sigma: The Gaussian's standard deviation
    :param dtype: The floating point type to compute in. The configured
        accumulator type by default.
    :return: The kernel
    """
    dtype = np.dtype(accumulator_dtype() if dtype is None else dtype)
    if not (sigma > 0.0):
        return identity_kernel(dtype)

    s = dtype.type(max(MIN_SIGMA, sigma))
    radius = max(0, int(math.ceil(dtype.type(RADIUS_PER_SIGMA) * s)))

    offsets = np.arange(-radius, radius + 1).astype(dtype)
    inv_two_s2 = dtype.type(1.0) / (dtype.type(2.0) * s * s)
    weights = np.exp(-(offsets * offsets) * inv_two_s2).astype(dtype)
    total = weights.sum(dtype=dtype)
    if total > 0.0:
        weights = (weights / total).astype(dtype)
    weights.flags.writeable = False
    logger.debug("Gaussian kernel for sigma=%g: radius %d", float(sigma), radius)
    return GaussianKernel(weights=weights, radius=radius)
