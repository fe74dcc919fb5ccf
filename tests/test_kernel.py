"""
Tests for the Gaussian kernel builder
"""

import math

import numpy as np
import pytest

from pixelstag import gaussian_kernel
from pixelstag.algorithms import identity_kernel


class TestIdentityKernel:
    """Non-positive strengths produce the radius 0 kernel."""

    @pytest.mark.parametrize("sigma", [0.0, -1.0, -0.001, float("nan")])
    def test_non_positive_sigma(self, sigma):
        kernel = gaussian_kernel(sigma)
        assert kernel.radius == 0
        assert kernel.is_identity
        assert kernel.size == 1
        assert kernel.weights.tolist() == [1.0]

    def test_identity_kernel(self):
        kernel = identity_kernel()
        assert kernel.is_identity
        assert kernel.weights.dtype == np.float32


class TestGaussianKernel:
    """Radius and weights of regular kernels."""

    @pytest.mark.parametrize(
        "sigma,radius",
        [(1.0, 3), (0.5, 2), (2.5, 8), (3.0, 9), (0.1, 1)],
    )
    def test_radius(self, sigma, radius):
        """The radius is ceil(3 * sigma)."""
        kernel = gaussian_kernel(sigma)
        assert kernel.radius == radius
        assert kernel.size == 2 * radius + 1
        assert len(kernel.weights) == kernel.size
        assert list(kernel.offsets()) == list(range(-radius, radius + 1))

    def test_weights_normalized_and_symmetric(self):
        kernel = gaussian_kernel(2.0)
        weights = kernel.weights
        assert float(weights.sum()) == pytest.approx(1.0, abs=1e-6)
        np.testing.assert_allclose(weights, weights[::-1], rtol=1e-6)
        assert int(np.argmax(weights)) == kernel.radius
        assert np.all(np.diff(weights[: kernel.radius + 1]) > 0)

    def test_weights_follow_gaussian(self):
        sigma = 1.5
        kernel = gaussian_kernel(sigma, dtype=np.float64)
        raw = [math.exp(-(i * i) / (2 * sigma * sigma)) for i in kernel.offsets()]
        expected = np.array(raw) / sum(raw)
        np.testing.assert_allclose(kernel.weights, expected, rtol=1e-12)

    def test_tiny_sigma_is_clamped(self):
        """Strengths below 0.001 behave like 0.001: radius 1, all weight in the center."""
        kernel = gaussian_kernel(1e-6)
        assert kernel.radius == 1
        assert kernel.weights.tolist() == [0.0, 1.0, 0.0]

    def test_dtype(self):
        assert gaussian_kernel(1.0).weights.dtype == np.float32
        assert gaussian_kernel(1.0, dtype=np.float64).weights.dtype == np.float64

    def test_weights_read_only(self):
        kernel = gaussian_kernel(1.0)
        with pytest.raises(ValueError):
            kernel.weights[0] = 1.0
