"""
Pytest fixtures for PixelStag tests
"""

import numpy as np
import pytest

from pixelstag import Color, Image, settings


def _red_gradient(count: int) -> list[Color]:
    """Colors from black to full red, all distinct for count <= 256."""
    return [
        Color(int(np.floor(255.0 * i / max(1, count - 1) + 0.5)), 0, 0)
        for i in range(count)
    ]


def _impulse_line(count: int, at: int, value: int = 255) -> list[Color]:
    """Black colors with a single gray impulse at index ``at``."""
    colors = [Color(0, 0, 0) for _ in range(count)]
    colors[at] = Color(value, value, value)
    return colors


@pytest.fixture
def red_gradient() -> list[Color]:
    """64 colors from black to red."""
    return _red_gradient(64)


@pytest.fixture
def ramp_image() -> Image:
    """A 5x5 grayscale image with the value x + 10 * y at column x, row y."""
    pixels = np.array([[x + 10 * y for x in range(5)] for y in range(5)], dtype=np.uint8)
    return Image.from_array(pixels)


@pytest.fixture
def red_green_image() -> Image:
    """A 40x20 RGB image, left half red and right half green."""
    image = Image(40, 20, channels=3)
    image.pixels[:, :20] = [255, 0, 0]
    image.pixels[:, 20:] = [0, 255, 0]
    return image


@pytest.fixture
def impulse_image() -> Image:
    """A 61x61 float grayscale image with a single 255 impulse in its center."""
    image = Image(61, 61, channels=1, dtype=np.float32)
    image[30, 30] = 255.0
    return image


@pytest.fixture
def make_red_gradient():
    """Factory for red gradients of a given length."""
    return _red_gradient


@pytest.fixture
def make_impulse_line():
    """Factory for black color lines with a single impulse."""
    return _impulse_line


@pytest.fixture
def debug_dir(tmp_path, monkeypatch):
    """Enables debug dumps into a temporary directory."""
    monkeypatch.setattr(settings, "DEBUG_DUMP", True)
    monkeypatch.setattr(settings, "DEBUG_DIR", tmp_path / "debug")
    return tmp_path / "debug"
