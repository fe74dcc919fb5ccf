"""
Tests for the Color class and color sequence helpers
"""

import numpy as np
import pytest

from pixelstag import Color, ContractViolation, colors_from_array, colors_to_array


def test_color_creation():
    """
    Tests creating colors from values and sequences
    """
    red = Color(255, 0, 0)
    assert red.channels == 3
    assert red.dtype == np.uint8
    assert red.to_tuple() == (255, 0, 0)
    assert Color([255, 0, 0]) == red
    assert Color(np.array([255, 0, 0], dtype=np.uint8)) == red

    gray = Color(0.25, dtype=np.float32)
    assert gray.channels == 1
    assert len(gray) == 1
    assert gray[0] == pytest.approx(0.25)


@pytest.mark.parametrize("values", [(), (1, 2), (1, 2, 3, 4)])
def test_invalid_channel_count(values):
    with pytest.raises(ContractViolation):
        Color(*values)


def test_invalid_element_type():
    with pytest.raises(ContractViolation):
        Color(1, dtype=bool)


def test_color_access():
    color = Color(10, 20, 30)
    assert color[1] == 20
    assert list(color) == [10, 20, 30]
    assert repr(color) == "Color(10, 20, 30, dtype=uint8)"


def test_color_equality_and_hash():
    assert Color(1, 2, 3) == Color(1, 2, 3)
    assert Color(1, 2, 3) != Color(1, 2, 4)
    assert Color(1) != Color(1, 1, 1)
    assert len({Color(1, 2, 3), Color(1, 2, 3), Color(3, 2, 1)}) == 2
    assert Color(5) != 5


def test_color_is_immutable():
    color = Color(1, 2, 3)
    with pytest.raises(ValueError):
        color.values[0] = 9


def test_from_array_keeps_type():
    color = Color.from_array(np.array([1, -2, 3], dtype=np.int32))
    assert color.dtype == np.int32
    assert color.to_tuple() == (1, -2, 3)


class TestColorSequences:
    """Converting between color lists and arrays."""

    def test_colors_to_array(self):
        values = colors_to_array([Color(1, 2, 3), Color(4, 5, 6)])
        assert values.shape == (2, 3)
        assert values.dtype == np.uint8
        assert values.tolist() == [[1, 2, 3], [4, 5, 6]]

    def test_colors_to_array_with_type(self):
        values = colors_to_array([Color(1), Color(2)], dtype=np.float32)
        assert values.dtype == np.float32
        assert values.shape == (2, 1)

    def test_mismatching_channels(self):
        with pytest.raises(ContractViolation):
            colors_to_array([Color(1, 2, 3), Color(4)])

    def test_empty_sequence(self):
        with pytest.raises(ContractViolation):
            colors_to_array([])

    def test_colors_from_array(self):
        colors = colors_from_array(np.array([[0.5], [1.5]], dtype=np.float32))
        assert colors == [Color(0.5, dtype=np.float32), Color(1.5, dtype=np.float32)]
        assert colors[0].dtype == np.float32
