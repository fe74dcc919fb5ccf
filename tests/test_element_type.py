"""
Tests for the accumulator type and the conversion back to storage types
"""

import numpy as np
import pytest

from pixelstag import ContractViolation
from pixelstag.element_type import (
    accumulator_dtype,
    check_element_type,
    from_accumulator,
    round_half_away,
    to_accumulator,
)


def test_round_half_away():
    values = np.array([0.5, 1.5, 2.5, -0.5, -1.5, 0.4, -0.4], dtype=np.float32)
    assert round_half_away(values).tolist() == [1.0, 2.0, 3.0, -1.0, -2.0, 0.0, -0.0]


def test_round_just_below_tie():
    """The largest float32 below 0.5 must not be rounded up."""
    below = np.nextafter(np.float32(0.5), np.float32(0.0))
    assert round_half_away(np.array([below], dtype=np.float32)).tolist() == [0.0]


def test_uint8_is_clamped_and_rounded():
    values = np.array([-3.2, 255.6, 127.5, 0.49], dtype=np.float32)
    result = from_accumulator(values, np.uint8)
    assert result.dtype == np.uint8
    assert result.tolist() == [0, 255, 128, 0]


def test_other_integers_are_rounded_only():
    values = np.array([-3.5, 1000.4, 70000.5], dtype=np.float64)
    result = from_accumulator(values, np.int32)
    assert result.dtype == np.int32
    assert result.tolist() == [-4, 1000, 70001]
    assert from_accumulator(np.array([300.2]), np.uint16).tolist() == [300]


def test_floats_are_stored_unchanged():
    values = np.array([-3.25, 1e6, 0.1], dtype=np.float32)
    result = from_accumulator(values, np.float32)
    assert result.dtype == np.float32
    np.testing.assert_array_equal(result, values)
    assert result is not values


def test_accumulator_dtype():
    assert accumulator_dtype() == np.float32
    assert accumulator_dtype(np.uint8) == np.float32
    assert accumulator_dtype(np.int32) == np.float32
    assert accumulator_dtype(np.float16) == np.float32
    assert accumulator_dtype(np.float64) == np.float64


def test_to_accumulator_copies():
    values = np.array([1, 2, 3], dtype=np.uint8)
    result = to_accumulator(values)
    assert result.dtype == np.float32
    result[0] = 7
    assert values[0] == 1


@pytest.mark.parametrize("dtype", [np.uint8, np.int32, np.int64, np.float32, np.float64])
def test_supported_types(dtype):
    assert check_element_type(dtype) == np.dtype(dtype)


@pytest.mark.parametrize("dtype", [bool, np.complex128, object])
def test_unsupported_types(dtype):
    with pytest.raises(ContractViolation):
        check_element_type(dtype)
    with pytest.raises(ContractViolation):
        from_accumulator(np.zeros(2), dtype)
