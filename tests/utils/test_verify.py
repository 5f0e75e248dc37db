"""Unit Tests for utils/verify.py
"""

from chirpsig.utils.verify import (
    verify_bounds,
    verify_float,
    verify_int,
    verify_numpy_array,
    verify_str,
)

# Third Party
import numpy as np
import pytest

# Built-In
from typing import Any


@pytest.mark.parametrize("a, low, high, expected, is_error", [
    (5, 0, 10, 5, False),
    (0, 0, 10, 0, False),
    (10, 0, 10, 10, False),
    (-1, 0, 10, ValueError, True),
    (11, 0, 10, ValueError, True),
    (11, None, None, 11, False),
])
def test_verify_bounds(
    a: Any,
    low: Any,
    high: Any,
    expected: Any,
    is_error: bool
) -> None:
    if is_error:
        with pytest.raises(expected):
            verify_bounds(a, "a", low=low, high=high)
    else:
        assert verify_bounds(a, "a", low=low, high=high) == expected


@pytest.mark.parametrize("f, expected, is_error", [
    (1, 1.0, False),
    (-2.5, -2.5, False),
    (np.float32(0.5), 0.5, False),
    (np.int64(3), 3.0, False),
    (True, ValueError, True),
    ("1.0", ValueError, True),
    (float("nan"), ValueError, True),
    (float("-inf"), ValueError, True),
])
def test_verify_float(f: Any, expected: Any, is_error: bool) -> None:
    if is_error:
        with pytest.raises(expected):
            verify_float(f, "f", low=None)
    else:
        result = verify_float(f, "f", low=None)
        assert isinstance(result, float)
        assert result == expected


def test_verify_float_bounds() -> None:
    assert verify_float(0.0, "f", low=0.0, high=1.0) == 0.0
    with pytest.raises(ValueError):
        verify_float(1.5, "f", low=0.0, high=1.0)


@pytest.mark.parametrize("a, expected, is_error", [
    (3, 3, False),
    (np.int32(4), 4, False),
    (-1, ValueError, True),
    (2.0, ValueError, True),
    (False, ValueError, True),
])
def test_verify_int(a: Any, expected: Any, is_error: bool) -> None:
    if is_error:
        with pytest.raises(expected):
            verify_int(a, "a")
    else:
        assert verify_int(a, "a") == expected


def test_verify_str() -> None:
    assert verify_str(" T64 ", "fmt", valid=["t64"]) == "t64"
    with pytest.raises(ValueError):
        verify_str("t16", "fmt", valid=["t64"])
    with pytest.raises(ValueError):
        verify_str(64, "fmt")


def test_verify_numpy_array() -> None:
    data = np.zeros(4, dtype=np.complex128)
    assert verify_numpy_array(data, "data", min_length=4, dtype_kind="c") is data
    np.testing.assert_array_equal(verify_numpy_array([1.0, 2.0], "data"), [1.0, 2.0])

    with pytest.raises(ValueError):
        verify_numpy_array(data, "data", min_length=5)
    with pytest.raises(ValueError):
        verify_numpy_array(data, "data", max_length=3)
    with pytest.raises(ValueError):
        verify_numpy_array(data, "data", exact_length=3)
    with pytest.raises(ValueError):
        verify_numpy_array(data, "data", dtype_kind="f")
    with pytest.raises(ValueError):
        verify_numpy_array(np.zeros((2, 2)), "data")
    with pytest.raises(ValueError):
        verify_numpy_array(np.array([1.0, np.inf]), "data")
    with pytest.raises(ValueError):
        verify_numpy_array("data", "data")

    # non-finite values may be allowed
    verify_numpy_array(np.array([np.nan]), "data", check_finite=False)
