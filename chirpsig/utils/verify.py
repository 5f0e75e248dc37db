""" Data verification and error checking utils
"""

from __future__ import annotations

__all__ = [
    "verify_bounds",
    "verify_int",
    "verify_float",
    "verify_str",
    "verify_numpy_array",
]

# Third Party
import numpy as np

# Built In
from typing import List


def verify_bounds(
    a: float | int,
    name: str,
    low: float | int = None,
    high: float | int = None,
):
    """
    Verifies that the value `a` lies within the closed interval [low, high].

    Args:
        a (float | int): The value to be checked.
        name (str): The name of the value to be used in error messages.
        low (float | int, optional): The lower bound of the value, None for unbounded. Defaults to None.
        high (float | int, optional): The upper bound of the value, None for unbounded. Defaults to None.

    Raises:
        ValueError: If `a` is out of bounds.

    Returns:
        float | int: The value `a`, unchanged.
    """
    if (low is not None and a < low) or (high is not None and a > high):
        bounds = f"{'-inf' if low is None else low} <= {name} <= {'inf' if high is None else high}"
        raise ValueError(f"{name}={a} is out of bounds. Must be {bounds}")

    return a

def verify_int(
    a: int,
    name: str,
    low: int = 0,
    high: int = None,
) -> int:
    """
    Verifies that the value `a` is an integer and within the specified bounds.

    Args:
        a (int): The value to be checked.
        name (str): The name of the value to be used in error messages.
        low (int, optional): The lower bound of the value. Defaults to 0.
        high (int, optional): The upper bound of the value. Defaults to None.

    Raises:
        ValueError: If `a` is not an integer or out of bounds.

    Returns:
        int: The verified integer value `a`.
    """
    # bool is an int subclass, but never a meaningful count
    if isinstance(a, np.integer):
        a = int(a)
    if isinstance(a, bool) or not isinstance(a, int):
        raise ValueError(f"{name} is not type int: {type(a)}")

    return verify_bounds(a, name, low=low, high=high)


def verify_float(
    f: float,
    name: str,
    low: float = 0.0,
    high: float = None,
) -> float:
    """
    Verifies that the value `f` is a finite float and within the specified bounds.

    Integers and NumPy real scalars are accepted and converted to `float`.

    Args:
        f (float): The value to be checked.
        name (str): The name of the value to be used in error messages.
        low (float, optional): The lower bound of the value. Defaults to 0.0.
        high (float, optional): The upper bound of the value. Defaults to None.

    Raises:
        ValueError: If `f` is not a float, is NaN or infinite, or is out of bounds.

    Returns:
        float: The verified float value `f`.
    """
    if isinstance(f, bool):
        raise ValueError(f"{name} is not type float: {type(f)}")
    elif isinstance(f, (int, np.integer, np.floating)):
        f = float(f)
    elif not isinstance(f, float):
        raise ValueError(f"{name} is not type float: {type(f)}")

    if not np.isfinite(f):
        raise ValueError(f"{name}={f} is not a finite number")

    return verify_bounds(f, name, low=low, high=high)

# lower, upper, title
def verify_str(
    s: str,
    name: str,
    valid: List[str] = [],
    str_format: str = "lower"
) -> str:
    """
    Verifies that the value `s` is a string and optionally formats it according to the specified format.

    Args:
        s (str): The value to be checked.
        name (str): The name of the value to be used in error messages.
        valid (List[str], optional): A list of valid string values. Defaults to an empty list.
        str_format (str, optional): The format for the string. Can be "lower", "upper", or "title". Defaults to "lower".

    Raises:
        ValueError: If `s` is not a string or if it is not in the list of valid values.

    Returns:
        str: The verified string value `s` in the specified format.
    """
    if not isinstance(s, str):
        raise ValueError(f"{name} is not a str: {type(s)}")

    # remove trailing or leading whitespace
    s = s.strip()

    # convert string to correct format
    if str_format == "lower":
        s = s.lower()
    elif str_format == "upper":
        s = s.upper()
    elif str_format == "title":
        s = s.title()

    if len(valid) > 0 and s not in valid:
        raise ValueError(f"Invalid {name}: {s}. Must be in {valid}")

    return s

def verify_numpy_array(
    n: np.ndarray,
    name: str,
    min_length: int = None,
    max_length: int = None,
    exact_length: int = None,
    dtype_kind: str = None,
    check_finite: bool = True,
) -> np.ndarray:
    """
    Verifies that the value `n` is a one dimensional NumPy array and optionally
    checks its length and element kind.

    Args:
        n (np.ndarray): The value to be checked.
        name (str): The name of the value to be used in error messages.
        min_length (int, optional): The minimum length of the array. Defaults to None.
        max_length (int, optional): The maximum length of the array. Defaults to None.
        exact_length (int, optional): The exact length of the array. Defaults to None.
        dtype_kind (str, optional): Allowed `np.dtype.kind` characters, ex: "c" for
            complex or "fiu" for real numbers. Defaults to None (any).
        check_finite (bool, optional): Reject NaN and infinite entries. Defaults to True.

    Raises:
        ValueError: If `n` is not a NumPy array, its length is not within the specified bounds,
                    its dtype kind is not allowed, or it contains non-finite values.

    Returns:
        np.ndarray: The verified NumPy array `n`.
    """
    if isinstance(n, (list, tuple)):
        n = np.array(n)
    elif not isinstance(n, np.ndarray):
        raise ValueError(f"{name} is not a numpy array: {type(n)}")

    if n.ndim != 1:
        raise ValueError(f"{name} must be one dimensional: shape {n.shape}")

    if min_length is not None and len(n) < min_length:
        raise ValueError(f"{name} is not at least minimum length {min_length}: {len(n)}")

    if max_length is not None and len(n) > max_length:
        raise ValueError(f"{name} exceeds maximum length {max_length}: {len(n)}")

    if exact_length is not None and len(n) != exact_length:
        raise ValueError(f"{name} is not required length {exact_length}: {len(n)}")

    if dtype_kind is not None and n.dtype.kind not in dtype_kind:
        raise ValueError(f"{name} has dtype {n.dtype}, expected kind in '{dtype_kind}'")

    if check_finite:
        # check for np.nan's
        if (np.isnan(n).any()):
            raise ValueError(f'{name} contains one or more NaN np.nan values.')

        # check for np.inf's
        if (np.isinf(n).any()):
            raise ValueError(f'{name} contains one or more np.inf values.')

    return n
