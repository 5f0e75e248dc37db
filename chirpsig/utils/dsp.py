"""Digital Signal Processing (DSP) Utils
"""

# Third Party
import numpy as np

# Built-In
import math


# common reference for the complex data type to allow for
# standardization across the different generators. double precision
# is required for the recurrences to hold their purity over long runs
chirpsig_complex_data_type = np.complex128

# common reference for the float data type to allow for
# standardization across the different algorithms
chirpsig_float_data_type = np.float64


def normalize_phasor(phasor: complex) -> complex:
    """Pulls a near-unit phasor back towards unit magnitude.

    Normally this would require a square root. However, when the sum of
    squares is near 1 the square root is also near 1, so a first order
    Taylor series approximation of 1/sqrt(x) around x = 1 is used instead.
    The adjustment is a real scalar multiply, not a complex multiply.

    Args:
        phasor (complex): Phasor whose magnitude has drifted slightly from 1.

    Returns:
        complex: Re-normalized phasor.
    """
    d = 1.0 - (phasor.real * phasor.real + phasor.imag * phasor.imag - 1.0) / 2.0
    return phasor * d


def delta_angle(theta_a: float, theta_b: float) -> float:
    """Computes the angle swept going from `theta_a` to `theta_b`.

    The result is wrapped into (-pi, pi].

    Args:
        theta_a (float): Starting angle in radians.
        theta_b (float): Ending angle in radians.

    Returns:
        float: Wrapped angular difference `theta_b - theta_a` in radians.
    """
    delta = theta_b - theta_a
    if delta > math.pi:
        delta -= 2 * math.pi
    elif delta <= -math.pi:
        delta += 2 * math.pi
    return delta


def in_tolerance(value: float, expected: float, tolerance: float) -> bool:
    """Returns True when `value` is within an absolute `tolerance` of `expected`.
    """
    return abs(value - expected) <= tolerance


def tone_reference(num_samples: int, radians_per_sample: float = 0.0, phi: float = 0.0) -> np.ndarray:
    """Tone evaluated directly with trigonometric functions.

    This is the legacy approach that the flying phasor replaces; it is kept
    as a reference for accuracy comparisons.

    Args:
        num_samples (int): Number of samples to produce.
        radians_per_sample (float, optional): Angular velocity. Defaults to 0.0.
        phi (float, optional): Phase of the first sample in radians. Defaults to 0.0.

    Returns:
        np.ndarray: Complex tone samples.
    """
    n = np.arange(num_samples, dtype=chirpsig_float_data_type)
    return np.exp(1j * (radians_per_sample * n + phi)).astype(chirpsig_complex_data_type)


def chirp_reference(
    num_samples: int,
    accel: float = 0.0,
    omega_zero: float = 0.0,
    phi: float = 0.0
) -> np.ndarray:
    """Linear chirp evaluated directly with trigonometric functions.

    Sample `s` has phase `phi + omega_zero*s + 0.5*accel*s^2`.

    Args:
        num_samples (int): Number of samples to produce.
        accel (float, optional): Angular acceleration in radians per sample per sample. Defaults to 0.0.
        omega_zero (float, optional): Angular velocity at sample zero in radians per sample. Defaults to 0.0.
        phi (float, optional): Phase of the first sample in radians. Defaults to 0.0.

    Returns:
        np.ndarray: Complex chirp samples.
    """
    s = np.arange(num_samples, dtype=chirpsig_float_data_type)

    # quadratic phase law
    phase = omega_zero * s + 0.5 * accel * s * s

    return np.exp(1j * (phase + phi)).astype(chirpsig_complex_data_type)
