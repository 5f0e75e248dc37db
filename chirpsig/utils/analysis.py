"""Phase and magnitude purity analysis of generated phasor sequences
"""

from __future__ import annotations

__all__ = [
    "RunningStats",
    "PhasePurityAnalyzer",
    "MagPurityAnalyzer",
    "magnitude_snr_db",
]

# ChirpSig
from chirpsig.utils.dsp import delta_angle
from chirpsig.utils.verify import verify_numpy_array, verify_float

# Third Party
import numpy as np

# Built-In
import math
from typing import Tuple


class RunningStats():
    """Online ("running") statistics accumulator.

    Implements Welford's online algorithm for mean and variance, which is much
    less prone to loss of precision from catastrophic cancellation than the
    sum of squares approach. Also tracks the most negative and most positive
    deviation of any sample from the running mean at the time it was added.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        """Clears all accumulated statistics.
        """
        self.num_samples = 0
        self._mean = 0.0
        self._m2 = 0.0
        self._max_neg_dev = math.inf
        self._max_pos_dev = -math.inf

    def add_sample(self, value: float) -> None:
        """Accumulates one sample.

        Args:
            value (float): Sample value.
        """
        delta = value - self._mean
        self.num_samples += 1
        self._mean += delta / self.num_samples
        self._m2 += delta * (value - self._mean)

        delta = value - self._mean
        if delta < self._max_neg_dev:
            self._max_neg_dev = delta
        if delta > self._max_pos_dev:
            self._max_pos_dev = delta

    def add_samples(self, values: np.ndarray) -> None:
        """Accumulates each value in order.
        """
        for value in np.asarray(values, dtype=float).tolist():
            self.add_sample(value)

    def get_stats(self) -> Tuple[float, float]:
        """Returns (mean, sample variance).

        Both are NaN with no samples; variance is NaN with a single sample.
        """
        if self.num_samples == 0:
            return math.nan, math.nan
        if self.num_samples == 1:
            return self._mean, math.nan
        return self._mean, self._m2 / (self.num_samples - 1)

    def get_min_max_dev(self) -> Tuple[float, float]:
        """Returns (max negative deviation, max positive deviation), NaN with no samples.
        """
        if self.num_samples == 0:
            return math.nan, math.nan
        return self._max_neg_dev, self._max_pos_dev

    def get_peak_abs_dev(self) -> float:
        """Largest absolute deviation from the running mean seen so far.
        """
        neg_dev, pos_dev = self.get_min_max_dev()
        return max(-neg_dev, pos_dev)


class PhasePurityAnalyzer():
    """Measures how steady the angular acceleration of a chirp is.

    For each sample the average angular velocity since the previous sample
    (omega bar) is the wrapped phase difference. Since omega bar is the mean
    of two consecutive instantaneous velocities, `omega(n) = 2*omega_bar - omega(n-1)`.
    With zero initial velocity, the acceleration implied at sample `n` is
    `omega(n) / n`. Sample zero has no predecessor and contributes the expected
    acceleration.
    """

    def __init__(self):
        self.stats = RunningStats()

    def analyze_phase_stability(self, samples: np.ndarray, accel: float) -> None:
        """Accumulates implied acceleration statistics over `samples`.

        Statistics are reset first, so an instance may be re-run.

        Args:
            samples (np.ndarray): Chirp generated with zero initial angular velocity.
            accel (float): Expected acceleration in radians per sample per sample.
        """
        samples = verify_numpy_array(samples, "samples", dtype_kind="c")
        accel = verify_float(accel, "accel", low=None)

        self.stats.reset()

        phases = np.angle(samples).tolist()
        prev_omega = 0.0
        for n, phase in enumerate(phases):
            if n == 0:
                self.stats.add_sample(accel)
                continue

            omega_bar = delta_angle(phases[n - 1], phase)
            omega = 2 * omega_bar - prev_omega
            prev_omega = omega

            self.stats.add_sample(omega / n)

    def get_stats(self) -> Tuple[float, float]:
        return self.stats.get_stats()

    def get_min_max_dev(self) -> Tuple[float, float]:
        return self.stats.get_min_max_dev()


class MagPurityAnalyzer():
    """Measures how closely samples hold unit magnitude.
    """

    def __init__(self):
        self.stats = RunningStats()

    def analyze_magnitude_stability(self, samples: np.ndarray) -> None:
        """Accumulates magnitude statistics over `samples`, resetting first.
        """
        samples = verify_numpy_array(samples, "samples", dtype_kind="c")

        self.stats.reset()
        self.stats.add_samples(np.abs(samples))

    def get_stats(self) -> Tuple[float, float]:
        return self.stats.get_stats()

    def get_min_max_dev(self) -> Tuple[float, float]:
        return self.stats.get_min_max_dev()


def magnitude_snr_db(variance: float) -> float:
    """Signal to noise ratio of a unit tone whose magnitude has the given variance.

    Args:
        variance (float): Magnitude variance.

    Returns:
        float: SNR in dB, `10*log10(0.5/variance)`. Infinite when variance is zero.
    """
    if variance == 0.0:
        return math.inf
    return 10.0 * math.log10(0.5 / variance)
