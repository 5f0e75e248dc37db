"""Flying Phasor Tone Generator and Modulator
"""

from __future__ import annotations

# ChirpSig
from chirpsig.signals.generator import ToneGenerator
from chirpsig.utils.dsp import normalize_phasor
from chirpsig.utils.verify import verify_float

# Third Party
import numpy as np

# Built-In
import cmath


# Modulator
def flying_phasor_modulator(num_samples: int, radians_per_sample: float = 0.0, phi: float = 0.0) -> np.ndarray:
    """Implements a tone modulator using the flying phasor recurrence.

    Args:
        num_samples (int): Number of samples to create.
        radians_per_sample (float, optional): Angular velocity in radians per sample. Defaults to 0.0.
        phi (float, optional): Phase of the first sample in radians. Defaults to 0.0.

    Returns:
        np.ndarray: Unit magnitude complex tone samples.
    """
    return FlyingPhasorToneGenerator(radians_per_sample, phi).get_samples(num_samples)


# Generator
class FlyingPhasorToneGenerator(ToneGenerator):
    """Generates a complex tone by repeated rotation of a phasor.

    This replaces evaluating `cos(w*n + phi) + j*sin(w*n + phi)` for each sample
    with a single complex multiply per sample. The running phasor is
    re-normalized on alternating samples, on the odd (pre-increment) sample
    counts, so it does not coincide with a chirping phasor that wraps it.

    Attributes:
        radians_per_sample (float): Fixed rotation applied per sample.
        phi (float): Phase of the first sample after construction or reset.
        normalization_interval (int): Samples per re-normalization. Defaults to 2.
    """

    def __init__(
        self,
        radians_per_sample: float = 0.0,
        phi: float = 0.0,
        normalization_interval: int = 2
    ):
        """Initializes Flying Phasor Tone Generator.

        Args:
            radians_per_sample (float, optional): Angular velocity in radians per sample. Defaults to 0.0.
            phi (float, optional): Phase of the first sample in radians. Defaults to 0.0.
            normalization_interval (int, optional): Samples per re-normalization. Defaults to 2.
        """
        super().__init__(normalization_interval=normalization_interval)
        self.reset(radians_per_sample, phi)

    def reset(self, radians_per_sample: float = 0.0, phi: float = 0.0) -> None:
        """Resets rotation, current phasor and sample counter.

        The current phasor becomes `exp(j*phi)`, which is the value the next
        `get_sample()` returns. It is unaffected by `radians_per_sample`.

        Args:
            radians_per_sample (float, optional): Angular velocity in radians per sample. Defaults to 0.0.
            phi (float, optional): Phase of the first sample in radians. Defaults to 0.0.

        Raises:
            ValueError: Either argument is not a finite real number.
        """
        self.radians_per_sample = verify_float(radians_per_sample, "radians_per_sample", low=None)
        self.phi = verify_float(phi, "phi", low=None)

        self._rate = cmath.rect(1.0, self.radians_per_sample)
        self._phasor = cmath.rect(1.0, self.phi)
        self._sample_counter = 0

    def get_sample(self) -> complex:
        """Returns the current phasor, then rotates it by one sample.

        Returns:
            complex: Unit magnitude sample.
        """
        sample = self._phasor
        self._phasor *= self._rate

        if self._sample_counter % self.normalization_interval == self.normalization_interval - 1:
            self._phasor = normalize_phasor(self._phasor)
        self._sample_counter += 1

        return sample

    def peek_next_sample(self) -> complex:
        """Returns the value the next `get_sample()` call would return.
        """
        return self._phasor

    def _fill(self, out: np.ndarray, num_samples: int) -> None:
        phasor = self._phasor
        rate = self._rate
        counter = self._sample_counter
        interval = self.normalization_interval

        for n in range(num_samples):
            out[n] = phasor
            phasor *= rate
            if counter % interval == interval - 1:
                phasor = normalize_phasor(phasor)
            counter += 1

        self._phasor = phasor
        self._sample_counter = counter
