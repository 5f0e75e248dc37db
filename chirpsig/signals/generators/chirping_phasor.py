"""Chirping Phasor Tone Generator and Modulator

A chirping phasor produces `exp(j*theta(s))` with the quadratic phase law

    theta(s) = phi + omega_zero*s + 0.5*accel*s^2

without evaluating any trigonometric function per sample. An inner flying
phasor supplies the rotation applied between consecutive samples. Its phase
is the *average* angular velocity across the next unit interval (omega bar),
not the instantaneous angular velocity (omega n) of any sample:

    omega_bar(s) = theta(s+1) - theta(s) = omega_n(s) + accel/2

Starting the inner phasor at `omega_zero + accel/2` and rotating it by
`accel` each sample makes the outer phasor an exact integrator of the
quadratic phase law.
"""

from __future__ import annotations

# ChirpSig
from chirpsig.signals.generator import ToneGenerator
from chirpsig.signals.generators.flying_phasor import FlyingPhasorToneGenerator
from chirpsig.utils.dsp import normalize_phasor
from chirpsig.utils.verify import verify_float

# Third Party
import numpy as np

# Built-In
import cmath
import math


# Modulator
def chirping_phasor_modulator(
    num_samples: int,
    accel: float = 0.0,
    omega_zero: float = 0.0,
    phi: float = 0.0
) -> np.ndarray:
    """Implements a linear chirp modulator using the chirping phasor recurrence.

    Args:
        num_samples (int): Number of samples to create.
        accel (float, optional): Angular acceleration in radians per sample per sample. Defaults to 0.0.
        omega_zero (float, optional): Angular velocity at sample zero in radians per sample. Defaults to 0.0.
        phi (float, optional): Phase of the first sample in radians. Defaults to 0.0.

    Returns:
        np.ndarray: Unit magnitude complex chirp samples.
    """
    return ChirpingPhasorToneGenerator(accel, omega_zero, phi).get_samples(num_samples)


# Generator
class ChirpingPhasorToneGenerator(ToneGenerator):
    """Generates a complex linear chirp with a complex multiply recurrence.

    The phasor is re-normalized on alternating samples, on the even
    (pre-increment) sample counts. The inner flying phasor normalizes on
    the odd counts, across acceleration changes as well.

    Attributes:
        accel (float): Current angular acceleration in radians per sample per sample.
        omega_zero (float): Angular velocity at sample zero after construction or reset.
        phi (float): Phase of sample zero after construction or reset.
        normalization_interval (int): Samples per re-normalization. Defaults to 2.
    """

    def __init__(
        self,
        accel: float = 0.0,
        omega_zero: float = 0.0,
        phi: float = 0.0,
        normalization_interval: int = 2
    ):
        """Initializes Chirping Phasor Tone Generator.

        Args:
            accel (float, optional): Angular acceleration in radians per sample per sample. Defaults to 0.0.
            omega_zero (float, optional): Angular velocity at sample zero in radians per sample. Defaults to 0.0.
            phi (float, optional): Phase of sample zero in radians. Defaults to 0.0.
            normalization_interval (int, optional): Samples per re-normalization. Defaults to 2.
        """
        super().__init__(normalization_interval=normalization_interval)
        self._rate = FlyingPhasorToneGenerator(normalization_interval=self.normalization_interval)
        self.reset(accel, omega_zero, phi)

    def reset(self, accel: float = 0.0, omega_zero: float = 0.0, phi: float = 0.0) -> None:
        """Restores the generator to the state construction with these arguments produces.

        Sample zero, `exp(j*phi)`, is fully determined here; no rate applies to it.
        The inner flying phasor starts at the average angular velocity between
        samples zero and one, `omega_zero + accel/2`.

        Args:
            accel (float, optional): Angular acceleration in radians per sample per sample. Defaults to 0.0.
            omega_zero (float, optional): Angular velocity at sample zero in radians per sample. Defaults to 0.0.
            phi (float, optional): Phase of sample zero in radians. Defaults to 0.0.

        Raises:
            ValueError: An argument is not a finite real number.
        """
        self.accel = verify_float(accel, "accel", low=None)
        self.omega_zero = verify_float(omega_zero, "omega_zero", low=None)
        self.phi = verify_float(phi, "phi", low=None)

        self._phasor = cmath.rect(1.0, self.phi)
        self._accel_over_2 = self.accel / 2
        self._rate.reset(self.accel, self.omega_zero + self._accel_over_2)
        self._sample_counter = 0

        # velocity bookkeeping outside the phasor, which only knows it modulo 2*pi
        self._omega_base = self.omega_zero
        self._omega_base_count = 0

    def get_sample(self) -> complex:
        """Returns the current phasor, then advances the chirp by one sample.

        Returns:
            complex: Unit magnitude sample.
        """
        sample = self._phasor

        # rotate by the average angular velocity over the next interval
        self._phasor *= self._rate.get_sample()

        if self._sample_counter % self.normalization_interval == 0:
            self._phasor = normalize_phasor(self._phasor)
        self._sample_counter += 1

        return sample

    def peek_next_sample(self) -> complex:
        """Returns the sample the next `get_sample()` or `get_samples()` call emits first.
        """
        return self._phasor

    def get_omega_bar(self) -> float:
        """Average angular velocity between the next two samples to be emitted.

        Returns:
            float: Radians per sample, wrapped into (-pi, pi].
        """
        return cmath.phase(self._rate.peek_next_sample())

    def get_omega_n(self) -> float:
        """Instantaneous angular velocity of the next sample to be emitted.

        The average of two consecutive instantaneous velocities is their
        midpoint, so half the acceleration is removed from omega bar.

        Returns:
            float: Radians per sample.
        """
        return self.get_omega_bar() - self._accel_over_2

    def modify_accel(self, new_accel: float = 0.0) -> None:
        """Changes the acceleration without disturbing the committed trajectory.

        The sample latched for the next retrieval is unchanged. The inner
        flying phasor is restarted so that its first rotation carries the
        chirp from the latched sample with the instantaneous angular velocity
        it already had, accelerating at `new_accel` from there on.

        Args:
            new_accel (float, optional): New angular acceleration in radians per
                sample per sample. Defaults to 0.0.

        Raises:
            ValueError: `new_accel` is not a finite real number.
        """
        new_accel = verify_float(new_accel, "new_accel", low=None)

        # instantaneous velocity of the latched sample under the old acceleration
        omega_n = self.get_omega_n()
        self._omega_base = self._unwrapped_omega_n()
        self._omega_base_count = self._sample_counter

        self.accel = new_accel
        self._accel_over_2 = new_accel / 2
        self._rate.reset(new_accel, omega_n + self._accel_over_2)

        # the inner phasor has produced one rotation per chirp sample; keep its
        # counter so the two normalization cadences stay offset
        self._rate._sample_counter = self._sample_counter

    def samples_until_rollover(self) -> int | None:
        """Number of samples that can be emitted before |omega n| exceeds pi.

        Past pi radians per sample the perceived frequency aliases to the
        opposite sign. Callers may use this to cap or reverse acceleration
        with `modify_accel()` before that happens.

        Returns:
            int | None: Sample count, 0 if already beyond pi, or None when the
            acceleration is zero and the velocity never leaves range.
        """
        omega_n = self._unwrapped_omega_n()
        if abs(omega_n) > math.pi:
            return 0
        if self.accel == 0.0:
            return None
        if self.accel > 0.0:
            return int(math.floor((math.pi - omega_n) / self.accel)) + 1
        return int(math.floor((omega_n + math.pi) / -self.accel)) + 1

    def _unwrapped_omega_n(self) -> float:
        return self._omega_base + self.accel * (self._sample_counter - self._omega_base_count)

    def _fill(self, out: np.ndarray, num_samples: int) -> None:
        # the flying phasor's outputs do not depend on the chirp state, so the
        # rotations are drawn in one block
        rates = self._rate.get_samples(num_samples).tolist()

        phasor = self._phasor
        counter = self._sample_counter
        interval = self.normalization_interval

        for n in range(num_samples):
            out[n] = phasor
            phasor *= rates[n]
            if counter % interval == 0:
                phasor = normalize_phasor(phasor)
            counter += 1

        self._phasor = phasor
        self._sample_counter = counter
