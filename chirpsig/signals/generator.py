"""Phasor Tone Generator base class

Examples
    Flying Phasor
        >>> from chirpsig.signals import FlyingPhasorToneGenerator
        >>> gen = FlyingPhasorToneGenerator(radians_per_sample=np.pi/8, phi=0.0)
        >>> first = gen.get_sample()
        >>> block = gen.get_samples(1024)
    Chirping Phasor
        >>> from chirpsig.signals import ChirpingPhasorToneGenerator
        >>> gen = ChirpingPhasorToneGenerator(accel=np.pi/4096)
        >>> block = gen.get_samples(4096)
        >>> gen.modify_accel(-np.pi/4096)
"""

from __future__ import annotations

# ChirpSig
from chirpsig.utils.dsp import chirpsig_complex_data_type
from chirpsig.utils.printing import generate_repr_str
from chirpsig.utils.verify import (
    verify_int,
    verify_float,
    verify_numpy_array,
)

# Third Party
import numpy as np

# Built-In
from abc import ABC, abstractmethod


class ToneGenerator(ABC):
    """Abstract base for recurrence based unit magnitude tone generators.

    Subclasses own a running phasor and advance it one sample at a time.
    The bulk, scaled and accumulating retrieval forms are implemented here
    in terms of `_fill()`, so every form advances generator state exactly
    as the equivalent number of `get_sample()` calls would.

    Attributes:
        normalization_interval (int): A phasor is re-normalized once every
            `normalization_interval` samples. Defaults to 2.
    """

    def __init__(self, normalization_interval: int = 2):
        """Initializes the generator's normalization cadence and sample counter.

        Args:
            normalization_interval (int, optional): Samples per re-normalization. Defaults to 2.

        Raises:
            ValueError: `normalization_interval` is not a positive integer.
        """
        self.normalization_interval = verify_int(
            normalization_interval,
            "normalization_interval",
            low=1
        )
        self._sample_counter = 0

    @abstractmethod
    def get_sample(self) -> complex:
        """Returns the current sample and advances state by one sample.
        """

    @abstractmethod
    def peek_next_sample(self) -> complex:
        """Returns the sample the next retrieval would produce, without advancing.
        """

    @abstractmethod
    def reset(self, *args, **kwargs) -> None:
        """Restores the generator to a freshly constructed state.
        """

    @abstractmethod
    def _fill(self, out: np.ndarray, num_samples: int) -> None:
        """Writes `num_samples` consecutive samples into `out[0:num_samples]`.
        To be implemented by subclasses.
        """

    def get_sample_count(self) -> int:
        """Returns the number of samples emitted since construction or the last reset.
        """
        return self._sample_counter

    def get_samples(self, num_samples: int, out: np.ndarray = None) -> np.ndarray:
        """Delivers `num_samples` unscaled samples (magnitude of one).

        Args:
            num_samples (int): Number of samples to produce.
            out (np.ndarray, optional): Complex buffer of at least `num_samples`
                elements to write into. Defaults to None, which allocates a new array.

        Raises:
            ValueError: `num_samples` is negative or `out` is unsuitable.

        Returns:
            np.ndarray: The first `num_samples` elements of the output buffer.
        """
        out = self._output_buffer(num_samples, out)
        self._fill(out, num_samples)
        return out[:num_samples]

    def get_samples_scaled(
        self,
        num_samples: int,
        magnitude: float | np.ndarray,
        out: np.ndarray = None
    ) -> np.ndarray:
        """Delivers `num_samples` samples scaled by `magnitude`.

        Args:
            num_samples (int): Number of samples to produce.
            magnitude (float | np.ndarray): A scalar applied to every sample, or an
                array of `num_samples` per-sample scalars.
            out (np.ndarray, optional): Complex output buffer. Defaults to None.

        Raises:
            ValueError: Invalid `num_samples`, `magnitude` or `out`.

        Returns:
            np.ndarray: The first `num_samples` elements of the output buffer.
        """
        magnitude = self._verify_magnitude(magnitude, num_samples)
        out = self.get_samples(num_samples, out)
        out *= magnitude
        return out

    def accum_samples(self, out: np.ndarray, num_samples: int) -> np.ndarray:
        """Adds `num_samples` unscaled samples into an existing buffer.

        Useful for composing several tones into one time series.

        Args:
            out (np.ndarray): Complex buffer holding the running sum.
            num_samples (int): Number of samples to produce and accumulate.

        Raises:
            ValueError: `num_samples` is negative or `out` is unsuitable.

        Returns:
            np.ndarray: The first `num_samples` elements of `out`.
        """
        out = self._verify_buffer(out, num_samples)
        out[:num_samples] += self.get_samples(num_samples)
        return out[:num_samples]

    def accum_samples_scaled(
        self,
        out: np.ndarray,
        num_samples: int,
        magnitude: float | np.ndarray
    ) -> np.ndarray:
        """Adds `num_samples` samples scaled by `magnitude` into an existing buffer.

        Args:
            out (np.ndarray): Complex buffer holding the running sum.
            num_samples (int): Number of samples to produce and accumulate.
            magnitude (float | np.ndarray): Scalar or per-sample scalars.

        Raises:
            ValueError: Invalid `num_samples`, `magnitude` or `out`.

        Returns:
            np.ndarray: The first `num_samples` elements of `out`.
        """
        out = self._verify_buffer(out, num_samples)
        out[:num_samples] += self.get_samples_scaled(num_samples, magnitude)
        return out[:num_samples]

    def _output_buffer(self, num_samples: int, out: np.ndarray = None) -> np.ndarray:
        if out is None:
            num_samples = verify_int(num_samples, "num_samples", low=0)
            return np.empty(num_samples, dtype=chirpsig_complex_data_type)
        return self._verify_buffer(out, num_samples)

    def _verify_buffer(self, out: np.ndarray, num_samples: int) -> np.ndarray:
        num_samples = verify_int(num_samples, "num_samples", low=0)
        if not isinstance(out, np.ndarray):
            raise ValueError(f"out is not a numpy array: {type(out)}")

        # buffer contents are overwritten or accumulated into, so they are
        # not checked for finiteness
        return verify_numpy_array(
            out,
            "out",
            min_length=num_samples,
            dtype_kind="c",
            check_finite=False
        )

    def _verify_magnitude(self, magnitude: float | np.ndarray, num_samples: int) -> float | np.ndarray:
        if isinstance(magnitude, (np.ndarray, list, tuple)):
            return verify_numpy_array(
                np.asarray(magnitude),
                "magnitude",
                exact_length=num_samples,
                dtype_kind="fiu"
            )
        return verify_float(magnitude, "magnitude", low=None)

    def __repr__(self):
        return generate_repr_str(self)
