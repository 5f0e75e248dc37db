"""Unit Tests for signals/generator.py

Classes:
- ToneGenerator
"""

from chirpsig.signals.generator import ToneGenerator
from chirpsig.signals import (
    ChirpingPhasorToneGenerator,
    FlyingPhasorToneGenerator,
)

# Third Party
import numpy as np
import pytest

# Built-In
from typing import Any


def make_generators():
    return [
        FlyingPhasorToneGenerator(0.3, 0.1),
        ChirpingPhasorToneGenerator(0.002, 0.1, 0.3),
    ]


def make_twins():
    return [
        FlyingPhasorToneGenerator(0.3, 0.1),
        ChirpingPhasorToneGenerator(0.002, 0.1, 0.3),
    ]


def test_tone_generator_is_abstract() -> None:
    with pytest.raises(TypeError):
        ToneGenerator()


@pytest.mark.parametrize("gen, twin", zip(make_generators(), make_twins()))
def test_get_samples_into_buffer(gen: ToneGenerator, twin: ToneGenerator) -> None:
    out = np.full(40, 7.0 + 7.0j, dtype=np.complex128)

    result = gen.get_samples(32, out)

    np.testing.assert_array_equal(result, twin.get_samples(32))
    np.testing.assert_array_equal(out[:32], result)
    # elements past the requested count are untouched
    np.testing.assert_array_equal(out[32:], 7.0 + 7.0j)
    assert gen.get_sample_count() == 32


@pytest.mark.parametrize("gen, twin", zip(make_generators(), make_twins()))
def test_get_samples_scaled(gen: ToneGenerator, twin: ToneGenerator) -> None:
    scaled = gen.get_samples_scaled(16, 2.5)
    np.testing.assert_allclose(scaled, 2.5 * twin.get_samples(16), rtol=0, atol=1e-15)

    magnitude = np.linspace(0.0, 1.0, 16)
    scaled = gen.get_samples_scaled(16, magnitude)
    np.testing.assert_allclose(scaled, magnitude * twin.get_samples(16), rtol=0, atol=1e-15)

    assert gen.get_sample_count() == twin.get_sample_count() == 32


@pytest.mark.parametrize("gen, twin", zip(make_generators(), make_twins()))
def test_accum_samples(gen: ToneGenerator, twin: ToneGenerator) -> None:
    out = np.ones(24, dtype=np.complex128)

    gen.accum_samples(out, 20)

    expected = np.ones(24, dtype=np.complex128)
    expected[:20] += twin.get_samples(20)
    np.testing.assert_allclose(out, expected, rtol=0, atol=1e-15)


@pytest.mark.parametrize("gen, twin", zip(make_generators(), make_twins()))
def test_accum_samples_scaled(gen: ToneGenerator, twin: ToneGenerator) -> None:
    out = np.zeros(10, dtype=np.complex128)

    gen.accum_samples_scaled(out, 10, 0.5)
    gen.accum_samples_scaled(out, 10, 0.5)

    expected = 0.5 * twin.get_samples(10) + 0.5 * twin.get_samples(10)
    np.testing.assert_allclose(out, expected, rtol=0, atol=1e-15)


@pytest.mark.parametrize("num_samples, out, magnitude", [
    (-1, None, 1.0),
    (1.5, None, 1.0),
    (8, np.zeros(4, dtype=np.complex128), 1.0),
    (8, np.zeros(8, dtype=np.float64), 1.0),
    (8, np.zeros((8, 1), dtype=np.complex128), 1.0),
    (8, [0j] * 8, 1.0),
    (8, None, np.ones(7)),
    (8, None, "loud"),
    (8, None, np.array([1.0] * 7 + [np.nan])),
])
def test_invalid_retrieval_leaves_state(num_samples: Any, out: Any, magnitude: Any) -> None:
    for gen in make_generators():
        peek = gen.peek_next_sample()
        with pytest.raises(ValueError):
            gen.get_samples_scaled(num_samples, magnitude, out)
        if isinstance(magnitude, float):
            with pytest.raises(ValueError):
                gen.get_samples(num_samples, out)
        assert gen.get_sample_count() == 0
        assert gen.peek_next_sample() == peek


def test_accum_requires_buffer() -> None:
    gen = FlyingPhasorToneGenerator(0.1)
    with pytest.raises(ValueError):
        gen.accum_samples(None, 4)
    with pytest.raises(ValueError):
        gen.accum_samples(np.zeros(3, dtype=np.complex128), 4)
    assert gen.get_sample_count() == 0


def test_zero_samples() -> None:
    gen = ChirpingPhasorToneGenerator(0.1)
    assert len(gen.get_samples(0)) == 0
    assert gen.get_sample_count() == 0
