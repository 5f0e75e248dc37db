"""Unit Tests for utils/stream.py
"""

from chirpsig.signals.generators.chirping_phasor import chirping_phasor_modulator
from chirpsig.utils.stream import (
    DEFAULT_ACCEL,
    MAX_NUM_CHUNKS,
    StreamConfig,
    stream_chirp,
)

# Third Party
import numpy as np
import pytest

# Built-In
import io
import math
import warnings


def test_stream_config_defaults() -> None:
    config = StreamConfig()

    assert config.accel == DEFAULT_ACCEL == math.pi / 16384
    assert config.omega_zero == 0.0
    assert config.phi == 0.0
    assert config.chunk_size == 4096
    assert config.num_chunks == 1
    assert config.skip_chunks == 0
    assert config.stream_format == "t64"
    assert config.include_x is False
    assert config.total_chunks == 1


def test_stream_config_total_chunks() -> None:
    assert StreamConfig(num_chunks=2, skip_chunks=3).total_chunks == 5
    assert StreamConfig(num_chunks=0, skip_chunks=3).total_chunks == MAX_NUM_CHUNKS


def test_stream_config_update_from() -> None:
    config = StreamConfig(chunk_size=8)
    updated = config.update_from({"chunk_size": 16, "stream_format": "B64"})

    assert config.chunk_size == 8
    assert updated.chunk_size == 16
    assert updated.stream_format == "b64"

    with pytest.raises(ValueError):
        config.update_from({"chunkSize": 16})


def test_stream_config_str() -> None:
    text = str(StreamConfig(chunk_size=8))
    assert "StreamConfig" in text
    assert "chunk_size" in text
    assert repr(StreamConfig(chunk_size=8)).startswith("StreamConfig(accel=")


@pytest.mark.parametrize("params", [
    {"chunk_size": -1},
    {"num_chunks": 1.5},
    {"skip_chunks": -2},
    {"accel": "fast"},
    {"stream_format": "csv"},
])
def test_stream_config_invalid(params: dict) -> None:
    with pytest.raises(ValueError):
        StreamConfig(**params)


def test_stream_chirp_skips_chunks() -> None:
    config = StreamConfig(
        accel=0.001,
        omega_zero=0.1,
        chunk_size=16,
        num_chunks=2,
        skip_chunks=1,
        stream_format="b64",
        include_x=True
    )
    stream = io.BytesIO()

    samples_written = stream_chirp(config, stream)

    records = np.frombuffer(
        stream.getvalue(),
        dtype=np.dtype([("x", np.uint64), ("real", np.float64), ("imag", np.float64)])
    )
    expected = chirping_phasor_modulator(48, 0.001, 0.1)[16:]

    assert samples_written == 32
    np.testing.assert_array_equal(records["x"], np.arange(16, 48))
    np.testing.assert_array_equal(records["real"] + 1j * records["imag"], expected)


def test_stream_chirp_text() -> None:
    stream = io.BytesIO()

    stream_chirp(StreamConfig(chunk_size=4, num_chunks=3), stream)

    lines = stream.getvalue().decode("ascii").splitlines()
    assert len(lines) == 12
    assert lines[0] == "1.00000000000000000e+00 0.00000000000000000e+00"


def test_stream_chirp_zero_chunk_size() -> None:
    stream = io.BytesIO()
    assert stream_chirp(StreamConfig(chunk_size=0, num_chunks=5), stream) == 0
    assert stream.getvalue() == b""


def test_stream_chirp_rollover_warning() -> None:
    with pytest.warns(UserWarning, match="pi radians per sample"):
        stream_chirp(StreamConfig(accel=0.1, chunk_size=64), io.BytesIO())


def test_stream_chirp_no_rollover_warning() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        stream_chirp(StreamConfig(accel=0.001, chunk_size=64, num_chunks=2), io.BytesIO())
        stream_chirp(StreamConfig(accel=0.0, omega_zero=1.0, chunk_size=64), io.BytesIO())
