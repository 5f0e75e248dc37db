"""Chunked streaming of chirping phasor output
"""

from __future__ import annotations

# ChirpSig
from chirpsig.signals.generators.chirping_phasor import ChirpingPhasorToneGenerator
from chirpsig.utils.dsp import chirpsig_complex_data_type
from chirpsig.utils.printing import generate_repr_str, stream_config_str
from chirpsig.utils.verify import verify_float, verify_int, verify_str
from chirpsig.utils.writer import stream_formats, write_chunk

# Third Party
import numpy as np

# Built-In
from typing import BinaryIO
import sys
import warnings


# effectively unbounded chunk count, as an unsigned 64 bit counter
MAX_NUM_CHUNKS = 2**64 - 1

DEFAULT_ACCEL = np.pi / 16384


class StreamConfig():
    """Parameters for streaming a chirp in chunks.

    Attributes:
        accel (float): Angular acceleration in radians per sample per sample. Defaults to pi/16384.
        omega_zero (float): Initial angular velocity in radians per sample (2*pi*f). Defaults to 0.0.
        phi (float): Phase of the first sample in radians. Defaults to 0.0.
        chunk_size (int): Samples per chunk. Zero produces no samples. Defaults to 4096.
        num_chunks (int): Chunks to output. Zero runs until `MAX_NUM_CHUNKS` chunks
            (skipped chunks included) have been generated. Defaults to 1.
        skip_chunks (int): Chunks generated but not output before output begins.
            With `num_chunks=1` and `skip_chunks=4`, chunk number 5 is the only chunk
            output. Defaults to 0.
        stream_format (str): One of "t32", "t64", "b32", "b64". Defaults to "t64".
        include_x (bool): Include the sample index in the output. Defaults to False.
    """

    def __init__(
        self,
        accel: float = DEFAULT_ACCEL,
        omega_zero: float = 0.0,
        phi: float = 0.0,
        chunk_size: int = 4096,
        num_chunks: int = 1,
        skip_chunks: int = 0,
        stream_format: str = "t64",
        include_x: bool = False,
    ):
        """Initializes and verifies a stream configuration.

        Raises:
            ValueError: A parameter has the wrong type or is out of bounds.
        """
        self.accel = verify_float(accel, "accel", low=None)
        self.omega_zero = verify_float(omega_zero, "omega_zero", low=None)
        self.phi = verify_float(phi, "phi", low=None)
        self.chunk_size = verify_int(chunk_size, "chunk_size", low=0)
        self.num_chunks = verify_int(num_chunks, "num_chunks", low=0)
        self.skip_chunks = verify_int(skip_chunks, "skip_chunks", low=0, high=MAX_NUM_CHUNKS)
        self.stream_format = verify_str(stream_format, "stream_format", valid=stream_formats)
        self.include_x = bool(include_x)

    @property
    def total_chunks(self) -> int:
        """Chunks to generate, skipped chunks included.
        """
        if self.num_chunks == 0:
            return MAX_NUM_CHUNKS
        return self.num_chunks + self.skip_chunks

    def update_from(self, attr_dict: dict) -> StreamConfig:
        """Returns a new configuration with the fields in `attr_dict` replaced.
        """
        params = self.to_dict()
        for key, value in attr_dict.items():
            if key not in params:
                raise ValueError(f"Unknown stream config parameter: {key}")
            params[key] = value
        return StreamConfig(**params)

    def to_dict(self) -> dict:
        return {
            "accel": self.accel,
            "omega_zero": self.omega_zero,
            "phi": self.phi,
            "chunk_size": self.chunk_size,
            "num_chunks": self.num_chunks,
            "skip_chunks": self.skip_chunks,
            "stream_format": self.stream_format,
            "include_x": self.include_x,
        }

    def __str__(self) -> str:
        return stream_config_str(self)

    def __repr__(self) -> str:
        return generate_repr_str(self)


def check_rollover(generator: ChirpingPhasorToneGenerator, num_samples: int | None) -> None:
    """Warns when generating `num_samples` more samples takes |omega n| past pi.

    Args:
        generator (ChirpingPhasorToneGenerator): Generator about to be run.
        num_samples (int | None): Samples to be generated, None for unbounded.
    """
    remaining = generator.samples_until_rollover()
    if remaining is None:
        return
    if num_samples is None or num_samples > remaining:
        warnings.warn(
            f"Angular velocity passes pi radians per sample after {remaining} samples; "
            "the chirp frequency will alias beyond that point.",
            UserWarning,
            stacklevel=2
        )


def stream_chirp(config: StreamConfig, stream: BinaryIO = None) -> int:
    """Generates a chirp chunk by chunk and writes the selected chunks to `stream`.

    Skipped chunks are still generated so the chirp state stays continuous.

    Args:
        config (StreamConfig): Stream parameters.
        stream (BinaryIO, optional): Binary output stream. Defaults to `sys.stdout.buffer`.

    Returns:
        int: Number of samples written.
    """
    if stream is None:
        stream = sys.stdout.buffer

    generator = ChirpingPhasorToneGenerator(config.accel, config.omega_zero, config.phi)

    if config.chunk_size == 0:
        return 0

    total_chunks = config.total_chunks
    num_samples = None if config.num_chunks == 0 else total_chunks * config.chunk_size
    check_rollover(generator, num_samples)

    buffer = np.empty(config.chunk_size, dtype=chirpsig_complex_data_type)
    sample_index = 0
    samples_written = 0
    for chunk in range(total_chunks):
        # skipped chunks must still advance the generator
        samples = generator.get_samples(config.chunk_size, buffer)

        if chunk < config.skip_chunks:
            sample_index += config.chunk_size
            continue

        sample_index = write_chunk(
            stream,
            samples,
            stream_format=config.stream_format,
            start_index=sample_index,
            include_x=config.include_x
        )
        samples_written += config.chunk_size

    return samples_written
