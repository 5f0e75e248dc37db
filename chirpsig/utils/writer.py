"""Sample stream serialization

Supported stream formats:
    t32: text, scientific notation with 9 decimal places
    t64: text, scientific notation with 17 decimal places
    b32: raw binary, native byte order, uint32 index and float32 real/imag
    b64: raw binary, native byte order, uint64 index and float64 real/imag

The index column is only written when `include_x` is set, which is
convenient for plotting tools such as gnuplot.
"""

from __future__ import annotations

__all__ = [
    "stream_formats",
    "text_stream_formats",
    "binary_stream_formats",
    "write_chunk",
]

# ChirpSig
from chirpsig.utils.verify import verify_str, verify_int, verify_numpy_array

# Third Party
import numpy as np

# Built-In
from typing import BinaryIO


text_stream_formats = {
    "t32": 9,
    "t64": 17,
}

binary_stream_formats = {
    "b32": (np.uint32, np.float32),
    "b64": (np.uint64, np.float64),
}

stream_formats = list(text_stream_formats.keys()) + list(binary_stream_formats.keys())


def _text_chunk(samples: np.ndarray, precision: int, start_index: int, include_x: bool) -> bytes:
    lines = []
    for n, sample in enumerate(samples.tolist()):
        line = f"{sample.real:.{precision}e} {sample.imag:.{precision}e}"
        if include_x:
            line = f"{start_index + n} {line}"
        lines.append(line)

    if len(lines) == 0:
        return b""
    return ("\n".join(lines) + "\n").encode("ascii")


def _binary_chunk(samples: np.ndarray, index_type, float_type, start_index: int, include_x: bool) -> bytes:
    fields = []
    if include_x:
        fields.append(("x", index_type))
    fields += [("real", float_type), ("imag", float_type)]

    # packed, native byte order records
    records = np.empty(len(samples), dtype=np.dtype(fields))
    if include_x:
        records["x"] = np.arange(start_index, start_index + len(samples))
    records["real"] = samples.real
    records["imag"] = samples.imag

    return records.tobytes()


def write_chunk(
    stream: BinaryIO,
    samples: np.ndarray,
    stream_format: str = "t64",
    start_index: int = 0,
    include_x: bool = False
) -> int:
    """Serializes a chunk of complex samples onto a binary stream.

    Args:
        stream (BinaryIO): Writable binary stream, ex: `sys.stdout.buffer`.
        samples (np.ndarray): Complex samples to write.
        stream_format (str, optional): One of `stream_formats`. Defaults to "t64".
        start_index (int, optional): Sample index of `samples[0]`. Defaults to 0.
        include_x (bool, optional): Prefix each sample with its index. Defaults to False.

    Raises:
        ValueError: Invalid stream format, index or samples.

    Returns:
        int: Sample index following the last sample written.
    """
    stream_format = verify_str(stream_format, "stream_format", valid=stream_formats)
    start_index = verify_int(start_index, "start_index", low=0)
    samples = verify_numpy_array(samples, "samples", dtype_kind="c", check_finite=False)

    if stream_format in text_stream_formats:
        payload = _text_chunk(samples, text_stream_formats[stream_format], start_index, include_x)
    else:
        index_type, float_type = binary_stream_formats[stream_format]
        payload = _binary_chunk(samples, index_type, float_type, start_index, include_x)

    stream.write(payload)
    stream.flush()

    return start_index + len(samples)
