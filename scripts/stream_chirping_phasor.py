"""Chirping phasor streaming for command line

Writes chirping phasor output to standard out for whatever analytical
purposes, ex: plotting or spectral analysis. Redirect it as needed.

Example:
To stream two chunks of 1024 samples in text with sample indices:
    >>> python stream_chirping_phasor.py --accel=0.0001 --chunk_size=1024 --num_chunks=2 --include_x

Exit codes:
    0: Success.
    2: Command line parsing error.
    3: Invalid stream format.
"""

# ChirpSig
from chirpsig.utils.stream import stream_chirp
from chirpsig.utils.writer import stream_formats
from chirpsig.utils.yaml import load_yaml_dict, stream_config_from_yaml_dict

# Third Party
import yaml

# Built-In
import argparse
import sys


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Streams chirping phasor samples to standard out."
    )

    parser.add_argument("--config", type=str, default=None, help="YAML stream configuration. Flags given on the command line override it.")
    parser.add_argument("--accel", type=float, default=None, help="Acceleration in radians per sample per sample. Defaults to pi/16384.")
    parser.add_argument("--omega_zero", type=float, default=None, help="Initial angular velocity in radians per sample (equal 2*pi*f). Defaults to 0.")
    parser.add_argument("--phi", type=float, default=None, help="Initial phase of the starting sample in radians. Defaults to 0.")
    parser.add_argument("--chunk_size", type=int, default=None, help="Samples per chunk. If zero, no samples are produced. Defaults to 4096.")
    parser.add_argument("--num_chunks", type=int, default=None, help="Chunks to output. If zero, runs continually. Defaults to 1.")
    parser.add_argument("--skip_chunks", type=int, default=None, help="Chunks to skip before any chunks are output. Defaults to 0.")
    parser.add_argument("--stream_format", type=str, default=None, help=f"One of {stream_formats}. Defaults to t64.")
    parser.add_argument("--include_x", action="store_true", default=None, help="Include the sample count in the output stream.")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {k: v for k, v in vars(args).items() if k != "config" and v is not None}

    try:
        params = {} if args.config is None else load_yaml_dict(args.config)
    except (OSError, yaml.YAMLError) as e:
        parser.error(str(e))
    if not isinstance(params, dict):
        parser.error(f"stream config YAML must be a mapping: {args.config}")
    params.update(overrides)

    # flags override the config file, so the format is checked once merged
    stream_format = params.get("stream_format", "t64")
    if not isinstance(stream_format, str) or stream_format.strip().lower() not in stream_formats:
        print(
            f"stream_chirping_phasor Error: Invalid stream format {stream_format}. Use --help for instructions",
            file=sys.stderr
        )
        return 3

    try:
        config = stream_config_from_yaml_dict(params)
    except ValueError as e:
        parser.error(str(e))

    stream_chirp(config, sys.stdout.buffer)

    return 0


if __name__ == "__main__":
    sys.exit(main())
