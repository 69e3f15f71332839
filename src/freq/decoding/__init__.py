"""Turning input streams into counting keys."""

from freq.decoding.reader import (
    DEFAULT_CHUNK_SIZE,
    STDIN_NAME,
    tally_bytes,
    tally_code_points,
    tally_files,
    tally_stream,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "STDIN_NAME",
    "tally_bytes",
    "tally_code_points",
    "tally_files",
    "tally_stream",
]
