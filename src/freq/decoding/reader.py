"""Read input sources and feed their units into a TallyState.

Byte mode counts every byte value. Code-point mode decodes UTF-8 with
the "surrogateescape" error handler: each byte that is not part of a
valid sequence comes out as one lone surrogate in U+DC80..U+DCFF. A
valid UTF-8 stream can never decode to a surrogate, so those characters
are exactly the decode errors, one per bad byte, and a genuine U+FFFD
in the input decodes as itself and is counted like any other character.

Streams are read in fixed-size chunks and each chunk is counted with a
Counter before touching the table, so the table sees one increment per
distinct unit per chunk instead of one per unit.
"""
from __future__ import annotations

import codecs
import logging
from collections import Counter
from collections.abc import Iterable
from typing import BinaryIO

from freq.domain.errors import SourceOpenError, SourceReadError
from freq.domain.mode import CountMode
from freq.domain.state import TallyState

log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 64 * 1024
STDIN_NAME = "<stdin>"

# surrogateescape maps undecodable byte b to chr(0xDC00 + b), b >= 0x80.
_ESCAPE_FIRST = 0xDC80
_ESCAPE_LAST = 0xDCFF


def _read_chunks(name: str, stream: BinaryIO, chunk_size: int) -> Iterable[bytes]:
    """Yield chunks until end of stream, wrapping I/O failures."""
    if chunk_size < 1:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")
    while True:
        try:
            chunk = stream.read(chunk_size)
        except OSError as exc:
            raise SourceReadError(name, exc) from exc
        if not chunk:
            return
        yield chunk


def tally_bytes(
    name: str,
    stream: BinaryIO,
    state: TallyState,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Count every byte of stream into state. Returns bytes read."""
    table = state.table
    nread = 0
    for chunk in _read_chunks(name, stream, chunk_size):
        nread += len(chunk)
        for value, n in Counter(chunk).items():
            table.increment(value, n)
    return nread


def _tally_text(text: str, state: TallyState) -> None:
    table = state.table
    for ch, n in Counter(text).items():
        cp = ord(ch)
        if _ESCAPE_FIRST <= cp <= _ESCAPE_LAST:
            state.errors += n
        else:
            table.increment(cp, n)


def tally_code_points(
    name: str,
    stream: BinaryIO,
    state: TallyState,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Decode stream as UTF-8 and count code points into state.

    Sequences split across chunk boundaries are carried over by the
    incremental decoder. A sequence still incomplete at end of stream
    counts one error per leftover byte. Returns bytes read.
    """
    decoder = codecs.getincrementaldecoder("utf-8")(errors="surrogateescape")
    nread = 0
    for chunk in _read_chunks(name, stream, chunk_size):
        nread += len(chunk)
        _tally_text(decoder.decode(chunk), state)
    _tally_text(decoder.decode(b"", final=True), state)
    return nread


def tally_stream(
    name: str,
    stream: BinaryIO,
    state: TallyState,
    mode: CountMode,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> int:
    """Count one already-open source in the given mode."""
    log.debug("reading %s", name)
    if mode is CountMode.BYTES:
        nread = tally_bytes(name, stream, state, chunk_size)
    else:
        nread = tally_code_points(name, stream, state, chunk_size)
    log.debug("finished %s: %d bytes", name, nread)
    return nread


def tally_files(
    paths: Iterable[str],
    state: TallyState,
    mode: CountMode,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    """Count each file in order, closing each before opening the next.

    Stops at the first file that cannot be opened or read; files after
    it are not touched.
    """
    for path in paths:
        try:
            f = open(path, "rb")
        except OSError as exc:
            raise SourceOpenError(path, exc) from exc
        with f:
            tally_stream(path, f, state, mode, chunk_size)
