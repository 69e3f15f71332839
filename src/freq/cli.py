"""freq CLI entry point.

Usage: freq [-bytes] [file ...]

Counts how many times each distinct Unicode code point appears in the
input, or each byte value with -bytes, and prints the table to standard
output one count per line. Reads standard input when no files are given.
"""
from __future__ import annotations

import argparse
import io
import logging
import os
import sys
from typing import TextIO

from freq.decoding.reader import STDIN_NAME, tally_files, tally_stream
from freq.domain.errors import FreqError
from freq.domain.mode import CountMode
from freq.domain.state import TallyState
from freq.report.render import write_report

PROG = "freq"

log = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        allow_abbrev=False,
        description="Count occurrences of each code point (or byte) in the input.",
    )
    parser.add_argument(
        "-bytes", "--bytes", "-b", dest="count_bytes", action="store_true",
        help="count bytes (default is code points)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="log progress and table statistics to stderr",
    )
    parser.add_argument(
        "files", nargs="*", metavar="file",
        help="input files (default: standard input)",
    )
    return parser


def _utf8_stdout() -> TextIO:
    """Return sys.stdout switched to UTF-8 regardless of the locale."""
    out = sys.stdout
    if isinstance(out, io.TextIOWrapper):
        out.reconfigure(encoding="utf-8")
    return out


def _consume(files: list[str], state: TallyState, mode: CountMode) -> None:
    if not files:
        tally_stream(STDIN_NAME, sys.stdin.buffer, state, mode)
    else:
        tally_files(files, state, mode)


def main(argv: list[str] | None = None) -> None:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format=f"{PROG}: %(name)s: %(message)s",
        )

    mode = CountMode.BYTES if args.count_bytes else CountMode.CODE_POINTS
    state = TallyState()
    try:
        _consume(args.files, state, mode)
    except FreqError as exc:
        print(f"{PROG}: {exc}", file=sys.stderr)
        sys.exit(1)

    if log.isEnabledFor(logging.DEBUG):
        table = state.table
        log.debug(
            "%d distinct keys, %d decode errors, %d nodes, ~%d bytes",
            len(table), state.errors, table.node_count(), table.memory_bytes(),
        )
    out = _utf8_stdout()
    try:
        write_report(state, mode, out)
        out.flush()
    except BrokenPipeError:
        # Stdout reader is gone; the flush at interpreter exit must go to devnull.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, out.fileno())
        sys.exit(1)
