"""Report formatting.

One line per nonzero counter in ascending key order:

    0061 a\t2        printable unit: hex code, glyph, count
    0020 -\t7        unprintable unit (or space): hex code, dash, count
    error -\t1       decode errors, only when there were any

Space is printable but is shown as "-" so the glyph column never holds
an invisible character.
"""
from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import TextIO

from freq.domain.mode import CountMode
from freq.domain.state import TallyState

ERROR_KEY = "error"
PLACEHOLDER = "-"
_MAX_CODE_POINT = 0x10FFFF


def glyph(key: int) -> str | None:
    """Return the character to display for key, or None if unprintable.

    str.isprintable() rejects the Other and Separator categories except
    U+0020, which leaves letters, marks, numbers, punctuation and symbols.
    """
    if key == 0x20 or key > _MAX_CODE_POINT:
        return None
    ch = chr(key)
    return ch if ch.isprintable() else None


def format_line(key: int, count: int, mode: CountMode) -> str:
    """Format a single report line, newline included."""
    ch = glyph(key)
    return f"{key:0{mode.hex_width}x} {ch or PLACEHOLDER}\t{count}\n"


def render(state: TallyState, mode: CountMode) -> Iterator[str]:
    """Yield the report lines for state. Does not modify state."""
    for key, count in state.table.items():
        yield format_line(key, count, mode)
    if state.errors > 0:
        yield f"{ERROR_KEY} {PLACEHOLDER}\t{state.errors}\n"


def write_report(
    state: TallyState,
    mode: CountMode,
    out: TextIO | None = None,
) -> None:
    """Write the full report to out (default sys.stdout)."""
    if out is None:
        out = sys.stdout
    out.writelines(render(state, mode))
