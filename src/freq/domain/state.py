"""Mutable state threaded through the consume and report phases."""
from __future__ import annotations

from dataclasses import dataclass, field

from freq.counting.table import SparseCountTable


@dataclass
class TallyState:
    """Counts gathered from every input source of one run.

    table holds the per-unit counts. errors counts input bytes that could
    not be decoded in code-point mode; they never reach the table, so a
    validly encoded U+FFFD stays distinguishable from a decode failure.
    """
    table: SparseCountTable = field(default_factory=SparseCountTable)
    errors: int = 0
