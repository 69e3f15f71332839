"""Shared domain types: counting mode, run state, and errors."""

from freq.domain.errors import FreqError, SourceOpenError, SourceReadError
from freq.domain.mode import CountMode
from freq.domain.state import TallyState

__all__ = [
    "CountMode",
    "FreqError",
    "SourceOpenError",
    "SourceReadError",
    "TallyState",
]
