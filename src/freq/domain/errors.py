"""Failures that abort a run.

Malformed UTF-8 is not one of them: undecodable bytes are counted in
TallyState.errors and show up as the "error" line of the report.
"""
from __future__ import annotations


class FreqError(Exception):
    """Base class for errors that end the run with exit status 1."""


class SourceOpenError(FreqError):
    """Raised when a named input file cannot be opened."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(str(cause))


class SourceReadError(FreqError):
    """Raised when reading from an open source fails before end of stream."""

    def __init__(self, name: str, cause: OSError) -> None:
        self.name = name
        self.cause = cause
        super().__init__(f"{name}: {cause}")
