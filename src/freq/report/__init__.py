"""Rendering a TallyState as the frequency report."""

from freq.report.render import ERROR_KEY, format_line, glyph, render, write_report

__all__ = [
    "ERROR_KEY",
    "format_line",
    "glyph",
    "render",
    "write_report",
]
