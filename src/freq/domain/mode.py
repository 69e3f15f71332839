"""Counting unit selected once for the whole run."""
from enum import Enum, auto


class CountMode(Enum):
    BYTES = auto()
    CODE_POINTS = auto()

    @property
    def hex_width(self) -> int:
        """Minimum number of hex digits used for a key in the report."""
        return 2 if self is CountMode.BYTES else 4
