"""Sparse frequency table over 22-bit integer keys.

Unicode needs 21 bits and byte values need 8, so one table shape serves
both counting modes. A flat counter array over the whole key space would
be 4M uint64 cells (32 MB) allocated before reading a single byte. Instead
the key is split base-256 into three digits and the counters live at the
bottom of a three-level tree:

    root[high] -> mid node
    mid[mid]   -> leaf (256 consecutive uint64 counters)
    leaf[low]  += 1

    high = bits 16-23, mid = bits 8-15, low = bits 0-7

Nodes are allocated the first time an increment passes through them.
Real text touches very few 256-key blocks (ASCII is one, Latin-1 is a
second, a CJK document adds a few dozen), so memory scales with the
number of distinct blocks observed rather than with the key space.

Walking the slots in index order at every level visits keys in ascending
numeric order, since the split is a positional base-256 encoding.
"""

from __future__ import annotations

import array
from collections.abc import Iterator

RADIX = 256
KEY_BITS = 22
KEY_MASK = (1 << KEY_BITS) - 1

# A leaf is a block of 256 unsigned 64-bit counters.
_ZERO_LEAF = array.array("Q", [0]) * RADIX


class SparseCountTable:
    """Counts occurrences of integer keys in [0, 0x3FFFFF].

    Keys outside that range are masked to their low 22 bits, so increment
    never fails. Counters are uint64; overflow is not handled.
    """

    def __init__(self) -> None:
        # The root is always present; it is needed unless the input is empty.
        self._root: list[list[array.array | None] | None] = [None] * RADIX
        self._total = 0

    @property
    def total(self) -> int:
        """Total number of increments applied."""
        return self._total

    def increment(self, key: int, count: int = 1) -> None:
        """Add count (default 1) to the counter for key."""
        key &= KEY_MASK
        high = (key >> 16) & 0xFF
        mid = (key >> 8) & 0xFF
        low = key & 0xFF

        node = self._root[high]
        if node is None:
            node = [None] * RADIX
            self._root[high] = node
        leaf = node[mid]
        if leaf is None:
            leaf = array.array("Q", _ZERO_LEAF)
            node[mid] = leaf
        leaf[low] += count
        self._total += count

    def get(self, key: int) -> int:
        """Return the count for key, 0 if it was never incremented."""
        key &= KEY_MASK
        node = self._root[(key >> 16) & 0xFF]
        if node is None:
            return 0
        leaf = node[(key >> 8) & 0xFF]
        if leaf is None:
            return 0
        return leaf[key & 0xFF]

    def items(self) -> Iterator[tuple[int, int]]:
        """Yield (key, count) for every nonzero counter, ascending by key.

        Each call starts a fresh walk over the current contents. The table
        must not be incremented while a walk is in progress.
        """
        for high, node in enumerate(self._root):
            if node is None:
                continue
            for mid, leaf in enumerate(node):
                if leaf is None:
                    continue
                base = (high << 16) | (mid << 8)
                for low, count in enumerate(leaf):
                    if count:
                        yield base | low, count

    def __len__(self) -> int:
        """Number of distinct keys with a nonzero count."""
        return sum(1 for _ in self.items())

    def node_count(self) -> int:
        """Count allocated nodes, root included (for memory reporting)."""
        count = 1
        for node in self._root:
            if node is None:
                continue
            count += 1 + sum(1 for leaf in node if leaf is not None)
        return count

    def memory_bytes(self) -> int:
        """Approximate memory held by slot lists and leaf counters."""
        slot_size = 8  # one pointer per list slot
        total = RADIX * slot_size
        for node in self._root:
            if node is None:
                continue
            total += RADIX * slot_size
            for leaf in node:
                if leaf is not None:
                    total += RADIX * leaf.itemsize
        return total
