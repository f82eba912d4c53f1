# beam_solver/pool.py
# The shared offcut pool: a multiset of lengths consumed by committed plans.
#
# Storage is a list of (length, source_index) kept sorted ascending, so both
# greedy queries are a bisection (nearest at-or-above / nearest at-or-below)
# instead of a scan. Equal lengths are kept apart by their input position:
# among equal lengths the lowest source_index is always taken first, which
# makes every run deterministic for a given input order.

from __future__ import annotations

import math
from bisect import bisect_left, bisect_right, insort
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple, Union

from .types import Offcut, expand_offcuts, require_length


class OffcutPool:
    def __init__(self, offcuts: Iterable[Union[int, Offcut]] = ()) -> None:
        self._items: List[Tuple[int, int]] = []
        self._next_index = 0
        self.restore(offcuts)

    @classmethod
    def from_lengths(cls, lengths: Iterable[int]) -> "OffcutPool":
        return cls(expand_offcuts(list(lengths)))

    # ----------------------------
    # Queries that remove
    # ----------------------------

    def take_smallest_completing(self, threshold: int) -> Optional[Offcut]:
        """Remove and return the smallest offcut with length >= threshold (None if there is none)."""
        i = bisect_left(self._items, (threshold, -1))
        if i == len(self._items):
            return None
        # bisect_left already lands on the lowest source_index of that length
        length, source_index = self._items.pop(i)
        return Offcut(length=length, source_index=source_index)

    def take_largest_fitting(self, limit: int) -> Optional[Offcut]:
        """Remove and return the largest offcut with length <= limit (None if there is none)."""
        i = bisect_right(self._items, (limit, math.inf))
        if i == 0:
            return None
        return self._pop_first_of_length(self._items[i - 1][0])

    def remove(self, length: int) -> Offcut:
        """Remove one instance of an exact length. Raises ValueError if none is left."""
        i = bisect_left(self._items, (length, -1))
        if i == len(self._items) or self._items[i][0] != length:
            raise ValueError(f"No offcut of length {length} in pool")
        length, source_index = self._items.pop(i)
        return Offcut(length=length, source_index=source_index)

    def _pop_first_of_length(self, length: int) -> Offcut:
        i = bisect_left(self._items, (length, -1))
        length, source_index = self._items.pop(i)
        return Offcut(length=length, source_index=source_index)

    # ----------------------------
    # Undo
    # ----------------------------

    def restore(self, offcuts: Iterable[Union[int, Offcut]]) -> None:
        """
        Put offcuts (back) into the pool.
        Offcut instances keep their source_index; bare ints get fresh indices
        after everything seen so far.
        """
        for oc in offcuts:
            if isinstance(oc, Offcut):
                entry = (oc.length, oc.source_index)
            else:
                entry = (require_length(oc, "Offcut length"), self._next_index)
            if entry[1] >= self._next_index:
                self._next_index = entry[1] + 1
            insort(self._items, entry)

    # ----------------------------
    # Read-only views
    # ----------------------------

    def lengths(self) -> List[int]:
        """All remaining lengths, longest first."""
        return [length for length, _ in reversed(self._items)]

    def offcuts(self) -> List[Offcut]:
        """Remaining instances, longest first (ties: lowest source_index first)."""
        out = [Offcut(length=l, source_index=i) for l, i in self._items]
        out.sort(key=lambda oc: (-oc.length, oc.source_index))
        return out

    def counts(self) -> Dict[int, int]:
        return dict(Counter(length for length, _ in self._items))

    def total_length(self) -> int:
        return sum(length for length, _ in self._items)

    def snapshot(self) -> Tuple[Tuple[int, int], ...]:
        """Immutable copy of the exact pool state (for rollback checks)."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"OffcutPool({self.lengths()})"
