from __future__ import annotations
from typing import Callable, Iterator, List

from .config import CHUNK_WIDTH
from .models import EMPTY_SLOT, Entry, FilteredResult, Row


class RowView:
    """
    Restartable lazy view of `result` as fixed-width rows.

    Every iteration rebuilds rows from the result; nothing is cached between
    calls. The last row is padded with EMPTY_SLOT up to `width`.
    """

    def __init__(self, result: FilteredResult, width: int = CHUNK_WIDTH) -> None:
        if width <= 0:
            raise ValueError(f"row width must be positive, got {width}")
        self._result = result
        self.width = width

    def __len__(self) -> int:
        # ceil(len / width)
        return -(-len(self._result) // self.width)

    def __iter__(self) -> Iterator[Row]:
        entries = self._result.entries
        w = self.width
        for idx, start in enumerate(range(0, len(entries), w)):
            chunk = entries[start:start + w]
            real = len(chunk)
            yield Row(index=idx, slots=tuple(chunk) + (EMPTY_SLOT,) * (w - real), real_count=real)

    def __getitem__(self, idx: int) -> Row:
        n = len(self)
        if idx < 0:
            idx += n
        if not 0 <= idx < n:
            raise IndexError(f"row {idx} out of range ({n} rows)")
        start = idx * self.width
        chunk = self._result.entries[start:start + self.width]
        real = len(chunk)
        return Row(index=idx, slots=tuple(chunk) + (EMPTY_SLOT,) * (self.width - real), real_count=real)

    def for_each(self, cb: Callable[[Row, int], None]) -> None:
        for row in self:
            cb(row, row.index)

    def for_each_mut(self, cb: Callable[[List[Entry], int], None]) -> None:
        """
        Hand `cb` a mutable copy of each row. Writes to real slots are copied
        back onto the result's entries; writes to padding slots are dropped.
        The callback may replace slots but not add or remove them (ValueError).
        """
        entries = self._result.entries
        w = self.width
        for idx, start in enumerate(range(0, len(entries), w)):
            real = min(w, len(entries) - start)
            slots: List[Entry] = entries[start:start + real] + [EMPTY_SLOT] * (w - real)
            cb(slots, idx)
            if len(slots) != w:
                raise ValueError(f"row {idx}: callback changed the row length from {w} to {len(slots)}")
            for c in range(real):
                entries[start + c] = slots[c]

    def real_entries(self) -> List[Entry]:
        """Concatenation of every row's real slots (equals the source result)."""
        out: List[Entry] = []
        for row in self:
            out.extend(row.real_entries())
        return out


def chunks(result: FilteredResult, width: int = CHUNK_WIDTH) -> RowView:
    return RowView(result, width)
