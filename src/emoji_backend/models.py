# src/emoji_backend/models.py
"""
Data models for the emoji picker engine.

- Entry: one (description, glyph) pair of the corpus.
- EmptySlot / EMPTY_SLOT: the sentinel used to pad the last grid row.
- Corpus: the immutable, ordered set of all entries.
- FilteredResult: the ordered subsequence of the corpus matching one query.
- Row: a fixed-width group of slots handed to the grid.
- PickerState: the single state value a host threads through its event loop.

These classes carry no matching logic; see matcher.py, search.py, cache.py and
chunker.py for that.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, TYPE_CHECKING

from .config import CHUNK_WIDTH, EMPTY_DESCRIPTION, EMPTY_GLYPH

if TYPE_CHECKING:  # pragma: no cover
    from .cache import ResultCache


class CorpusConfigError(ValueError):
    """The corpus data violates a startup invariant (fatal, fail fast)."""


@dataclass(frozen=True, slots=True)
class Entry:
    """
    One labeled symbol.

    Attributes
    ----------
    description : str
        Text the query is matched against (case-sensitive).
    glyph : str
        What the grid displays and what gets copied on activation.
    """
    description: str
    glyph: str

    @property
    def is_placeholder(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class EmptySlot(Entry):
    """Padding for the trailing slots of the last row. Never selectable."""
    description: str = EMPTY_DESCRIPTION
    glyph: str = EMPTY_GLYPH

    @property
    def is_placeholder(self) -> bool:
        return True


EMPTY_SLOT = EmptySlot()


@dataclass(frozen=True, slots=True)
class Corpus:
    """
    Ordered, read-only sequence of entries loaded once at startup.

    Build it through from_pairs(), which checks every pair and the
    divisibility invariant instead of trusting the data source.
    """
    entries: Tuple[Entry, ...]
    source: str = "<memory>"

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[str, str]],
        *,
        width: int = CHUNK_WIDTH,
        source: str = "<memory>",
    ) -> "Corpus":
        entries: List[Entry] = []
        for i, pair in enumerate(pairs, start=1):
            try:
                description, glyph = pair
            except (TypeError, ValueError) as exc:
                raise CorpusConfigError(f"{source}: item {i} is not a (description, glyph) pair: {pair!r}") from exc
            if not isinstance(description, str) or not isinstance(glyph, str):
                raise CorpusConfigError(f"{source}: item {i} must hold two strings, got {pair!r}")
            if not description or not glyph:
                raise CorpusConfigError(f"{source}: item {i} has an empty description or glyph")
            entries.append(Entry(description, glyph))

        if len(entries) % width != 0:
            raise CorpusConfigError(
                f"{source}: corpus holds {len(entries)} entries, "
                f"which is not evenly divisible by the row width {width}"
            )
        return cls(entries=tuple(entries), source=source)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, i: int) -> Entry:
        return self.entries[i]


# not slotted: the cache tests observe retirement through weak references
@dataclass(frozen=True)
class FilteredResult:
    """
    Entries of the corpus matching `query`, in corpus order.

    `entries` is a plain list so that row views can forward per-slot writes
    back onto it; the list itself is owned by whoever holds the result
    (normally the ResultCache).
    """
    query: str
    entries: List[Entry] = field(default_factory=list)

    @classmethod
    def of(cls, query: str, entries: Iterable[Entry]) -> "FilteredResult":
        return cls(query=query, entries=list(entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.entries)

    def __getitem__(self, i: int) -> Entry:
        return self.entries[i]


@dataclass(frozen=True, slots=True)
class Row:
    """A grid row: exactly `width` slots, trailing ones may be EMPTY_SLOT."""
    index: int
    slots: Tuple[Entry, ...]
    real_count: int

    def __len__(self) -> int:
        return len(self.slots)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self.slots)

    def __getitem__(self, col: int) -> Entry:
        return self.slots[col]

    def real_entries(self) -> Sequence[Entry]:
        return self.slots[:self.real_count]

    def glyph_at(self, col: int) -> Optional[str]:
        """Glyph for a click on `col`, or None for padding / out of range."""
        if not 0 <= col < len(self.slots):
            return None
        e = self.slots[col]
        return None if e.is_placeholder else e.glyph


@dataclass
class PickerState:
    """
    Application state value passed through the host's update cycle.

    Created once at startup; only ResultCache.replace mutates the cached
    result it holds.
    """
    corpus: Corpus
    cache: "ResultCache"
    search: str = ""
