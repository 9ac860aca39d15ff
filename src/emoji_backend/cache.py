# src/emoji_backend/cache.py
"""
Single-slot owner of the current FilteredResult.

The host calls replace() once per query change. Replacement is a plain
reference swap under a lock: the new result is complete before it becomes
visible, and the previous one is dropped only after the swap, so a reader
calling current() sees either the old or the new result in full. The cache
keeps no other reference to retired results, which lets them be collected
as soon as the caller's transient references go away.
"""

from __future__ import annotations
import logging
import threading

from .models import FilteredResult

log = logging.getLogger(__name__)


def same(a: FilteredResult, b: FilteredResult) -> bool:
    """
    Coarse "did the visible result change" signal.

    Compares lengths only: two different results of equal length count as
    unchanged. Hosts use this to skip re-laying out the grid; it is not a
    content check.
    """
    return len(a) == len(b)


class ResultCache:
    """
    Owns exactly one current result at a time.

    Public API:
      * replace(result) -> bool   install a new result, retire the old one
      * current()                 the installed result
      * generation                number of completed replacements
      * clear()                   install an empty result
    """

    def __init__(self, initial: FilteredResult | None = None) -> None:
        self._lock = threading.Lock()
        self._current: FilteredResult = initial if initial is not None else FilteredResult(query="")
        self._generation = 0

    # /* ~~~ swap the slot; returns the staleness signal (True = looks changed) ~~~ */
    def replace(self, new_result: FilteredResult) -> bool:
        with self._lock:
            old = self._current
            self._current = new_result
            self._generation += 1
            changed = not same(old, new_result)
            gen = self._generation
        # drop our last reference to the retired result outside the lock
        del old
        log.debug("replace gen=%d len=%d changed=%s", gen, len(new_result), changed)
        return changed

    def current(self) -> FilteredResult:
        with self._lock:
            return self._current

    @property
    def generation(self) -> int:
        return self._generation

    def clear(self) -> bool:
        return self.replace(FilteredResult(query=""))

    def __len__(self) -> int:
        return len(self.current())
