# emoji_backend/engine.py
from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional, Tuple

from . import config as CFG
from .models import Corpus, FilteredResult, PickerState, Row
from .loader import load_corpus, load_pairs as _corpus_from_pairs
from .search import filter_corpus
from .normalize import clean_query
from .cache import ResultCache
from .chunker import RowView, chunks

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the read-only Corpus (loader.load_corpus),
      - the filter step (search.filter_corpus),
      - the single-slot ResultCache,
      - the row view for the grid (chunker.chunks).

    Public API (used by the GUI, CLI and Flask hosts):
      * build(path, ...):        load a corpus file -> initial unfiltered result
      * load_pairs(pairs):       same, from an in-memory list of pairs
      * on_query_changed(text):  re-filter, install, return the staleness signal
      * rows():                  row view of the current result
      * search(text):            on_query_changed + rows + generation, atomically
      * activate(row, col, ...): glyph for a clicked slot of the installed result (None for padding)
      * shutdown():              retire the cached result
    """

    # ------------- lifecycle -------------

    def __init__(self, *, width: int = CFG.CHUNK_WIDTH) -> None:
        self.width = width
        self.state: Optional[PickerState] = None
        self._lock = threading.RLock()

    # /* ~~~ Load the corpus and install the empty-query result ~~~ */
    def build(self, path: Optional[str] = None, *, verbose: bool = False) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)

        log.info("Loading corpus from %s", path or CFG.DATA_FILE)
        corpus = load_corpus(path, width=self.width, verbose=verbose)
        self._attach(corpus)

    def load_pairs(self, pairs: Iterable[Tuple[str, str]]) -> None:
        corpus = _corpus_from_pairs(pairs, width=self.width)
        self._attach(corpus)

    # ------------- query -------------

    # /* ~~~ Host calls this on every text change ~~~ */
    def on_query_changed(self, query: str) -> bool:
        state = self._require_state()
        with self._lock:
            result = filter_corpus(state.corpus, query)
            state.search = result.query
            changed = state.cache.replace(result)
        log.debug("query %r -> %d entries (changed=%s)", result.query, len(result), changed)
        return changed

    def current(self) -> FilteredResult:
        return self._require_state().cache.current()

    def rows(self) -> RowView:
        return chunks(self.current(), self.width)

    def search(self, query: str) -> Tuple[FilteredResult, List[Row], int]:
        """Filter, install and snapshot rows and generation without another caller slipping in between."""
        with self._lock:
            self.on_query_changed(query)
            result = self.current()
            return result, list(chunks(result, self.width)), self.generation

    # /* ~~~ Resolve a click on (row, col) to the glyph to copy ~~~ */
    def activate(self, row: int, col: int, *, query: Optional[str] = None) -> Optional[str]:
        """
        Look (row, col) up in the installed result; never re-filters.
        With `query`, a click aimed at a result other than the installed one resolves to None.
        """
        with self._lock:
            result = self.current()
        if query is not None and clean_query(query) != result.query:
            log.debug("activate (%d, %d): stale query %r, installed %r", row, col, query, result.query)
            return None
        view = chunks(result, self.width)
        if not 0 <= row < len(view):
            log.debug("activate (%d, %d): row out of range", row, col)
            return None
        glyph = view[row].glyph_at(col)
        if glyph is not None:
            log.info("activate (%d, %d): %s", row, col, glyph)
        return glyph

    @property
    def corpus(self) -> Corpus:
        return self._require_state().corpus

    @property
    def generation(self) -> int:
        return self._require_state().cache.generation

    # ------------- teardown -------------

    # /* ~~~ Retire the cached result and detach the state ~~~ */
    def shutdown(self) -> None:
        try:
            if self.state is not None:
                self.state.cache.clear()
        finally:
            self.state = None
            log.info("Engine shutdown complete")

    # ------------- internals -------------

    def _attach(self, corpus: Corpus) -> None:
        cache = ResultCache(filter_corpus(corpus, ""))
        with self._lock:
            self.state = PickerState(corpus=corpus, cache=cache)
        log.info("Engine ready: entries=%d rows=%d", len(corpus), len(corpus) // self.width)

    def _require_state(self) -> PickerState:
        if self.state is None:
            raise RuntimeError("Engine not initialized. Call build() or load_pairs() first.")
        return self.state
