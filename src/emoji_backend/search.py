from __future__ import annotations
import logging
from typing import Iterable, List, Tuple

from .models import Corpus, Entry, FilteredResult
from .matcher import is_match
from .normalize import clean_query

log = logging.getLogger(__name__)


def filter_corpus(corpus: Corpus, query: str) -> FilteredResult:
    """
    Stable filter of `corpus` by `query`.

    Keeps corpus order (no scoring-based sort), never mutates the corpus and
    never touches the cache; installing the result is the caller's job.
    An empty result is a normal outcome, not an error.
    """
    q = clean_query(query)
    hits: List[Entry] = [e for e in corpus if is_match(e.description, q)]
    log.debug("filter %r: %d/%d entries", q, len(hits), len(corpus))
    return FilteredResult(query=q, entries=hits)


def filter_pairs(pairs: Iterable[Tuple[str, str]], query: str) -> List[Tuple[str, str]]:
    """Same rules as filter_corpus() for raw (description, glyph) pairs."""
    q = clean_query(query)
    return [(d, g) for d, g in pairs if is_match(d, q)]
