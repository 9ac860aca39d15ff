"""
Emoji Picker Engine

Filters a fixed corpus of (description, glyph) pairs against a live query
and hands the matches to a grid host as rows of five.

- Corpus loading and validation (loader, models)
- Matching: empty query, literal substring, then fuzzy subsequence > 25
- Single-slot result cache with a length-only staleness signal
- Row chunking with explicit empty-slot padding

Example Usage:
    from emoji_backend import Engine

    eng = Engine()
    eng.build()                 # bundled corpus
    eng.on_query_changed("apple")
    for row in eng.rows():
        print([e.glyph for e in row.real_entries()])
"""

# src/emoji_backend/__init__.py
from .engine import Engine
from .loader import load_corpus
from .search import filter_corpus
from .cache import ResultCache
from .chunker import chunks
from .models import Corpus, CorpusConfigError, Entry, EMPTY_SLOT, FilteredResult, Row

__version__ = "1.0.0"
__all__ = [
    "Engine", "load_corpus", "filter_corpus", "ResultCache", "chunks",
    "Corpus", "CorpusConfigError", "Entry", "EMPTY_SLOT", "FilteredResult", "Row",
]
