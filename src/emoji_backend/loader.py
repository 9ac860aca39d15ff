from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .models import Corpus, CorpusConfigError
from .normalize import clean_description
from .config import CHUNK_WIDTH, DATA_FILE, ENCODING

# Progress logging (verbose=True, or EMOJI_PICKER_VERBOSE=1 at call time)
VERBOSE_ENV = "EMOJI_PICKER_VERBOSE"
PROGRESS_EVERY_ENTRIES = 500

PathLike = Union[str, Path]


def _iter_lines(path: Path) -> Iterator[Tuple[int, str]]:
    with open(path, "r", encoding=ENCODING) as f:
        for line_no, raw in enumerate(f, start=1):
            yield line_no, raw.rstrip("\r\n")


def iter_pairs(path: PathLike) -> Iterator[Tuple[str, str]]:
    """
    Yield (description, glyph) from a tab-separated corpus file.
    Blank lines and lines starting with '#' are skipped.
    """
    p = Path(path)
    for line_no, line in _iter_lines(p):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        desc, sep, glyph = line.partition("\t")
        if not sep:
            raise CorpusConfigError(f"{p}:{line_no}: expected 'description<TAB>glyph', got {line!r}")
        desc = clean_description(desc)
        glyph = glyph.strip()
        if not desc or not glyph:
            raise CorpusConfigError(f"{p}:{line_no}: empty description or glyph")
        yield desc, glyph


def load_corpus(path: Optional[PathLike] = None, *, width: int = CHUNK_WIDTH, verbose: bool = False) -> Corpus:
    """
    Read a corpus file (the bundled data when `path` is None) into a Corpus.
    Raises CorpusConfigError when the entry count is not a multiple of `width`.
    """
    verbose = verbose or os.environ.get(VERBOSE_ENV) == "1"
    p = Path(path) if path is not None else DATA_FILE
    if not p.is_file():
        raise FileNotFoundError(str(p))

    pairs: List[Tuple[str, str]] = []
    for pair in iter_pairs(p):
        pairs.append(pair)
        if verbose and len(pairs) % PROGRESS_EVERY_ENTRIES == 0:
            print(f"[loaded] entries={len(pairs):,}")

    corpus = Corpus.from_pairs(pairs, width=width, source=str(p))
    if verbose:
        print(f"[done] entries={len(corpus):,} rows={len(corpus) // width:,}")
    return corpus


def load_pairs(pairs: Iterable[Tuple[str, str]], *, width: int = CHUNK_WIDTH) -> Corpus:
    """In-memory form of the load format (ordered list of pairs)."""
    return Corpus.from_pairs(pairs, width=width)
