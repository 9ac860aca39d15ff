from __future__ import annotations
from typing import List, Optional

from . import config as CFG
from .normalize import is_boundary

# Returned by score() for matches that bypass the threshold (empty query, substring).
ALWAYS: int = 1 << 30


def fuzzy_score(candidate: str, query: str) -> Optional[int]:
    """
    /* ~~~ Best subsequence alignment of query inside candidate, or None. ~~~ */

    Each query char must be matched, in order, to a later candidate char.
    Per matched char:  +MATCH_SCORE
                       +CONSECUTIVE_BONUS  if it directly follows the previous match
                       +BOUNDARY_BONUS     if it starts a word in candidate
                       -GAP_PENALTY        per candidate char skipped since the previous match
    Chars skipped before the first match or after the last one cost nothing.
    Case-sensitive.
    """
    m, n = len(query), len(candidate)
    if m == 0 or m > n:
        return None

    bonus = [CFG.BOUNDARY_BONUS if is_boundary(candidate, j) else 0 for j in range(n)]

    # prev[j]: best score with the previous query char matched at candidate[j]
    prev: List[Optional[int]] = [
        CFG.MATCH_SCORE + bonus[j] if candidate[j] == query[0] else None for j in range(n)
    ]

    for i in range(1, m):
        q = query[i]
        cur: List[Optional[int]] = [None] * n
        # best prev[k] - GAP_PENALTY * (j - k - 1) over k <= j - 2
        gap_best: Optional[int] = None
        for j in range(n):
            if j >= 2:
                decayed = None if gap_best is None else gap_best - CFG.GAP_PENALTY
                fresh = None if prev[j - 2] is None else prev[j - 2] - CFG.GAP_PENALTY
                gap_best = _max(decayed, fresh)
            if candidate[j] != q:
                continue
            adj = None
            if j >= 1 and prev[j - 1] is not None:
                adj = prev[j - 1] + CFG.CONSECUTIVE_BONUS
            best = _max(adj, gap_best)
            if best is not None:
                cur[j] = best + CFG.MATCH_SCORE + bonus[j]
        prev = cur

    found = [s for s in prev if s is not None]
    return max(found) if found else None


def _max(a: Optional[int], b: Optional[int]) -> Optional[int]:
    if a is None:
        return b
    if b is None:
        return a
    return a if a >= b else b


def is_match(candidate: str, query: str) -> bool:
    """Empty query and literal substrings always match; otherwise fuzzy score must beat the threshold."""
    if not query or query in candidate:
        return True
    s = fuzzy_score(candidate, query)
    return s is not None and s > CFG.MATCH_THRESHOLD


def score(candidate: str, query: str) -> Optional[int]:
    """Scored form of is_match(): ALWAYS for unconditional matches, the fuzzy score above threshold, else None."""
    if not query or query in candidate:
        return ALWAYS
    s = fuzzy_score(candidate, query)
    if s is None or s <= CFG.MATCH_THRESHOLD:
        return None
    return s
