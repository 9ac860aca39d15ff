"""Text rendering helpers shared by the CLI host."""
from __future__ import annotations
from typing import Any, Dict, Iterable, List

from emoji_backend.models import Row

PAD_CELL = "·"


def format_row(row: Row) -> str:
    """One grid row as fixed-width cells; padding shows as PAD_CELL."""
    cells = [PAD_CELL if e.is_placeholder else e.glyph for e in row]
    return f"{row.index:<4} " + "  ".join(f"{c:<2}" for c in cells)


def rows_to_dicts(rows: Iterable[Row]) -> List[List[Dict[str, Any]]]:
    return [
        [{"description": e.description, "glyph": e.glyph, "placeholder": e.is_placeholder} for e in row]
        for row in rows
    ]
