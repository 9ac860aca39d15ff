from __future__ import annotations
import os
from pathlib import Path

# package root: src/emoji_backend/
PACKAGE_ROOT = Path(__file__).resolve().parent

# bundled corpus (one "description<TAB>glyph" pair per line)
DATA_FILE = Path(os.environ.get("EMOJI_PICKER_CORPUS") or PACKAGE_ROOT / "data" / "emojis.tsv")
ENCODING = "utf-8"
EXPECTED_CORPUS_SIZE: int = 1570

# grid layout
CHUNK_WIDTH: int = 5

# empty-slot sentinel used to pad the last row
EMPTY_DESCRIPTION: str = " "
EMPTY_GLYPH: str = "0"

# /* ~~~ fuzzy matcher weights; only the threshold is part of the contract ~~~ */
MATCH_THRESHOLD: int = 25
MATCH_SCORE: int = 10
CONSECUTIVE_BONUS: int = 8
BOUNDARY_BONUS: int = 6
GAP_PENALTY: int = 2

# GUI host
SEARCH_DEBOUNCE_MS: int = 120
TILE_FONT_SIZE: int = 30
WINDOW_SIZE: str = "330x420"
