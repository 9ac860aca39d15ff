# app.py
# CustomTkinter GUI for the Emoji Picker (dark theme).
# - Background corpus load (keeps UI responsive).
# - Live search with debounce; results in a scrollable 5-wide tile grid.
# - Click a tile to copy its glyph to the clipboard.

from __future__ import annotations
import argparse
import threading
from typing import List, Optional

import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (pip install -e . or PYTHONPATH=src)
from emoji_backend import Engine
from emoji_backend import config as CFG


class EmojiPickerApp(ctk.CTk):
    """Dark-themed picker window: search entry on top, tile grid below."""

    def __init__(self, corpus_path: Optional[str] = None) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Emoji Picker")
        self.geometry(CFG.WINDOW_SIZE)
        self.minsize(298, 324)

        # State
        self._engine = Engine()
        self._corpus_path = corpus_path
        self._ready: bool = False
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None
        self._tiles: List[List[ctk.CTkButton]] = []

        # Fonts
        self.font_tile = ctk.CTkFont(size=CFG.TILE_FONT_SIZE)
        self.font_label = ctk.CTkFont(size=12)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(1, weight=1)  # tiles

        # Build UI
        self._build_search()
        self._build_grid()
        self._build_status()

        self._set_status("Loading…")
        self.protocol("WM_DELETE_WINDOW", self._on_close)
        self._start_loading()

    # --------- UI sections ---------

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=0, column=0, sticky="ew", padx=8, pady=(8, 4))
        box.grid_columnconfigure(0, weight=1)

        self.entry_query = ctk.CTkEntry(box, placeholder_text="Search emoji's")
        self.entry_query.grid(row=0, column=0, sticky="ew", padx=6, pady=6)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

    def _build_grid(self) -> None:
        self.grid_frame = ctk.CTkScrollableFrame(self, corner_radius=8)
        self.grid_frame.grid(row=1, column=0, sticky="nsew", padx=8, pady=4)
        for col in range(self._engine.width):
            self.grid_frame.grid_columnconfigure(col, weight=1, uniform="tile")

    def _build_status(self) -> None:
        self.progress = ctk.CTkProgressBar(self, mode="indeterminate", height=4)
        self.progress.grid(row=2, column=0, sticky="ew", padx=8)
        self.lbl_status = ctk.CTkLabel(self, text="", anchor="w", font=self.font_label)
        self.lbl_status.grid(row=3, column=0, sticky="ew", padx=10, pady=(2, 6))

    # --------- loading (threaded) ---------

    def _start_loading(self) -> None:
        self.progress.start()
        self._loading_thread = threading.Thread(target=self._load_worker, daemon=True)
        self._loading_thread.start()

    def _load_worker(self) -> None:
        try:
            self._engine.build(self._corpus_path)
        except Exception as exc:
            self.after(0, lambda: self._on_load_error(exc))
            return
        self.after(0, self._on_load_ok)

    def _on_load_ok(self) -> None:
        self.progress.stop()
        self.progress.grid_remove()
        self._ready = True
        self._relayout()
        self._refresh()
        self._set_status(f"{len(self._engine.corpus):,} emoji")
        self.entry_query.focus_set()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status(f"ERROR: {exc}")
        mb.showerror("Load error", f"Failed to load emoji corpus.\n{exc}")

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        # debounce for smoother typing
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(CFG.SEARCH_DEBOUNCE_MS, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        if not self._ready:
            return
        changed = self._engine.on_query_changed(self.entry_query.get())
        # row count only moves when the result length does; labels always refresh
        if changed:
            self._relayout()
        self._refresh()
        self._set_status(f"{len(self._engine.current()):,} matches")

    # --------- tile grid ---------

    def _relayout(self) -> None:
        """Grow or shrink the pool of tile rows to match the current row count."""
        wanted = len(self._engine.rows())
        while len(self._tiles) > wanted:
            for btn in self._tiles.pop():
                btn.destroy()
        while len(self._tiles) < wanted:
            r = len(self._tiles)
            row_btns = []
            for c in range(self._engine.width):
                btn = ctk.CTkButton(
                    self.grid_frame, text="", width=46, height=46, font=self.font_tile,
                    fg_color=("gray80", "gray16"), hover_color=("gray70", "gray25"),
                    command=lambda r=r, c=c: self._on_tile(r, c),
                )
                btn.grid(row=r, column=c, padx=1, pady=1, sticky="ew")
                row_btns.append(btn)
            self._tiles.append(row_btns)

    def _refresh(self) -> None:
        for row in self._engine.rows():
            if row.index >= len(self._tiles):
                break
            for col, entry in enumerate(row):
                btn = self._tiles[row.index][col]
                if entry.is_placeholder:
                    btn.configure(text="", state="disabled")
                else:
                    btn.configure(text=entry.glyph, state="normal")

    def _on_tile(self, row: int, col: int) -> None:
        glyph = self._engine.activate(row, col)
        if glyph is None:
            return
        self.clipboard_clear()
        self.clipboard_append(glyph)
        self._set_status(f"Copied {glyph}")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=text)

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Emoji picker window")
    ap.add_argument("--corpus", default=None, help="Corpus file (description<TAB>glyph); bundled data if omitted")
    args = ap.parse_args(argv)
    app = EmojiPickerApp(corpus_path=args.corpus)
    app.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
