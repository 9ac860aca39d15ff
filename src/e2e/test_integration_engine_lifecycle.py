from pathlib import Path
import pytest
from emoji_backend import config as CFG
from emoji_backend.engine import Engine

def _seed(tmp: Path, n: int = 10) -> str:
    path = tmp / "mojis.tsv"
    path.write_text("".join(f"symbol {i}\t{chr(0x1F400 + i)}\n" for i in range(n)), encoding="utf-8")
    return str(path)

@pytest.mark.e2e
def test_build_bundled_then_query(tmp_path: Path):
    eng = Engine()
    try:
        eng.build()
        assert len(eng.current()) == CFG.EXPECTED_CORPUS_SIZE
        assert len(eng.rows()) == CFG.EXPECTED_CORPUS_SIZE // CFG.CHUNK_WIDTH
        eng.on_query_changed("apple")
        descs = [e.description for e in eng.current()]
        assert "red apple" in descs and "green apple" in descs
        assert descs.index("green apple") < descs.index("red apple")
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_on_query_changed_tracks_search_and_generation(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(_seed(tmp_path))
        g0 = eng.generation
        assert eng.on_query_changed("symbol 3") is True
        assert eng.state.search == "symbol 3"
        assert eng.generation == g0 + 1
        assert [e.description for e in eng.current()] == ["symbol 3"]
        # "symbol 4" also has length 1 -> coarse signal says unchanged
        assert eng.on_query_changed("symbol 4") is False
        assert eng.activate(0, 0) == chr(0x1F404)
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_search_snapshot_matches_current(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(_seed(tmp_path))
        result, rows, generation = eng.search("symbol")
        assert result is eng.current()
        assert generation == eng.generation
        assert len(rows) == 2 and rows[1].real_count == 5
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_activate_reads_installed_result_without_refiltering(tmp_path: Path):
    eng = Engine()
    try:
        eng.build(_seed(tmp_path))
        eng.on_query_changed("symbol 2")
        g0 = eng.generation
        assert eng.activate(0, 0, query="symbol 2") == chr(0x1F402)
        assert eng.activate(0, 0, query="symbol 7") is None
        assert eng.activate(0, 1) is None
        assert eng.generation == g0
        assert [e.description for e in eng.current()] == ["symbol 2"]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_build_verbose_prints_progress(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.delenv("EMOJI_PICKER_VERBOSE", raising=False)
    eng = Engine()
    try:
        eng.build(_seed(tmp_path, 1000), verbose=True)
        out = capsys.readouterr().out
        assert "[loaded] entries=500" in out
        assert "[done] entries=1,000 rows=200" in out
        eng.build(_seed(tmp_path, 10))
        assert "[done]" not in capsys.readouterr().out
    finally:
        eng.shutdown()

def test_load_pairs_and_shutdown():
    eng = Engine()
    eng.load_pairs([("a", "1"), ("b", "2"), ("c", "3"), ("d", "4"), ("e", "5")])
    assert len(eng.corpus) == 5
    eng.shutdown()
    assert eng.state is None
    with pytest.raises(RuntimeError):
        eng.current()
