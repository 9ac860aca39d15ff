import math
import pytest
from emoji_backend.chunker import RowView, chunks
from emoji_backend.models import EMPTY_SLOT, Entry, FilteredResult

def _result(n: int) -> FilteredResult:
    return FilteredResult.of("q", (Entry(f"e{i}", chr(0x1F600 + i)) for i in range(n)))

@pytest.mark.parametrize("n", [0, 1, 4, 5, 6, 10, 13, 1570])
def test_row_count_width_and_reconstruction(n: int):
    result = _result(n)
    view = chunks(result)
    rows = list(view)
    assert len(rows) == len(view) == math.ceil(n / 5)
    assert all(len(r) == 5 for r in rows)
    real = [e for r in rows for e in r.real_entries()]
    assert real == result.entries
    assert view.real_entries() == result.entries

def test_padding_is_the_sentinel_and_only_at_the_end():
    rows = list(chunks(_result(7)))
    assert rows[0].real_count == 5 and not any(e.is_placeholder for e in rows[0])
    assert rows[1].real_count == 2
    assert rows[1][2] is EMPTY_SLOT and rows[1][4] is EMPTY_SLOT
    assert rows[1].glyph_at(2) is None
    assert rows[1].glyph_at(1) == rows[1][1].glyph

def test_sentinel_is_structurally_distinct():
    lookalike = Entry(" ", "0")
    assert EMPTY_SLOT.is_placeholder and not lookalike.is_placeholder
    assert EMPTY_SLOT != lookalike

def test_view_is_restartable_and_tracks_source():
    result = _result(6)
    view = chunks(result)
    first = [r.slots for r in view]
    second = [r.slots for r in view]
    assert first == second
    result.entries.append(Entry("late", "L"))
    assert list(view)[1].real_count == 2

def test_getitem_matches_iteration():
    view = chunks(_result(12))
    assert [view[i] for i in range(len(view))] == list(view)
    assert view[-1].index == 2
    with pytest.raises(IndexError):
        view[3]

def test_custom_width_and_invalid_width():
    view = chunks(_result(7), width=3)
    assert [r.real_count for r in view] == [3, 3, 1]
    with pytest.raises(ValueError):
        RowView(_result(1), width=0)

def test_for_each_visits_every_row():
    seen = []
    chunks(_result(11)).for_each(lambda row, i: seen.append((i, row.real_count)))
    assert seen == [(0, 5), (1, 5), (2, 1)]

def test_for_each_mut_forwards_only_real_slots():
    result = _result(7)
    marked = Entry("marked", "M")

    def mark_all(slots, idx):
        for c in range(len(slots)):
            slots[c] = marked

    chunks(result).for_each_mut(mark_all)
    assert len(result) == 7
    assert all(e is marked for e in result)
    # padding was dropped: a fresh view still pads with the sentinel
    last = list(chunks(result))[-1]
    assert last[2] is EMPTY_SLOT

def test_for_each_mut_rejects_row_length_change():
    result = _result(7)
    with pytest.raises(ValueError, match="row length"):
        chunks(result).for_each_mut(lambda slots, idx: slots.pop())
    assert len(result) == 7
    with pytest.raises(ValueError):
        chunks(result).for_each_mut(lambda slots, idx: slots.append(Entry("extra", "X")))
    assert len(result) == 7
