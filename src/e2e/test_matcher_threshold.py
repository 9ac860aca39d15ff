import pytest
from emoji_backend.matcher import ALWAYS, fuzzy_score, is_match, score

def test_empty_query_always_matches():
    assert is_match("anything", "")
    assert is_match("", "")
    assert score("anything", "") == ALWAYS

def test_substring_bypasses_threshold():
    # the fuzzy score alone (10) would not pass
    assert fuzzy_score("grape", "a") == 10
    assert is_match("grape", "a")
    assert score("grape", "ape") == ALWAYS

def test_consecutive_runs_score_high():
    # a(10+6) p(+10+8) l(gap, +10+8 from second p) e(+10+8)
    assert fuzzy_score("apple", "aple") == 60
    assert is_match("apple", "aple")
    assert score("apple", "aple") == 60

def test_scattered_short_match_is_below_threshold():
    assert fuzzy_score("apple", "ae") == 20
    assert fuzzy_score("grape", "ga") == 24
    assert not is_match("apple", "ae")
    assert not is_match("grape", "ga")
    assert score("apple", "ae") is None

def test_word_boundary_bonus_can_tip_the_threshold():
    assert fuzzy_score("red flag", "rf") == 26
    assert fuzzy_score("redxflag", "rf") == 20
    assert is_match("red flag", "rf")
    assert not is_match("redxflag", "rf")

def test_threshold_is_strict(monkeypatch):
    from emoji_backend import config as CFG
    assert CFG.MATCH_THRESHOLD == 25
    monkeypatch.setattr(CFG, "MATCH_THRESHOLD", 26)
    # score 26 must beat the threshold, not merely reach it
    assert not is_match("red flag", "rf")
    assert score("red flag", "rf") is None

def test_order_matters_and_case_sensitive():
    assert fuzzy_score("apple", "ea") is None
    assert fuzzy_score("kiwi", "Kiwi") is None
    assert not is_match("kiwi", "K")
    assert fuzzy_score("Kiwi Fruit", "KiF") == 44
    assert is_match("Kiwi Fruit", "KiF")

@pytest.mark.parametrize("cand,q", [("", "a"), ("ab", "abc")])
def test_query_longer_than_candidate(cand, q):
    assert fuzzy_score(cand, q) is None
    assert not is_match(cand, q)
