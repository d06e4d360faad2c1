from swipe.reducer import KeyVisit
from swipe.word_builder import build_word


def test_no_visits_is_none():
    assert build_word([], 0.3) is None


def test_all_below_threshold_is_none():
    visits = [KeyVisit("q", 0.1, 0), KeyVisit("w", 0.3, 40)]
    assert build_word(visits, 0.3) is None


def test_threshold_is_exclusive():
    visits = [KeyVisit("h", 0.9, 0), KeyVisit("x", 0.3, 40), KeyVisit("i", 0.31, 80)]
    assert build_word(visits, 0.3) == "hi"


def test_word_is_lower_case_in_visit_order():
    visits = [KeyVisit("Q", 1.0, 0), KeyVisit("W", 0.8, 40), KeyVisit("e", 0.5, 80)]
    assert build_word(visits, 0.3) == "qwe"


def test_filtered_visits_are_left_in_place():
    visits = [KeyVisit("a", 0.1, 0), KeyVisit("b", 0.9, 40)]
    assert build_word(visits, 0.3) == "b"
    assert len(visits) == 2
