import pytest
from prediction.ranker import levenshtein_distance, rank_suggestions


class ExplodingDictionary:
    def __iter__(self):
        raise AssertionError("dictionary should not be read")


@pytest.mark.parametrize("a, b, expected", [
    ("", "", 0),
    ("abc", "", 3),
    ("", "abc", 3),
    ("kitten", "sitting", 3),
    ("flaw", "lawn", 2),
    ("ab", "ba", 2),  # no transposition discount
    ("hello", "hello", 0),
])
def test_levenshtein_distance(a, b, expected):
    assert levenshtein_distance(a, b) == expected


def test_no_candidate_returns_empty_without_reading_dictionary():
    assert rank_suggestions(None, ExplodingDictionary()) == []
    assert rank_suggestions("", ExplodingDictionary()) == []


def test_no_dictionary_returns_candidate():
    assert rank_suggestions("qwe", None) == ["qwe"]


def test_empty_dictionary_returns_empty():
    assert rank_suggestions("qwe", []) == []


def test_prefix_filter():
    words = ["hello", "help", "world", "he", "hat"]
    assert set(rank_suggestions("helo", words)) == {"hello", "help", "he"}


def test_sorted_by_distance_with_stable_ties():
    words = ["went", "west", "were", "wert", "wet"]
    result = rank_suggestions("wert", words)
    assert result[0] == "wert"
    # All others are distance 1 and keep dictionary order
    assert result[1:] == ["went", "west", "were", "wet"]


def test_limit_and_ordering():
    words = ["theory", "they", "the", "then", "there", "these", "thee", "thy"]
    result = rank_suggestions("the", words, limit=3)
    assert len(result) == 3
    distances = [levenshtein_distance("the", w) for w in result]
    assert distances == sorted(distances)
    assert result[0] == "the"


def test_prefix_length_zero_disables_filter():
    result = rank_suggestions("cat", ["bat", "dog"], prefix_length=0)
    assert result == ["bat", "dog"]


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        rank_suggestions("the", ["the", "then", "they", "them"], limit=-1)


def test_zero_limit_is_empty():
    assert rank_suggestions("the", ["the", "then"], limit=0) == []
