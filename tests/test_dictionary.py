import json
import pytest
from prediction.dictionary import DEFAULT_DICTIONARY_PATH, FALLBACK_WORDS, load_dictionary


def test_json_ranks_define_order(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"hello": 3, "The": 1, "and": 2}))
    assert load_dictionary(path) == ["the", "and", "hello"]


def test_json_list_keeps_file_order(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["zebra", "apple", "zebra"]))
    assert load_dictionary(path) == ["zebra", "apple"]


def test_text_file_skips_comments_and_blanks(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# common words\nhello\n\n  World \nhello\n")
    assert load_dictionary(path) == ["hello", "world"]


def test_missing_file_uses_fallback(tmp_path):
    assert load_dictionary(tmp_path / "nope.json") == FALLBACK_WORDS


def test_unsupported_format(tmp_path):
    path = tmp_path / "words.csv"
    path.write_text("hello,world")
    with pytest.raises(ValueError):
        load_dictionary(path)


def test_bundled_dictionary():
    assert DEFAULT_DICTIONARY_PATH.exists()
    words = load_dictionary()
    assert words[0] == "the"
    assert "hello" in words
    assert len(words) == len(set(words))
