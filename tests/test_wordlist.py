import logging

from seqtrie.constants import SAMPLE_WORDS
from seqtrie.wordlist import WordList


def write_words(tmp_path, *lines):
    path = tmp_path / "words.txt"
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(path)


def test_load_from_explicit_path(tmp_path, caplog):
    path = write_words(tmp_path, "Apple", "app", "apply", "banana")

    with caplog.at_level(logging.INFO, logger="seqtrie.wordlist"):
        wl = WordList(path, search_paths=[])

    assert len(wl) == 4
    assert wl.source == path
    assert "apple" in wl
    assert "APPLE" in wl
    assert f"Loaded 4 words from {path}" in caplog.text


def test_load_filters_blank_and_multiword_lines(tmp_path):
    path = write_words(tmp_path, "", "   ", "ice cream", "ice", "x" * 100)

    wl = WordList(path, search_paths=[])

    assert len(wl) == 1
    assert "ice" in wl
    assert "ice cream" not in wl


def test_search_paths_tried_in_order(tmp_path):
    missing = str(tmp_path / "missing.txt")
    path = write_words(tmp_path, "dog", "door")

    wl = WordList(search_paths=[missing, path])

    assert wl.source == path
    assert wl.complete("do") == ["dog", "door"]


def test_falls_back_to_sample_words(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="seqtrie.wordlist"):
        wl = WordList(str(tmp_path / "missing.txt"), search_paths=[])

    assert wl.source is None
    assert len(wl) == len(SAMPLE_WORDS)
    assert "No word list found" in caplog.text
    assert set(wl.complete("care")) == {"care", "cared"}


def test_empty_file_falls_through(tmp_path):
    empty = tmp_path / "empty.txt"
    empty.write_text("", encoding="utf-8")
    path = write_words(tmp_path, "zebra")

    wl = WordList(str(empty), search_paths=[path])

    assert wl.source == path
    assert "zebra" in wl


def test_complete_with_limit():
    wl = WordList(search_paths=[])

    assert wl.complete("car", limit=3) == ["car", "card", "care"]
    assert wl.complete("car", limit=0) == []
    assert len(wl.complete("car")) == 8
    assert wl.complete("zzz") == []


def test_case_sensitive_list(tmp_path):
    path = write_words(tmp_path, "Paris", "paris")

    wl = WordList(path, lowercase=False, search_paths=[])

    assert len(wl) == 2
    assert wl.complete("P") == ["Paris"]


def test_add_and_discard():
    wl = WordList(search_paths=[])

    assert wl.add("Carton") is True
    assert "carton" in wl
    assert wl.add("two words") is False

    wl.discard("CARTON")
    assert "carton" not in wl
    assert len(wl) == len(SAMPLE_WORDS)
