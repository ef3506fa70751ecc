from __future__ import annotations

from pathlib import Path

import pytest

from graphpoet.corpus import CorpusUnreadableError, read_corpus_lines, split_words


def test_split_words_collapses_whitespace() -> None:
    assert split_words("  one\ttwo\n\nthree\r\nfour  ") == ["one", "two", "three", "four"]


def test_split_words_keeps_case_and_punctuation() -> None:
    assert split_words("Hello, WORLD!") == ["Hello,", "WORLD!"]


def test_split_words_empty() -> None:
    assert split_words("") == []
    assert split_words(" \t\n ") == []


def test_read_corpus_lines(tmp_path: Path) -> None:
    path = tmp_path / "corpus.txt"
    path.write_text("first line\nsecond line\n", encoding="utf-8")
    assert read_corpus_lines(path) == ["first line", "second line"]


def test_read_corpus_lines_accepts_str_path(tmp_path: Path) -> None:
    path = tmp_path / "corpus.txt"
    path.write_text("only", encoding="utf-8")
    assert read_corpus_lines(str(path)) == ["only"]


def test_missing_corpus_raises(tmp_path: Path) -> None:
    missing = tmp_path / "nonexistent.txt"
    with pytest.raises(CorpusUnreadableError) as excinfo:
        read_corpus_lines(missing)
    assert excinfo.value.path == str(missing)
    assert "nonexistent.txt" in str(excinfo.value)


def test_corpus_error_is_os_error(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_corpus_lines(tmp_path / "nonexistent.txt")


def test_directory_corpus_raises(tmp_path: Path) -> None:
    with pytest.raises(CorpusUnreadableError):
        read_corpus_lines(tmp_path)


def test_undecodable_corpus_raises(tmp_path: Path) -> None:
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\xfa not utf-8")
    with pytest.raises(CorpusUnreadableError):
        read_corpus_lines(path, encoding="utf-8")
