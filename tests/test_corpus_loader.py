# tests/test_corpus_loader.py
import io
import logging

import pytest

from fuzzy_index.core.trie import FuzzyIndex
from fuzzy_index.utils import corpus_loader
from fuzzy_index.utils.corpus_loader import CorpusLoadError, index_file, index_lines


def test_index_lines_trims_and_skips_blanks():
    idx = FuzzyIndex()
    n = index_lines(idx, ["  alpha\n", "\tbeta \r\n", "", "   \n", "gamma"])
    assert n == 3
    assert sorted(idx) == ["alpha", "beta", "gamma"]


def test_only_ascii_whitespace_trimmed():
    idx = FuzzyIndex()
    index_lines(idx, ["\u00a0nbsp\u00a0\n", "\u3000wide\n"])
    assert "\u00a0nbsp\u00a0" in idx
    assert "\u3000wide" in idx
    assert "nbsp" not in idx


def test_index_file_password_list(password_file, password_variants):
    idx = FuzzyIndex()
    n = index_file(idx, password_file)
    assert n == 81
    assert len(idx) == 81
    assert "password1" in idx
    assert idx.fuzzy_match("password", 1) == {w: 1 for w in password_variants}


def test_index_file_accepts_str_path(tmp_path):
    p = tmp_path / "words.txt"
    p.write_bytes(b"one\r\ntwo\rthree\nfour")
    idx = FuzzyIndex()
    assert index_file(idx, str(p)) == 4
    assert sorted(idx) == ["four", "one", "three", "two"]


def test_invalid_utf8_becomes_replacement_char(tmp_path):
    p = tmp_path / "latin1.txt"
    p.write_bytes(b"caf\xe9\nok\n")
    idx = FuzzyIndex()
    index_file(idx, p)
    assert "caf\ufffd" in idx
    assert "ok" in idx


def test_missing_file_raises(tmp_path):
    idx = FuzzyIndex()
    idx.insert("kept")
    missing = tmp_path / "nope.txt"
    with pytest.raises(CorpusLoadError) as info:
        index_file(idx, missing)
    err = info.value
    assert isinstance(err, OSError)
    assert isinstance(err.__cause__, FileNotFoundError)
    assert err.path == missing
    assert err.inserted == 0
    assert "nope.txt" in str(err)
    assert "kept" in idx


def test_directory_raises(tmp_path):
    with pytest.raises(CorpusLoadError):
        index_file(FuzzyIndex(), tmp_path)


class _BrokenFile(io.StringIO):
    """Yields a few lines, then fails like a disk read error."""

    def __init__(self, text, fail_after):
        super().__init__(text)
        self.fail_after = fail_after
        self.read_lines = 0

    def __next__(self):
        if self.read_lines == self.fail_after:
            raise OSError(5, "Input/output error")
        self.read_lines += 1
        return super().__next__()


def test_read_error_keeps_partial_index(tmp_path, monkeypatch):
    p = tmp_path / "words.txt"
    p.write_text("alpha\nbeta\ngamma\ndelta\n", encoding="utf-8")

    def fake_open(path, *args, **kwargs):
        return _BrokenFile(p.read_text(encoding="utf-8"), fail_after=2)

    monkeypatch.setattr(corpus_loader, "open", fake_open, raising=False)
    idx = FuzzyIndex()
    with pytest.raises(CorpusLoadError) as info:
        index_file(idx, p)

    assert info.value.inserted == 2
    # no rollback: what got in stays in
    assert sorted(idx) == ["alpha", "beta"]
    assert "gamma" not in idx


def test_load_is_logged(tmp_path, caplog):
    p = tmp_path / "words.txt"
    p.write_text("alpha\nbeta\n", encoding="utf-8")
    with caplog.at_level(logging.INFO, logger="fuzzy_index"):
        index_file(FuzzyIndex(), p)
    messages = [r.getMessage() for r in caplog.records]
    assert any("indexed 2 lines" in m for m in messages)
    assert any(m.startswith("index ") and " done: " in m for m in messages)
