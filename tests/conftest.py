# tests/conftest.py
# shared fixtures: small indexes, word lists on disk, clean logging state

import logging

import pytest

from fuzzy_index.core.trie import FuzzyIndex
from fuzzy_index.utils.logger_utils import PACKAGE_LOGGER


def _one_edit_from_password():
    """81 distinct words, each exactly one edit away from "password"."""
    base = "password"
    words = []
    for extra in "0123456789!@#$?":
        words.append(base + extra)
        words.append(extra + base)
    for i in range(len(base)):
        for ch in "01xz#":
            words.append(base[:i] + ch + base[i + 1:])
    # deleting either "s" gives the same word, so set() keeps 7 of the 8
    words.extend(sorted({base[:i] + base[i + 1:] for i in range(len(base))}))
    for i in range(1, 5):
        words.append(base[:i] + "_" + base[i:])
    return words


def _plain_levenshtein(a, b):
    """Textbook full-matrix DP, kept independent of the package code."""
    rows = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        rows[i][0] = i
    for j in range(len(b) + 1):
        rows[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            rows[i][j] = min(
                rows[i - 1][j] + 1,
                rows[i][j - 1] + 1,
                rows[i - 1][j - 1] + cost,
            )
    return rows[len(a)][len(b)]


@pytest.fixture
def plain_levenshtein():
    return _plain_levenshtein


@pytest.fixture
def password_variants():
    words = _one_edit_from_password()
    assert len(words) == len(set(words)) == 81
    return words


@pytest.fixture
def password_file(tmp_path, password_variants):
    # mixed line endings, padding and blank lines, no trailing newline
    lines = []
    for i, w in enumerate(password_variants):
        ending = ("\n", "\r\n", "\r")[i % 3]
        pad = " \t" if i % 5 == 0 else ""
        if i % 20 == 0:
            lines.append("   " + ending)
        lines.append(pad + w + pad + ending)
    text = "".join(lines).rstrip("\r\n")
    p = tmp_path / "password.1.txt"
    p.write_bytes(text.encode("utf-8"))
    return p


@pytest.fixture
def index():
    idx = FuzzyIndex()
    idx.insert_many(["Prinzhorn", "prinzhorn", "Crème fraîche", "👻💩💩👻"])
    return idx


@pytest.fixture(autouse=True)
def reset_package_logger():
    """setup_logging() detaches the package logger from root; undo it between tests."""
    yield
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
