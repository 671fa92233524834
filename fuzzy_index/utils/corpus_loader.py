# corpus_loader.py
# Feed line-oriented word lists (one word per line) into a FuzzyIndex.
# Lines are trimmed of ASCII whitespace only, so non-ASCII spacing that is
# part of a word survives. Loading is not transactional: whatever was
# inserted before a read error stays in the index.

from __future__ import annotations

import logging
import os
from typing import Iterable, Iterator, Union

from fuzzy_index.core.trie import FuzzyIndex
from fuzzy_index.utils.logger_utils import time_block

logger = logging.getLogger(__name__)

ASCII_WHITESPACE = " \t\n\r\x0b\x0c"
PathLike = Union[str, "os.PathLike[str]"]


class CorpusLoadError(OSError):
    """Opening or reading a corpus failed; `inserted` words made it in first."""

    def __init__(self, path: PathLike, inserted: int, reason: BaseException):
        super().__init__(f"could not load corpus {os.fspath(path)!r}: {reason}")
        self.path = path
        self.inserted = inserted
        self.reason = reason


def _clean(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        word = line.strip(ASCII_WHITESPACE)
        if word:
            yield word


def index_lines(index: FuzzyIndex, lines: Iterable[str]) -> int:
    """Insert every non-blank trimmed line; return how many were inserted."""
    inserted = 0
    for word in _clean(lines):
        index.insert(word)
        inserted += 1
    return inserted


def index_file(index: FuzzyIndex, path: PathLike) -> int:
    """
    Index a UTF-8 word list. Any newline convention works and the last
    line needn't be terminated; undecodable bytes become U+FFFD.
    Raises CorpusLoadError if the file can't be opened or read.
    """
    inserted = 0
    try:
        with time_block(f"index {os.fspath(path)}", logger):
            with open(path, "r", encoding="utf-8", errors="replace", newline=None) as f:
                for word in _clean(f):
                    index.insert(word)
                    inserted += 1
    except OSError as exc:
        logger.error("corpus %s failed after %d lines: %s", path, inserted, exc)
        raise CorpusLoadError(path, inserted, exc) from exc

    logger.info("indexed %s lines from %s (%d distinct words)", f"{inserted:,}", path, len(index))
    return inserted
