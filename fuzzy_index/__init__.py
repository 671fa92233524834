"""
fuzzy_index

Typo tolerant word index: exact membership plus "every word within N
edits" lookups over a code-point trie.

    from fuzzy_index import FuzzyIndex

    index = FuzzyIndex()
    index.insert_many(["Prinzhorn", "prinzhorn"])
    index.fuzzy_match("Prinzhorn", 2)   # {"Prinzhorn": 0, "prinzhorn": 1}
"""

from .core import FuzzyIndex, TrieNode, levenshtein
from .utils import CorpusLoadError, index_file, index_lines

__all__ = [
    "FuzzyIndex",
    "TrieNode",
    "levenshtein",
    "CorpusLoadError",
    "index_file",
    "index_lines",
]

__version__ = "0.1.0"
