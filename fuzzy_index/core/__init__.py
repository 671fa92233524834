"""
fuzzy_index.core

Data structures behind the index:
 - code-point trie with exact and bounded fuzzy lookup (FuzzyIndex)
 - reference Levenshtein distance (levenshtein)
"""

from .trie import FuzzyIndex, TrieNode
from .distance import levenshtein
from .text import to_text

__all__ = [
    "FuzzyIndex",
    "TrieNode",
    "levenshtein",
    "to_text",
]
