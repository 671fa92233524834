# trie.py
# Code-point trie with exact lookup and bounded Levenshtein search.
# Every node remembers the longest word tail reachable below it, which lets
# both lookup and fuzzy search cut whole subtrees early.
# Search uses an explicit stack (no recursion), so big edit budgets don't
# grow the interpreter stack.

from __future__ import annotations

import logging
import operator
from collections import defaultdict
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .text import Text, to_text

logger = logging.getLogger(__name__)

Word = str
Distance = int
Match = Tuple[Word, Distance]
State = Tuple["TrieNode", str, int]  # (node, query suffix, distance so far)


class TrieNode:
    """
    A single node in the trie.
    children: code point -> TrieNode
    bound_length: longest number of code points any indexed word still has
                  to consume below this node (never decreases)
    word: the full word ending here, or None
    """

    __slots__ = ("children", "bound_length", "word")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = defaultdict(TrieNode)
        self.bound_length = 0
        self.word: Optional[str] = None


class FuzzyIndex:
    """
    Append-only word index answering:
     - exact membership (`contains` / `in`)
     - every word within an edit distance of a query (`fuzzy_match`)
    Words are case and diacritic sensitive; nothing is normalized.
    """

    def __init__(self) -> None:
        self._root = TrieNode()
        self._size = 0

    # insertion -----------------------------------------------------
    def insert(self, word: Text) -> None:
        """
        Insert a word. Empty words are ignored.
        Re-inserting a known word changes nothing.
        """
        word = to_text(word)
        if not word:
            return

        node = self._root
        remaining = len(word)
        if node.bound_length < remaining:
            node.bound_length = remaining

        for ch in word:
            node = node.children[ch]
            remaining -= 1
            if node.bound_length < remaining:
                node.bound_length = remaining

        # terminal node keeps the whole word
        if node.word is None:
            node.word = word
            self._size += 1

    def insert_many(self, words: Iterable[Text]) -> None:
        for w in words:
            self.insert(w)

    # exact lookup ---------------------------------------------------------
    def contains(self, word: Text) -> bool:
        """True only if exactly `word` was inserted (prefixes don't count)."""
        word = to_text(word)
        if not word:
            return False

        node = self._root
        remaining = len(word)
        for ch in word:
            # subtree holds nothing long enough
            if node.bound_length < remaining:
                return False
            node = node.children.get(ch)
            if node is None:
                return False
            remaining -= 1

        return node.word == word

    def __contains__(self, word: Text) -> bool:
        return self.contains(word)

    # fuzzy search ---------------------------------------------------------
    def fuzzy_match(
        self,
        query: Text,
        max_distance: int,
        out: Optional[Dict[Word, Distance]] = None,
    ) -> Dict[Word, Distance]:
        """
        Return {word: distance} for every indexed word whose Levenshtein
        distance to `query` is at most `max_distance`.

        If `out` is given, matches are merged into it (a word keeps the
        smaller of its old and new distance) and `out` itself is returned.
        Cost grows quickly with max_distance, keep it small (1-3).
        """
        max_distance = _check_budget(max_distance)
        if out is None:
            out = {}

        explored = self._collect(to_text(query), max_distance, out)
        logger.debug(
            "fuzzy_match(%r, %d): %d matches, %d states explored",
            query, max_distance, len(out), explored,
        )
        return out

    def closest(
        self, query: Text, max_distance: int = 2, limit: Optional[int] = None
    ) -> List[Match]:
        """
        Same matches as fuzzy_match, as a list of (word, distance)
        sorted by distance then word.
        """
        found = self.fuzzy_match(query, max_distance)
        ranked = sorted(found.items(), key=lambda item: (item[1], item[0]))
        if limit is not None:
            ranked = ranked[:limit]
        return ranked

    def _collect(self, query: str, max_distance: int, out: Dict[Word, Distance]) -> int:
        """
        Branch-and-bound walk over (node, query suffix, distance) states.

        Moves from a state, each one a Levenshtein edit of the query:
         - advance: first code point matches an edge, step down for free
         - substitution: swap the first code point for an edge label (+1)
         - insertion: put an edge label in front of the suffix (+1)
         - deletion: drop the first code point (+1)
        Once the suffix is used up, remaining budget goes into trailing
        insertions so longer words are reached too.

        Returns the number of states expanded.
        """
        # lowest distance each state was expanded with; a state reached again
        # at an equal or higher distance can't produce anything new
        best: Dict[Tuple[TrieNode, str], int] = {}
        stack: List[State] = [(self._root, query, 0)]
        explored = 0

        while stack:
            node, rest, dist = stack.pop()
            key = (node, rest)
            seen = best.get(key)
            if seen is not None and seen <= dist:
                continue
            best[key] = dist
            explored += 1

            if not rest:
                if node.word is not None:
                    known = out.get(node.word)
                    if known is None or dist < known:
                        out[node.word] = dist
                if dist < max_distance:
                    for child in node.children.values():
                        stack.append((child, "", dist + 1))
                continue

            budget = max_distance - dist
            # each deletion shortens the suffix by one; if that still leaves it
            # longer than anything below this node, the branch is dead
            if node.bound_length < len(rest) - budget:
                continue

            head, tail = rest[0], rest[1:]
            child = node.children.get(head)
            if child is not None:
                stack.append((child, tail, dist))

            if budget > 0:
                dist += 1
                for ch in node.children:
                    if ch != head:
                        stack.append((node, ch + tail, dist))  # substitution
                    stack.append((node, ch + rest, dist))  # insertion
                stack.append((node, tail, dist))  # deletion

        return explored

    # utilities -------------------------------------------------------------------
    def __len__(self) -> int:
        """Number of distinct words indexed."""
        return self._size

    def __iter__(self) -> Iterator[Word]:
        """Yield every indexed word, in no particular order."""
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.word is not None:
                yield node.word
            stack.extend(node.children.values())


def _check_budget(max_distance: int) -> int:
    """Return the budget as a plain int; anything integral (numpy ints too) is accepted."""
    if isinstance(max_distance, bool):
        raise TypeError("max_distance must be an int, got bool")
    max_distance = operator.index(max_distance)
    if max_distance < 0:
        raise ValueError(f"max_distance must be non-negative, got {max_distance}")
    return max_distance
