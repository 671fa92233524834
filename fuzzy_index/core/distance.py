# distance.py
# Reference Levenshtein distance over code points.
# Plain dynamic programming, one NumPy row at a time, with an optional
# early-exit cutoff. Slower than the trie search for many words but
# obviously correct, so it's what the search gets checked against.

from typing import Optional

import numpy as np

from .text import Text, to_text


def levenshtein(a: Text, b: Text, max_dist: Optional[int] = None) -> int:
    """
    Compute the Levenshtein distance between `a` and `b` (insert, delete,
    substitute; cost 1 each).

    With max_dist set, any distance above it is reported as max_dist + 1,
    and the computation stops as soon as that is certain.
    """
    if max_dist is not None and max_dist < 0:
        raise ValueError(f"max_dist must be non-negative, got {max_dist}")

    a, b = to_text(a), to_text(b)
    if a == b:
        return 0

    # keep b the shorter one so rows stay small
    if len(a) < len(b):
        a, b = b, a

    la, lb = len(a), len(b)
    if max_dist is not None and la - lb > max_dist:
        return max_dist + 1
    if lb == 0:
        return la

    codes_b = np.fromiter((ord(ch) for ch in b), dtype=np.int64, count=lb)
    offsets = np.arange(lb + 1, dtype=np.int64)
    prev = offsets.copy()

    for i, ca in enumerate(a, start=1):
        cost = (codes_b != ord(ca)).astype(np.int64)
        curr = np.empty(lb + 1, dtype=np.int64)
        curr[0] = i
        # deletion and substitution come straight from the previous row
        curr[1:] = np.minimum(prev[1:] + 1, prev[:-1] + cost)
        # insertion chains along the row: curr[j] = min over k <= j of curr[k] + (j - k)
        curr = np.minimum.accumulate(curr - offsets) + offsets

        if max_dist is not None and int(curr.min()) > max_dist:
            return max_dist + 1
        prev = curr

    dist = int(prev[-1])
    if max_dist is not None and dist > max_dist:
        return max_dist + 1
    return dist
