"""Edit-distance similarity used by the fuzzy fallbacks."""

from __future__ import annotations

from typing import List


def levenshtein_distance(a: str, b: str) -> int:
    """
    Case-insensitive Levenshtein distance.

    Classic iterative DP keeping only two rows, so memory is O(len(b)).
    """
    s = (a or "").lower()
    t = (b or "").lower()
    m, n = len(s), len(t)
    if m == 0:
        return n
    if n == 0:
        return m

    prev: List[int] = list(range(n + 1))
    curr: List[int] = [0] * (n + 1)
    for i in range(m):
        curr[0] = i + 1
        for j in range(n):
            cost = 0 if s[i] == t[j] else 1
            curr[j + 1] = min(curr[j] + 1, prev[j + 1] + 1, prev[j] + cost)
        prev, curr = curr, prev
    return prev[n]


def fuzzy_score(a: str, b: str) -> float:
    """Similarity in [0, 1]: 1 - distance / longest length. 0 if either is empty."""
    if not a or not b:
        return 0.0
    max_len = max(len(a), len(b))
    similarity = 1.0 - levenshtein_distance(a, b) / max_len
    return max(0.0, similarity)
