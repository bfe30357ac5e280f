"""Edit distance and similarity between normalized words."""

from __future__ import annotations


def levenshtein(a: str, b: str) -> int:
    """Return the number of single-character edits turning ``a`` into ``b``.

    Only two rows of length ``len(b) + 1`` are kept in memory.
    """

    m = len(a)
    n = len(b)
    if m == 0:
        return n
    if n == 0:
        return m

    prev = list(range(n + 1))
    curr = [0] * (n + 1)

    for i in range(1, m + 1):
        curr[0] = i
        ca = a[i - 1]
        for j in range(1, n + 1):
            cost = 0 if ca == b[j - 1] else 1
            curr[j] = min(
                prev[j] + 1,  # deletion
                curr[j - 1] + 1,  # insertion
                prev[j - 1] + cost,  # substitution
            )
        prev, curr = curr, prev
    return prev[n]


def similarity(a: str, b: str) -> float:
    """Return ``1 - distance / longest length`` in the range ``0.0``..``1.0``."""

    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein(a, b) / longest
