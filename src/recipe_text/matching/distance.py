"""Edit distance on Unicode code points."""

import numpy as np


def levenshtein(source: str, target: str) -> int:
    """Levenshtein distance between two strings.

    Uses a single row of the dynamic programming table. Insertions along a
    row are resolved with a running minimum, so each row is one vectorized
    step instead of an inner Python loop.

    Examples:
        >>> levenshtein("kitten", "sitting")
        3
        >>> levenshtein("", "abc")
        3
    """
    if source == target:
        return 0
    if not source:
        return len(target)
    if not target:
        return len(source)

    codes = np.fromiter((ord(char) for char in target), dtype=np.int64, count=len(target))
    offsets = np.arange(len(target) + 1, dtype=np.int64)
    previous = offsets.copy()

    for row, char in enumerate(source, start=1):
        substitution = previous[:-1] + (codes != ord(char))
        current = np.empty_like(previous)
        current[0] = row
        current[1:] = np.minimum(previous[1:] + 1, substitution)
        # current[j] = min over k <= j of current[k] + (j - k)
        previous = np.minimum.accumulate(current - offsets) + offsets

    return int(previous[-1])


def normalized_levenshtein(source: str, target: str) -> float:
    """Levenshtein distance divided by the longer length, in [0, 1]."""
    if source == target:
        return 0.0

    longest = max(len(source), len(target))
    if longest == 0:
        return 0.0

    return levenshtein(source, target) / longest
