"""Levenshtein distance engines and the metrics derived from them.

Strings are compared code point by code point. Python ``str`` objects are
already random-access sequences of code points, so ``len()`` and indexing
count an astral-plane character such as an emoji as a single unit.

Two engines are provided:

- :func:`distance` is the classic edit distance, computed with the two-row
  dynamic program (O(n*m) time, O(m) memory).
- :func:`partial_distance` slides the shorter string across the longer one
  and returns the best distance of any same-length window.

Every other public function is a normalization or similarity score layered
on one of the two engines.
"""

from __future__ import annotations

from typing import Sequence

__all__ = [
    "LevkitError",
    "ValidationError",
    "MetricError",
    "distance",
    "normalized_distance",
    "similarity",
    "normalized_similarity",
    "partial_distance",
    "normalized_partial_distance",
    "partial_similarity",
    "normalized_partial_similarity",
]


class LevkitError(Exception):
    """Base exception for all levkit errors."""


class ValidationError(LevkitError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class MetricError(LevkitError, ValueError):
    """Raised when an unknown metric is requested."""


def _check_text(a: object, b: object) -> None:
    if not isinstance(a, str):
        raise TypeError(f"expected str for first argument, got {type(a).__name__}")
    if not isinstance(b, str):
        raise TypeError(f"expected str for second argument, got {type(b).__name__}")


def _distance(a: Sequence[str], b: Sequence[str]) -> int:
    n = len(a)
    m = len(b)

    if n == 0:
        return m
    if m == 0:
        return n

    prev = list(range(m + 1))
    curr = [0] * (m + 1)

    for i, ac in enumerate(a):
        curr[0] = i + 1
        for j in range(m):
            cost = 0 if ac == b[j] else 1
            curr[j + 1] = min(
                prev[j + 1] + 1,  # deletion
                curr[j] + 1,  # insertion
                prev[j] + cost,  # substitution or match
            )
        prev, curr = curr, prev

    return prev[m]


def _partial_distance(a: str, b: str) -> int:
    # Ties keep ``a`` as the short side.
    if len(a) <= len(b):
        short, long_ = a, b
    else:
        short, long_ = b, a

    n = len(short)
    m = len(long_)

    if n == 0:
        return 0
    if n == m:
        return _distance(short, long_)

    # No window can be further than n edits away.
    best = n
    for start in range(m - n + 1):
        d = _distance(short, long_[start : start + n])
        if d < best:
            best = d
            if best == 0:
                break

    return best


def distance(a: str, b: str) -> int:
    """
    Compute the Levenshtein (edit) distance between two strings.

    Args:
        a: First string
        b: Second string

    Returns:
        The minimum number of single code point insertions, deletions or
        substitutions needed to transform a into b.

    Raises:
        TypeError: If either argument is not a str.

    Complexity:
        Time: O(n*m) where n, m are string lengths.
        Space: O(m) using two-row optimization.

    Example:
        >>> distance("kitten", "sitting")
        3
        >>> distance("", "abc")
        3
    """
    _check_text(a, b)
    return _distance(a, b)


def normalized_distance(a: str, b: str) -> float:
    """
    Levenshtein distance divided by the length of the longer string.

    0.0 means identical, 1.0 means completely different. Two empty strings
    are identical and give 0.0.

    Example:
        >>> normalized_distance("kitten", "sitting")
        0.42857142857142855
    """
    _check_text(a, b)
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 0.0
    return _distance(a, b) / max_len


def similarity(a: str, b: str) -> int:
    """
    Raw similarity score: length of the longer string minus the distance.

    Never negative.

    Example:
        >>> similarity("kitten", "sitting")
        4
    """
    _check_text(a, b)
    return max(0, max(len(a), len(b)) - _distance(a, b))


def normalized_similarity(a: str, b: str) -> float:
    """
    Similarity normalized to [0.0, 1.0]; ``1.0 - normalized_distance(a, b)``.

    Two empty strings give 1.0.

    Example:
        >>> normalized_similarity("hello", "hallo")
        0.8
    """
    _check_text(a, b)
    max_len = max(len(a), len(b))
    if max_len == 0:
        return 1.0
    return 1.0 - _distance(a, b) / max_len


def partial_distance(a: str, b: str) -> int:
    """
    Best Levenshtein distance between the shorter string and any window of
    the longer string having the same length.

    The shorter string is rolled along the longer one from left to right and
    the smallest distance found is returned. The scan stops early on an exact
    substring match, so 0 means the shorter string occurs verbatim inside the
    longer one. An empty string matches anywhere and gives 0.

    Args:
        a: First string
        b: Second string

    Returns:
        The minimum window distance, at most the length of the shorter string.

    Complexity:
        Time: O((m - n + 1) * n * n) where n <= m are the string lengths.

    Example:
        >>> partial_distance("wick", "john wicker")
        0
        >>> partial_distance("jon", "john wick")
        1
    """
    _check_text(a, b)
    return _partial_distance(a, b)


def normalized_partial_distance(a: str, b: str) -> float:
    """
    Partial distance divided by the length of the shorter string.

    Returns 0.0 when either string is empty.
    """
    _check_text(a, b)
    min_len = min(len(a), len(b))
    if min_len == 0:
        return 0.0
    return _partial_distance(a, b) / min_len


def partial_similarity(a: str, b: str) -> int:
    """Length of the shorter string minus the partial distance, never negative."""
    _check_text(a, b)
    return max(0, min(len(a), len(b)) - _partial_distance(a, b))


def normalized_partial_similarity(a: str, b: str) -> float:
    """
    Partial similarity normalized to [0.0, 1.0].

    Returns 1.0 when either string is empty, since an empty string is a
    substring of everything.

    Example:
        >>> normalized_partial_similarity("test", "this is a test!")
        1.0
    """
    _check_text(a, b)
    min_len = min(len(a), len(b))
    if min_len == 0:
        return 1.0
    return 1.0 - _partial_distance(a, b) / min_len
