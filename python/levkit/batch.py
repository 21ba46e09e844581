"""Batch operations API for levkit.

This module provides list-based batch operations on strings. All functions
are thin loops over the pairwise metrics in :mod:`levkit`, so any metric
accepted there (by name or as a :class:`~levkit.enums.Metric`) is accepted
here.

Example usage:
    >>> import levkit.batch as batch

    # Score a query against every string
    >>> results = batch.score(["hello", "hallo"], "helo")
    >>> [(r.text, r.score) for r in results]
    [('hello', 0.8), ('hallo', 0.6)]

    # Find the top N matches, optionally by best substring alignment
    >>> matches = batch.best_matches(["john wicker", "jane doe"], "wick", partial=True, limit=1)
    >>> [(m.text, m.score) for m in matches]
    [('john wicker', 1.0)]

    # Pairwise scores between aligned lists
    >>> batch.pairwise(["kitten", "rust"], ["sitting", "rust"], metric="distance")
    [3, 0]

    # Full score matrix
    >>> batch.matrix(["abc"], ["abd", "xyz"], metric="distance")
    [[1, 3]]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from levkit._core import ValidationError
from levkit._utils import (
    metric_function,
    normalize_metric,
    validate_min_similarity,
    validate_non_negative,
)

if TYPE_CHECKING:
    from levkit.enums import Metric

logger = logging.getLogger(__name__)

__all__ = [
    "MatchResult",
    "score",
    "best_matches",
    "pairwise",
    "matrix",
]


@dataclass(frozen=True)
class MatchResult:
    """A scored string from a batch operation.

    Attributes:
        text: The compared string.
        score: Metric value for this string against the query.
        id: Index of the string in the input list.
    """

    text: str
    score: Union[int, float]
    id: int


def score(
    strings: list[str],
    query: str,
    metric: str | Metric = "normalized_similarity",
) -> list[MatchResult]:
    """Score a query against all strings.

    Args:
        strings: List of strings to compare against the query.
        query: The query string.
        metric: Metric to compute (string or Metric enum). Any of the eight
            levkit metrics; defaults to normalized similarity.

    Returns:
        List of MatchResult objects in the same order as the input strings.

    Example:
        >>> [r.score for r in score(["kitten", "sitting"], "kitten", metric="distance")]
        [0, 3]
    """
    func = metric_function(metric)
    logger.debug("scoring %d strings with %s", len(strings), normalize_metric(metric).value)
    return [MatchResult(text, func(text, query), idx) for idx, text in enumerate(strings)]


def best_matches(
    strings: list[str],
    query: str,
    partial: bool = False,
    limit: int = 5,
    min_similarity: float = 0.0,
) -> list[MatchResult]:
    """Find the best matching strings for a query.

    Strings are ranked by normalized similarity, or by normalized partial
    similarity when ``partial`` is set. Equal scores keep input order.

    Args:
        strings: List of candidate strings.
        query: The query string.
        partial: Rank by best same-length substring alignment instead of
            whole-string distance.
        limit: Maximum number of results to return.
        min_similarity: Minimum score (0.0 to 1.0) for a result to be kept.

    Returns:
        List of MatchResult objects sorted by descending score.

    Raises:
        ValidationError: If limit is negative or min_similarity is outside [0, 1].

    Example:
        >>> matches = best_matches(["apple", "apply", "banana"], "appel", limit=2)
        >>> [(m.text, m.score) for m in matches]
        [('apple', 0.6), ('apply', 0.6)]
    """
    validate_non_negative("limit", limit)
    validate_min_similarity(min_similarity)

    metric = "normalized_partial_similarity" if partial else "normalized_similarity"
    results = [r for r in score(strings, query, metric) if r.score >= min_similarity]
    results.sort(key=lambda r: -r.score)
    return results[:limit]


def pairwise(
    left: list[str],
    right: list[str],
    metric: str | Metric = "normalized_similarity",
) -> list[Union[int, float]]:
    """Compute a metric between aligned pairs of strings.

    Args:
        left: First list of strings.
        right: Second list of strings (must be the same length as left).
        metric: Metric to compute (string or Metric enum).

    Returns:
        List of scores where ``result[i] = metric(left[i], right[i])``.

    Raises:
        ValidationError: If the lists differ in length.

    Example:
        >>> pairwise(["hello", "world"], ["hallo", "word"], metric="distance")
        [1, 1]
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    func = metric_function(metric)
    logger.debug("pairwise %s over %d pairs", normalize_metric(metric).value, len(left))
    return [func(a, b) for a, b in zip(left, right)]


def matrix(
    queries: list[str],
    choices: list[str],
    metric: str | Metric = "normalized_similarity",
) -> list[list[Union[int, float]]]:
    """Compute a full metric matrix between queries and choices.

    Args:
        queries: List of query strings (rows).
        choices: List of choice strings (columns).
        metric: Metric to compute (string or Metric enum).

    Returns:
        Matrix where ``result[i][j] = metric(queries[i], choices[j])``.

    Example:
        >>> matrix(["abc", "xyz"], ["abd", "xyz"], metric="distance")
        [[1, 3], [3, 0]]
    """
    func = metric_function(metric)
    logger.debug(
        "matrix %s over %dx%d strings",
        normalize_metric(metric).value,
        len(queries),
        len(choices),
    )
    return [[func(q, c) for c in choices] for q in queries]
