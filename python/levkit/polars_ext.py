"""Polars Series and DataFrame operations for levkit.

Functions in This Module
------------------------
- ``batch_similarity()``: Metric between two aligned Series
- ``match_series()``: Match query Series against target Series
- ``dedupe_series()``: Deduplicate a Series, grouping similar values

Example Usage
-------------
>>> import polars as pl
>>> import levkit.polars as lkp
>>>
>>> df = pl.DataFrame({"a": ["kitten", "rust"], "b": ["sitting", "rust"]})
>>> df.with_columns(dist=lkp.batch_similarity(df["a"], df["b"], metric="distance"))
>>>
>>> titles = pl.Series(["John Wick", "John Wick: Chapter 2", "Jane Doe"])
>>> lkp.match_series(pl.Series(["wick"]), titles, partial=True, min_similarity=1.0)

See Also
--------
- ``levkit.expr``: Polars expression namespace for column operations
- ``levkit.batch``: The same operations on plain lists
"""

import logging
from typing import List, Union

import polars as pl

from levkit._core import ValidationError
from levkit._utils import metric_function, normalize_metric, validate_min_similarity
from levkit.enums import Metric

logger = logging.getLogger(__name__)


class UnionFind:
    """Union-Find data structure for efficient clustering."""

    def __init__(self, n: int):
        self.parent = list(range(n))
        self.rank = [0] * n

    def find(self, x: int) -> int:
        while self.parent[x] != x:
            self.parent[x] = self.parent[self.parent[x]]
            x = self.parent[x]
        return x

    def union(self, x: int, y: int) -> None:
        px, py = self.find(x), self.find(y)
        if px == py:
            return
        if self.rank[px] < self.rank[py]:
            px, py = py, px
        self.parent[py] = px
        if self.rank[px] == self.rank[py]:
            self.rank[px] += 1


def _similarity_metric(partial: bool) -> Metric:
    return Metric.NORMALIZED_PARTIAL_SIMILARITY if partial else Metric.NORMALIZED_SIMILARITY


def batch_similarity(
    left: "pl.Series",
    right: "pl.Series",
    metric: Union[str, Metric] = "normalized_similarity",
) -> "pl.Series":
    """
    Compute a metric between two aligned Series.

    Args:
        left: First string Series
        right: Second string Series (must be same length as left)
        metric: Metric to compute (string or Metric enum)

    Returns:
        Series named after the metric; Int64 for raw metrics, Float64 for
        normalized ones. Rows where either side is null are null.

    Raises:
        ValidationError: If the Series differ in length.

    Example:
        >>> df = pl.DataFrame({"a": ["hello", "world"], "b": ["hallo", "word"]})
        >>> df = df.with_columns(score=batch_similarity(df["a"], df["b"]))
    """
    member = normalize_metric(metric)
    func = metric_function(member)

    if len(left) != len(right):
        raise ValidationError(
            f"Series must have equal length, got {len(left)} and {len(right)}"
        )

    logger.debug("batch %s over %d rows", member.value, len(left))
    scores = [
        None if a is None or b is None else func(str(a), str(b))
        for a, b in zip(left.to_list(), right.to_list())
    ]
    dtype = pl.Int64 if member.is_integer else pl.Float64
    return pl.Series(member.value, scores, dtype=dtype)


def match_series(
    query_series: "pl.Series",
    target_series: "pl.Series",
    partial: bool = False,
    min_similarity: float = 0.0,
) -> "pl.DataFrame":
    """
    Match each value in query_series against all values in target_series.

    For each query, keeps every target whose normalized similarity (or
    normalized partial similarity) reaches the threshold. Null queries and
    targets are skipped.

    Args:
        query_series: Series of query strings
        target_series: Series of target strings to match against
        partial: Score by best same-length substring alignment
        min_similarity: Minimum similarity threshold (0.0 to 1.0)

    Returns:
        DataFrame with columns: query_idx, query, target_idx, target, score

    Example:
        >>> queries = pl.Series(["apple", "banana"])
        >>> targets = pl.Series(["appel", "banan", "cherry"])
        >>> result = match_series(queries, targets, min_similarity=0.6)
    """
    validate_min_similarity(min_similarity)
    func = metric_function(_similarity_metric(partial))

    queries = query_series.to_list()
    targets = target_series.to_list()
    logger.debug("matching %d queries against %d targets", len(queries), len(targets))

    results = []
    for query_idx, query in enumerate(queries):
        if query is None:
            continue
        for target_idx, target in enumerate(targets):
            if target is None:
                continue
            score = func(str(query), str(target))
            if score >= min_similarity:
                results.append(
                    {
                        "query_idx": query_idx,
                        "query": str(query),
                        "target_idx": target_idx,
                        "target": str(target),
                        "score": score,
                    }
                )

    return pl.DataFrame(
        results,
        schema={
            "query_idx": pl.Int64,
            "query": pl.Utf8,
            "target_idx": pl.Int64,
            "target": pl.Utf8,
            "score": pl.Float64,
        },
    )


def dedupe_series(
    series: "pl.Series",
    partial: bool = False,
    min_similarity: float = 0.85,
) -> "pl.DataFrame":
    """
    Deduplicate a Series, grouping similar values together.

    Every pair of values scoring at least ``min_similarity`` is linked, and
    linked values are clustered transitively. Null values are treated as
    empty strings.

    Args:
        series: Series of strings to deduplicate
        partial: Link values by normalized partial similarity, so that a
            value contained in another joins its group
        min_similarity: Minimum similarity to consider as duplicates (default: 0.85)

    Returns:
        DataFrame with columns:
        - value: The original string value
        - group_id: Group identifier (None for unique values)
        - is_canonical: True for the first value of each group and for
          every unique value

    Example:
        >>> series = pl.Series(["hello", "helo", "world"])
        >>> result = dedupe_series(series, min_similarity=0.8)
        >>> print(result.filter(pl.col("group_id").is_not_null()))
    """
    validate_min_similarity(min_similarity)
    func = metric_function(_similarity_metric(partial))

    items: List[str] = [str(x) if x is not None else "" for x in series.to_list()]
    logger.debug("deduplicating %d values", len(items))

    uf = UnionFind(len(items))
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if func(items[i], items[j]) >= min_similarity:
                uf.union(i, j)

    members: dict = {}
    for idx in range(len(items)):
        members.setdefault(uf.find(idx), []).append(idx)

    rows = []
    unique = []
    group_id = 0
    for group in members.values():
        if len(group) == 1:
            unique.append(group[0])
            continue
        for position, idx in enumerate(group):
            rows.append(
                {
                    "value": items[idx],
                    "group_id": group_id,
                    "is_canonical": position == 0,
                }
            )
        group_id += 1

    for idx in unique:
        rows.append(
            {
                "value": items[idx],
                "group_id": None,
                "is_canonical": True,
            }
        )

    return pl.DataFrame(
        rows,
        schema={"value": pl.Utf8, "group_id": pl.Int64, "is_canonical": pl.Boolean},
    )
