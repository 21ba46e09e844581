"""Polars expression namespace for edit-distance metrics.

This module registers a `.lev` namespace on Polars expressions, enabling
chainable Levenshtein computations directly in Polars expression contexts.

Comparisons run row by row through map_elements. Null values are compared
as empty strings.

Example:
    >>> import polars as pl
    >>> import levkit  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["john wick", "john wicker", "jane doe"]})
    >>> df.with_columns(
    ...     dist=pl.col("name").lev.distance("john wick"),
    ...     found=pl.col("name").lev.is_within("wick", max_distance=0, partial=True),
    ... )
"""

from typing import Union

import polars as pl

from levkit._utils import (
    metric_function,
    normalize_metric,
    validate_min_similarity,
    validate_non_negative,
)
from levkit.enums import Metric


def _as_text(value) -> str:
    return str(value) if value is not None else ""


@pl.api.register_expr_namespace("lev")
class LevExprNamespace:
    """
    Edit-distance namespace for Polars expressions.

    Provides chainable metric methods directly on string columns.
    Access via `.lev` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def metric(
        self,
        other: Union[str, pl.Expr],
        metric: Union[str, Metric] = "normalized_similarity",
    ) -> pl.Expr:
        """
        Compute any levkit metric between this column and a value/column.

        Args:
            other: String literal or column expression to compare against
            metric: Metric to compute (string or Metric enum)

        Returns:
            Int64 expression for raw distance/similarity metrics,
            Float64 expression for normalized ones

        Example:
            >>> df.with_columns(
            ...     score=pl.col("a").lev.metric(pl.col("b"), "normalized_partial_similarity")
            ... )
        """
        member = normalize_metric(metric)
        func = metric_function(member)
        return_dtype = pl.Int64 if member.is_integer else pl.Float64

        if isinstance(other, str):
            return self._expr.map_elements(
                lambda s: func(_as_text(s), other),
                return_dtype=return_dtype,
                skip_nulls=False,
            )

        return pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: func(_as_text(row["_left"]), _as_text(row["_right"])),
            return_dtype=return_dtype,
        )

    def distance(self, other: Union[str, pl.Expr]) -> pl.Expr:
        """
        Levenshtein distance between this column and another value/column.

        Example:
            >>> df.with_columns(dist=pl.col("name").lev.distance("John"))
        """
        return self.metric(other, Metric.DISTANCE)

    def partial_distance(self, other: Union[str, pl.Expr]) -> pl.Expr:
        """
        Best window distance between this column and another value/column.

        Example:
            >>> df.with_columns(dist=pl.col("title").lev.partial_distance("wick"))
        """
        return self.metric(other, Metric.PARTIAL_DISTANCE)

    def similarity(self, other: Union[str, pl.Expr], partial: bool = False) -> pl.Expr:
        """
        Normalized similarity (0.0 to 1.0) between this column and another value/column.

        Args:
            other: String literal or column expression to compare against
            partial: Score the best same-length substring alignment instead
                of the whole strings

        Returns:
            Float64 expression
        """
        metric = (
            Metric.NORMALIZED_PARTIAL_SIMILARITY if partial else Metric.NORMALIZED_SIMILARITY
        )
        return self.metric(other, metric)

    def is_similar(
        self,
        other: Union[str, pl.Expr],
        min_similarity: float = 0.8,
        partial: bool = False,
    ) -> pl.Expr:
        """
        Check if values are similar to another value/column above a threshold.

        Args:
            other: String literal or column expression to compare against
            min_similarity: Minimum normalized similarity to return True (0.0 to 1.0)
            partial: Use normalized partial similarity

        Returns:
            Boolean expression

        Example:
            >>> df.filter(pl.col("name").lev.is_similar("John", min_similarity=0.75))
        """
        validate_min_similarity(min_similarity)
        return self.similarity(other, partial=partial) >= min_similarity

    def is_within(
        self,
        other: Union[str, pl.Expr],
        max_distance: int,
        partial: bool = False,
    ) -> pl.Expr:
        """
        Check if values are at most ``max_distance`` edits from another value/column.

        With ``partial=True`` and ``max_distance=0`` this is an exact
        substring test in either direction.

        Returns:
            Boolean expression
        """
        validate_non_negative("max_distance", max_distance)
        metric = Metric.PARTIAL_DISTANCE if partial else Metric.DISTANCE
        return self.metric(other, metric) <= max_distance
