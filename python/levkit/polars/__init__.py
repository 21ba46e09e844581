"""
Polars integration for levkit.

Levels:
    1. **Expression Namespace** (`.lev`) - Per-row operations
       Example: `df.with_columns(d=pl.col("name").lev.distance("John"))`

    2. **Series Functions** - Aligned scoring, matching, deduplication
       Example: `match_series(queries, targets, partial=True)`

Examples:
    >>> import polars as pl
    >>> import levkit.polars as lkp  # or: from levkit import polars as lkp

    >>> df = pl.DataFrame({"a": ["kitten"], "b": ["sitting"]})
    >>> df.with_columns(d=pl.col("a").lev.distance(pl.col("b")))
    >>> lkp.batch_similarity(df["a"], df["b"], metric="normalized_distance")
"""

# Expression namespace is registered on import
import levkit.expr as _expr  # noqa: F401
from levkit.polars_ext import (
    batch_similarity,
    dedupe_series,
    match_series,
)

__all__ = [
    "batch_similarity",
    "match_series",
    "dedupe_series",
]
