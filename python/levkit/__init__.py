"""
levkit - Levenshtein distance, partial matching and similarity scores

Computes edit distances between Unicode strings, code point by code point,
plus a partial variant that rolls the shorter string along the longer one
and reports the best same-length alignment.

Example usage:
    >>> import levkit as lk

    # Full edit distance and its derived scores
    >>> lk.distance("kitten", "sitting")
    3
    >>> lk.similarity("kitten", "sitting")
    4
    >>> lk.normalized_similarity("hello", "hallo")
    0.8

    # Partial matching: 0 means an exact substring match
    >>> lk.partial_distance("wick", "john wicker")
    0
    >>> lk.normalized_partial_similarity("wick", "john wicker")
    1.0

    # Batch helpers
    >>> lk.batch.pairwise(["kitten", "rust"], ["sitting", "rust"], metric="distance")
    [3, 0]
"""

import logging
from importlib.metadata import version as _get_version

from levkit._core import (
    # Custom exceptions
    LevkitError,
    MetricError,
    ValidationError,
    # Full distance and derived scores
    distance,
    normalized_distance,
    normalized_partial_distance,
    normalized_partial_similarity,
    normalized_similarity,
    # Partial distance and derived scores
    partial_distance,
    partial_similarity,
    similarity,
)
from levkit.enums import Metric

# Register the .lev expression namespace
import levkit.expr  # noqa: F401
from levkit import batch, polars
from levkit.batch import MatchResult

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("levkit")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "LevkitError",
    "ValidationError",
    "MetricError",
    # Enums
    "Metric",
    # Result types
    "MatchResult",
    # Distance/similarity functions
    "distance",
    "normalized_distance",
    "similarity",
    "normalized_similarity",
    "partial_distance",
    "normalized_partial_distance",
    "partial_similarity",
    "normalized_partial_similarity",
    # Submodules
    "batch",
    "polars",
]


# Convenience aliases
edit_distance = distance
levenshtein = distance
