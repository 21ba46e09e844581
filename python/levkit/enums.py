"""Enums for levkit API."""

from enum import Enum


class Metric(str, Enum):
    """Available edit-distance metrics.

    This enum provides type-safe metric selection for batch and Polars
    operations. String values are accepted anywhere a Metric is.

    Example:
        >>> from levkit import Metric, batch
        >>> batch.pairwise(["kitten"], ["sitting"], metric=Metric.DISTANCE)
        [3]
    """

    DISTANCE = "distance"
    """Levenshtein distance (insertions, deletions, substitutions)"""

    NORMALIZED_DISTANCE = "normalized_distance"
    """Distance divided by the longer length, 0.0 to 1.0"""

    SIMILARITY = "similarity"
    """Longer length minus distance"""

    NORMALIZED_SIMILARITY = "normalized_similarity"
    """1.0 - normalized distance"""

    PARTIAL_DISTANCE = "partial_distance"
    """Best distance of the shorter string against any same-length window of the longer"""

    NORMALIZED_PARTIAL_DISTANCE = "normalized_partial_distance"
    """Partial distance divided by the shorter length, 0.0 to 1.0"""

    PARTIAL_SIMILARITY = "partial_similarity"
    """Shorter length minus partial distance"""

    NORMALIZED_PARTIAL_SIMILARITY = "normalized_partial_similarity"
    """1.0 - normalized partial distance"""

    @property
    def is_integer(self) -> bool:
        """True for metrics that return a raw edit count rather than a ratio."""
        return not self.value.startswith("normalized_")


__all__ = ["Metric"]
