"""Internal utilities for levkit."""

import math
from typing import Callable, Dict, Union

from levkit import _core
from levkit._core import MetricError, ValidationError
from levkit.enums import Metric

# Metric name -> implementation
METRIC_FUNCTIONS: Dict[str, Callable[[str, str], Union[int, float]]] = {
    Metric.DISTANCE.value: _core.distance,
    Metric.NORMALIZED_DISTANCE.value: _core.normalized_distance,
    Metric.SIMILARITY.value: _core.similarity,
    Metric.NORMALIZED_SIMILARITY.value: _core.normalized_similarity,
    Metric.PARTIAL_DISTANCE.value: _core.partial_distance,
    Metric.NORMALIZED_PARTIAL_DISTANCE.value: _core.normalized_partial_distance,
    Metric.PARTIAL_SIMILARITY.value: _core.partial_similarity,
    Metric.NORMALIZED_PARTIAL_SIMILARITY.value: _core.normalized_partial_similarity,
}

VALID_METRICS = frozenset(METRIC_FUNCTIONS)


def normalize_metric(metric: Union[str, Metric]) -> Metric:
    """Convert a metric name to its Metric enum member.

    Args:
        metric: Either a Metric enum value or a string metric name.

    Returns:
        The matching Metric member.

    Raises:
        MetricError: If the metric name is not recognized.
        TypeError: If metric is not a string or Metric enum.

    Example:
        >>> normalize_metric("Partial_Distance")
        <Metric.PARTIAL_DISTANCE: 'partial_distance'>
    """
    if isinstance(metric, Metric):
        return metric

    if isinstance(metric, str):
        name = metric.lower()
        if name in VALID_METRICS:
            return Metric(name)
        raise MetricError(
            f"Unknown metric: '{metric}'. Valid options: {sorted(VALID_METRICS)}"
        )

    raise TypeError(f"metric must be str or Metric enum, got {type(metric).__name__}")


def metric_function(metric: Union[str, Metric]) -> Callable[[str, str], Union[int, float]]:
    """Return the pairwise function implementing ``metric``."""
    return METRIC_FUNCTIONS[normalize_metric(metric).value]


def validate_min_similarity(min_similarity: float) -> None:
    """Raise ValidationError unless min_similarity is a finite value in [0, 1]."""
    if not math.isfinite(min_similarity) or not 0.0 <= min_similarity <= 1.0:
        raise ValidationError(
            f"min_similarity must be between 0.0 and 1.0, got {min_similarity}"
        )


def validate_non_negative(name: str, value: int) -> None:
    """Raise ValidationError if an integer parameter is negative."""
    if value < 0:
        raise ValidationError(f"{name} must be non-negative, got {value}")


__all__ = [
    "METRIC_FUNCTIONS",
    "VALID_METRICS",
    "metric_function",
    "normalize_metric",
    "validate_min_similarity",
    "validate_non_negative",
]
