"""Domain services for bed clustering.

This package provides:
- Containment classification of beds into user-drawn regions
- Per-cluster and overall statistics
"""

from .classifier import (
    DEFAULT_GROUP_KEY,
    ClassificationResult,
    GeometryClassifier,
    is_index_key,
    order_group_keys,
    point_in_polygon,
    resolve_group_key,
)
from .statistics import StatisticsAggregator, group_sort_key, round_half_up

__all__ = [
    "DEFAULT_GROUP_KEY",
    "ClassificationResult",
    "GeometryClassifier",
    "StatisticsAggregator",
    "group_sort_key",
    "is_index_key",
    "order_group_keys",
    "point_in_polygon",
    "resolve_group_key",
    "round_half_up",
]
