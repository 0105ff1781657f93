"""Domain layer - core clustering logic."""

from .services import (
    DEFAULT_GROUP_KEY,
    ClassificationResult,
    GeometryClassifier,
    StatisticsAggregator,
    point_in_polygon,
    resolve_group_key,
)
from .value_objects import (
    Bed,
    ClusteringStatistics,
    ExportType,
    GlobalStatistics,
    GroupStatistics,
    Point2D,
    Region,
    RegionRejection,
)

__all__ = [
    "DEFAULT_GROUP_KEY",
    "Bed",
    "ClassificationResult",
    "ClusteringStatistics",
    "ExportType",
    "GeometryClassifier",
    "GlobalStatistics",
    "GroupStatistics",
    "Point2D",
    "Region",
    "RegionRejection",
    "StatisticsAggregator",
    "point_in_polygon",
    "resolve_group_key",
]
