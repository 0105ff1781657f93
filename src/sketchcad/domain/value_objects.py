"""Value objects for the bed clustering domain.

All records here are immutable snapshots supplied by the caller for a single
classify -> aggregate/export pass. Nothing holds a reference back to the
collection it came from; beds are addressed by their position in the
sequence the caller passes around.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

Point2D = tuple[float, float]
"""A point in the 2-D projection (or image) coordinate space."""


def _as_point(value: object) -> Point2D:
    """Coerce a 2-item sequence into a ``(x, y)`` tuple."""
    try:
        x, y = value  # type: ignore[misc]
    except (TypeError, ValueError):
        raise ValueError(f"Expected a 2-D point, got {value!r}") from None
    return (x, y)


class ExportType(str, Enum):
    """Kind of CAD export requested by the user."""

    SUMMARY = "summary"
    DETAILED = "detailed"


@dataclass(frozen=True)
class Bed:
    """A detected image region with an id, an area and its outlines.

    Attributes:
        bed_id: Stable id assigned by the detection step.
        area: Area in pixel units.
        polygons: Shape outlines, each an ordered sequence of points.
            Outlines with fewer than 2 points are kept as given but are
            ignored by the exporter.
    """

    bed_id: int
    area: float
    polygons: tuple[tuple[Point2D, ...], ...] = ()

    def __post_init__(self) -> None:
        if self.area < 0:
            raise ValueError("Bed area must be non-negative")
        outlines = tuple(
            tuple(_as_point(point) for point in outline) for outline in self.polygons
        )
        object.__setattr__(self, "polygons", outlines)

    @property
    def outlines(self) -> tuple[tuple[Point2D, ...], ...]:
        """Outlines that describe a shape (at least 2 vertices)."""
        return tuple(outline for outline in self.polygons if len(outline) >= 2)


@dataclass(frozen=True)
class Region:
    """A user-drawn polygon contributing to the cluster ``group_key``.

    Group keys are normalized to strings so that ``0`` and ``"0"`` name the
    same cluster.
    """

    group_key: str
    points: tuple[Point2D, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "group_key", str(self.group_key))
        object.__setattr__(
            self, "points", tuple(_as_point(point) for point in self.points)
        )

    @property
    def is_valid(self) -> bool:
        """A region needs at least three points to enclose anything."""
        return len(self.points) >= 3


@dataclass(frozen=True)
class RegionRejection:
    """A region that was left out of classification, and why."""

    group_key: str
    reason: str
    region_index: int | None = None


@dataclass(frozen=True)
class GroupStatistics:
    """Per-cluster statistics.

    Attributes:
        cluster_id: Ordinal of the cluster in the reported order.
        cluster_name: The group key.
        bed_count: Number of member beds.
        total_area: Sum of member areas.
        average_area: ``total_area / bed_count`` rounded half up, 0 if empty.
        bed_ids: Member bed ids in ascending order.
        percent_of_total: Share of all beds, one decimal.
    """

    cluster_id: int
    cluster_name: str
    bed_count: int
    total_area: float
    average_area: int
    bed_ids: tuple[int, ...] = ()
    percent_of_total: float = 0.0


@dataclass(frozen=True)
class GlobalStatistics:
    """Statistics across all clusters.

    ``clustered_beds`` counts membership instances, so a bed inside two
    overlapping clusters is counted twice. ``unclustered_beds`` can then go
    negative and ``coverage_percent`` can exceed 100.
    """

    total_beds: int
    clustered_beds: int
    unclustered_beds: int
    coverage_percent: int
    num_clusters: int


@dataclass(frozen=True)
class ClusteringStatistics:
    """Global statistics together with the per-cluster details."""

    overview: GlobalStatistics
    cluster_details: tuple[GroupStatistics, ...] = field(default_factory=tuple)

    @property
    def total_beds(self) -> int:
        return self.overview.total_beds

    @property
    def clustered_beds(self) -> int:
        return self.overview.clustered_beds

    @property
    def unclustered_beds(self) -> int:
        return self.overview.unclustered_beds

    @property
    def coverage_percent(self) -> int:
        return self.overview.coverage_percent

    @property
    def num_clusters(self) -> int:
        return self.overview.num_clusters


__all__ = [
    "Bed",
    "ClusteringStatistics",
    "ExportType",
    "GlobalStatistics",
    "GroupStatistics",
    "Point2D",
    "Region",
    "RegionRejection",
]
