"""Cluster statistics aggregation."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Mapping, Sequence

from ..value_objects import (
    Bed,
    ClusteringStatistics,
    GlobalStatistics,
    GroupStatistics,
)

__all__ = [
    "StatisticsAggregator",
    "group_sort_key",
    "round_half_up",
]


logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves rounding towards +infinity.

    Matches the rounding used by the clustering dashboard rather than
    Python's round-half-to-even.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -2
    """
    return math.floor(value + 0.5)


def group_sort_key(group_key: str) -> tuple[int, float, str]:
    """Sort key ordering numeric group keys ascending, then the rest by name."""
    try:
        number = float(group_key)
    except ValueError:
        return (1, 0.0, group_key)
    if math.isnan(number):
        return (1, 0.0, group_key)
    return (0, number, group_key)


class StatisticsAggregator:
    """Computes per-cluster and overall statistics from a classification."""

    def aggregate(
        self,
        total_entities: int,
        groups: Mapping[str, frozenset[int] | set[int]],
        area_of: Callable[[int], float],
        id_of: Callable[[int], int] | None = None,
    ) -> ClusteringStatistics:
        """Aggregate statistics for the given groups.

        Args:
            total_entities: Number of beds that were classified.
            groups: Group key -> member bed indices.
            area_of: Returns the area of the bed at an index.
            id_of: Returns the bed id at an index. Defaults to the index
                itself.

        Returns:
            ClusteringStatistics holding the cluster details, ordered by
            ascending numeric group key, and the global overview.
        """
        resolve_id = id_of if id_of is not None else (lambda index: index)

        details: list[GroupStatistics] = []
        for ordinal, group_key in enumerate(sorted(groups, key=group_sort_key)):
            members = sorted(groups[group_key])
            bed_count = len(members)
            total_area = sum(area_of(index) for index in members)
            average_area = round_half_up(total_area / bed_count) if bed_count else 0
            details.append(
                GroupStatistics(
                    cluster_id=ordinal,
                    cluster_name=group_key,
                    bed_count=bed_count,
                    total_area=total_area,
                    average_area=average_area,
                    bed_ids=tuple(sorted(resolve_id(index) for index in members)),
                    percent_of_total=self._percent_of_total(bed_count, total_entities),
                )
            )

        # Membership instances, not a union: overlapping clusters count twice
        clustered = sum(detail.bed_count for detail in details)
        coverage = (
            round_half_up(clustered / total_entities * 100) if total_entities else 0
        )
        overview = GlobalStatistics(
            total_beds=total_entities,
            clustered_beds=clustered,
            unclustered_beds=total_entities - clustered,
            coverage_percent=coverage,
            num_clusters=len(groups),
        )
        logger.debug(
            f"Aggregated {overview.num_clusters} clusters: "
            f"{clustered}/{total_entities} beds clustered ({coverage}%)"
        )
        return ClusteringStatistics(overview=overview, cluster_details=tuple(details))

    def aggregate_beds(
        self,
        beds: Sequence[Bed],
        groups: Mapping[str, frozenset[int] | set[int]],
    ) -> ClusteringStatistics:
        """Aggregate statistics using the areas and ids of a bed sequence.

        Indices outside the sequence contribute an area of 0 and report the
        index as their id.
        """

        def area_of(index: int) -> float:
            return beds[index].area if 0 <= index < len(beds) else 0.0

        def id_of(index: int) -> int:
            return beds[index].bed_id if 0 <= index < len(beds) else index

        return self.aggregate(len(beds), groups, area_of, id_of)

    @staticmethod
    def _percent_of_total(bed_count: int, total_entities: int) -> float:
        if not total_entities:
            return 0.0
        return round_half_up(bed_count / total_entities * 1000) / 10
