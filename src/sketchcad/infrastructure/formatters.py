"""Console formatters for clustering results."""

from __future__ import annotations

from collections.abc import Sequence

from sketchcad.domain.value_objects import ClusteringStatistics, RegionRejection


class StatisticsFormatter:
    """Formats clustering statistics for display.

    Renders an overview block followed by a per-cluster table. Bed ids are
    listed only when ``show_bed_ids`` is enabled since large clusters make
    the table hard to read.
    """

    def __init__(self, show_bed_ids: bool = False) -> None:
        self._show_bed_ids = show_bed_ids

    def format(self, statistics: ClusteringStatistics) -> str:
        lines = [
            "CLUSTERING OVERVIEW",
            "=" * 60,
            f"{'Total beds:':<20} {statistics.total_beds}",
            f"{'Clustered beds:':<20} {statistics.clustered_beds}",
            f"{'Unclustered beds:':<20} {statistics.unclustered_beds}",
            f"{'Clusters:':<20} {statistics.num_clusters}",
            f"{'Coverage:':<20} {statistics.coverage_percent}%",
            "",
        ]

        if not statistics.cluster_details:
            lines.append("No clusters defined.")
            return "\n".join(lines)

        lines.extend(
            [
                "CLUSTERS",
                "=" * 60,
                f"{'Cluster':<12} {'Beds':<8} {'Total area':<14} {'Avg area':<12} {'Share'}",
                "-" * 60,
            ]
        )
        for detail in statistics.cluster_details:
            lines.append(
                f"{detail.cluster_name:<12} {detail.bed_count:<8} "
                f"{detail.total_area:<14,.0f} {detail.average_area:<12,} "
                f"{detail.percent_of_total:.1f}%"
            )
            if self._show_bed_ids and detail.bed_ids:
                ids = ", ".join(str(bed_id) for bed_id in detail.bed_ids)
                lines.append(f"{'':<12} ids: {ids}")
        lines.append("-" * 60)

        return "\n".join(lines)


class RejectionFormatter:
    """Formats rejected regions as warning lines."""

    def format(self, rejections: Sequence[RegionRejection]) -> str:
        if not rejections:
            return ""
        lines = ["Rejected regions:"]
        for rejection in rejections:
            position = (
                f"region {rejection.region_index}"
                if rejection.region_index is not None
                else "region"
            )
            lines.append(
                f"  {position} (cluster '{rejection.group_key}'): {rejection.reason}"
            )
        return "\n".join(lines)
