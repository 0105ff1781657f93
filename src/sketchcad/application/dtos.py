"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from sketchcad.domain import (
    Bed,
    ClassificationResult,
    ClusteringStatistics,
    ExportType,
    Point2D,
    Region,
    RegionRejection,
)


@dataclass(frozen=True)
class ClusteringInput:
    """Input DTO for a clustering pass.

    ``points[i]`` is the projection coordinate of ``beds[i]``; the two
    sequences must stay aligned.
    """

    beds: tuple[Bed, ...]
    points: tuple[Point2D, ...]
    regions: tuple[Region, ...] = ()
    export_type: ExportType = ExportType.DETAILED

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        if len(self.points) != len(self.beds):
            errors.append(
                f"Point count ({len(self.points)}) must match bed count "
                f"({len(self.beds)})"
            )
        return errors


@dataclass
class ClusteringOutput:
    """Output DTO from a clustering pass.

    Attributes:
        beds: The beds that were classified, in input order.
        classification: Group mapping and rejected regions.
        statistics: Per-cluster and overall statistics.
        export_type: Export type requested for the CAD document.
        errors: Blocking input errors. When present, classification and
            statistics are empty.
    """

    beds: tuple[Bed, ...]
    classification: ClassificationResult
    statistics: ClusteringStatistics | None
    export_type: ExportType = ExportType.DETAILED
    errors: list[str] = field(default_factory=list)

    @property
    def groups(self) -> dict[str, frozenset[int]]:
        return self.classification.groups

    @property
    def rejections(self) -> tuple[RegionRejection, ...]:
        return self.classification.rejections

    @property
    def is_valid(self) -> bool:
        """Check if the clustering ran successfully."""
        return len(self.errors) == 0

    def final_labels(self) -> list[str]:
        """Resolved cluster key for every bed, ``"0"`` when unassigned."""
        return self.classification.final_labels(len(self.beds))


__all__ = [
    "ClusteringInput",
    "ClusteringOutput",
]
