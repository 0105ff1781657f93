"""Conversion from session configuration to domain objects."""

from __future__ import annotations

from sketchcad.application.config.schema import SessionConfiguration
from sketchcad.application.dtos import ClusteringInput
from sketchcad.domain.value_objects import Bed, Point2D, Region


def config_to_beds(config: SessionConfiguration) -> tuple[Bed, ...]:
    """Convert bed configurations to Bed value objects, keeping their order."""
    return tuple(
        Bed(
            bed_id=bed.bed_id,
            area=bed.area,
            polygons=tuple(tuple(outline) for outline in bed.polygons),
        )
        for bed in config.beds
    )


def config_to_points(config: SessionConfiguration) -> tuple[Point2D, ...]:
    return tuple((x, y) for x, y in config.points)


def config_to_regions(config: SessionConfiguration) -> tuple[Region, ...]:
    """Convert region configurations to Region value objects.

    Regions are passed through regardless of their point count so the
    classifier can report the short ones.
    """
    return tuple(
        Region(group_key=str(region.group_key), points=tuple(region.points))
        for region in config.regions
    )


def config_to_input(config: SessionConfiguration) -> ClusteringInput:
    """Build the ClusteringInput for a validated session."""
    return ClusteringInput(
        beds=config_to_beds(config),
        points=config_to_points(config),
        regions=config_to_regions(config),
        export_type=config.export.type,
    )


__all__ = [
    "config_to_beds",
    "config_to_input",
    "config_to_points",
    "config_to_regions",
]
