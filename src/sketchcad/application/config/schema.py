"""Pydantic models for clustering session files.

A session file bundles everything one classify -> aggregate/export pass
needs: the detected beds, their coordinates in the color projection, the
regions drawn by the user and the export options.

Example:
    >>> config = SessionConfiguration(
    ...     schema_version="1.0",
    ...     beds=[BedConfig(bed_id=0, area=10)],
    ...     points=[(0.5, 0.5)],
    ...     regions=[RegionConfig(group_key="0", points=[(0, 0), (1, 0), (1, 1)])],
    ... )
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from sketchcad.domain.value_objects import ExportType

# Supported schema versions for session files
# Version 1.0: Beds, projection points, regions and export options
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Coordinates keep their JSON type so integers are written back unchanged
Coordinate = int | float
PointConfig = tuple[Coordinate, Coordinate]


class BedConfig(BaseModel):
    """Configuration for a detected bed.

    Attributes:
        bed_id: Stable id assigned by the detection step
        area: Area in pixels (non-negative)
        polygons: Shape outlines as lists of [x, y] points
    """

    model_config = ConfigDict(extra="forbid")

    bed_id: int
    area: float = Field(..., ge=0)
    polygons: list[list[PointConfig]] = Field(default_factory=list)


class RegionConfig(BaseModel):
    """Configuration for a user-drawn region.

    The number of points is deliberately not validated here. Regions with
    fewer than three points are reported by the classifier as rejected
    regions instead of failing the whole session.

    Attributes:
        group_key: Cluster the region contributes to
        points: Polygon vertices as [x, y] pairs
    """

    model_config = ConfigDict(extra="forbid")

    group_key: str | int
    points: list[PointConfig] = Field(default_factory=list)

    @field_validator("group_key")
    @classmethod
    def validate_group_key_not_blank(cls, v: str | int) -> str | int:
        """Reject empty string keys."""
        if isinstance(v, str) and not v.strip():
            raise ValueError("group_key must not be empty")
        return v


class ExportConfig(BaseModel):
    """Export options for the CAD document.

    Attributes:
        type: "summary" or "detailed" (default "detailed")
    """

    model_config = ConfigDict(extra="forbid")

    type: ExportType = ExportType.DETAILED


class SessionConfiguration(BaseModel):
    """Root configuration model for a clustering session.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        beds: Detected beds in index order
        points: Projection coordinates, ``points[i]`` belongs to ``beds[i]``
        regions: User-drawn regions
        export: Export options
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    beds: list[BedConfig] = Field(default_factory=list)
    points: list[PointConfig] = Field(default_factory=list)
    regions: list[RegionConfig] = Field(default_factory=list)
    export: ExportConfig = Field(default_factory=ExportConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

    @model_validator(mode="after")
    def validate_points_align_with_beds(self) -> "SessionConfiguration":
        """Each bed needs exactly one projection point."""
        if len(self.points) != len(self.beds):
            raise ValueError(
                f"'points' has {len(self.points)} entries but 'beds' has "
                f"{len(self.beds)}; each bed needs exactly one point"
            )
        return self
