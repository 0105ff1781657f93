"""DXF exporter for clustered bed outlines.

Generates a minimal ASCII DXF (AutoCAD 2000, AC1015) document with one
layer per cluster and one closed LWPOLYLINE per bed outline. The document
is written tag by tag so the output stays byte-for-byte reproducible:

    HEADER    $ACADVER
    TABLES    LAYER table, one record per cluster
    ENTITIES  LWPOLYLINE per outline
    EOF
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from ezdxf.lldxf.types import DXFTag

from sketchcad.domain.services import resolve_group_key
from sketchcad.domain.value_objects import Bed, ExportType, Point2D
from sketchcad.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from sketchcad.application.dtos import ClusteringOutput


logger = logging.getLogger(__name__)


DXF_VERSION = "AC1015"  # AutoCAD 2000
LAYER_PREFIX = "cluster_"
LAYER_LINETYPE = "CONTINUOUS"
MAX_COLOR_INDEX = 255

# Group codes
TYPE_CODE = 0
STRING_CODE = 1
NAME_CODE = 2
LINETYPE_CODE = 6
LAYER_CODE = 8
HEADER_VARIABLE_CODE = 9
X_CODE = 10
Y_CODE = 20
COLOR_CODE = 62
FLAGS_CODE = 70
VERTEX_COUNT_CODE = 90
SUBCLASS_CODE = 100

CLOSED_POLYLINE_FLAG = 1


def layer_name(group_key: str) -> str:
    """DXF layer name for a cluster."""
    return f"{LAYER_PREFIX}{group_key}"


def layer_color(ordinal: int) -> int:
    """ACI color for the n-th layer, cycling through 1..255."""
    return (ordinal % MAX_COLOR_INDEX) + 1


def format_value(value: object) -> str:
    """Text for a tag value. Whole-number floats are written without ``.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_tags(tags: Sequence[DXFTag]) -> str:
    lines: list[str] = []
    for tag in tags:
        lines.append(str(tag.code))
        lines.append(format_value(tag.value))
    return "\n".join(lines)


@ExporterRegistry.register("dxf")
class CadExporter:
    """Exports clustered beds to a DXF document.

    Every bed is drawn on exactly one layer. When a bed belongs to several
    clusters, the last cluster in mapping order wins; beds in no cluster go
    to ``cluster_0``.

    The export type is carried through but summary and detailed exports
    currently emit the same geometry.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(self, export_type: ExportType | str | None = None) -> None:
        """Initialize the DXF exporter.

        Args:
            export_type: Overrides the export type stored on the clustering
                output. None uses the output's export type.
        """
        self.export_type = ExportType(export_type) if export_type is not None else None

    def export(self, output: ClusteringOutput, path: Path) -> None:
        """Write the DXF document for a clustering output to a file."""
        content = self.export_string(output)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Exported DXF to {path}")

    def export_string(self, output: ClusteringOutput) -> str:
        """Generate the DXF document for a clustering output."""
        export_type = self.export_type or output.export_type
        return self.generate(output.beds, output.groups, export_type)

    def generate(
        self,
        beds: Sequence[Bed],
        groups: Mapping[str, frozenset[int] | set[int]],
        export_type: ExportType | str = ExportType.DETAILED,
    ) -> str:
        """Generate DXF document text.

        Args:
            beds: Beds in index order, with their outlines.
            groups: Cluster key -> bed indices. Iteration order decides layer
                colors and which cluster wins for beds in several clusters.
            export_type: "summary" or "detailed".

        Returns:
            The document as newline separated group code / value lines.
        """
        return _format_tags(self.build_tags(beds, groups, export_type))

    def build_tags(
        self,
        beds: Sequence[Bed],
        groups: Mapping[str, frozenset[int] | set[int]],
        export_type: ExportType | str = ExportType.DETAILED,
    ) -> list[DXFTag]:
        """Build the ordered list of DXF tags for the document."""
        export_type = ExportType(export_type)
        # TODO: give summary exports their own geometry once the expected
        # content of a summary document is decided
        logger.debug(f"Building {export_type.value} DXF for {len(beds)} beds")

        frozen_groups = {key: frozenset(members) for key, members in groups.items()}

        tags: list[DXFTag] = []
        tags.extend(self._header_tags())
        tags.extend(self._layer_table_tags(frozen_groups))
        tags.extend(self._entity_tags(beds, frozen_groups))
        tags.append(DXFTag(TYPE_CODE, "EOF"))
        return tags

    def _header_tags(self) -> list[DXFTag]:
        return [
            DXFTag(TYPE_CODE, "SECTION"),
            DXFTag(NAME_CODE, "HEADER"),
            DXFTag(HEADER_VARIABLE_CODE, "$ACADVER"),
            DXFTag(STRING_CODE, DXF_VERSION),
            DXFTag(TYPE_CODE, "ENDSEC"),
        ]

    def _layer_table_tags(self, groups: Mapping[str, frozenset[int]]) -> list[DXFTag]:
        """One LAYER record per cluster key, including empty clusters."""
        tags = [
            DXFTag(TYPE_CODE, "SECTION"),
            DXFTag(NAME_CODE, "TABLES"),
            DXFTag(TYPE_CODE, "TABLE"),
            DXFTag(NAME_CODE, "LAYER"),
        ]
        for ordinal, group_key in enumerate(groups):
            tags.extend(
                [
                    DXFTag(TYPE_CODE, "LAYER"),
                    DXFTag(SUBCLASS_CODE, "AcDbSymbolTableRecord"),
                    DXFTag(SUBCLASS_CODE, "AcDbLayerTableRecord"),
                    DXFTag(NAME_CODE, layer_name(group_key)),
                    DXFTag(FLAGS_CODE, 0),
                    DXFTag(COLOR_CODE, layer_color(ordinal)),
                    DXFTag(LINETYPE_CODE, LAYER_LINETYPE),
                ]
            )
        tags.append(DXFTag(TYPE_CODE, "ENDTAB"))
        tags.append(DXFTag(TYPE_CODE, "ENDSEC"))
        return tags

    def _entity_tags(
        self, beds: Sequence[Bed], groups: Mapping[str, frozenset[int]]
    ) -> list[DXFTag]:
        tags = [
            DXFTag(TYPE_CODE, "SECTION"),
            DXFTag(NAME_CODE, "ENTITIES"),
        ]
        skipped = 0
        for index, bed in enumerate(beds):
            outlines = bed.outlines
            if not outlines:
                skipped += 1
                continue
            layer = layer_name(resolve_group_key(groups, index))
            for outline in outlines:
                tags.extend(self._polyline_tags(layer, outline))
        if skipped:
            logger.debug(f"Skipped {skipped} beds without outlines")
        tags.append(DXFTag(TYPE_CODE, "ENDSEC"))
        return tags

    def _polyline_tags(
        self, layer: str, outline: Sequence[Point2D]
    ) -> list[DXFTag]:
        """Closed LWPOLYLINE for one outline."""
        tags = [
            DXFTag(TYPE_CODE, "LWPOLYLINE"),
            DXFTag(SUBCLASS_CODE, "AcDbEntity"),
            DXFTag(LAYER_CODE, layer),
            DXFTag(SUBCLASS_CODE, "AcDbPolyline"),
            DXFTag(VERTEX_COUNT_CODE, len(outline)),
            DXFTag(FLAGS_CODE, CLOSED_POLYLINE_FLAG),
        ]
        for x, y in outline:
            tags.append(DXFTag(X_CODE, x))
            tags.append(DXFTag(Y_CODE, y))
        return tags


def generate_dxf_content(
    beds: Sequence[Bed],
    groups: Mapping[str, frozenset[int] | set[int]],
    export_type: ExportType | str = ExportType.DETAILED,
) -> str:
    """Generate a DXF document for beds and their clusters."""
    return CadExporter().generate(beds, groups, export_type)


__all__ = [
    "CadExporter",
    "DXF_VERSION",
    "LAYER_PREFIX",
    "format_value",
    "generate_dxf_content",
    "layer_color",
    "layer_name",
]
