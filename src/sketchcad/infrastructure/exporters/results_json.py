"""JSON exporter for clustering results.

Produces the downloadable results document: cluster membership, final
labels per bed, statistics with per-cluster details and the regions that
were rejected.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from sketchcad.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from sketchcad.application.dtos import ClusteringOutput
    from sketchcad.domain.value_objects import ClusteringStatistics


logger = logging.getLogger(__name__)


# Current schema version for results JSON output
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class ResultsJsonExporter:
    """Exports clustering results as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def export(self, output: ClusteringOutput, path: Path) -> None:
        """Export results JSON to file."""
        content = self.export_string(output)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Exported clustering results to {path}")

    def export_string(self, output: ClusteringOutput) -> str:
        return json.dumps(self._build_output(output), indent=self.indent)

    def _build_output(self, output: ClusteringOutput) -> dict[str, Any]:
        return {
            "schema_version": SCHEMA_VERSION,
            "export_type": output.export_type.value,
            "final_labels": output.final_labels(),
            "processed_clusters": {
                key: sorted(members) for key, members in output.groups.items()
            },
            "statistics": self._statistics_to_dict(output.statistics),
            "rejections": [asdict(rejection) for rejection in output.rejections],
            "errors": list(output.errors),
        }

    def _statistics_to_dict(
        self, statistics: ClusteringStatistics | None
    ) -> dict[str, Any] | None:
        if statistics is None:
            return None
        data: dict[str, Any] = asdict(statistics.overview)
        data["cluster_details"] = [
            {**asdict(detail), "bed_ids": list(detail.bed_ids)}
            for detail in statistics.cluster_details
        ]
        return data
