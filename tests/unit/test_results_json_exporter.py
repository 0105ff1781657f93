"""Tests for the clustering results JSON exporter."""

from __future__ import annotations

import json
from pathlib import Path

from sketchcad.application import ClusterBedsCommand, ClusteringInput
from sketchcad.domain.value_objects import Bed, ExportType, Region
from sketchcad.infrastructure.exporters import ResultsJsonExporter
from sketchcad.infrastructure.exporters.results_json import SCHEMA_VERSION


def run(beds: list[Bed], points: list[tuple[float, float]], regions: list[Region]):
    return ClusterBedsCommand().execute(
        ClusteringInput(
            beds=tuple(beds),
            points=tuple(points),
            regions=tuple(regions),
            export_type=ExportType.SUMMARY,
        )
    )


class TestResultsJsonExporter:
    """Tests for ResultsJsonExporter."""

    def test_document_layout(
        self,
        four_beds: list[Bed],
        four_points: list[tuple[float, float]],
        square_region: Region,
    ) -> None:
        """The document carries clusters, labels, statistics and rejections."""
        short = Region(group_key="1", points=((0, 0), (1, 1)))
        output = run(four_beds, four_points, [square_region, short])

        data = json.loads(ResultsJsonExporter().export_string(output))

        assert data["schema_version"] == SCHEMA_VERSION
        assert data["export_type"] == "summary"
        assert data["final_labels"] == ["0", "0", "0", "0"]
        assert data["processed_clusters"] == {"0": [0, 1]}
        assert data["errors"] == []
        assert data["rejections"] == [
            {
                "group_key": "1",
                "reason": "Region needs at least 3 points to form a polygon (got 2)",
                "region_index": 1,
            }
        ]

    def test_statistics_section(
        self,
        four_beds: list[Bed],
        four_points: list[tuple[float, float]],
        square_region: Region,
    ) -> None:
        """Statistics include the overview and per-cluster details."""
        output = run(four_beds, four_points, [square_region])

        statistics = json.loads(ResultsJsonExporter().export_string(output))["statistics"]

        assert statistics["total_beds"] == 4
        assert statistics["clustered_beds"] == 2
        assert statistics["unclustered_beds"] == 2
        assert statistics["coverage_percent"] == 50
        assert statistics["num_clusters"] == 1
        assert statistics["cluster_details"] == [
            {
                "cluster_id": 0,
                "cluster_name": "0",
                "bed_count": 2,
                "total_area": 30,
                "average_area": 15,
                "bed_ids": [0, 1],
                "percent_of_total": 50.0,
            }
        ]

    def test_failed_output_has_null_statistics(self, four_beds: list[Bed]) -> None:
        """Input errors are reported and statistics are null."""
        output = run(four_beds, [(0, 0)], [])
        data = json.loads(ResultsJsonExporter().export_string(output))
        assert data["statistics"] is None
        assert len(data["errors"]) == 1

    def test_compact_output(self, four_beds: list[Bed]) -> None:
        """indent=None produces a single line."""
        output = run(four_beds, [(0, 0)] * 4, [])
        assert "\n" not in ResultsJsonExporter(indent=None).export_string(output)

    def test_export_writes_file(
        self,
        tmp_path: Path,
        four_beds: list[Bed],
        four_points: list[tuple[float, float]],
    ) -> None:
        output = run(four_beds, four_points, [])
        path = tmp_path / "results.json"
        ResultsJsonExporter().export(output, path)
        assert json.loads(path.read_text(encoding="utf-8"))["processed_clusters"] == {}
