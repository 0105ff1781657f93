"""Tests for the ClusterBedsCommand use case."""

from __future__ import annotations

from sketchcad.application import ClusterBedsCommand, ClusteringInput
from sketchcad.domain import GeometryClassifier, StatisticsAggregator
from sketchcad.domain.value_objects import Bed, ExportType, Region
from sketchcad.infrastructure.exporters import CadExporter


class TestClusterBedsCommand:
    """Tests for ClusterBedsCommand.execute."""

    def test_default_collaborators(self) -> None:
        command = ClusterBedsCommand()
        assert isinstance(command.classifier, GeometryClassifier)
        assert isinstance(command.aggregator, StatisticsAggregator)

    def test_scenario_two_beds_in_one_cluster(
        self,
        four_beds: list[Bed],
        four_points: list[tuple[float, float]],
        square_region: Region,
    ) -> None:
        """Classify and aggregate four beds with one region around beds 0 and 1."""
        result = ClusterBedsCommand().execute(
            ClusteringInput(
                beds=tuple(four_beds),
                points=tuple(four_points),
                regions=(square_region,),
            )
        )

        assert result.is_valid
        assert result.groups == {"0": frozenset({0, 1})}
        assert result.statistics is not None
        detail = result.statistics.cluster_details[0]
        assert (detail.bed_count, detail.total_area, detail.average_area) == (2, 30, 15)
        assert detail.bed_ids == (0, 1)
        assert result.statistics.coverage_percent == 50

    def test_overlapping_clusters_double_count(self) -> None:
        """A bed enclosed by two clusters' regions counts twice."""
        beds = tuple(Bed(bed_id=i, area=1) for i in range(6))
        points = tuple([(50.0, 50.0)] * 5 + [(5.0, 5.0)])
        regions = (
            Region(group_key="0", points=((0, 0), (10, 0), (10, 10), (0, 10))),
            Region(group_key="1", points=((4, 4), (8, 4), (8, 8), (4, 8))),
        )

        result = ClusterBedsCommand().execute(
            ClusteringInput(beds=beds, points=points, regions=regions)
        )

        assert result.groups == {"0": frozenset({5}), "1": frozenset({5})}
        assert result.statistics is not None
        assert result.statistics.clustered_beds == 2
        assert result.final_labels() == ["0", "0", "0", "0", "0", "1"]

    def test_rejections_are_carried_through(
        self, four_beds: list[Bed], four_points: list[tuple[float, float]]
    ) -> None:
        """Short regions are reported but do not make the output invalid."""
        result = ClusterBedsCommand().execute(
            ClusteringInput(
                beds=tuple(four_beds),
                points=tuple(four_points),
                regions=(Region(group_key="0", points=((0, 0), (1, 1))),),
            )
        )
        assert result.is_valid
        assert result.groups == {}
        assert len(result.rejections) == 1
        assert result.statistics is not None
        assert result.statistics.num_clusters == 0

    def test_misaligned_points_return_errors(self, four_beds: list[Bed]) -> None:
        """A point count different from the bed count is an input error."""
        result = ClusterBedsCommand().execute(
            ClusteringInput(
                beds=tuple(four_beds),
                points=((0.0, 0.0),),
                export_type=ExportType.SUMMARY,
            )
        )
        assert not result.is_valid
        assert "Point count (1) must match bed count (4)" in result.errors
        assert result.statistics is None
        assert result.groups == {}
        assert result.export_type is ExportType.SUMMARY

    def test_export_type_is_carried(self, four_beds: list[Bed]) -> None:
        result = ClusterBedsCommand().execute(
            ClusteringInput(
                beds=tuple(four_beds),
                points=((0.0, 0.0),) * 4,
                export_type=ExportType.SUMMARY,
            )
        )
        assert result.export_type is ExportType.SUMMARY

    def test_out_of_order_keys_drive_layers_in_numeric_order(self) -> None:
        """Regions listed "2" then "1" still give layer order 1, 2."""
        square = ((0, 0), (10, 0), (10, 10), (0, 10))
        beds = (Bed(bed_id=0, area=4, polygons=(((1, 1), (2, 1), (2, 2)),)),)
        result = ClusterBedsCommand().execute(
            ClusteringInput(
                beds=beds,
                points=((5.0, 5.0),),
                regions=(
                    Region(group_key="2", points=square),
                    Region(group_key="1", points=square),
                ),
            )
        )

        content = CadExporter().export_string(result)
        lines = content.split("\n")
        pairs = list(zip(lines[::2], lines[1::2]))
        layer_names = [value for code, value in pairs if code == "2" and value.startswith("cluster_")]
        assert layer_names == ["cluster_1", "cluster_2"]
        assert "8\ncluster_2\n100\nAcDbPolyline" in content
        assert result.final_labels() == ["2"]
