"""Tests for the exporter framework: Protocol, Registry and ExportManager."""

from __future__ import annotations

import json
from pathlib import Path
from typing import ClassVar

import pytest

from sketchcad.application import ClusterBedsCommand, ClusteringInput, ClusteringOutput
from sketchcad.domain.value_objects import Bed, Region
from sketchcad.infrastructure.exporters import (
    CadExporter,
    ExporterRegistry,
    ExportManager,
    ResultsJsonExporter,
)


@pytest.fixture
def clustering_output(
    four_beds: list[Bed],
    four_points: list[tuple[float, float]],
    square_region: Region,
) -> ClusteringOutput:
    return ClusterBedsCommand().execute(
        ClusteringInput(
            beds=tuple(four_beds),
            points=tuple(four_points),
            regions=(square_region,),
        )
    )


@pytest.fixture
def restore_registry():
    """Restore the exporter registry after a test modifies it."""
    saved = dict(ExporterRegistry._exporters)
    yield
    ExporterRegistry._exporters.clear()
    ExporterRegistry._exporters.update(saved)


class TestExporterRegistry:
    """Tests for ExporterRegistry."""

    def test_builtin_formats_are_registered(self) -> None:
        """dxf and json exporters register on import."""
        assert ExporterRegistry.available_formats() == ["dxf", "json"]
        assert ExporterRegistry.get("json") is ResultsJsonExporter

    def test_unknown_format_lists_available(self) -> None:
        """Looking up an unknown format raises KeyError naming the options."""
        with pytest.raises(KeyError) as exc_info:
            ExporterRegistry.get("svg")
        assert "dxf" in str(exc_info.value)
        assert "json" in str(exc_info.value)

    @pytest.mark.usefixtures("restore_registry")
    def test_register_decorator(self) -> None:
        """Custom exporters can register themselves."""

        @ExporterRegistry.register("txt")
        class TextExporter:
            format_name: ClassVar[str] = "txt"
            file_extension: ClassVar[str] = "txt"

            def export(self, output: ClusteringOutput, path: Path) -> None:
                path.write_text("clusters")

        assert ExporterRegistry.get("txt") is TextExporter
        assert "txt" in ExporterRegistry.available_formats()

    @pytest.mark.usefixtures("restore_registry")
    def test_empty_registry_message(self) -> None:
        """With nothing registered the error says so."""
        ExporterRegistry._exporters.clear()
        with pytest.raises(KeyError) as exc_info:
            ExporterRegistry.get("dxf")
        assert "none" in str(exc_info.value)

    @pytest.mark.usefixtures("restore_registry")
    def test_reregistration_replaces(self) -> None:
        """A later registration for the same name wins."""

        @ExporterRegistry.register("json")
        class OtherJsonExporter(ResultsJsonExporter):
            pass

        assert ExporterRegistry.get("json") is OtherJsonExporter


class TestExportManager:
    """Tests for ExportManager."""

    def test_export_all_writes_named_files(
        self, tmp_path: Path, clustering_output: ClusteringOutput
    ) -> None:
        """Files are named {project}_{format}.{ext} in the output directory."""
        out_dir = tmp_path / "nested" / "out"
        manager = ExportManager(out_dir)

        files = manager.export_all(["dxf", "json"], clustering_output, "garden")

        assert files == {
            "dxf": out_dir / "garden_dxf.dxf",
            "json": out_dir / "garden_json.json",
        }
        assert files["dxf"].read_text(encoding="utf-8") == CadExporter().export_string(
            clustering_output
        )
        data = json.loads(files["json"].read_text(encoding="utf-8"))
        assert data["processed_clusters"] == {"0": [0, 1]}

    def test_default_project_name(
        self, tmp_path: Path, clustering_output: ClusteringOutput
    ) -> None:
        files = ExportManager(tmp_path).export_all(["dxf"], clustering_output)
        assert files == {"dxf": tmp_path / "clusters_dxf.dxf"}
        assert files["dxf"].exists()

    def test_unknown_format_writes_nothing(
        self, tmp_path: Path, clustering_output: ClusteringOutput
    ) -> None:
        """Formats are resolved before any file is written."""
        out_dir = tmp_path / "out"
        with pytest.raises(KeyError):
            ExportManager(out_dir).export_all(["dxf", "pdf"], clustering_output)
        assert not out_dir.exists()
