"""Exporter framework for clustering outputs.

This package provides a unified exporter framework with:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- dxf: DXF document with one layer per cluster and bed outlines
- json: Clustering results with statistics and final labels

Usage:
    from sketchcad.infrastructure.exporters import ExporterRegistry, ExportManager

    dxf_exporter = ExporterRegistry.get("dxf")(export_type="summary")
    content = dxf_exporter.export_string(clustering_output)

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["dxf", "json"], clustering_output, project_name="garden")
"""

from sketchcad.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)

# Import exporters to trigger registration
from sketchcad.infrastructure.exporters.dxf import CadExporter, generate_dxf_content
from sketchcad.infrastructure.exporters.results_json import ResultsJsonExporter

__all__ = [
    # Framework
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    # Registered exporters
    "CadExporter",
    "ResultsJsonExporter",
    "generate_dxf_content",
]
