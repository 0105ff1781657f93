"""Infrastructure layer - exporters and console formatting."""

from .exporters import (
    CadExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    ResultsJsonExporter,
    generate_dxf_content,
)
from .formatters import RejectionFormatter, StatisticsFormatter

__all__ = [
    "CadExporter",
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "RejectionFormatter",
    "ResultsJsonExporter",
    "StatisticsFormatter",
    "generate_dxf_content",
]
