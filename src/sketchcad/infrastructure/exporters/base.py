"""Exporter interface, format registry and multi-format export."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sketchcad.application.dtos import ClusteringOutput


logger = logging.getLogger(__name__)


@runtime_checkable
class Exporter(Protocol):
    """Something that can render a ClusteringOutput in one file format.

    ``format_name`` is the key used on the command line and in the registry,
    ``file_extension`` is appended without a leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    def export(self, output: ClusteringOutput, path: Path) -> None: ...

    def export_string(self, output: ClusteringOutput) -> str: ...


class ExporterRegistry:
    """Maps format names to exporter classes.

    Exporter modules register their class at import time:

        @ExporterRegistry.register("dxf")
        class CadExporter:
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str):
        """Class decorator adding an exporter under ``format_name``.

        A second registration for the same name replaces the first one.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            previous = cls._exporters.get(format_name)
            if previous is not None and previous is not exporter_class:
                logger.warning(
                    f"Exporter '{format_name}' {previous.__name__} replaced by "
                    f"{exporter_class.__name__}"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}'")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Exporter class for a format name.

        Raises:
            KeyError: The format is unknown. The message lists the known ones.
        """
        try:
            return cls._exporters[format_name]
        except KeyError:
            known = ", ".join(cls.available_formats()) or "none"
            raise KeyError(
                f"Unknown export format '{format_name}' (known formats: {known})"
            ) from None

    @classmethod
    def available_formats(cls) -> list[str]:
        return sorted(cls._exporters)


class ExportManager:
    """Writes one clustering output in several formats into a directory.

    Files are named ``<project>_<format>.<extension>``.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: ClusteringOutput,
        project_name: str = "clusters",
    ) -> dict[str, Path]:
        """Export ``output`` once per format.

        The output directory is created when missing. Formats are resolved
        before anything is written, so an unknown name leaves no partial
        export behind.

        Returns:
            Format name -> path of the written file.

        Raises:
            KeyError: A format is not registered.
            OSError: A file could not be written.
        """
        exporters = [(name, ExporterRegistry.get(name)()) for name in formats]
        self.output_dir.mkdir(parents=True, exist_ok=True)

        written: dict[str, Path] = {}
        for name, exporter in exporters:
            target = self.output_dir / f"{project_name}_{name}.{exporter.file_extension}"
            exporter.export(output, target)
            written[name] = target
        logger.info(f"Exported {len(written)} file(s) to {self.output_dir}")
        return written
