"""Typer CLI for bed clustering and DXF export."""

from pathlib import Path
from typing import Annotated

import typer

from sketchcad.application import ClusterBedsCommand, ClusteringOutput
from sketchcad.application.config import ConfigError, config_to_input, load_config
from sketchcad.cli.commands import display_load_error, validate_command
from sketchcad.domain import ExportType
from sketchcad.infrastructure import (
    CadExporter,
    ExporterRegistry,
    ExportManager,
    RejectionFormatter,
    ResultsJsonExporter,
    StatisticsFormatter,
)


app = typer.Typer(
    name="sketchcad",
    help="Group detected beds into color clusters and export them as DXF.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _run_session(session_file: Path) -> ClusteringOutput:
    """Load a session file and run classification and statistics.

    Exits with code 1 when the session cannot be loaded or is invalid.
    Rejected regions are reported on stderr but do not stop the run.
    """
    try:
        config = load_config(session_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    result = ClusterBedsCommand().execute(config_to_input(config))

    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    if result.rejections:
        typer.echo(RejectionFormatter().format(result.rejections), err=True)

    return result


def _handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path | None,
    project_name: str,
    result: ClusteringOutput,
) -> None:
    """Handle multi-format export via --output-formats option.

    Args:
        output_formats_str: Comma-separated format list or "all".
        output_dir: Output directory for exported files.
        project_name: Project name for file naming.
        result: The clustering output to export.
    """
    if output_formats_str.lower() == "all":
        formats = ExporterRegistry.available_formats()
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


@app.command()
def cluster(
    session_file: Annotated[
        Path, typer.Argument(help="Path to the JSON session file")
    ],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the results as JSON")
    ] = False,
    show_ids: Annotated[
        bool, typer.Option("--show-ids", help="List bed ids for each cluster")
    ] = False,
) -> None:
    """Classify beds into clusters and show statistics."""
    result = _run_session(session_file)

    if as_json:
        typer.echo(ResultsJsonExporter().export_string(result))
        return

    if result.statistics is not None:
        formatter = StatisticsFormatter(show_bed_ids=show_ids)
        typer.echo(formatter.format(result.statistics))


@app.command()
def export(
    session_file: Annotated[
        Path, typer.Argument(help="Path to the JSON session file")
    ],
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="DXF file to write (default: <session>.dxf)"),
    ] = None,
    export_type: Annotated[
        str | None,
        typer.Option("--type", help="Export type (summary or detailed), overrides the session file"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats (dxf,json) or 'all'",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for --output-formats"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name used in exported file names"),
    ] = None,
) -> None:
    """Export clustered bed outlines as a DXF document."""
    if export_type is not None and export_type.lower() not in ("summary", "detailed"):
        typer.echo(
            f"Invalid export type: {export_type}. Must be 'summary' or 'detailed'",
            err=True,
        )
        raise typer.Exit(code=1)

    result = _run_session(session_file)
    if export_type is not None:
        result.export_type = ExportType(export_type.lower())

    if output_formats:
        _handle_multi_format_export(
            output_formats,
            output_dir,
            project_name or session_file.stem,
            result,
        )
        return

    target = output or session_file.with_suffix(".dxf")
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        CadExporter().export(result, target)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Exported {len(result.groups)} cluster layer(s) "
        f"({result.export_type.value}) to {target}"
    )


@app.command()
def formats() -> None:
    """List available export formats."""
    for format_name in ExporterRegistry.available_formats():
        exporter_class = ExporterRegistry.get(format_name)
        typer.echo(f"{format_name:<8} .{exporter_class.file_extension}")


if __name__ == "__main__":
    app()
