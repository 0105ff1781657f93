"""Validate command for checking session files.

This module provides the `validate` command that checks a JSON session file
for errors and reports regions the classifier would reject.
"""

from pathlib import Path
from typing import Annotated

import typer

from sketchcad.application.config import (
    ConfigError,
    config_to_input,
    load_config,
)
from sketchcad.domain import GeometryClassifier


def display_load_error(error: ConfigError) -> None:
    """Display a session loading error on stderr.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def validate_command(
    session_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON session file to validate"),
    ],
) -> None:
    """Validate a clustering session file.

    Checks the session file for JSON syntax errors, schema errors and
    regions with too few points to be used for clustering.

    Exit codes:
        0 - Session is valid
        1 - Session has errors (cannot be used)
        2 - Session is valid but some regions will be ignored

    Example:
        sketchcad validate session.json
    """
    typer.echo(f"Validating {session_file}...")
    typer.echo()

    try:
        config = load_config(session_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    clustering_input = config_to_input(config)
    # Only region validity matters here; no points are needed
    result = GeometryClassifier().classify((), clustering_input.regions)

    if result.rejections:
        typer.echo("Warnings:")
        for rejection in result.rejections:
            typer.echo(
                f"  regions[{rejection.region_index}] "
                f"(cluster '{rejection.group_key}'): {rejection.reason}"
            )
        typer.echo()
        typer.echo(
            f"Validation passed with {len(result.rejections)} warning(s)"
        )
        raise typer.Exit(code=2)

    typer.echo(
        f"Validation passed. {len(config.beds)} beds, "
        f"{len(config.regions)} regions, {len(result.groups)} clusters."
    )
