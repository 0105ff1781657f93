"""CLI command implementations for the sketchcad application.

This package contains subcommands for the sketchcad CLI, including:
- validate: Validate a session file
"""

from sketchcad.cli.commands.validate import display_load_error, validate_command

__all__ = ["display_load_error", "validate_command"]
