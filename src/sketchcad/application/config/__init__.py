"""Session file schema and loading.

Public API:
    - SessionConfiguration: Root session model
    - BedConfig: Detected bed model
    - RegionConfig: User-drawn region model
    - ExportConfig: Export options model
    - load_config: Load a session from a JSON file
    - load_config_from_dict: Load a session from a dictionary
    - ConfigError: Exception for session file errors
    - config_to_input: Convert a session to a ClusteringInput

Example:
    >>> from pathlib import Path
    >>> from sketchcad.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("session.json"))
    ...     print(f"{len(config.beds)} beds, {len(config.regions)} regions")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from sketchcad.application.config.adapter import (
    config_to_beds,
    config_to_input,
    config_to_points,
    config_to_regions,
)
from sketchcad.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from sketchcad.application.config.schema import (
    SUPPORTED_VERSIONS,
    BedConfig,
    ExportConfig,
    RegionConfig,
    SessionConfiguration,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "BedConfig",
    "ConfigError",
    "ExportConfig",
    "RegionConfig",
    "SessionConfiguration",
    "config_to_beds",
    "config_to_input",
    "config_to_points",
    "config_to_regions",
    "load_config",
    "load_config_from_dict",
]
