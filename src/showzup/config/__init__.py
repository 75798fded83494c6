"""Application configuration helpers."""

from __future__ import annotations

from .cli import (
    CliConfig,
    ConfigurationError,
    MissingManifestPathError,
    get_cli_config,
    get_manifest_path,
    parse_flag,
    parse_log_level,
)
from .logging import RESOLUTION_LOGGER, configure_logging

__all__ = [
    "RESOLUTION_LOGGER",
    "CliConfig",
    "ConfigurationError",
    "MissingManifestPathError",
    "configure_logging",
    "get_cli_config",
    "get_manifest_path",
    "parse_flag",
    "parse_log_level",
]
