"""Configuration for the developer command line.

Only the CLI reads the environment; the resolver core takes everything it
needs as arguments.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

MANIFEST_ENV_VAR: Final[str] = "SHOWZUP_MANIFEST"
LOG_LEVEL_ENV_VAR: Final[str] = "SHOWZUP_LOG_LEVEL"
TRACE_ENV_VAR: Final[str] = "SHOWZUP_TRACE_RESOLUTION"
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


class ConfigurationError(RuntimeError):
    """Raised when a CLI setting read from the environment is invalid."""


class MissingManifestPathError(ConfigurationError):
    """Raised when neither ``--manifest`` nor the manifest variable names a file."""

    def __init__(self, env_var: str = MANIFEST_ENV_VAR) -> None:
        super().__init__(f"No manifest given: pass --manifest PATH or set {env_var}")
        self.env_var = env_var


@dataclass(frozen=True, slots=True)
class CliConfig:
    log_level: int = DEFAULT_LOG_LEVEL
    trace_resolution: bool = False


def _env_value(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def parse_log_level(value: str) -> int:
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level: {value}")
    return level


def parse_flag(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}, got {value!r}")


def get_cli_config() -> CliConfig:
    env_level = _env_value(LOG_LEVEL_ENV_VAR)
    env_trace = _env_value(TRACE_ENV_VAR)
    return CliConfig(
        log_level=DEFAULT_LOG_LEVEL if env_level is None else parse_log_level(env_level),
        trace_resolution=False if env_trace is None else parse_flag(TRACE_ENV_VAR, env_trace),
    )


def get_manifest_path(override: str | None = None) -> Path:
    """Return ``override`` if given, else the manifest path from the environment."""

    if override is not None and override.strip():
        return Path(override.strip()).expanduser()

    env_path = _env_value(MANIFEST_ENV_VAR)
    if env_path is None:
        raise MissingManifestPathError(MANIFEST_ENV_VAR)
    return Path(env_path).expanduser()
