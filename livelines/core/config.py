"""Configuration management for the live display.

This module provides:
- DisplayConfig, the settings passed to an Aggregator at construction
- Validation of configured values
- Loading of the optional project config file

Config structure (.livelines.json):
{
  "refresh_interval": 0.05,
  "fallback_width": 80
}
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from livelines.reporting.display import config as display_config

logger = logging.getLogger(__name__)

# Config file name
CONFIG_FILE = ".livelines.json"

# Environment variable that points at an alternative config file
CONFIG_FILE_ENV = "LIVELINES_CONFIG_FILE"


class ConfigError(Exception):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, fix_suggestion: Optional[str] = None):
        super().__init__(message)
        self.fix_suggestion = fix_suggestion


@dataclass(frozen=True)
class DisplayConfig:
    """Settings for an Aggregator.

    Attributes:
        refresh_interval: Seconds to wait between redraws (default 50ms)
        fallback_width: Terminal width assumed when it cannot be detected
    """

    refresh_interval: float = display_config.DEFAULT_REFRESH_INTERVAL
    fallback_width: int = display_config.DEFAULT_TERMINAL_WIDTH

    def __post_init__(self) -> None:
        validate_refresh_interval(self.refresh_interval)
        validate_fallback_width(self.fallback_width)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DisplayConfig":
        """Build a config from a mapping, ignoring unknown keys.

        Args:
            data: Parsed config file contents

        Returns:
            DisplayConfig with defaults for missing keys

        Raises:
            ConfigError: If a value has the wrong type or is out of range
        """
        kwargs: Dict[str, Any] = {}

        if "refresh_interval" in data:
            value = data["refresh_interval"]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(
                    f"refresh_interval must be a number, got {value!r}",
                    fix_suggestion='Use seconds, e.g. "refresh_interval": 0.05',
                )
            kwargs["refresh_interval"] = float(value)

        if "fallback_width" in data:
            value = data["fallback_width"]
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(
                    f"fallback_width must be an integer, got {value!r}",
                    fix_suggestion='Use a column count, e.g. "fallback_width": 80',
                )
            kwargs["fallback_width"] = value

        return cls(**kwargs)

    def merged(
        self,
        refresh_interval: Optional[float] = None,
        fallback_width: Optional[int] = None,
    ) -> "DisplayConfig":
        """Return a copy with any non-None overrides applied."""
        return DisplayConfig(
            refresh_interval=(
                self.refresh_interval if refresh_interval is None else refresh_interval
            ),
            fallback_width=(
                self.fallback_width if fallback_width is None else fallback_width
            ),
        )


def validate_refresh_interval(value: float) -> None:
    """Raise ConfigError unless *value* is a positive number of seconds."""
    if value <= 0:
        raise ConfigError(
            f"refresh_interval must be greater than 0, got {value}",
            fix_suggestion="Pick a small positive delay such as 0.05",
        )


def validate_fallback_width(value: int) -> None:
    """Raise ConfigError unless *value* is a positive column count."""
    if value <= 0:
        raise ConfigError(
            f"fallback_width must be greater than 0, got {value}",
            fix_suggestion="Use the width of a typical terminal such as 80",
        )


def config_path(project_root: Path) -> Path:
    """Return the config file location for *project_root*.

    The LIVELINES_CONFIG_FILE environment variable overrides the default
    ``<project_root>/.livelines.json``.
    """
    override = os.environ.get(CONFIG_FILE_ENV)
    if override:
        return Path(override)
    return project_root / CONFIG_FILE


def load_config(project_root: Path) -> Dict[str, Any]:
    """Load configuration from .livelines.json.

    Args:
        project_root: Path to project root directory

    Returns:
        Configuration dictionary, or empty dict if not found or unreadable
    """
    path = config_path(project_root)
    if not path.exists():
        return {}

    try:
        data = json.loads(path.read_text())
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Failed to parse config {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Ignoring config {path}: expected a JSON object")
        return {}
    return data
