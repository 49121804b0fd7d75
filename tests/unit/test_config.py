"""Tests for livelines.core.config."""

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from livelines.core.config import (
    CONFIG_FILE,
    ConfigError,
    DisplayConfig,
    config_path,
    load_config,
)


class TestDisplayConfig:
    """Tests for the DisplayConfig dataclass."""

    def test_defaults(self) -> None:
        """Documented defaults: 50ms refresh, 80 column fallback."""
        config = DisplayConfig()
        assert config.refresh_interval == 0.05
        assert config.fallback_width == 80

    @pytest.mark.parametrize("interval", [0, -0.5])
    def test_rejects_non_positive_interval(self, interval: float) -> None:
        """The refresh interval must be positive."""
        with pytest.raises(ConfigError) as exc_info:
            DisplayConfig(refresh_interval=interval)
        assert exc_info.value.fix_suggestion

    @pytest.mark.parametrize("width", [0, -1])
    def test_rejects_non_positive_width(self, width: int) -> None:
        """The fallback width must be positive."""
        with pytest.raises(ConfigError):
            DisplayConfig(fallback_width=width)

    def test_is_immutable(self) -> None:
        """Configs are frozen once built."""
        config = DisplayConfig()
        with pytest.raises(AttributeError):
            config.refresh_interval = 1.0  # type: ignore[misc]

    def test_merged_overrides_only_given_values(self) -> None:
        """None means keep the current value."""
        base = DisplayConfig(refresh_interval=0.2, fallback_width=100)
        assert base.merged() == base
        assert base.merged(refresh_interval=0.1) == DisplayConfig(0.1, 100)
        assert base.merged(fallback_width=60) == DisplayConfig(0.2, 60)

    def test_merged_validates(self) -> None:
        """Overrides go through the same validation."""
        with pytest.raises(ConfigError):
            DisplayConfig().merged(refresh_interval=0)


class TestFromDict:
    """Tests for DisplayConfig.from_dict."""

    def test_empty_gives_defaults(self) -> None:
        """Missing keys fall back to defaults."""
        assert DisplayConfig.from_dict({}) == DisplayConfig()

    def test_reads_known_keys(self) -> None:
        """Both settings are read."""
        config = DisplayConfig.from_dict({"refresh_interval": 1, "fallback_width": 120})
        assert config.refresh_interval == 1.0
        assert isinstance(config.refresh_interval, float)
        assert config.fallback_width == 120

    def test_ignores_unknown_keys(self) -> None:
        """Unrelated keys do not cause errors."""
        config = DisplayConfig.from_dict({"colour": "blue", "fallback_width": 90})
        assert config.fallback_width == 90

    @pytest.mark.parametrize(
        "data",
        [
            {"refresh_interval": "fast"},
            {"refresh_interval": True},
            {"fallback_width": 80.5},
            {"fallback_width": "80"},
            {"fallback_width": False},
        ],
    )
    def test_rejects_wrong_types(self, data: dict) -> None:
        """Values of the wrong type raise ConfigError with a suggestion."""
        with pytest.raises(ConfigError) as exc_info:
            DisplayConfig.from_dict(data)
        assert exc_info.value.fix_suggestion


@pytest.mark.usefixtures("clean_config_env")
class TestLoadConfig:
    """Tests for load_config function."""

    def test_loads_config_from_file(self, tmp_path: Path) -> None:
        """Config is loaded from .livelines.json."""
        data = {"refresh_interval": 0.1}
        (tmp_path / CONFIG_FILE).write_text(json.dumps(data))

        assert load_config(tmp_path) == data

    def test_returns_empty_dict_if_no_config(self, tmp_path: Path) -> None:
        """Returns empty dict if config file doesn't exist."""
        assert load_config(tmp_path) == {}

    def test_returns_empty_dict_on_invalid_json(self, tmp_path: Path) -> None:
        """Returns empty dict if config file has invalid JSON."""
        (tmp_path / CONFIG_FILE).write_text("not valid json {{{")

        assert load_config(tmp_path) == {}

    def test_returns_empty_dict_for_non_object(self, tmp_path: Path) -> None:
        """A JSON list is not a config."""
        (tmp_path / CONFIG_FILE).write_text("[1, 2, 3]")

        assert load_config(tmp_path) == {}

    def test_uses_env_var_override(self, tmp_path: Path) -> None:
        """LIVELINES_CONFIG_FILE env var overrides default path."""
        custom = tmp_path / "custom.json"
        custom.write_text(json.dumps({"fallback_width": 100}))

        with patch.dict(os.environ, {"LIVELINES_CONFIG_FILE": str(custom)}):
            assert config_path(tmp_path) == custom
            assert load_config(tmp_path) == {"fallback_width": 100}

    def test_default_path(self, tmp_path: Path) -> None:
        """Without override the file lives in the project root."""
        assert config_path(tmp_path) == tmp_path / ".livelines.json"
