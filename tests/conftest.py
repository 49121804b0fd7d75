"""Pytest configuration and fixtures for livelines tests."""

import io
from pathlib import Path
from typing import Generator, List
from unittest.mock import patch

import pytest

from livelines.core.config import DisplayConfig
from livelines.core.stream import StreamBuffer


@pytest.fixture
def out() -> io.StringIO:
    """In-memory terminal for the aggregator to paint on."""
    return io.StringIO()


@pytest.fixture
def fast_config() -> DisplayConfig:
    """Display config with a short refresh interval to keep tests quick."""
    return DisplayConfig(refresh_interval=0.01)


@pytest.fixture
def terminal_80() -> Generator[None, None, None]:
    """Pin the detected terminal width to 80 columns."""
    with patch("livelines.core.aggregator.get_terminal_width", return_value=80):
        yield


@pytest.fixture
def closed_streams() -> List[StreamBuffer]:
    """Three finished streams with short last lines."""
    streams = []
    for name, line in [("a", "x"), ("bb", "yy"), ("ccc", "zzz")]:
        stream = StreamBuffer(name)
        stream.write(f"earlier output\n{line}\n")
        stream.close()
        streams.append(stream)
    return streams


@pytest.fixture
def clean_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure no config file override leaks in from the environment."""
    monkeypatch.delenv("LIVELINES_CONFIG_FILE", raising=False)


@pytest.fixture
def livelines_root() -> Path:
    """Return the livelines project root directory."""
    return Path(__file__).parent.parent
