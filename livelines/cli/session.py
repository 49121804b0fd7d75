"""Shared plumbing for CLI verbs that show a live display."""

import argparse
import logging
from pathlib import Path
from typing import Sequence

from livelines.core.aggregator import Aggregator
from livelines.core.config import ConfigError, DisplayConfig, load_config
from livelines.core.signals import Signal
from livelines.core.stream import Stream

logger = logging.getLogger(__name__)

# How often the main thread re-checks for completion while waiting
WAIT_POLL_INTERVAL = 0.25


def resolve_config(args: argparse.Namespace) -> DisplayConfig:
    """Build the display config: CLI flags > config file > defaults.

    Raises:
        ConfigError: If the config file or a flag holds an invalid value
    """
    project_root = Path(getattr(args, "project_root", ".")).resolve()
    file_config = DisplayConfig.from_dict(load_config(project_root))
    return file_config.merged(
        refresh_interval=getattr(args, "interval", None),
        fallback_width=getattr(args, "width", None),
    )


def display_streams(
    streams: Sequence[Stream], config: DisplayConfig, cancel: Signal
) -> bool:
    """Show *streams* live until they all close or *cancel* fires.

    Args:
        streams: Streams to display
        config: Display settings
        cancel: External cancellation signal

    Returns:
        True if the display was cancelled, False if every stream finished
    """
    aggregator = Aggregator(*streams, config=config)

    finished = Signal()
    aggregator.done.subscribe(finished.fire)
    cancel.subscribe(finished.fire)

    logger.debug(f"Displaying {len(streams)} streams with {config}")
    print("starting")
    aggregator.begin(cancel)

    while not finished.wait(WAIT_POLL_INTERVAL):
        pass

    # The render loop owns stdout until it has exited
    aggregator.stop()

    if aggregator.done.is_set():
        print("all streams finished")
        return False

    print("stopping")
    return True


def report_config_error(error: ConfigError) -> None:
    """Print a configuration error and its fix suggestion."""
    print(f"❌ {error}")
    if error.fix_suggestion:
        print(f"💡 {error.fix_suggestion}")
