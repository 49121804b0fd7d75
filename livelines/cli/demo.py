"""Demo command for livelines CLI.

Feeds lines of text into a few named streams with random pauses, which
is enough to watch the live display at work without any real commands.
"""

import argparse
import logging
import random
import threading
import time
from pathlib import Path
from typing import List, Optional, Sequence

from livelines.cli.session import display_streams, report_config_error, resolve_config
from livelines.cli.signals import install_interrupt_handler
from livelines.constants import EXIT_CONFIG_ERROR, EXIT_FAILED, EXIT_INTERRUPTED, EXIT_OK
from livelines.core.config import ConfigError
from livelines.core.signals import Signal
from livelines.core.stream import Stream, StreamBuffer

logger = logging.getLogger(__name__)

DEFAULT_NAMES = ["fred", "wilma", "barney"]
DEFAULT_MIN_DELAY = 0.05
DEFAULT_MAX_DELAY = 0.25

LOREM_IPSUM = [
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit.",
    "Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua.",
    "Ut enim ad minim veniam, quis nostrud exercitation ullamco laboris nisi ut aliquip ex ea commodo consequat.",
    "Duis aute irure dolor in reprehenderit in voluptate velit esse cillum dolore eu fugiat nulla pariatur.",
    "Excepteur sint occaecat cupidatat non proident.",
    "Sunt in culpa qui officia deserunt mollit anim id est laborum.",
    "Curabitur pretium tincidunt lacus, nulla gravida orci a odio.",
    "Nullam varius, turpis et commodo pharetra, est eros bibendum elit, nec luctus magna felis sollicitudin mauris.",
    "Integer in mauris eu nibh euismod gravida.",
    "Duis ac tellus et risus vulputate vehicula.",
    "Donec lobortis risus a elit.",
    "Etiam tempor.",
    "Ut ullamcorper, ligula eu tempor congue, eros est euismod turpis, id tincidunt sapien risus a quam.",
    "Maecenas fermentum consequat mi.",
    "Donec fermentum.",
    "Pellentesque malesuada nulla a mi.",
    "Duis sapien sem, aliquet nec, commodo eget, consequat quis, neque.",
    "Aliquam faucibus, elit ut dictum aliquet, felis nisl adipiscing sapien, sed malesuada diam lacus eget erat.",
    "Cras mollis scelerisque nunc.",
    "Nullam arcu.",
]


def load_sample_lines(path: Optional[Path] = None) -> List[str]:
    """Read the lines to replay, or the built-in lorem ipsum.

    Raises:
        OSError: If *path* cannot be read
    """
    if path is None:
        return list(LOREM_IPSUM)
    return path.read_text(encoding="utf-8", errors="replace").splitlines()


def feed_lines(
    stream: Stream,
    lines: Sequence[str],
    min_delay: float = DEFAULT_MIN_DELAY,
    max_delay: float = DEFAULT_MAX_DELAY,
    rng: Optional[random.Random] = None,
    cancel: Optional[Signal] = None,
) -> None:
    """Write *lines* into *stream* one at a time with random pauses.

    The stream is always closed on return, including when *cancel* fires
    part way through.
    """
    rng = rng or random.Random()
    try:
        for line in lines:
            stream.write(line + "\n")
            delay = rng.uniform(min_delay, max_delay)
            if cancel is not None:
                if cancel.wait(delay):
                    logger.debug(f"Feeding {stream.name} cancelled")
                    return
            else:
                time.sleep(delay)
    finally:
        stream.close()


def cmd_demo(args: argparse.Namespace) -> int:
    """Handle the demo command."""
    try:
        config = resolve_config(args)
    except ConfigError as e:
        report_config_error(e)
        return EXIT_CONFIG_ERROR

    if args.min_delay < 0 or args.max_delay < args.min_delay:
        print("❌ Delays must satisfy 0 <= --min-delay <= --max-delay")
        return EXIT_CONFIG_ERROR

    try:
        lines = load_sample_lines(Path(args.file) if args.file else None)
    except OSError as e:
        print(f"❌ Cannot read {args.file}: {e}")
        return EXIT_FAILED

    streams = [StreamBuffer(name) for name in args.names]
    cancel = Signal()
    feeders = [
        threading.Thread(
            target=feed_lines,
            args=(stream, lines, args.min_delay, args.max_delay),
            kwargs={"cancel": cancel},
            name=f"livelines-demo-{stream.name}",
            daemon=True,
        )
        for stream in streams
    ]

    restore = install_interrupt_handler(cancel)
    try:
        for feeder in feeders:
            feeder.start()
        cancelled = display_streams(streams, config, cancel)
    finally:
        cancel.fire()
        for feeder in feeders:
            feeder.join()
        restore()

    print("finished")
    return EXIT_INTERRUPTED if cancelled else EXIT_OK
