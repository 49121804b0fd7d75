"""Run command for livelines CLI.

Starts every given command in parallel and shows the latest output line
of each one in a live block until they have all exited.
"""

import argparse
import time
from typing import List, Tuple

from livelines.cli.session import display_streams, report_config_error, resolve_config
from livelines.cli.signals import install_interrupt_handler
from livelines.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_FAILED,
    EXIT_INTERRUPTED,
    EXIT_OK,
)
from livelines.core.config import ConfigError
from livelines.core.result import RunSummary
from livelines.core.signals import Signal
from livelines.reporting.console import ConsoleReporter
from livelines.subprocess.runner import SubprocessRunner, parse_command


def cmd_run(args: argparse.Namespace) -> int:
    """Handle the run command."""
    try:
        config = resolve_config(args)
    except ConfigError as e:
        report_config_error(e)
        return EXIT_CONFIG_ERROR

    commands: List[Tuple[str, List[str]]] = []
    for text in args.commands:
        try:
            commands.append(parse_command(text))
        except ValueError as e:
            print(f"❌ {e}")
            return EXIT_CONFIG_ERROR

    runner = SubprocessRunner()
    cancel = Signal()
    restore = install_interrupt_handler(cancel)
    start_time = time.time()

    try:
        for name, argv in commands:
            runner.start(name, argv, cwd=args.cwd)

        cancelled = display_streams(runner.streams, config, cancel)
        if cancelled:
            runner.terminate_all()
        results = runner.wait_all()
    finally:
        restore()

    summary = RunSummary(
        results=results,
        cancelled=cancelled,
        total_duration=time.time() - start_time,
    )
    ConsoleReporter(quiet=args.quiet).print_summary(summary)

    if cancelled:
        return EXIT_INTERRUPTED
    return EXIT_OK if summary.all_succeeded else EXIT_FAILED
