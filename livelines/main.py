"""livelines - live multi-stream terminal display.

Usage:
    livelines run CMD [CMD ...] [--interval SECONDS] [--width COLUMNS]
    livelines demo [--file PATH] [--names NAME ...]

Verbs:
    run     Run commands in parallel and show each one's latest output line
    demo    Replay sample text into a few streams to show the display
"""

import argparse
import logging
import sys
from typing import List, Optional

from livelines import __version__
from livelines.cli import cmd_demo, cmd_run
from livelines.cli.demo import DEFAULT_MAX_DELAY, DEFAULT_MIN_DELAY, DEFAULT_NAMES
from livelines.constants import PROJECT_ROOT_HELP

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging for CLI.

    Logs never go to stdout, which belongs to the live display.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler: logging.Handler
    if log_file:
        handler = logging.FileHandler(log_file)
    else:
        handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[handler],
    )


def _add_display_arguments(parser: argparse.ArgumentParser) -> None:
    """Options shared by every verb that shows the live display."""
    parser.add_argument(
        "--interval",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Delay between redraws (default: 0.05, or refresh_interval in config)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=None,
        metavar="COLUMNS",
        help="Terminal width to assume when it cannot be detected (default: 80)",
    )
    parser.add_argument(
        "--project-root",
        type=str,
        default=".",
        help=PROJECT_ROOT_HELP,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        metavar="PATH",
        default=None,
        help="Write logs to PATH instead of stderr",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with verb subcommands."""
    parser = argparse.ArgumentParser(
        prog="livelines",
        description="""
livelines - watch several output streams at once.

Each stream gets one line showing the latest thing it printed, prefixed
by its name. The block is redrawn in place until every stream is done.

Verbs:
  run     Run commands in parallel with a live status line each
  demo    Replay sample text into a few streams

Examples:
  livelines run "build=make -j4" "tests=pytest -q"
  livelines run "lint=ruff check ." --interval 0.2
  livelines demo --names fred wilma barney
  livelines demo --file notes.txt --min-delay 0.01 --max-delay 0.1
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="verb", help="Command to run")

    # === run verb ===
    run_parser = subparsers.add_parser(
        "run",
        help="Run commands in parallel",
        description="Run commands in parallel and show each one's latest output line.",
    )
    run_parser.add_argument(
        "commands",
        nargs="+",
        metavar="CMD",
        help='Command to run, optionally named: "name=program args"',
    )
    run_parser.add_argument(
        "--cwd",
        type=str,
        default=None,
        help="Working directory for the commands (default: current directory)",
    )
    run_parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Only list unsuccessful commands in the summary",
    )
    _add_display_arguments(run_parser)

    # === demo verb ===
    demo_parser = subparsers.add_parser(
        "demo",
        help="Replay sample text into a few streams",
        description="Replay lines of text into named streams with random pauses.",
    )
    demo_parser.add_argument(
        "--file",
        "-f",
        metavar="PATH",
        default=None,
        help="Text file to replay (default: built-in lorem ipsum)",
    )
    demo_parser.add_argument(
        "--names",
        nargs="+",
        default=list(DEFAULT_NAMES),
        metavar="NAME",
        help=f"Stream names (default: {' '.join(DEFAULT_NAMES)})",
    )
    demo_parser.add_argument(
        "--min-delay",
        type=float,
        default=DEFAULT_MIN_DELAY,
        metavar="SECONDS",
        help=f"Shortest pause between lines (default: {DEFAULT_MIN_DELAY})",
    )
    demo_parser.add_argument(
        "--max-delay",
        type=float,
        default=DEFAULT_MAX_DELAY,
        metavar="SECONDS",
        help=f"Longest pause between lines (default: {DEFAULT_MAX_DELAY})",
    )
    _add_display_arguments(demo_parser)

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for livelines CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.verb is None:
        parser.print_help()
        return 0

    setup_logging(args.verbose, args.log_file)

    if args.verb == "run":
        return cmd_run(args)
    elif args.verb == "demo":
        return cmd_demo(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
