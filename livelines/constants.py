"""Shared string constants extracted to avoid duplication across modules."""

from livelines.core.result import StreamStatus

# CLI help text
PROJECT_ROOT_HELP = "Project root directory for config lookup (default: current directory)"


def format_duration_suffix(seconds: float) -> str:
    """Format a duration as a trailing summary fragment, e.g. ' · ⏱️  3.2s'."""
    return f" · ⏱️  {seconds:.1f}s"


# Status emoji mapping used by the console summary
STATUS_EMOJI = {
    StreamStatus.SUCCEEDED: "✅",
    StreamStatus.FAILED: "❌",
    StreamStatus.CANCELLED: "⏹️",
    StreamStatus.ERROR: "💥",
}

# Exit codes
EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130
