"""Console output formatting for run results.

Printed after the live display has stopped, so it never competes with
the redraw region.
"""

from typing import List

from livelines.constants import STATUS_EMOJI, format_duration_suffix
from livelines.core.result import RunSummary, StreamResult, StreamStatus


class ConsoleReporter:
    """Console reporter for the end of a run.

    Formats output for terminal display with:
    - One status line per stream
    - Error messages for producers that could not run
    - A totals line
    """

    def __init__(self, quiet: bool = False):
        """Initialize reporter.

        Args:
            quiet: Minimal output mode (omit successful streams)
        """
        self.quiet = quiet

    def format_result(self, result: StreamResult, name_width: int = 0) -> str:
        """Format a single stream result line.

        Args:
            result: Stream result
            name_width: Minimum name column width for alignment

        Returns:
            Formatted line
        """
        emoji = STATUS_EMOJI.get(result.status, "❓")
        padded_name = f"{result.name:<{name_width}}" if name_width else result.name
        line = f"{emoji} {padded_name}: {result.status.value}"
        if result.returncode is not None:
            line += f" (exit {result.returncode})"
        line += f" ({result.duration:.2f}s)"
        return line

    def print_summary(self, summary: RunSummary) -> None:
        """Print run summary.

        Args:
            summary: Run summary to display
        """
        shown: List[StreamResult] = [
            r for r in summary.results if not (self.quiet and r.succeeded)
        ]
        name_width = max((len(r.name) for r in shown), default=0)

        print()
        print("=" * 60)
        for result in shown:
            print(self.format_result(result, name_width))
            if result.error:
                print(f"   {result.error}")

        counts: List[str] = [f"{summary.succeeded} succeeded"]
        if summary.failed:
            counts.append(f"{summary.failed} failed")
        if summary.errors:
            counts.append(f"{summary.errors} errored")
        cancelled = summary.count(StreamStatus.CANCELLED)
        if cancelled:
            counts.append(f"{cancelled} cancelled")

        if summary.cancelled:
            header = "⏹️  INTERRUPTED"
        elif summary.all_succeeded:
            header = "✨ ALL STREAMS SUCCEEDED"
        else:
            header = "❌ SOME STREAMS FAILED"

        print("-" * 60)
        print(
            f"{header} · {' · '.join(counts)}"
            f"{format_duration_suffix(summary.total_duration)}"
        )
        print("=" * 60)
