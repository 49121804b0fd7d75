"""Tests for livelines.reporting.console."""

import pytest

from livelines.core.result import RunSummary, StreamResult, StreamStatus
from livelines.reporting.console import ConsoleReporter


@pytest.fixture
def mixed_summary() -> RunSummary:
    return RunSummary(
        results=[
            StreamResult("build", StreamStatus.SUCCEEDED, 1.234, returncode=0),
            StreamResult("tests", StreamStatus.FAILED, 2.5, returncode=3),
            StreamResult(
                "lint", StreamStatus.ERROR, 0.0, error="Cannot start ruff: not found"
            ),
        ],
        total_duration=2.6,
    )


class TestFormatResult:
    """Tests for ConsoleReporter.format_result."""

    def test_succeeded_line(self) -> None:
        """A success shows emoji, name, status, exit code and duration."""
        line = ConsoleReporter().format_result(
            StreamResult("build", StreamStatus.SUCCEEDED, 1.234, returncode=0)
        )
        assert line == "✅ build: succeeded (exit 0) (1.23s)"

    def test_no_returncode(self) -> None:
        """Producers without a process omit the exit code."""
        line = ConsoleReporter().format_result(
            StreamResult("feed", StreamStatus.CANCELLED, 0.5)
        )
        assert "exit" not in line
        assert "cancelled" in line

    def test_name_padding(self) -> None:
        """Names are left-aligned to the given width."""
        line = ConsoleReporter().format_result(
            StreamResult("a", StreamStatus.FAILED, 0.1, returncode=1), name_width=4
        )
        assert "a   : failed" in line


class TestPrintSummary:
    """Tests for ConsoleReporter.print_summary."""

    def test_failure_summary(
        self, capsys: pytest.CaptureFixture[str], mixed_summary: RunSummary
    ) -> None:
        """Every stream is listed and the header reports failure."""
        ConsoleReporter().print_summary(mixed_summary)
        out = capsys.readouterr().out

        assert "build" in out
        assert "tests" in out
        assert "Cannot start ruff" in out
        assert "SOME STREAMS FAILED" in out
        assert "1 succeeded · 1 failed · 1 errored" in out

    def test_quiet_hides_successes(
        self, capsys: pytest.CaptureFixture[str], mixed_summary: RunSummary
    ) -> None:
        """Quiet mode lists only unsuccessful streams."""
        ConsoleReporter(quiet=True).print_summary(mixed_summary)
        out = capsys.readouterr().out

        assert "✅ build" not in out
        assert "tests" in out

    def test_success_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        """All successes get the success header."""
        summary = RunSummary(
            results=[StreamResult("a", StreamStatus.SUCCEEDED, 0.1, returncode=0)]
        )
        ConsoleReporter().print_summary(summary)
        assert "ALL STREAMS SUCCEEDED" in capsys.readouterr().out

    def test_interrupted_summary(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A cancelled run is reported as interrupted."""
        summary = RunSummary(
            results=[StreamResult("a", StreamStatus.CANCELLED, 0.1, returncode=-15)],
            cancelled=True,
        )
        ConsoleReporter().print_summary(summary)
        out = capsys.readouterr().out
        assert "INTERRUPTED" in out
        assert "1 cancelled" in out
