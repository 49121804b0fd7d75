"""Tests for the demo producers in livelines.cli.demo."""

import random
import threading
from pathlib import Path

import pytest

from livelines.cli.demo import LOREM_IPSUM, feed_lines, load_sample_lines
from livelines.core.signals import Signal
from livelines.core.stream import StreamBuffer


class TestLoadSampleLines:
    """Tests for load_sample_lines."""

    def test_builtin_text(self) -> None:
        """Without a path the built-in text is used."""
        lines = load_sample_lines()
        assert lines == LOREM_IPSUM
        assert lines is not LOREM_IPSUM

    def test_reads_file(self, tmp_path: Path) -> None:
        """A file is split into lines."""
        path = tmp_path / "notes.txt"
        path.write_text("one\ntwo\nthree\n", encoding="utf-8")
        assert load_sample_lines(path) == ["one", "two", "three"]

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """Unreadable files surface as OSError."""
        with pytest.raises(OSError):
            load_sample_lines(tmp_path / "missing.txt")


class TestFeedLines:
    """Tests for feed_lines."""

    def test_writes_every_line_then_closes(self) -> None:
        """All lines are written in order and the stream is closed."""
        stream = StreamBuffer("fred")
        feed_lines(stream, ["a", "b", "c"], 0, 0, rng=random.Random(1))

        assert stream.getvalue() == b"a\nb\nc\n"
        assert stream.closed is True
        assert stream.last_line() == "c"

    def test_delays_come_from_rng(self) -> None:
        """Pauses are drawn between min_delay and max_delay."""
        rng = random.Random(7)
        cancel = Signal()
        waits = []

        def _record(timeout: float) -> bool:
            waits.append(timeout)
            return False

        cancel.wait = _record  # type: ignore[method-assign]
        feed_lines(StreamBuffer("s"), ["a", "b", "c"], 0.1, 0.2, rng=rng, cancel=cancel)

        assert len(waits) == 3
        assert all(0.1 <= w <= 0.2 for w in waits)

    def test_cancel_stops_early_and_closes(self) -> None:
        """A fired cancel signal ends feeding at the next pause."""
        stream = StreamBuffer("s")
        cancel = Signal()
        cancel.fire()

        feed_lines(stream, ["a", "b", "c"], 10, 10, cancel=cancel)

        assert stream.getvalue() == b"a\n"
        assert stream.closed is True

    def test_cancel_from_another_thread(self) -> None:
        """Long pauses are cut short by cancellation."""
        stream = StreamBuffer("s")
        cancel = Signal()
        feeder = threading.Thread(
            target=feed_lines, args=(stream, ["a", "b"], 30, 30), kwargs={"cancel": cancel}
        )
        feeder.start()

        cancel.fire()
        feeder.join(5)

        assert feeder.is_alive() is False
        assert stream.closed is True
