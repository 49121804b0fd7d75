"""Live aggregation of several streams into one redrawn terminal block.

The Aggregator owns a list of streams and repaints their last lines in
place, one line per stream, using ANSI cursor movement. It polls the
streams on a fixed interval; streams never notify it.

Usage:
    agg = Aggregator(StreamBuffer("fred"), StreamBuffer("wilma"))
    agg.begin()
    agg.done.wait()
    agg.stop()
"""

import logging
import sys
import threading
from typing import List, Optional, TextIO, Tuple

from livelines.core.config import DisplayConfig
from livelines.core.signals import Signal
from livelines.core.stream import Stream
from livelines.reporting.display.renderer import (
    build_block,
    compute_name_width,
    erase_sequence,
    get_terminal_width,
)

logger = logging.getLogger(__name__)


class Aggregator:
    """Redraws the last line of every stream until they all close.

    The render loop runs on its own thread and stops on the first of:
    - every stream observed closed in one pass (``done`` fires)
    - ``stop()``
    - the external ``cancel`` signal given to ``begin()``

    ``begin()`` may be called once; an aggregator cannot be restarted.

    The name column is measured when ``begin()`` runs. Streams added
    later keep that width and longer names are cut to fit.
    """

    def __init__(
        self,
        *streams: Stream,
        config: Optional[DisplayConfig] = None,
        out: Optional[TextIO] = None,
    ):
        """Initialize the aggregator.

        Args:
            streams: Streams to display, in display order
            config: Display settings (defaults if None)
            out: Text stream to paint on (default: sys.stdout at draw time)
        """
        self.config = config or DisplayConfig()
        self._out = out
        self._streams: List[Stream] = []
        self._name_width = 0

        self._done = Signal()
        self._stop_requested = Signal()
        self._wake = Signal()
        self._stop_requested.subscribe(self._wake.fire)

        self._thread: Optional[threading.Thread] = None
        self._cancel: Optional[Signal] = None
        self._lines_drawn = 0

        self.add(*streams)

    def add(self, *streams: Stream) -> None:
        """Include more streams in the display.

        Only safe before begin(); there is no guarantee for streams added
        while the render loop is running.
        """
        self._streams.extend(streams)

    @property
    def streams(self) -> Tuple[Stream, ...]:
        """Managed streams in display order."""
        return tuple(self._streams)

    @property
    def name_width(self) -> int:
        """Width of the name column, fixed when begin() runs."""
        return self._name_width

    @property
    def done(self) -> Signal:
        """Fires once every stream has been seen closed in a render pass."""
        return self._done

    @property
    def is_running(self) -> bool:
        """True while the render loop thread is alive."""
        return self._thread is not None and self._thread.is_alive()

    def begin(self, cancel: Optional[Signal] = None) -> None:
        """Start the render loop in the background and return immediately.

        Args:
            cancel: Optional external signal that ends the loop when fired

        Raises:
            RuntimeError: If called more than once
        """
        if self._thread is not None:
            raise RuntimeError("Aggregator.begin() may only be called once")

        self._name_width = compute_name_width([s.name for s in self._streams])
        if cancel is not None:
            self._cancel = cancel
            cancel.subscribe(self._wake.fire)

        logger.debug(
            f"Starting render loop: {len(self._streams)} streams, "
            f"name width {self._name_width}, "
            f"interval {self.config.refresh_interval}s"
        )
        self._thread = threading.Thread(
            target=self._render_loop, name="livelines-render", daemon=True
        )
        self._thread.start()

    def stop(self) -> None:
        """Request the render loop to end and wait until it has.

        No further terminal output happens once this returns. Safe to
        call more than once, and before begin().
        """
        self._stop_requested.fire()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Wait for the render loop to exit without requesting a stop.

        Returns:
            True if the loop has exited (or was never started).
        """
        if self._thread is None:
            return True
        self._thread.join(timeout)
        return not self._thread.is_alive()

    def _render_loop(self) -> None:
        """Background thread: draw, wait, erase, repeat."""
        try:
            while True:
                if self._draw():
                    self._done.fire()
                    logger.debug("All streams closed; render loop finished")
                    return

                if self._wake.wait(self.config.refresh_interval):
                    logger.debug("Render loop cancelled")
                    return

                self._erase()
        finally:
            # Detach from the caller's cancel signal
            if self._cancel is not None:
                self._cancel.unsubscribe(self._wake.fire)

    def _draw(self) -> bool:
        """Print one render pass.

        Returns:
            True if every stream was closed during this pass.
        """
        streams = list(self._streams)
        rows: List[Tuple[str, str]] = []
        closed_count = 0

        for stream in streams:
            # Closed is read first so a closed stream's line is its final one
            if stream.closed:
                closed_count += 1
            rows.append((stream.name, stream.last_line()))

        term_width = get_terminal_width(self.config.fallback_width)
        self._write(build_block(rows, self._name_width, term_width))
        self._lines_drawn = len(rows)

        return closed_count == len(streams)

    def _erase(self) -> None:
        """Wipe out the lines printed by the previous pass."""
        self._write(erase_sequence(self._lines_drawn))
        self._lines_drawn = 0

    def _write(self, text: str) -> None:
        if not text:
            return
        out = self._out or sys.stdout
        out.write(text)
        out.flush()
