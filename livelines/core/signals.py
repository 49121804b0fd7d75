"""One-shot notification signals.

A Signal fires at most once and stays fired. Any number of threads may
wait on it, poll it, or subscribe callbacks to it. The aggregator uses
signals for natural completion, stop requests and external cancellation.
"""

import logging
import threading
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class Signal:
    """Settable-once event observable by multiple waiters.

    Unlike ``threading.Event`` there is no ``clear()``: once fired the
    signal never reverts.
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._lock = threading.RLock()
        self._callbacks: List[Callable[[], None]] = []

    def fire(self) -> bool:
        """Fire the signal.

        Returns:
            True for the call that fired it, False if already fired.
        """
        with self._lock:
            if self._event.is_set():
                return False
            self._event.set()
            callbacks, self._callbacks = self._callbacks, []

        for callback in callbacks:
            self._run_callback(callback)
        return True

    def is_set(self) -> bool:
        """Return True once the signal has fired (never blocks)."""
        return self._event.is_set()

    def wait(self, timeout: Optional[float] = None) -> bool:
        """Block until the signal fires or *timeout* seconds elapse.

        Returns:
            True if the signal has fired.
        """
        return self._event.wait(timeout)

    def subscribe(self, callback: Callable[[], None]) -> None:
        """Run *callback* once when the signal fires.

        If the signal has already fired, the callback runs immediately on
        the calling thread.
        """
        with self._lock:
            if not self._event.is_set():
                self._callbacks.append(callback)
                return
        self._run_callback(callback)

    def unsubscribe(self, callback: Callable[[], None]) -> bool:
        """Drop a callback that has not run yet.

        Returns:
            True if *callback* was pending and has been removed.
        """
        with self._lock:
            try:
                self._callbacks.remove(callback)
            except ValueError:
                return False
        return True

    @staticmethod
    def _run_callback(callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception as e:
            logger.error(f"Signal callback {callback!r} failed: {e}")

    def __repr__(self) -> str:
        state = "fired" if self.is_set() else "pending"
        return f"<Signal {state}>"
