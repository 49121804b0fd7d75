"""Tests for livelines.cli.signals."""

import signal
import threading

from livelines.cli.signals import install_interrupt_handler
from livelines.core.signals import Signal


class TestInstallInterruptHandler:
    """Tests for install_interrupt_handler."""

    def test_sigint_fires_cancel(self) -> None:
        """The installed handler fires the cancel signal."""
        cancel = Signal()
        previous = signal.getsignal(signal.SIGINT)
        restore = install_interrupt_handler(cancel)
        try:
            handler = signal.getsignal(signal.SIGINT)
            assert callable(handler)
            handler(signal.SIGINT, None)
            assert cancel.is_set() is True
        finally:
            restore()

        assert signal.getsignal(signal.SIGINT) == previous

    def test_sigterm_fires_cancel(self) -> None:
        """SIGTERM is treated the same as SIGINT."""
        cancel = Signal()
        restore = install_interrupt_handler(cancel)
        try:
            signal.getsignal(signal.SIGTERM)(signal.SIGTERM, None)
            assert cancel.is_set() is True
        finally:
            restore()

    def test_noop_off_main_thread(self) -> None:
        """Worker threads cannot install handlers and get a no-op."""
        before = signal.getsignal(signal.SIGINT)
        restores = []

        worker = threading.Thread(
            target=lambda: restores.append(install_interrupt_handler(Signal()))
        )
        worker.start()
        worker.join()

        assert signal.getsignal(signal.SIGINT) == before
        restores[0]()
        assert signal.getsignal(signal.SIGINT) == before
