"""Turn process signals into an external cancellation signal."""

import logging
import signal
import threading
from types import FrameType
from typing import Any, Callable, Dict, Optional

from livelines.core.signals import Signal

logger = logging.getLogger(__name__)

INTERRUPT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def install_interrupt_handler(cancel: Signal) -> Callable[[], None]:
    """Fire *cancel* on SIGINT or SIGTERM.

    Handlers can only be installed from the main thread; elsewhere this
    is a no-op.

    Args:
        cancel: Signal to fire when the process is interrupted

    Returns:
        Function that restores the previous handlers
    """
    if threading.current_thread() is not threading.main_thread():
        logger.debug("Not on the main thread; interrupt handlers not installed")
        return lambda: None

    def _handler(signum: int, frame: Optional[FrameType]) -> None:
        logger.debug(f"Received signal {signum}; cancelling")
        cancel.fire()

    previous: Dict[int, Any] = {}
    for signum in INTERRUPT_SIGNALS:
        previous[signum] = signal.signal(signum, _handler)

    def restore() -> None:
        for signum, handler in previous.items():
            # None means the handler was not installed from Python
            signal.signal(signum, handler if handler is not None else signal.SIG_DFL)

    return restore
