"""livelines - multiplex concurrent text streams into one live terminal block."""

from livelines.core.aggregator import Aggregator
from livelines.core.config import ConfigError, DisplayConfig
from livelines.core.signals import Signal
from livelines.core.stream import Stream, StreamBuffer, StreamClosedError

__version__ = "1.0.0"

__all__ = [
    "Aggregator",
    "ConfigError",
    "DisplayConfig",
    "Signal",
    "Stream",
    "StreamBuffer",
    "StreamClosedError",
    "__version__",
]
