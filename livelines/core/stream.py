"""Stream buffers: append-only sinks for one named data source.

A producer writes raw output into a StreamBuffer and closes it when the
source is exhausted. The aggregator only ever reads the derived state:
the buffer's name, the last line written so far, and whether it is closed.
"""

import threading
from typing import Protocol, Union, runtime_checkable

Data = Union[bytes, bytearray, memoryview, str]


class StreamClosedError(ValueError):
    """Raised when writing to a stream that has already been closed."""

    def __init__(self, name: str):
        super().__init__(f"write to closed stream {name!r}")
        self.stream_name = name


@runtime_checkable
class Stream(Protocol):
    """What the aggregator needs from a stream."""

    @property
    def name(self) -> str:
        """Display label."""
        ...

    @property
    def closed(self) -> bool:
        """True once the source will provide no more output."""
        ...

    def write(self, data: Data) -> int:
        """Append output."""
        ...

    def close(self) -> None:
        """Mark the stream finished."""
        ...

    def last_line(self) -> str:
        """Most recent line of output, whitespace-trimmed."""
        ...


class StreamBuffer:
    """Thread-safe append-only buffer for one producer.

    The content only grows and ``closed`` only goes from False to True.
    Writes and reads are serialized by a per-buffer lock; readers copy a
    snapshot under the lock and decode it afterwards.

    Writing after ``close()`` raises StreamClosedError.

    Example:
        >>> buf = StreamBuffer("build")
        >>> buf.write(b"compiling\\nlinking")
        17
        >>> buf.last_line()
        'linking'
    """

    def __init__(self, name: str):
        self._name = name
        self._content = bytearray()
        self._closed = False
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        """Immutable display label."""
        return self._name

    @property
    def closed(self) -> bool:
        """True once close() has been called."""
        return self._closed

    def is_closed(self) -> bool:
        """Return the current closed state."""
        return self._closed

    def write(self, data: Data) -> int:
        """Append *data* to the buffer.

        Text is encoded as UTF-8.

        Returns:
            Number of bytes appended.

        Raises:
            StreamClosedError: If the buffer is already closed.
        """
        if isinstance(data, str):
            data = data.encode("utf-8")
        with self._lock:
            if self._closed:
                raise StreamClosedError(self._name)
            self._content.extend(data)
        return len(data)

    def flush(self) -> None:
        """No-op so a buffer can stand in for a text file."""

    def close(self) -> None:
        """Mark the buffer closed. Safe to call more than once."""
        with self._lock:
            self._closed = True

    def getvalue(self) -> bytes:
        """Return a copy of everything written so far."""
        with self._lock:
            return bytes(self._content)

    def last_line(self) -> str:
        """Return the most recent line of output with whitespace trimmed.

        A trailing partial line (not yet newline-terminated) counts as the
        last line; trailing whitespace-only writes are ignored. Within that
        line only the text after the last carriage return is kept, the
        part a terminal would leave visible for progress-style output.
        """
        text = self.getvalue().decode("utf-8", errors="replace").strip()
        text = text[text.rfind("\n") + 1 :]
        text = text[text.rfind("\r") + 1 :]
        return text.strip()

    def __len__(self) -> int:
        with self._lock:
            return len(self._content)

    def __enter__(self) -> "StreamBuffer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<StreamBuffer {self._name!r} {state} {len(self)} bytes>"
