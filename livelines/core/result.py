"""Result types for producer runs.

This module defines the data structures used to report how each stream's
producer finished once the live display is over.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, cast


class StreamStatus(Enum):
    """Outcome of the producer behind one stream."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELLED = "cancelled"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


@dataclass
class StreamResult:
    """Result of one producer.

    Attributes:
        name: Stream name
        status: Outcome of the producer
        duration: Time from start to close, in seconds
        returncode: Process exit code, if the producer was a process
        error: Error message if status is ERROR
    """

    name: str
    status: StreamStatus
    duration: float
    returncode: Optional[int] = None
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        """Return True if the producer finished cleanly."""
        return self.status == StreamStatus.SUCCEEDED


@dataclass
class RunSummary:
    """Summary of a whole run.

    Attributes:
        results: Individual results in display order
        cancelled: Whether the run was interrupted
        total_duration: Wall-clock time of the run in seconds
    """

    results: List[StreamResult] = field(
        default_factory=lambda: cast(List[StreamResult], [])
    )
    cancelled: bool = False
    total_duration: float = 0.0

    def count(self, status: StreamStatus) -> int:
        """Number of results with *status*."""
        return sum(1 for r in self.results if r.status == status)

    @property
    def succeeded(self) -> int:
        return self.count(StreamStatus.SUCCEEDED)

    @property
    def failed(self) -> int:
        return self.count(StreamStatus.FAILED)

    @property
    def errors(self) -> int:
        return self.count(StreamStatus.ERROR)

    @property
    def all_succeeded(self) -> bool:
        """Return True if nothing failed, errored or was cancelled."""
        return not self.cancelled and all(r.succeeded for r in self.results)
