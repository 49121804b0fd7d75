"""Subprocess producers that feed stream buffers.

Each command runs with stdout and stderr merged into one pipe. A reader
thread copies the output into a StreamBuffer as it arrives and closes the
buffer when the process exits, so the live display can show the latest
line of every command.
"""

import logging
import os
import re
import shlex
import subprocess  # nosec B404 - subprocess is core to this module's purpose
import threading
import time
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from livelines.core.result import StreamResult, StreamStatus
from livelines.core.stream import StreamBuffer

logger = logging.getLogger(__name__)

_NAMED_COMMAND_RE = re.compile(r"^(?P<name>[\w.-]+)=(?P<command>\S.*)$")


def parse_command(text: str) -> Tuple[str, List[str]]:
    """Split a ``"name=program args"`` string into a name and argv.

    Without a ``name=`` prefix the name is the program's basename.

    Examples:
        >>> parse_command("build=make -j4")
        ('build', ['make', '-j4'])
        >>> parse_command("/usr/bin/env true")
        ('env', ['/usr/bin/env', 'true'])

    Raises:
        ValueError: If *text* contains no command.
    """
    name: Optional[str] = None
    command = text.strip()
    m = _NAMED_COMMAND_RE.match(command)
    if m:
        name, command = m.group("name"), m.group("command")

    argv = shlex.split(command)
    if not argv:
        raise ValueError(f"No command given in {text!r}")
    return name or os.path.basename(argv[0]), argv


@dataclass
class _Job:
    """Bookkeeping for one started command."""

    name: str
    stream: StreamBuffer
    start_time: float
    process: Optional["subprocess.Popen[bytes]"] = None
    reader: Optional[threading.Thread] = None
    end_time: Optional[float] = None
    error: Optional[str] = None
    cancelled: bool = False


class SubprocessRunner:
    """Runs commands in parallel, each one writing into its own stream.

    - Commands are argument lists and never run through a shell
    - Output is pumped into StreamBuffers by daemon reader threads
    - Running processes are tracked and can be terminated together
    """

    READ_SIZE = 4096
    TERMINATE_TIMEOUT = 5  # seconds before a terminated process is killed

    def __init__(self, read_size: int = READ_SIZE):
        """Initialize the runner.

        Args:
            read_size: Maximum bytes copied into a stream per read
        """
        self._read_size = read_size
        self._process_lock = threading.Lock()
        self._running_processes: Dict[int, "subprocess.Popen[bytes]"] = {}
        self._jobs: List[_Job] = []

    def start(
        self,
        name: str,
        command: List[str],
        cwd: Optional[str] = None,
        env: Optional[Dict[str, str]] = None,
    ) -> StreamBuffer:
        """Start *command* and return the stream receiving its output.

        A command that cannot be started produces an already-closed
        stream whose last line is the error message.

        Args:
            name: Stream name shown in the display
            command: Command to run as list of strings
            cwd: Working directory for the command
            env: Environment variables (None = inherit)

        Returns:
            StreamBuffer fed by the process
        """
        stream = StreamBuffer(name)
        job = _Job(name=name, stream=stream, start_time=time.time())
        self._jobs.append(job)

        logger.debug(f"Starting {name}: {' '.join(command)}")

        try:
            # SECURITY: Never use shell=True
            process = subprocess.Popen(  # nosec B603 - argv list, no shell
                command,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                cwd=cwd,
                env=env,
            )
        except OSError as e:
            job.error = f"Cannot start {command[0]}: {e}"
            job.end_time = time.time()
            logger.warning(job.error)
            stream.write(job.error)
            stream.close()
            return stream

        job.process = process
        with self._process_lock:
            self._running_processes[process.pid] = process

        job.reader = threading.Thread(
            target=self._pump, args=(job,), name=f"livelines-reader-{name}", daemon=True
        )
        job.reader.start()
        return stream

    def _pump(self, job: _Job) -> None:
        """Reader thread: copy process output into the job's stream."""
        process = job.process
        assert process is not None and process.stdout is not None

        try:
            while True:
                chunk = process.stdout.read1(self._read_size)
                if not chunk:
                    break
                job.stream.write(chunk)
        except (OSError, ValueError) as e:
            job.error = f"Error reading output of {job.name}: {e}"
            logger.error(job.error)
        finally:
            process.stdout.close()
            process.wait()
            job.end_time = time.time()
            with self._process_lock:
                self._running_processes.pop(process.pid, None)
            job.stream.close()
            logger.debug(f"{job.name} exited with {process.returncode}")

    def wait_all(self, timeout: Optional[float] = None) -> List[StreamResult]:
        """Wait for every started command and collect the results.

        Args:
            timeout: Maximum seconds to wait per command (None = forever)

        Returns:
            Results in the order the commands were started
        """
        for job in self._jobs:
            if job.reader is not None:
                job.reader.join(timeout)
        return [self._result(job) for job in self._jobs]

    def _result(self, job: _Job) -> StreamResult:
        end = job.end_time if job.end_time is not None else time.time()
        returncode = job.process.returncode if job.process is not None else None

        if job.error:
            status = StreamStatus.ERROR
        elif job.cancelled:
            status = StreamStatus.CANCELLED
        elif returncode == 0:
            status = StreamStatus.SUCCEEDED
        elif returncode is None:
            # Still running when results were requested
            status = StreamStatus.CANCELLED
        else:
            status = StreamStatus.FAILED

        return StreamResult(
            name=job.name,
            status=status,
            duration=end - job.start_time,
            returncode=returncode,
            error=job.error,
        )

    def terminate_all(self) -> int:
        """Terminate all tracked running processes.

        Returns:
            Number of processes terminated
        """
        with self._process_lock:
            processes = list(self._running_processes.values())

        for job in self._jobs:
            process = job.process
            if process is not None and process in processes and process.poll() is None:
                job.cancelled = True

        count = 0
        for process in processes:
            try:
                process.terminate()
                process.wait(timeout=self.TERMINATE_TIMEOUT)
                count += 1
            except subprocess.TimeoutExpired:
                process.kill()
                count += 1
            except OSError as e:
                logger.warning(f"Failed to terminate process {process.pid}: {e}")

        return count

    def is_running(self, pid: int) -> bool:
        """Check if a tracked process is still running."""
        with self._process_lock:
            if pid not in self._running_processes:
                return False
            return self._running_processes[pid].poll() is None

    @property
    def streams(self) -> List[StreamBuffer]:
        """Streams of all started commands, in start order."""
        return [job.stream for job in self._jobs]
