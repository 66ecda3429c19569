"""Core logic for probing connectivity and logging state transitions.

Uses stdlib urllib for the reachability check to avoid additional dependencies.
"""

import signal
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime
from enum import Enum
from http.client import HTTPException
from pathlib import Path
from types import FrameType
from typing import IO
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .config import Config
from .ui.console import print_transition


class MonitorError(Exception):
    """Base class for connection monitor errors."""


class LogDestinationError(MonitorError):
    """The transition log could not be opened for appending."""


class MonitorStopped(MonitorError):
    """Raised inside the monitor loop when the process is asked to terminate."""


class Transition(Enum):
    """Change in connectivity between two consecutive probes."""

    LOST = "Internet connection lost"
    RESTORED = "Internet connection restored"

    @property
    def message(self) -> str:
        return self.value


def probe(config: Config) -> bool:
    """Issue a single GET against the configured target.

    True only when the response arrives within the timeout with a success
    status. Every failure (timeout, refused connection, DNS, bad status)
    collapses to False; nothing is raised and nothing is retried.
    """
    headers = {"User-Agent": config.user_agent}
    try:
        req = Request(config.target_url, headers=headers)
        with urlopen(req, timeout=config.timeout) as response:
            return response.getcode() in config.success_status_codes
    except HTTPError as e:
        # 4xx/5xx arrive as exceptions
        return e.code in config.success_status_codes
    except (URLError, HTTPException, OSError, ValueError):
        # URLError: DNS/refused; OSError: socket timeouts; ValueError: malformed URL
        return False


def detect_transition(current_result: bool, previous_state: bool) -> tuple[bool, Transition | None]:
    """Compare the latest probe result with the previous state.

    Returns (new_state, transition). new_state is always current_result;
    transition is None when nothing changed.
    """
    if previous_state and not current_result:
        return current_result, Transition.LOST
    if current_result and not previous_state:
        return current_result, Transition.RESTORED
    return current_result, None


class TransitionLog:
    """Append-only transition log, held open for the life of the monitor.

    Use as a context manager so the file is closed on any exit path.
    """

    def __init__(self, path: str | Path, timestamp_format: str = "%Y/%m/%d %H:%M:%S") -> None:
        self.path = Path(path)
        self.timestamp_format = timestamp_format
        self._file: IO[str] | None = None

    def open(self) -> "TransitionLog":
        try:
            # Append + create; never truncates
            self._file = open(self.path, "a", encoding="utf-8")
        except OSError as e:
            raise LogDestinationError(f"failed to open log file {self.path}: {e.strerror or e}") from e
        return self

    def close(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "TransitionLog":
        if self._file is None:
            self.open()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def record(
        self,
        transition: Transition,
        echo_to_console: bool = False,
        now: datetime | None = None,
    ) -> str:
        """Append one timestamped line for the transition and return it.

        The console echo carries only the message, without the timestamp.
        """
        if self._file is None:
            raise LogDestinationError(f"log file {self.path} is not open")

        now = now or datetime.now()
        line = f"{now.strftime(self.timestamp_format)} {transition.message}"
        self._file.write(line + "\n")
        # Flush per entry so a killed process leaves a complete log
        self._file.flush()

        if echo_to_console:
            print_transition(transition.message)
        return line


def run_monitor(
    config: Config,
    log: TransitionLog,
    probe_fn: Callable[[Config], bool] = probe,
    sleep: Callable[[float], None] | None = None,
    max_checks: int | None = None,
) -> int:
    """Probe, detect transitions, record them and sleep, forever.

    Connectivity is assumed to be down before the first probe, so a healthy
    start is logged as restored. The sleep follows each check's work, so the
    real period is probe latency plus the interval. With max_checks set the
    loop returns the number of checks performed after the last one.
    """
    sleep = sleep or time.sleep
    connected = False
    check_count = 0

    while True:
        result = probe_fn(config)
        connected, transition = detect_transition(result, connected)
        if transition is not None:
            log.record(transition, config.print_output)
        check_count += 1

        if max_checks is not None and check_count >= max_checks:
            return check_count
        sleep(config.check_interval)


def _raise_stopped(signum: int, frame: FrameType | None) -> None:
    raise MonitorStopped(f"received signal {signal.Signals(signum).name}")


@contextmanager
def stop_on_sigterm() -> Iterator[None]:
    """Turn SIGTERM into MonitorStopped for the duration of the block.

    Interrupts a blocked sleep immediately; the previous handler is restored
    on exit.
    """
    previous = signal.signal(signal.SIGTERM, _raise_stopped)
    try:
        yield
    finally:
        # None when the old handler was not installed from Python
        if previous is not None:
            signal.signal(signal.SIGTERM, previous)


def tail_log(path: str | Path, lines: int = 20) -> str | None:
    """Last lines of the transition log, or None if it does not exist."""
    log_file = Path(path)
    if not log_file.exists():
        return None
    with open(log_file, encoding="utf-8") as f:
        return "".join(f.readlines()[-lines:])
