"""Default configuration values for the connection monitor CLI."""

from dataclasses import dataclass, field

from connection_monitor_cli import __version__


@dataclass(frozen=True)
class Config:
    """Configuration for connection monitoring.

    Built once at startup from CLI options; never changed afterwards.
    """

    # Seconds to sleep between checks (measured from the end of each check)
    check_interval: int = 10
    # Append-only transition log
    log_file: str = "connection_log.txt"
    # Mirror transition messages to stdout
    print_output: bool = False

    # Fixed reachability target; not exposed as CLI options
    target_url: str = "http://www.google.com"
    # HTTP timeout in seconds
    timeout: int = 10
    success_status_codes: frozenset[int] = field(default_factory=lambda: frozenset({200}))
    user_agent: str = f"connection-monitor-cli/{__version__}"

    # Prefix of every log line, e.g. 2024/02/17 21:52:06
    timestamp_format: str = "%Y/%m/%d %H:%M:%S"

    def __post_init__(self) -> None:
        if self.check_interval <= 0:
            raise ValueError(f"check_interval must be positive, got {self.check_interval}")
