"""Monitor commands for watching internet connectivity.

Provides 'watch' for the continuous transition-logging loop, 'check' for a
one-time probe and 'logs' to view recent transitions.
All options documented in --help.
"""

import typer

from connection_monitor_cli.config import Config
from connection_monitor_cli.core import (
    LogDestinationError,
    MonitorStopped,
    TransitionLog,
    probe,
    run_monitor,
    stop_on_sigterm,
    tail_log,
)
from connection_monitor_cli.ui.console import (
    format_duration,
    print_error,
    print_info,
    print_logs,
    print_success,
)

DEFAULTS = Config()

app = typer.Typer(help="Monitor internet connectivity and log when it is lost or restored.")


@app.command("watch")
def watch(
    interval: int = typer.Option(
        DEFAULTS.check_interval,
        "--interval",
        "-i",
        min=1,
        envvar="CONNECTION_MONITOR_INTERVAL",
        help="Check interval in seconds.",
    ),
    log_file: str = typer.Option(
        DEFAULTS.log_file,
        "--logfile",
        "-l",
        envvar="CONNECTION_MONITOR_LOGFILE",
        help="Log file path (opened in append mode, created if missing).",
    ),
    print_output: bool = typer.Option(
        DEFAULTS.print_output,
        "--print",
        "-p",
        envvar="CONNECTION_MONITOR_PRINT",
        help="Print output to console as well as the log file.",
    ),
    max_checks: int | None = typer.Option(
        None,
        "--max-checks",
        "-m",
        min=1,
        help="Maximum checks before stopping (unlimited if not set).",
    ),
) -> None:
    """Continuously check the connection and log every state change.

    Each cycle probes the fixed target, compares the result with the previous
    one and appends a timestamped 'Internet connection lost' or
    'Internet connection restored' line only when the state flips.
    Connectivity is assumed down at startup, so a healthy first check is
    logged as restored. Runs until stopped (Ctrl+C or SIGTERM).

    **Examples:**

    [bold green]Default settings (10s interval, ./connection_log.txt):[/bold green]
      $ connection-monitor monitor watch

    [bold green]Custom interval and log file, echo to console:[/bold green]
      $ connection-monitor monitor watch -i 30 -l /var/log/connection.log -p
    """
    config = Config(check_interval=interval, log_file=log_file, print_output=print_output)

    # Open the log before any probe; a broken target is fatal
    log = TransitionLog(config.log_file, config.timestamp_format)
    try:
        log.open()
    except LogDestinationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if config.print_output:
        print_info(
            f"Monitoring internet connection. Check interval: {format_duration(config.check_interval)}, "
            f"Log file: {config.log_file}"
        )

    with log:
        try:
            with stop_on_sigterm():
                check_count = run_monitor(config, log, probe_fn=probe, max_checks=max_checks)
        except (KeyboardInterrupt, MonitorStopped):
            if config.print_output:
                print_info("Monitoring stopped")
        else:
            if config.print_output:
                print_success(f"Completed {check_count} checks")


@app.command()
def check() -> None:
    """Perform a single connectivity check and report the result.

    Exits 0 when the target answered with a success status, 1 otherwise.
    Nothing is written to the transition log.

    **Examples:**

      $ connection-monitor monitor check && echo online
    """
    config = Config()
    if probe(config):
        print_success(f"Internet connection is up ({config.target_url})")
    else:
        print_error(f"Internet connection is down ({config.target_url})")
        raise typer.Exit(1)


@app.command()
def logs(
    log_file: str = typer.Option(
        DEFAULTS.log_file,
        "--logfile",
        "-l",
        envvar="CONNECTION_MONITOR_LOGFILE",
        help="Log file path written by 'watch'.",
    ),
    lines: int = typer.Option(20, "--lines", "-n", min=1, help="Number of log lines to tail."),
) -> None:
    """View the most recent connection transitions.

    Examples:
        connection-monitor monitor logs
        connection-monitor monitor logs -l /var/log/connection.log --lines 50
    """
    print_logs(tail_log(log_file, lines), log_file)
