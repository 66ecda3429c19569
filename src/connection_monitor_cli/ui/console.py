"""Shared Rich console and output helpers."""

from datetime import timedelta

from rich.console import Console

console = Console()
# Errors go to stderr so stdout carries only transition echoes
err_console = Console(stderr=True)


def format_duration(seconds: float | int | None) -> str:
    """Format seconds to a compact duration (e.g., '10s', '1h 30m').

    Used for the check interval in the startup banner.
    """
    if seconds is None or seconds < 0:
        return "N/A"
    delta = timedelta(seconds=float(seconds))
    days = delta.days
    hours, remainder = divmod(delta.seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    parts = []
    if days > 0:
        parts.append(f"{days} day{'s' if days != 1 else ''}")
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0:
        parts.append(f"{minutes}m")
    if secs > 0 or not parts:  # Always show secs if <1min
        parts.append(f"{secs}s")
    return " ".join(parts)


def print_info(message: str) -> None:
    """Print informational message in cyan."""
    console.print(f"[bold cyan]info:[/bold cyan] {message}")


def print_success(message: str) -> None:
    """Print success message in green."""
    console.print(f"[bold green]success:[/bold green] {message}")


def print_error(message: str) -> None:
    """Print error message in red."""
    err_console.print(f"[bold red]error:[/bold red] {message}")


def print_transition(message: str) -> None:
    # Bare message, same text as the log line minus its timestamp
    console.print(message, markup=False, highlight=False)


def print_logs(log_output: str | None, log_file: str) -> None:
    """Print the tail of the transition log with a header."""
    if log_output is None:
        print_info(f"No logs found. ({log_file} does not exist yet)")
        return
    print_info(f"Transitions recorded in {log_file} (recent lines):")
    console.print(log_output.rstrip("\n") or "Log is empty.", markup=False, highlight=False)
