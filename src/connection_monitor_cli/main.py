"""CLI entrypoint and command registration."""

from typing import Annotated

import typer

from connection_monitor_cli import __version__
from connection_monitor_cli.commands.monitor import app as monitor_app

# Epilog with copyable commands for root --help (Rich markup enabled)
SAMPLE_COMMANDS = """
**Quick Start Examples** (copy and run these):

- Monitor with defaults (10s interval, ./connection_log.txt):
  `connection-monitor monitor watch`

- Custom interval/log file, echo transitions to the console:
  `connection-monitor monitor watch --interval 30 --logfile /var/log/connection.log --print`

- One-off check (exit code 0 = online):
  `connection-monitor monitor check`

- Recent transitions:
  `connection-monitor monitor logs --lines 50`

See `monitor --help` for all options.
"""

app = typer.Typer(
    help="Connection Monitor CLI: watch internet connectivity and log when it is lost or restored.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"connection-monitor-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Root command group for all CLI commands."""
    _ = version


app.add_typer(monitor_app, name="monitor")

app.info.epilog = SAMPLE_COMMANDS


def main() -> None:
    """Console script entrypoint."""
    app()


if __name__ == "__main__":
    main()
