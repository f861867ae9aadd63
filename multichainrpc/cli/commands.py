"""CLI commands for multichainrpc.

The CLI is the single entry point: global options load settings and set up
logging, command groups do the work.
"""

from pathlib import Path

import typer
from rich.console import Console

from multichainrpc import __logo__, __version__
from multichainrpc.cli.command_groups.chain_commands import register_chain_commands
from multichainrpc.cli.shared.logging_utils import configure_console_logging, ensure_rotating_log_file
from multichainrpc.config.loader import load_settings

app = typer.Typer(
    name="multichainrpc",
    help=f"{__logo__} multichainrpc - MultiChain JSON-RPC client",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"{__logo__} multichainrpc v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True
    ),
    config: Path = typer.Option(None, "--config", help="Settings file (default ~/.multichainrpc/config.json)"),
    log_level: str = typer.Option(None, "--log-level", help="Console log level, e.g. DEBUG"),
    log_file: bool = typer.Option(False, "--log-file", help="Also log to ~/.multichainrpc/logs"),
):
    """multichainrpc - MultiChain JSON-RPC client."""
    try:
        settings = load_settings(config)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--config")
    configure_console_logging(log_level or settings.log_level)
    if log_file:
        ensure_rotating_log_file("multichainrpc", level="DEBUG")
    ctx.obj = settings


register_chain_commands(app, console)


if __name__ == "__main__":
    app()
