"""Chain discovery and RPC call commands."""

from __future__ import annotations

import asyncio
import json
from typing import Any

import httpx
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from multichainrpc.chain.client import MultichainClient
from multichainrpc.chain.commands import COMMANDS
from multichainrpc.chain.resolver import ChainResolver
from multichainrpc.cli.shared.value_utils import parse_value
from multichainrpc.config.loader import get_chain_path
from multichainrpc.config.schema import Settings
from multichainrpc.errors import (
    ConfigurationError,
    MissingParameterError,
    MultichainRPCError,
    ProtocolError,
    sanitize_error_message,
)
from multichainrpc.jsonrpc.client import MethodCasing


def format_rpc_exception(exc: Exception) -> tuple[str, str]:
    """Return (rich colour, message) for an error raised by a CLI call."""
    if isinstance(exc, ProtocolError):
        return "red", f"{exc.code}, status={exc.status_code}: {json.dumps(exc.payload)}"
    if isinstance(exc, MissingParameterError):
        return "yellow", f"{exc.code}: {exc.message}"
    if isinstance(exc, MultichainRPCError):
        status = exc.details.get("status_code")
        status_suffix = f", status={status}" if status is not None else ""
        return "red", f"{exc.code}{status_suffix}: {exc.message}"
    if isinstance(exc, httpx.RequestError):
        return "red", f"network error: {sanitize_error_message(str(exc)) or type(exc).__name__}"
    return "yellow", sanitize_error_message(str(exc))


def describe_parameters(descriptors: list[Any] | tuple[Any, ...]) -> str:
    parts = []
    for descriptor in descriptors:
        if isinstance(descriptor, dict):
            for name, default in descriptor.items():
                parts.append(f"[{name}={json.dumps(default)}]")
                break
            else:
                parts.append("[?]")
        else:
            parts.append(str(descriptor))
    return " ".join(parts)


def schema_method_name(method: str) -> str:
    """Map ``method`` onto its COMMANDS key ignoring case; unknown names are returned as given."""
    wanted = method.strip().lower()
    for name in COMMANDS:
        if name.lower() == wanted:
            return name
    return method


def run_rpc_call(
    settings: Settings,
    chain: str,
    method: str,
    params: list[Any],
    *,
    casing: str | None = None,
    protocol: str | None = None,
    host: str | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """Resolve ``chain``, send one request and return the parsed response body."""
    updates: dict[str, Any] = {}
    if protocol:
        updates["protocol"] = protocol
    if host:
        updates["host"] = host
    connection = settings.connection_defaults().model_copy(update=updates)
    client = MultichainClient(
        chain,
        connection=connection,
        chain_path=get_chain_path(settings),
        method_casing=MethodCasing.from_name(casing or settings.method_casing),
        transport=transport,
    )
    return asyncio.run(client.call(schema_method_name(method), params))


def register_chain_commands(app: typer.Typer, console: Console) -> None:
    """Register chain commands on the main app."""

    def _settings(ctx: typer.Context) -> Settings:
        return ctx.obj if isinstance(ctx.obj, Settings) else Settings()

    def _call_and_print(ctx: typer.Context, chain: str, method: str, params: list[Any], **options: Any) -> None:
        try:
            result = run_rpc_call(_settings(ctx), chain, method, params, **options)
        except (MultichainRPCError, httpx.RequestError) as exc:
            level, detail = format_rpc_exception(exc)
            console.print(f"[{level}]Error:[/{level}] {escape(detail)}")
            raise typer.Exit(1)
        console.print_json(data=result)
        # A 200 body may still carry a JSON-RPC error member.
        if isinstance(result, dict) and result.get("error"):
            raise typer.Exit(1)

    @app.command("chains")
    def chains(ctx: typer.Context) -> None:
        """List chains found in the MultiChain data folder."""
        resolver = ChainResolver(get_chain_path(_settings(ctx)))
        try:
            names = resolver.get_chain_names()
        except ConfigurationError as exc:
            console.print(f"[red]Error:[/red] {escape(exc.message)}")
            raise typer.Exit(1)
        if not names:
            console.print(f"[yellow]No chains found in {resolver.chain_path}[/yellow]")
            return
        table = Table(title=f"Chains in {resolver.chain_path}")
        table.add_column("Name", style="cyan")
        table.add_column("RPC port")
        for name in names:
            try:
                port = str(resolver.read_rpc_port(name))
            except ConfigurationError:
                port = "[red]unreadable[/red]"
            table.add_row(name, port)
        console.print(table)

    @app.command("commands")
    def list_commands(
        filter_text: str = typer.Option("", "--filter", "-f", help="Only show commands containing this text"),
    ) -> None:
        """List known RPC commands and their parameters."""
        needle = filter_text.strip().lower()
        table = Table(title="RPC commands")
        table.add_column("Command", style="cyan")
        table.add_column("Parameters")
        for name, descriptors in COMMANDS.items():
            if needle and needle not in name.lower():
                continue
            table.add_row(name, describe_parameters(descriptors))
        console.print(table)

    @app.command("call")
    def call(
        ctx: typer.Context,
        chain: str = typer.Argument(..., help="Chain name"),
        method: str = typer.Argument(..., help="RPC method in any case, e.g. getinfo or listStreamItems"),
        params: list[str] = typer.Argument(None, help="Positional parameters (JSON values or plain strings)"),
        casing: str = typer.Option(None, "--casing", help="Method casing: default, upper or lower"),
        protocol: str = typer.Option(None, "--protocol", help="http or https"),
        host: str = typer.Option(None, "--host", help="RPC host"),
    ) -> None:
        """Call an RPC method on a chain and print the JSON response."""
        values = [parse_value(p) for p in params or []]
        _call_and_print(ctx, chain, method, values, casing=casing, protocol=protocol, host=host)

    @app.command("info")
    def info(
        ctx: typer.Context,
        chain: str = typer.Argument(..., help="Chain name"),
    ) -> None:
        """Shorthand for `call CHAIN getinfo`."""
        _call_and_print(ctx, chain, "getinfo", [])
