"""MultiChain client: a JSON-RPC client bound to one local chain."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx
from loguru import logger

from multichainrpc.chain.commands import COMMANDS
from multichainrpc.chain.resolver import ChainResolver
from multichainrpc.config.loader import get_chain_path
from multichainrpc.config.schema import ConnectionConfig
from multichainrpc.jsonrpc.client import CommandSchema, JSONRPCClient, MethodCasing, ParamPresence


class MultichainClient(JSONRPCClient):
    """
    JSON-RPC client for a named MultiChain chain.

    The chain name drives the connection: user, password and RPC port are read
    from the chain's folder whenever the client is (re)configured.
    """

    def __init__(
        self,
        name: str,
        commands: CommandSchema | None = None,
        connection: ConnectionConfig | Mapping[str, Any] | None = None,
        *,
        chain_path: Path | str | None = None,
        resolver: ChainResolver | None = None,
        method_casing: MethodCasing = MethodCasing.LOWER,
        presence: ParamPresence = ParamPresence.TRUTHY,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        # Set before the schema is bound so these names count as reserved.
        self.resolver = resolver or ChainResolver(chain_path if chain_path is not None else get_chain_path())
        self._name: str | None = None
        super().__init__(
            connection,
            commands if commands is not None else COMMANDS,
            method_casing,
            presence=presence,
            transport=transport,
        )
        self.reconfigure(name)

    @property
    def name(self) -> str | None:
        return self._name

    def reconfigure(self, name: str) -> ConnectionConfig:
        """
        Point the client at another chain.

        Raises ConfigurationError (InvalidChainError for unknown names); on
        failure the current chain and connection are kept.
        """
        connection = self.resolver.get_connection(name, self.connection)
        self.connection = connection
        self._name = name
        logger.info(f"Client configured for chain {name} on port {connection.port}")
        return connection

    def get_chain_names(self) -> list[str]:
        return self.resolver.get_chain_names()

    @classmethod
    def list_chains(cls, chain_path: Path | str | None = None) -> list[str]:
        """Chains available under ``chain_path`` (default: the OS MultiChain folder)."""
        return ChainResolver(chain_path if chain_path is not None else get_chain_path()).get_chain_names()
