"""multichainrpc - JSON-RPC over HTTP(S) client for MultiChain nodes."""

__version__ = "0.1.0"
__logo__ = "⛓"

from multichainrpc.chain import COMMANDS, ChainResolver, MultichainClient
from multichainrpc.config import ConnectionConfig, Settings
from multichainrpc.errors import (
    ConfigurationError,
    InvalidChainError,
    MissingParameterError,
    MultichainRPCError,
    ProtocolError,
    ReservedCommandError,
    TransportError,
)
from multichainrpc.jsonrpc import RPC_VERSION, JSONRPCClient, JSONRPCRequest, MethodCasing, ParamPresence, request

__all__ = [
    "COMMANDS",
    "RPC_VERSION",
    "ChainResolver",
    "ConfigurationError",
    "ConnectionConfig",
    "InvalidChainError",
    "JSONRPCClient",
    "JSONRPCRequest",
    "MethodCasing",
    "MissingParameterError",
    "MultichainClient",
    "MultichainRPCError",
    "ParamPresence",
    "ProtocolError",
    "ReservedCommandError",
    "Settings",
    "TransportError",
    "request",
]
