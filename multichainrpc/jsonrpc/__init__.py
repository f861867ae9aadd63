"""JSON-RPC over HTTP(S): request envelope, transport and schema-driven client."""

from multichainrpc.jsonrpc.client import JSONRPCClient, MethodCasing, ParamPresence
from multichainrpc.jsonrpc.request import RPC_VERSION, JSONRPCRequest
from multichainrpc.jsonrpc.transport import request

__all__ = [
    "JSONRPCClient",
    "JSONRPCRequest",
    "MethodCasing",
    "ParamPresence",
    "RPC_VERSION",
    "request",
]
