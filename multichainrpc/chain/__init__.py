"""MultiChain specialization: chain discovery, command table and client."""

from multichainrpc.chain.client import MultichainClient
from multichainrpc.chain.commands import COMMANDS
from multichainrpc.chain.resolver import ChainResolver

__all__ = ["COMMANDS", "ChainResolver", "MultichainClient"]
