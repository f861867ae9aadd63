"""Configuration module for multichainrpc."""

from multichainrpc.config.loader import get_chain_path, get_config_path, load_settings
from multichainrpc.config.schema import ConnectionConfig, Settings

__all__ = ["ConnectionConfig", "Settings", "get_chain_path", "get_config_path", "load_settings"]
