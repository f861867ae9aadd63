"""Configuration loading utilities."""

import json
import os
import sys
from pathlib import Path
from typing import Any

from multichainrpc.config.schema import Settings


def get_config_path() -> Path:
    """Get the default configuration file path."""
    return Path.home() / ".multichainrpc" / "config.json"


def default_chain_path(platform: str | None = None, environ: dict[str, str] | None = None) -> Path:
    """MultiChain data folder for the given platform (defaults to the running one)."""
    platform = platform or sys.platform
    env = os.environ if environ is None else environ
    if platform == "win32":
        return Path(env.get("APPDATA", "")) / "MultiChain"
    home = env.get("HOME")
    return (Path(home) if home else Path.home()) / ".multichain"


def get_chain_path(settings: Settings | None = None) -> Path:
    """
    Resolve the folder holding one subdirectory per chain.

    Call once at startup and pass the result to ChainResolver.
    """
    if settings is not None and settings.chain_path is not None:
        return Path(settings.chain_path).expanduser()
    return default_chain_path()


def load_settings(config_path: Path | None = None) -> Settings:
    """
    Load settings from file or fall back to defaults plus environment.

    Args:
        config_path: Optional path to config file. Uses default if not provided.

    Returns:
        Loaded settings object.
    """
    path = config_path or get_config_path()

    if path.exists():
        try:
            with open(path) as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("config file must be a JSON object")
            # Keyword init so environment values still fill keys the file leaves out.
            return Settings(**convert_keys(data))
        except (json.JSONDecodeError, ValueError) as e:
            raise ValueError(
                f"Failed to load config from {path}: {e}. "
                "Fix the file or remove it to use defaults."
            ) from e

    return Settings()


def convert_keys(data: Any) -> Any:
    """Convert camelCase keys to snake_case for Pydantic."""
    if isinstance(data, dict):
        return {camel_to_snake(k): convert_keys(v) for k, v in data.items()}
    if isinstance(data, list):
        return [convert_keys(item) for item in data]
    return data


def camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    result = []
    for i, char in enumerate(name):
        if char.isupper() and i > 0:
            result.append("_")
        result.append(char.lower())
    return "".join(result)
