"""Configuration schema using Pydantic.

ConnectionConfig is what a client sends requests with; Settings holds process-wide
defaults read from the environment and ~/.multichainrpc/config.json.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConnectionConfig(BaseModel):
    """HTTP(S) connection options for one JSON-RPC endpoint."""
    model_config = ConfigDict(populate_by_name=True)

    protocol: str = "http"  # "https" selects TLS, anything else is plain HTTP
    host: str = "localhost"
    port: int | None = None
    user: str | None = None
    password: str | None = Field(default=None, alias="pass")
    path: str = "/"
    headers: dict[str, str] = Field(default_factory=dict)  # Extra request headers
    timeout: float | None = None  # None keeps the httpx default
    verify: bool = True  # TLS certificate verification

    @property
    def is_resolved(self) -> bool:
        """True once user, password and port are all known."""
        return bool(self.user) and bool(self.password) and self.port is not None


class Settings(BaseSettings):
    """Process-wide defaults. Env vars use the MULTICHAINRPC_ prefix."""
    model_config = SettingsConfigDict(env_prefix="MULTICHAINRPC_", extra="ignore")

    chain_path: Path | None = None  # Overrides the OS-dependent MultiChain data folder
    host: str = "localhost"
    protocol: str = "http"
    timeout: float | None = None
    method_casing: Literal["default", "upper", "lower"] = "lower"
    log_level: str = "WARNING"

    def connection_defaults(self) -> ConnectionConfig:
        return ConnectionConfig(protocol=self.protocol, host=self.host, timeout=self.timeout)
