"""Find local MultiChain chains and read their RPC credentials and port."""

from __future__ import annotations

from pathlib import Path

from loguru import logger

from multichainrpc.config.schema import ConnectionConfig
from multichainrpc.errors import ConfigurationError, InvalidChainError

DAEMON_DIR = "multichaind"
CONF_FILE = "multichain.conf"
PARAMS_FILE = "params.dat"
RPC_PORT_KEY = "default-rpc-port"


def _read_lines(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(
            f"Cannot read {path}: {exc}",
            details={"path": str(path)},
        ) from exc
    return [line.strip() for line in text.strip().splitlines()]


def _value_after_equals(line: str, path: Path) -> str:
    if "=" not in line:
        raise ConfigurationError(f"Malformed line in {path}: {line!r}", details={"path": str(path)})
    return line.split("=", 1)[1].strip()


class ChainResolver:
    """Resolve chain names to connection options from a MultiChain data folder."""

    def __init__(self, chain_path: Path | str):
        self.chain_path = Path(chain_path)

    def get_chain_names(self) -> list[str]:
        """Names of chain directories, skipping hidden entries and the daemon folder."""
        if not self.chain_path.is_dir():
            raise ConfigurationError(
                f"MultiChain data folder not found: {self.chain_path}",
                details={"chain_path": str(self.chain_path)},
            )
        return sorted(
            entry.name
            for entry in self.chain_path.iterdir()
            if entry.is_dir() and not entry.name.startswith(".") and entry.name != DAEMON_DIR
        )

    def read_credentials(self, name: str) -> tuple[str, str]:
        """rpcuser and rpcpassword: the first two lines of multichain.conf, in that order."""
        path = self.chain_path / name / CONF_FILE
        lines = _read_lines(path)
        if len(lines) < 2:
            raise ConfigurationError(f"Expected rpcuser and rpcpassword in {path}", details={"path": str(path)})
        return _value_after_equals(lines[0], path), _value_after_equals(lines[1], path)

    def read_rpc_port(self, name: str) -> int:
        """Port from the first ``default-rpc-port = <port> ...`` line of params.dat."""
        path = self.chain_path / name / PARAMS_FILE
        for line in _read_lines(path):
            if not line.startswith(RPC_PORT_KEY):
                continue
            tokens = _value_after_equals(line, path).split()
            if not tokens or not tokens[0].isdigit():
                raise ConfigurationError(f"Invalid {RPC_PORT_KEY} in {path}: {line!r}", details={"path": str(path)})
            return int(tokens[0])
        raise ConfigurationError(f"{RPC_PORT_KEY} not found in {path}", details={"path": str(path)})

    def get_connection(self, name: str, base: ConnectionConfig | None = None) -> ConnectionConfig:
        """
        Build connection options for ``name`` on top of ``base``.

        Raises InvalidChainError before touching any chain file when the name
        is not a known chain. ``base`` itself is never modified.
        """
        if name not in self.get_chain_names():
            raise InvalidChainError(name, str(self.chain_path))
        user, password = self.read_credentials(name)
        port = self.read_rpc_port(name)
        logger.debug(f"Resolved chain {name}: port={port} user={user}")
        base = base or ConnectionConfig()
        return base.model_copy(update={"user": user, "password": password, "port": port}, deep=True)
