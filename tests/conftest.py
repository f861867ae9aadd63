"""Pytest hooks and fixtures."""

import json
import os
from pathlib import Path

import httpx
import pytest


def pytest_configure(config):
    """Register custom markers (also in pyproject.toml)."""
    config.addinivalue_line(
        "markers",
        "network: talks to a real MultiChain node (skipped unless MULTICHAINRPC_LIVE=1)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip network tests unless a live node is explicitly requested."""
    if os.environ.get("MULTICHAINRPC_LIVE") == "1":
        return
    skip = pytest.mark.skip(reason="Requires a running MultiChain node (set MULTICHAINRPC_LIVE=1)")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip)


def write_chain(base: Path, name: str, *, user: str = "multichainrpc", password: str = "secret", port: int = 4770) -> Path:
    chain_dir = base / name
    chain_dir.mkdir(parents=True)
    (chain_dir / "multichain.conf").write_text(f"rpcuser={user}\nrpcpassword={password}\n", encoding="utf-8")
    (chain_dir / "params.dat").write_text(
        "# ==== MultiChain configuration file ====\n"
        f"chain-name = {name}          # Chain name\n"
        "default-network-port = 4771    # Default TCP/IP port for peer-to-peer connection\n"
        f"default-rpc-port = {port}        # Default TCP/IP port for incoming JSON-RPC API requests\n",
        encoding="utf-8",
    )
    return chain_dir


@pytest.fixture
def chain_path(tmp_path: Path) -> Path:
    """MultiChain data folder with chains alpha (port 4770) and beta (port 5770)."""
    base = tmp_path / "multichain"
    base.mkdir()
    write_chain(base, "alpha", user="alice", password="alpha-pass", port=4770)
    write_chain(base, "beta", user="bob", password="beta-pass", port=5770)
    (base / "multichaind").mkdir()
    (base / ".hidden").mkdir()
    (base / "stray.txt").write_text("not a chain", encoding="utf-8")
    return base


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler=None):
        self.requests: list[httpx.Request] = []

        def _handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            if handler is not None:
                return handler(request)
            body = json.loads(request.content)
            return httpx.Response(200, json={"result": body["method"], "error": None, "id": body["id"]})

        super().__init__(_handler)

    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def recording_transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def make_chain():
    return write_chain


@pytest.fixture
def make_transport():
    """Build a RecordingTransport around a custom handler."""
    return RecordingTransport
