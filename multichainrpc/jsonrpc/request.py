"""JSON-RPC request envelope."""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from typing import Any

RPC_VERSION = "2.0"


def new_request_id() -> str:
    """Time-ordered correlation token (UUID1)."""
    return str(uuid.uuid1())


@dataclass(frozen=True)
class JSONRPCRequest:
    """One outbound call. Built fresh per request and never mutated."""
    method: str
    params: tuple[Any, ...] = ()
    id: str = field(default_factory=new_request_id)
    jsonrpc: str = RPC_VERSION

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "method": self.method,
            "params": list(self.params),
            "jsonrpc": self.jsonrpc,
        }

    def to_bytes(self) -> bytes:
        return json.dumps(self.to_dict()).encode("utf-8")
