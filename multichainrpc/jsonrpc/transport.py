"""HTTP(S) transport: one POST carrying one JSON-RPC request."""

from __future__ import annotations

import json
from typing import Any, Mapping, Sequence

import httpx
from loguru import logger

from multichainrpc.config.schema import ConnectionConfig
from multichainrpc.errors import ProtocolError, TransportError
from multichainrpc.jsonrpc.request import JSONRPCRequest


def _coerce_options(options: ConnectionConfig | Mapping[str, Any] | None) -> ConnectionConfig:
    if options is None:
        return ConnectionConfig()
    if isinstance(options, ConnectionConfig):
        return options
    return ConnectionConfig.model_validate(dict(options))


def resolve_scheme(protocol: str | None) -> str:
    if protocol and protocol.strip().lower().startswith("https"):
        return "https"
    return "http"


def build_url(options: ConnectionConfig) -> str:
    path = options.path if options.path.startswith("/") else f"/{options.path}"
    netloc = options.host if options.port is None else f"{options.host}:{options.port}"
    return f"{resolve_scheme(options.protocol)}://{netloc}{path}"


def _is_json_content_type(value: str | None) -> bool:
    if not value:
        return False
    return value.split(";", 1)[0].strip().lower() == "application/json"


async def request(
    method: str,
    params: Sequence[Any] | None = None,
    options: ConnectionConfig | Mapping[str, Any] | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Any:
    """
    Make a JSON-RPC request over HTTP or HTTPS.

    Args:
        method: Remote method name, sent as given (after trimming whitespace).
        params: Positional parameters.
        options: Connection options. The HTTP method is always POST and the
            content type is always application/json.
        transport: Optional httpx transport (tests, custom stacks).

    Returns:
        The parsed JSON body of a 200 response, including bodies that carry a
        JSON-RPC ``error`` member.

    Raises:
        ProtocolError: non-200 response with a JSON body.
        TransportError: non-200 response without one, or a 200 that is not JSON.
        httpx.RequestError: network failure, propagated unmodified.
    """
    opts = _coerce_options(options)
    rpc_request = JSONRPCRequest(method=method.strip(), params=tuple(params or ()))
    data = rpc_request.to_bytes()

    headers = httpx.Headers(opts.headers)
    headers["Content-Type"] = "application/json"
    headers["Content-Length"] = str(len(data))
    auth = httpx.BasicAuth(opts.user, opts.password) if opts.user and opts.password else None
    url = build_url(opts)

    client_kwargs: dict[str, Any] = {"verify": opts.verify}
    if opts.timeout is not None:
        client_kwargs["timeout"] = opts.timeout
    if transport is not None:
        client_kwargs["transport"] = transport

    logger.debug(f"RPC call: {rpc_request.method} {url} id={rpc_request.id}")
    async with httpx.AsyncClient(**client_kwargs) as client:
        resp = await client.post(url, content=data, headers=headers, auth=auth)

    if resp.status_code == 200:
        try:
            return resp.json()
        except json.JSONDecodeError as exc:
            raise TransportError(
                f"Request failed. Non-JSON body for {rpc_request.method}",
                status_code=200,
                code="BAD_RESPONSE",
            ) from exc

    logger.warning(f"RPC call failed: {rpc_request.method} {url} status={resp.status_code}")
    if _is_json_content_type(resp.headers.get("content-type")):
        try:
            payload = resp.json()
        except json.JSONDecodeError:
            logger.debug(f"RPC error body labelled JSON but unparseable: id={rpc_request.id}")
        else:
            raise ProtocolError(payload, resp.status_code)
    raise TransportError(f"Request failed. HTTP {resp.status_code}", status_code=resp.status_code)
