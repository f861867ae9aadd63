"""Generic JSON-RPC client driven by a command schema."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Any, Awaitable, Callable

import httpx
from loguru import logger

from multichainrpc.config.schema import ConnectionConfig
from multichainrpc.errors import ConfigurationError, MissingParameterError, ReservedCommandError
from multichainrpc.jsonrpc.transport import request

CommandSchema = Mapping[str, Sequence[Any]]


class MethodCasing(IntEnum):
    """How method names are cased before they go on the wire."""
    DEFAULT = 0  # unchanged
    UPPER = 1
    LOWER = 2

    @classmethod
    def from_name(cls, value: str | int | MethodCasing | None) -> MethodCasing:
        """Parse "upper"/"lower"/"default" (or an int); unknown values map to DEFAULT."""
        if isinstance(value, MethodCasing):
            return value
        if isinstance(value, int):
            try:
                return cls(value)
            except ValueError:
                return cls.DEFAULT
        if isinstance(value, str):
            return cls.__members__.get(value.strip().upper(), cls.DEFAULT)
        return cls.DEFAULT


class ParamPresence(Enum):
    """Rule deciding whether a caller supplied a positional parameter."""
    # Falsy scalars (None, False, "", 0, NaN) count as absent and get the default.
    TRUTHY = "truthy"
    # Only a missing position or None counts as absent.
    EXPLICIT = "explicit"


def default_value(descriptor: Mapping[str, Any]) -> Any:
    """Value of a single-entry default record ({display_name: default})."""
    for value in descriptor.values():
        return value
    return None


def _is_falsy(value: Any) -> bool:
    """Falsy scalar: None, False, "", zero or NaN. Empty lists and dicts are values."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (int, float)):
        return value == 0 or value != value
    return False


class JSONRPCClient:
    """
    JSON-RPC client that owns its connection options and a command schema.

    Every key of the schema is callable as ``client.<name>(*params)``; the
    bindings live in a lookup table, not on the instance.
    """

    def __init__(
        self,
        connection: ConnectionConfig | Mapping[str, Any] | None = None,
        commands: CommandSchema | None = None,
        method_casing: MethodCasing = MethodCasing.LOWER,
        *,
        presence: ParamPresence = ParamPresence.TRUTHY,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._commands: dict[str, tuple[Any, ...]] = {}
        self._bindings: dict[str, Callable[..., Awaitable[Any]]] = {}
        self.connection = connection
        self.method_casing = method_casing
        self.presence = presence
        self.transport = transport
        self.commands = commands or {}

    @property
    def connection(self) -> ConnectionConfig:
        return self._connection

    @connection.setter
    def connection(self, value: ConnectionConfig | Mapping[str, Any] | None) -> None:
        if value is None:
            value = ConnectionConfig()
        elif not isinstance(value, ConnectionConfig):
            value = ConnectionConfig.model_validate(dict(value))
        self._connection = value

    @property
    def commands(self) -> Mapping[str, tuple[Any, ...]]:
        return MappingProxyType(self._commands)

    @commands.setter
    def commands(self, value: CommandSchema) -> None:
        """Replace the schema and its bindings. Nothing changes if validation fails."""
        schema: dict[str, tuple[Any, ...]] = {}
        for name, descriptors in value.items():
            if not isinstance(name, str) or not name:
                raise ConfigurationError(f"Command names must be non-empty strings, got {name!r}")
            if isinstance(descriptors, (str, bytes)) or not isinstance(descriptors, Sequence):
                raise ConfigurationError(f"Parameters for command {name} must be a list")
            schema[name] = tuple(descriptors)

        reserved = self._reserved_names()
        collisions = sorted(name for name in schema if name in reserved)
        if collisions:
            raise ReservedCommandError(collisions)

        bindings = {name: self._make_binding(name) for name in schema}
        self._commands, self._bindings = schema, bindings
        logger.debug(f"Bound {len(bindings)} RPC commands")

    @property
    def bound_methods(self) -> Mapping[str, Callable[..., Awaitable[Any]]]:
        return MappingProxyType(self._bindings)

    def method(self, name: str) -> Callable[..., Awaitable[Any]]:
        """Return the bound caller for ``name``; KeyError when it is not in the schema."""
        return self._bindings[name]

    def _reserved_names(self) -> set[str]:
        return set(dir(type(self))) | set(vars(self))

    def _make_binding(self, name: str) -> Callable[..., Awaitable[Any]]:
        def invoke(*params: Any) -> Awaitable[Any]:
            return self.call(name, params)

        invoke.__name__ = name
        invoke.__qualname__ = f"{type(self).__name__}.{name}"
        return invoke

    def __getattr__(self, name: str) -> Callable[..., Awaitable[Any]]:
        bindings = self.__dict__.get("_bindings") or {}
        if name in bindings:
            return bindings[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._bindings))

    def call(self, method: str, params: Sequence[Any] = ()) -> Awaitable[Any]:
        """
        Call an RPC method using the current configuration.

        Parameters are defaulted and the connection is snapshotted right away,
        so a MissingParameterError is raised here and later reconfiguration
        does not affect this call. The returned awaitable performs the exchange.
        """
        resolved = self.handle_defaults(method, params)
        wire_method = self.handle_casing(method)
        connection = self._connection.model_copy(deep=True)
        return request(wire_method, resolved, connection, transport=self.transport)

    def handle_defaults(self, method: str, params: Sequence[Any]) -> list[Any]:
        """
        Place default values into a parameter list.

        Methods missing from the schema keep their params as given. For known
        methods the result has exactly one entry per schema position.
        """
        params = list(params)
        descriptors = self._commands.get(method)
        if descriptors is None:
            return params

        resolved: list[Any] = []
        for i, descriptor in enumerate(descriptors):
            if i < len(params) and self._is_present(params[i]):
                resolved.append(params[i])
            elif isinstance(descriptor, Mapping):
                resolved.append(default_value(descriptor))
            else:
                raise MissingParameterError(method, i, descriptor)
        return resolved

    def _is_present(self, value: Any) -> bool:
        if self.presence is ParamPresence.EXPLICIT:
            return value is not None
        return not _is_falsy(value)

    def handle_casing(self, method: str) -> str:
        """Apply the casing policy to a method name. Unknown policies leave it unchanged."""
        if self.method_casing == MethodCasing.UPPER:
            return method.upper()
        if self.method_casing == MethodCasing.LOWER:
            return method.lower()
        return method
