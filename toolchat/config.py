"""Configuration files for chat clients and their tool servers."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Mapping

_MISSING = object()


def _get(data: Mapping[str, Any], key: str, kind: type, default: Any = _MISSING) -> Any:
    value = data.get(key)
    if value is None:
        if default is _MISSING:
            raise ValueError(f"missing field `{key}`")
        return default
    if kind is bool:
        valid = isinstance(value, bool)
    elif kind in (int, float):
        valid = isinstance(value, (int, float)) and not isinstance(value, bool)
    else:
        valid = isinstance(value, kind)
    if not valid:
        raise ValueError(f"invalid type for field `{key}`")
    return value


def _mapping(data: Any) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError("expected a table")
    return data


@dataclass
class SseTransportConfig:
    """A tool server reached over server-sent events."""

    url: str


@dataclass
class StdioTransportConfig:
    """A tool server started as a child process talking over stdio."""

    command: str
    args: list[str] = field(default_factory=list)
    envs: dict[str, str] = field(default_factory=dict)


McpServerTransportConfig = SseTransportConfig | StdioTransportConfig


def parse_transport(data: Mapping[str, Any]) -> McpServerTransportConfig:
    """Build a transport config from a table tagged by its "protocol" key."""
    data = _mapping(data)
    protocol = _get(data, "protocol", str)
    if protocol == "sse":
        return SseTransportConfig(url=_get(data, "url", str))
    if protocol == "stdio":
        args = _get(data, "args", list, [])
        envs = _get(data, "envs", dict, {})
        if not all(isinstance(arg, str) for arg in args):
            raise ValueError("invalid type for field `args`")
        if not all(isinstance(k, str) and isinstance(v, str) for k, v in envs.items()):
            raise ValueError("invalid type for field `envs`")
        return StdioTransportConfig(
            command=_get(data, "command", str), args=list(args), envs=dict(envs)
        )
    raise ValueError(f"unknown variant `{protocol}`, expected `sse` or `stdio`")


@dataclass
class McpServerConfig:
    """A named tool server and how to reach it."""

    name: str
    transport: McpServerTransportConfig

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> McpServerConfig:
        data = _mapping(data)
        return cls(name=_get(data, "name", str), transport=parse_transport(data))


@dataclass
class McpConfig:
    """The list of tool servers."""

    server: list[McpServerConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> McpConfig:
        data = _mapping(data)
        servers = _get(data, "server", list)
        return cls(server=[McpServerConfig.from_dict(item) for item in servers])


def _read_toml(path: str | PathLike[str]) -> dict[str, Any]:
    with open(path, "rb") as handle:
        return tomllib.load(handle)


@dataclass
class Config:
    """Settings of the simple chat client."""

    openai_key: str | None = None
    chat_url: str | None = None
    mcp: McpConfig | None = None
    model_name: str | None = None
    proxy: bool | None = None
    support_tool: bool | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        data = _mapping(data)
        mcp = data.get("mcp")
        return cls(
            openai_key=_get(data, "openai_key", str, None),
            chat_url=_get(data, "chat_url", str, None),
            mcp=None if mcp is None else McpConfig.from_dict(mcp),
            model_name=_get(data, "model_name", str, None),
            proxy=_get(data, "proxy", bool, None),
            support_tool=_get(data, "support_tool", bool, None),
        )

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Config:
        """Read a TOML configuration file."""
        return cls.from_dict(_read_toml(path))


@dataclass
class RigConfig:
    """Settings of the agent client: tool servers and provider keys."""

    mcp: McpConfig
    deepseek_key: str | None = None
    cohere_key: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RigConfig:
        data = _mapping(data)
        mcp = data.get("mcp")
        if mcp is None:
            raise ValueError("missing field `mcp`")
        return cls(
            mcp=McpConfig.from_dict(mcp),
            deepseek_key=_get(data, "deepseek_key", str, None),
            cohere_key=_get(data, "cohere_key", str, None),
        )

    @classmethod
    def retrieve(cls, path: str | PathLike[str]) -> RigConfig:
        """Read a TOML configuration file."""
        return cls.from_dict(_read_toml(path))