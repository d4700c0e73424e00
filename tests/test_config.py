import tomllib

import pytest

from toolchat.config import (
    Config,
    McpConfig,
    McpServerConfig,
    RigConfig,
    SseTransportConfig,
    StdioTransportConfig,
    parse_transport,
)

CHAT_TOML = """
openai_key = "placeholder"
chat_url = "http://localhost:9000/v1/chat/completions"
model_name = "gpt-4o-mini"
proxy = false
support_tool = true

[[mcp.server]]
name = "git"
protocol = "stdio"
command = "uvx"
args = ["mcp-server-git"]

[mcp.server.envs]
RUST_LOG = "info"

[[mcp.server]]
name = "counter"
protocol = "sse"
url = "http://localhost:8000/sse"
"""


def test_load_full_chat_config(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(CHAT_TOML)
    config = Config.load(path)
    assert config.openai_key == "placeholder"
    assert config.model_name == "gpt-4o-mini"
    assert config.proxy is False
    assert config.support_tool is True
    assert config.mcp == McpConfig(
        server=[
            McpServerConfig(
                "git",
                StdioTransportConfig("uvx", ["mcp-server-git"], {"RUST_LOG": "info"}),
            ),
            McpServerConfig("counter", SseTransportConfig("http://localhost:8000/sse")),
        ]
    )


def test_empty_chat_config_uses_defaults():
    config = Config.from_dict({})
    assert config == Config()
    assert config.mcp is None


def test_stdio_defaults_for_args_and_envs():
    transport = parse_transport({"protocol": "stdio", "command": "npx"})
    assert transport == StdioTransportConfig("npx")
    assert transport.args == []
    assert transport.envs == {}


def test_unknown_protocol_is_rejected():
    with pytest.raises(ValueError, match="unknown variant"):
        parse_transport({"protocol": "ws", "url": "ws://localhost"})


def test_missing_protocol_is_rejected():
    with pytest.raises(ValueError, match="protocol"):
        parse_transport({"url": "http://localhost:8000/sse"})


def test_sse_needs_url():
    with pytest.raises(ValueError, match="url"):
        parse_transport({"protocol": "sse"})


def test_server_needs_name():
    with pytest.raises(ValueError, match="name"):
        McpServerConfig.from_dict({"protocol": "sse", "url": "http://localhost"})


def test_wrong_type_is_rejected():
    with pytest.raises(ValueError):
        Config.from_dict({"proxy": "yes"})
    with pytest.raises(ValueError):
        parse_transport({"protocol": "stdio", "command": "x", "args": [1]})


def test_mcp_needs_server_list():
    with pytest.raises(ValueError, match="server"):
        McpConfig.from_dict({})


def test_invalid_toml_raises(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("openai_key = ")
    with pytest.raises(tomllib.TOMLDecodeError):
        Config.load(path)


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.load(tmp_path / "absent.toml")


def test_rig_config_retrieve(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text(
        'deepseek_key = "placeholder"\n'
        "[[mcp.server]]\n"
        'name = "git"\n'
        'protocol = "stdio"\n'
        'command = "uvx"\n'
    )
    config = RigConfig.retrieve(path)
    assert config.deepseek_key == "placeholder"
    assert config.cohere_key is None
    assert config.mcp.server == [McpServerConfig("git", StdioTransportConfig("uvx"))]


def test_rig_config_requires_mcp():
    with pytest.raises(ValueError, match="mcp"):
        RigConfig.from_dict({"deepseek_key": "placeholder"})