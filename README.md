# toolchat

Building blocks for chat clients that talk to OpenAI-compatible
chat-completion APIs and to Model Context Protocol (MCP) tool servers:
request and response types, an HTTP completion client, configuration
loading, an asyncio worker-backed transport, console output helpers and a
few example tool providers.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `toolchat.model`: the wire types `Message`, `ToolCall`, `ToolFunction`,
  `Tool`, `CompletionRequest`, `Choice`, `CompletionResponse`, `Content` and
  `ToolResult`. Each has `to_dict`; most also have `from_dict`, which raises
  `ValueError` when a required field is missing. `Message.system`,
  `Message.user` and `Message.assistant` build messages with the given role;
  `Content.text` builds a `text/plain` content.
- `toolchat.client`: `ChatClient` is the abstract interface with an async
  `complete(request)`. `OpenAIClient(api_key, url=None, proxy=None)` posts a
  `CompletionRequest` as JSON with a bearer token to
  `https://api.openai.com/v1/chat/completions` unless another URL is given
  (or set with `with_base_url`), and returns a `CompletionResponse`. A
  non-success status raises `ApiError`, which carries `status_code` and
  `body`. Proxy settings from the environment are used only when `proxy` is
  true.
- `toolchat.config`: `Config.load(path)` and `RigConfig.retrieve(path)` read
  TOML files; `from_dict` builds them from a mapping. Tool servers are
  `McpServerConfig` entries whose transport, chosen by the `protocol` key, is
  `SseTransportConfig` (`url`) or `StdioTransportConfig` (`command`, `args`,
  `envs`). Missing or mistyped fields raise `ValueError`.
- `toolchat.worker`: `WorkerTransport(worker)` runs a `Worker` in a
  background asyncio task and offers `send`, `receive`, `cancel` and `close`
  (also usable as an async context manager). The worker talks to the handler
  through `WorkerContext.send_to_handler` and
  `WorkerContext.recv_from_handler`, and stops by raising a `WorkerQuit`:
  `WorkerFatal`, `WorkerCancelled`, `TransportClosed`, `HandlerTerminated` or
  `WorkerJoinError`. `fatal_context(context)` turns an exception into a
  `WorkerFatal`. `WorkerConfig` sets a name and the channel capacity
  (default 16).
- `toolchat.console`: `output_error`, `output_agent`,
  `stream_output_toolcall`, `stream_output_agent_start` and
  `stream_output_agent_finished` write coloured agent-session output to a
  text stream (standard output by default).
- `toolchat.counter`: `Counter`, a thread-safe counter with the tools
  `increment`, `decrement`, `get_value`, `say_hello`, `echo` and `sum`, plus
  sample resources (`list_resources`, `read_resource`) and an
  `example_prompt` prompt (`list_prompts`, `get_prompt`). Unknown resources
  raise `ResourceNotFound`; unknown prompts or a missing `message` argument
  raise `InvalidParams`.
- `toolchat.generic_service`: `DataService`, the in-memory
  `MemoryDataService`, and `GenericService`, which exposes a store through
  `get_data` and `set_data` tools.

## Configuration file

```toml
openai_key = "placeholder"
chat_url = "https://api.openai.com/v1/chat/completions"
model_name = "gpt-4o-mini"
proxy = false
support_tool = true

[[mcp.server]]
name = "git"
protocol = "stdio"
command = "uvx"
args = ["mcp-server-git"]

[[mcp.server]]
name = "counter"
protocol = "sse"
url = "http://localhost:8000/sse"
```

```python
from toolchat.config import Config

config = Config.load("config.toml")
```

## What it does not do

The package provides no command-line program and no interactive chat loop.
It does not start or connect to MCP tool servers from a configuration, and
it does not dispatch the model's tool calls; the example tool providers are
plain Python objects and are not served over any protocol.