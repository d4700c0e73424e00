"""A counter tool service with example resources and prompts."""

from __future__ import annotations

import threading
from typing import Any

PROTOCOL_VERSION = "2024-11-05"
SERVER_NAME = "toolchat"
SERVER_VERSION = "0.1.0"

INSTRUCTIONS = (
    "This server provides a counter tool that can increment and decrement values. "
    "The counter starts at 0 and can be modified using the 'increment' and "
    "'decrement' tools. Use 'get_value' to check the current count."
)

CWD_URI = "str:////Users/to/some/path/"
MEMO_URI = "memo://insights"
EXAMPLE_PROMPT = "example_prompt"


class _McpFailure(Exception):
    code = 0

    def __init__(self, message: str, data: Any = None) -> None:
        self.message = message
        self.data = data
        super().__init__(message)


class ResourceNotFound(_McpFailure):
    """A resource URI the server does not know."""

    code = -32002


class InvalidParams(_McpFailure):
    """Bad or missing request parameters."""

    code = -32602


def _success(text: Any) -> dict[str, Any]:
    return {"content": [{"type": "text", "text": str(text)}], "isError": False}


class Counter:
    """A shared counter exposed as tools, plus sample resources and prompts."""

    TOOLS = {
        "increment": "Increment the counter by 1",
        "decrement": "Decrement the counter by 1",
        "get_value": "Get the current counter value",
        "say_hello": "Say hello to the client",
        "echo": "Repeat what you say",
        "sum": "Calculate the sum of two numbers",
    }

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def increment(self) -> dict[str, Any]:
        with self._lock:
            self._value += 1
            return _success(self._value)

    def decrement(self) -> dict[str, Any]:
        with self._lock:
            self._value -= 1
            return _success(self._value)

    def get_value(self) -> dict[str, Any]:
        with self._lock:
            return _success(self._value)

    def say_hello(self) -> dict[str, Any]:
        return _success("hello")

    def echo(self, saying: str) -> dict[str, Any]:
        return _success(saying)

    def sum(self, a: int, b: int) -> dict[str, Any]:
        return _success(a + b)

    def info(self) -> dict[str, Any]:
        return {
            "protocolVersion": PROTOCOL_VERSION,
            "capabilities": {"prompts": {}, "resources": {}, "tools": {}},
            "serverInfo": {"name": SERVER_NAME, "version": SERVER_VERSION},
            "instructions": INSTRUCTIONS,
        }

    def list_resources(self) -> list[dict[str, Any]]:
        return [
            {"uri": CWD_URI, "name": "cwd"},
            {"uri": MEMO_URI, "name": "memo-name"},
        ]

    def read_resource(self, uri: str) -> list[dict[str, Any]]:
        if uri == CWD_URI:
            text = "/Users/to/some/path/"
        elif uri == MEMO_URI:
            text = "Business Intelligence Memo\n\nAnalysis has revealed 5 key insights ..."
        else:
            raise ResourceNotFound("resource_not_found", {"uri": uri})
        return [{"uri": uri, "text": text}]

    def list_prompts(self) -> list[dict[str, Any]]:
        return [
            {
                "name": EXAMPLE_PROMPT,
                "description": (
                    "This is an example prompt that takes one required argument, message"
                ),
                "arguments": [
                    {
                        "name": "message",
                        "description": "A message to put in the prompt",
                        "required": True,
                    }
                ],
            }
        ]

    def get_prompt(self, name: str, arguments: dict[str, Any] | None = None) -> dict[str, Any]:
        if name != EXAMPLE_PROMPT:
            raise InvalidParams("prompt not found")
        message = (arguments or {}).get("message")
        if not isinstance(message, str):
            raise InvalidParams("No message provided to example_prompt")
        text = f"This is an example prompt with your message here: '{message}'"
        return {
            "description": None,
            "messages": [{"role": "user", "content": {"type": "text", "text": text}}],
        }