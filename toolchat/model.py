"""Wire types for chat-completion requests and responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _field(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"missing field `{key}`") from exc


@dataclass
class ToolFunction:
    """The function part of a tool call: a name and JSON-encoded arguments."""

    name: str
    arguments: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "arguments": self.arguments}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ToolFunction:
        return cls(name=_field(data, "name"), arguments=_field(data, "arguments"))


@dataclass
class ToolCall:
    """A tool call requested by the model."""

    id: str
    type: str
    function: ToolFunction

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "type": self.type, "function": self.function.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ToolCall:
        return cls(
            id=_field(data, "id"),
            type=_field(data, "type"),
            function=ToolFunction.from_dict(_field(data, "function")),
        )


@dataclass
class Message:
    """A chat message with an optional list of tool calls."""

    role: str
    content: str
    tool_calls: list[ToolCall] | None = None

    @classmethod
    def system(cls, content: Any) -> Message:
        return cls(role="system", content=str(content))

    @classmethod
    def user(cls, content: Any) -> Message:
        return cls(role="user", content=str(content))

    @classmethod
    def assistant(cls, content: Any) -> Message:
        return cls(role="assistant", content=str(content))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"role": self.role, "content": self.content}
        if self.tool_calls is not None:
            data["tool_calls"] = [call.to_dict() for call in self.tool_calls]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Message:
        raw_calls = data.get("tool_calls") if isinstance(data, Mapping) else None
        return cls(
            role=_field(data, "role"),
            content=_field(data, "content"),
            tool_calls=(
                None if raw_calls is None else [ToolCall.from_dict(c) for c in raw_calls]
            ),
        )


@dataclass
class Tool:
    """A tool definition offered to the model."""

    name: str
    description: str
    parameters: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "parameters": self.parameters,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Tool:
        return cls(
            name=_field(data, "name"),
            description=_field(data, "description"),
            parameters=_field(data, "parameters"),
        )


@dataclass
class CompletionRequest:
    """A chat-completion request."""

    model: str
    messages: list[Message]
    temperature: float | None = None
    tools: list[Tool] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "model": self.model,
            "messages": [message.to_dict() for message in self.messages],
        }
        if self.temperature is not None:
            data["temperature"] = self.temperature
        if self.tools is not None:
            data["tools"] = [tool.to_dict() for tool in self.tools]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CompletionRequest:
        tools = data.get("tools") if isinstance(data, Mapping) else None
        return cls(
            model=_field(data, "model"),
            messages=[Message.from_dict(m) for m in _field(data, "messages")],
            temperature=data.get("temperature"),
            tools=None if tools is None else [Tool.from_dict(t) for t in tools],
        )


@dataclass
class Choice:
    """One completion choice."""

    index: int
    message: Message
    finish_reason: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "message": self.message.to_dict(),
            "finish_reason": self.finish_reason,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Choice:
        return cls(
            index=int(_field(data, "index")),
            message=Message.from_dict(_field(data, "message")),
            finish_reason=_field(data, "finish_reason"),
        )


@dataclass
class CompletionResponse:
    """A chat-completion response."""

    id: str
    object: str
    created: int
    model: str
    choices: list[Choice] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "object": self.object,
            "created": self.created,
            "model": self.model,
            "choices": [choice.to_dict() for choice in self.choices],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> CompletionResponse:
        return cls(
            id=_field(data, "id"),
            object=_field(data, "object"),
            created=int(_field(data, "created")),
            model=_field(data, "model"),
            choices=[Choice.from_dict(c) for c in _field(data, "choices")],
        )


@dataclass
class Content:
    """A typed body of tool output."""

    content_type: str
    body: str

    @classmethod
    def text(cls, content: Any) -> Content:
        return cls(content_type="text/plain", body=str(content))

    def to_dict(self) -> dict[str, Any]:
        return {"content_type": self.content_type, "body": self.body}


@dataclass
class ToolResult:
    """The outcome of a tool invocation."""

    success: bool
    contents: list[Content] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "success": self.success,
            "contents": [content.to_dict() for content in self.contents],
        }