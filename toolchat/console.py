"""Coloured console output for an interactive agent session."""

from __future__ import annotations

import sys
from typing import Any, TextIO

ERROR_PREFIX = "\x1b[1;31m\u274c ERROR: \x1b[0m"
TOOL_CALL_PREFIX = "\x1b[1;33m\U0001f6e0 Tool Call: \x1b[0m"
AGENT_PREFIX = "\x1b[1;34m\U0001f916 Agent: \x1b[0m"


def _emit(output: TextIO | None, *parts: str) -> None:
    stream = output if output is not None else sys.stdout
    for part in parts:
        stream.write(part)
    stream.flush()


def output_error(error: Any, output: TextIO | None = None) -> None:
    """Write *error* as a red error line."""
    _emit(output, ERROR_PREFIX, str(error), "\n")


def output_agent(content: Any, output: TextIO | None = None) -> None:
    """Write a piece of streamed agent text."""
    _emit(output, str(content))


def stream_output_toolcall(content: Any, output: TextIO | None = None) -> None:
    """Write the result of a tool call as a yellow line."""
    _emit(output, TOOL_CALL_PREFIX, str(content), "\n")


def stream_output_agent_start(output: TextIO | None = None) -> None:
    """Write the prompt that introduces the agent's answer."""
    _emit(output, AGENT_PREFIX)


def stream_output_agent_finished(output: TextIO | None = None) -> None:
    """End the agent's answer."""
    _emit(output, "\n")