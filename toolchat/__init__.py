"""Building blocks for chat clients that use OpenAI-compatible APIs and MCP tool servers."""

__version__ = "0.1.0"