"""Chat-completion clients."""

from __future__ import annotations

import abc
import json
import logging

import httpx

from toolchat.model import CompletionRequest, CompletionResponse

logger = logging.getLogger(__name__)

DEFAULT_CHAT_URL = "https://api.openai.com/v1/chat/completions"


class ApiError(Exception):
    """The completion endpoint answered with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"API Error: {body}")


class ChatClient(abc.ABC):
    """Something that turns a completion request into a completion response."""

    @abc.abstractmethod
    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        """Send *request* and return the model's response."""


class OpenAIClient(ChatClient):
    """Client for an OpenAI-compatible chat-completion endpoint."""

    def __init__(
        self,
        api_key: str,
        url: str | None = None,
        proxy: bool | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = url if url is not None else DEFAULT_CHAT_URL
        # Proxy settings from the environment are only honoured when asked for.
        self.proxy = bool(proxy)

    def with_base_url(self, base_url: str) -> OpenAIClient:
        """Point the client at another endpoint and return it."""
        self.base_url = str(base_url)
        return self

    async def complete(self, request: CompletionRequest) -> CompletionResponse:
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        async with httpx.AsyncClient(trust_env=self.proxy, timeout=None) as http:
            response = await http.post(
                self.base_url, headers=headers, json=request.to_dict()
            )
        text = response.text
        if not response.is_success:
            logger.error("API error: %s", text)
            raise ApiError(response.status_code, text)
        logger.debug("Received response: %s", text)
        return CompletionResponse.from_dict(json.loads(text))