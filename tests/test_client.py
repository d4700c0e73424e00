import json

import httpx
import pytest
import respx

from toolchat.client import DEFAULT_CHAT_URL, ApiError, OpenAIClient
from toolchat.model import CompletionRequest, CompletionResponse, Message

LOCAL_URL = "http://localhost:9000/v1/chat/completions"

RESPONSE = {
    "id": "cmpl-1",
    "object": "chat.completion",
    "created": 1700000000,
    "model": "gpt-4o-mini",
    "choices": [
        {
            "index": 0,
            "message": {"role": "assistant", "content": "hello there"},
            "finish_reason": "stop",
        }
    ],
}


def _request() -> CompletionRequest:
    return CompletionRequest(
        model="gpt-4o-mini", messages=[Message.user("hi")], temperature=0.7
    )


@pytest.mark.asyncio
async def test_complete_parses_response_and_sends_headers():
    client = OpenAIClient("placeholder", LOCAL_URL)
    with respx.mock:
        route = respx.post(LOCAL_URL).mock(
            return_value=httpx.Response(200, json=RESPONSE)
        )
        result = await client.complete(_request())
    assert result == CompletionResponse.from_dict(RESPONSE)
    sent = route.calls.last.request
    assert sent.headers["Authorization"] == "Bearer placeholder"
    assert sent.headers["Content-Type"] == "application/json"
    assert json.loads(sent.content) == _request().to_dict()


@pytest.mark.asyncio
async def test_default_url_is_used_without_override():
    client = OpenAIClient("placeholder")
    with respx.mock:
        route = respx.post(DEFAULT_CHAT_URL).mock(
            return_value=httpx.Response(200, json=RESPONSE)
        )
        result = await client.complete(_request())
    assert route.called
    assert result.choices[0].message.content == "hello there"


@pytest.mark.asyncio
async def test_with_base_url_redirects_requests():
    client = OpenAIClient("placeholder").with_base_url(LOCAL_URL)
    assert client.base_url == LOCAL_URL
    with respx.mock:
        route = respx.post(LOCAL_URL).mock(
            return_value=httpx.Response(200, json=RESPONSE)
        )
        await client.complete(_request())
    assert route.call_count == 1


@pytest.mark.asyncio
async def test_error_status_raises_api_error():
    client = OpenAIClient("placeholder", LOCAL_URL)
    with respx.mock:
        respx.post(LOCAL_URL).mock(return_value=httpx.Response(500, text="boom"))
        with pytest.raises(ApiError) as info:
            await client.complete(_request())
    assert info.value.status_code == 500
    assert info.value.body == "boom"
    assert str(info.value) == "API Error: boom"


@pytest.mark.asyncio
async def test_malformed_body_raises_value_error():
    client = OpenAIClient("placeholder", LOCAL_URL)
    with respx.mock:
        respx.post(LOCAL_URL).mock(
            return_value=httpx.Response(200, json={"id": "x"})
        )
        with pytest.raises(ValueError):
            await client.complete(_request())