import asyncio

import aiohttp
import pytest

from resume_forge.agent import ProviderError, get_provider
from resume_forge.agent.providers import GeminiProvider, OllamaProvider
from resume_forge.core import settings

MESSAGES = [
    {"role": "system", "content": "Return JSON."},
    {"role": "system", "content": "Be terse."},
    {"role": "user", "content": "Parse this."},
    {"role": "assistant", "content": "{}"},
    {"role": "user", "content": "Again."},
]


class FakeResponse:
    def __init__(self, status, body):
        self.status = status
        self.body = body

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    async def text(self):
        return str(self.body)

    async def json(self):
        return self.body


class FakeSession:
    """Replaces aiohttp.ClientSession; records posts and answers with a canned response."""

    response = None
    posts = []

    def __init__(self, timeout=None):
        self.timeout = timeout

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return False

    def post(self, url, json=None):
        FakeSession.posts.append({"url": url, "json": json})
        if isinstance(FakeSession.response, Exception):
            raise FakeSession.response
        return FakeSession.response


@pytest.fixture
def session(monkeypatch):
    FakeSession.response = None
    FakeSession.posts = []
    monkeypatch.setattr(aiohttp, "ClientSession", FakeSession)
    return FakeSession


# ───────────────────────────── Gemini ──
def test_gemini_requires_api_key(monkeypatch):
    monkeypatch.setattr(settings, "LLM_API_KEY", None)

    with pytest.raises(ProviderError):
        GeminiProvider(model_name="gemini-1.5-flash")


def test_gemini_payload_maps_roles_and_system_instruction():
    provider = GeminiProvider(model_name="gemini-1.5-flash", api_key="k", opts={"temperature": 0.5})

    payload = provider._payload(MESSAGES, json_mode=True, max_output_tokens=256)

    assert payload["systemInstruction"] == {"parts": [{"text": "Return JSON.\n\nBe terse."}]}
    assert [c["role"] for c in payload["contents"]] == ["user", "model", "user"]
    assert payload["contents"][1]["parts"] == [{"text": "{}"}]
    config = payload["generationConfig"]
    assert config["responseMimeType"] == "application/json"
    assert config["temperature"] == 0.5
    assert config["maxOutputTokens"] == 256


def test_gemini_payload_without_system_or_json_mode():
    provider = GeminiProvider(model_name="gemini-1.5-flash", api_key="k")

    payload = provider._payload([{"role": "user", "content": "hi"}])

    assert "systemInstruction" not in payload
    assert "responseMimeType" not in payload["generationConfig"]
    assert payload["generationConfig"]["temperature"] == settings.LLM_TEMPERATURE


def test_gemini_returns_first_candidate_text(session):
    session.response = FakeResponse(
        200, {"candidates": [{"content": {"parts": [{"text": '{"ok": true}'}]}, "finishReason": "STOP"}]}
    )
    provider = GeminiProvider(model_name="gemini-1.5-flash", api_key="secret")

    assert asyncio.run(provider(MESSAGES)) == '{"ok": true}'
    assert session.posts[0]["url"].endswith("/models/gemini-1.5-flash:generateContent?key=secret")


def test_gemini_http_error_raises_provider_error(session):
    session.response = FakeResponse(429, "quota exceeded")
    provider = GeminiProvider(model_name="gemini-1.5-flash", api_key="k")

    with pytest.raises(ProviderError, match="429"):
        asyncio.run(provider(MESSAGES))


def test_gemini_transport_and_shape_errors_raise_provider_error(session):
    provider = GeminiProvider(model_name="gemini-1.5-flash", api_key="k")

    session.response = aiohttp.ClientConnectionError("refused")
    with pytest.raises(ProviderError):
        asyncio.run(provider(MESSAGES))

    session.response = FakeResponse(200, {"candidates": []})
    with pytest.raises(ProviderError):
        asyncio.run(provider(MESSAGES))


# ───────────────────────────── Ollama ──
def test_ollama_payload_sends_messages_and_options():
    provider = OllamaProvider(model_name="llama3.1", api_base_url="http://ollama:11434/", opts={"num_predict": 64})

    payload = provider._payload(MESSAGES, json_mode=True, temperature=0)

    assert payload["model"] == "llama3.1"
    assert payload["messages"] == MESSAGES
    assert payload["stream"] is False
    assert payload["options"] == {"temperature": 0, "num_predict": 64}
    assert payload["format"] == "json"
    assert "json_mode" not in payload["options"]
    assert provider.api_base_url == "http://ollama:11434"


def test_ollama_payload_defaults_from_settings():
    payload = OllamaProvider(model_name="llama3.1")._payload(MESSAGES)

    assert payload["options"] == {
        "temperature": settings.LLM_TEMPERATURE,
        "num_predict": settings.LLM_MAX_TOKENS,
    }
    assert "format" not in payload


def test_ollama_returns_message_content(session):
    session.response = FakeResponse(200, {"message": {"role": "assistant", "content": '{"ok": true}'}})
    provider = OllamaProvider(model_name="llama3.1", api_base_url="http://ollama:11434")

    assert asyncio.run(provider(MESSAGES, json_mode=True)) == '{"ok": true}'
    assert session.posts[0]["url"] == "http://ollama:11434/api/chat"
    assert session.posts[0]["json"]["format"] == "json"


def test_ollama_errors_raise_provider_error(session):
    provider = OllamaProvider(model_name="llama3.1")

    session.response = FakeResponse(404, "model not found")
    with pytest.raises(ProviderError, match="404"):
        asyncio.run(provider(MESSAGES))

    session.response = aiohttp.ClientConnectionError("refused")
    with pytest.raises(ProviderError):
        asyncio.run(provider(MESSAGES))


def test_get_provider_by_name():
    assert isinstance(get_provider("ollama", "llama3.1"), OllamaProvider)
    with pytest.raises(ProviderError):
        get_provider("openai", "gpt-4o")
