import aiohttp
import logging
from typing import Any, Dict, List

from ..exceptions import ProviderError
from .base import Message, Provider
from ...core import settings

logger = logging.getLogger(__name__)

_ROLE_MAP = {"user": "user", "assistant": "model"}


class GeminiProvider(Provider):
    """
    Provider for text generation using Google Gemini API.
    """
    def __init__(
        self,
        model_name: str = settings.LL_MODEL,
        api_key: str | None = None,
        api_base_url: str | None = None,
        opts: Dict[str, Any] = None
    ):
        self.model_name = model_name
        self.api_key = api_key or settings.LLM_API_KEY
        self.api_base_url = api_base_url or "https://generativelanguage.googleapis.com/v1beta"
        self.opts = opts or {}

        if not self.api_key:
            raise ProviderError("Gemini API key is missing")

    def _payload(self, messages: List[Message], **generation_args: Any) -> Dict[str, Any]:
        opts = {**self.opts, **generation_args}
        system = "\n\n".join(m["content"] for m in messages if m["role"] == "system")
        contents = [
            {"role": _ROLE_MAP.get(m["role"], "user"), "parts": [{"text": m["content"]}]}
            for m in messages
            if m["role"] != "system"
        ]
        generation_config = {
            "temperature": opts.get("temperature", settings.LLM_TEMPERATURE),
            "topK": opts.get("top_k", 40),
            "topP": opts.get("top_p", 0.9),
            "maxOutputTokens": opts.get("max_output_tokens", settings.LLM_MAX_TOKENS),
        }
        if opts.get("json_mode"):
            generation_config["responseMimeType"] = "application/json"

        payload: Dict[str, Any] = {"contents": contents, "generationConfig": generation_config}
        if system:
            payload["systemInstruction"] = {"parts": [{"text": system}]}
        return payload

    async def __call__(self, messages: List[Message], **generation_args: Any) -> str:
        """
        Calls the Gemini API and returns the text of the first candidate.
        """
        url = f"{self.api_base_url}/models/{self.model_name}:generateContent?key={self.api_key}"
        payload = self._payload(messages, **generation_args)
        timeout = aiohttp.ClientTimeout(total=settings.LLM_TIMEOUT_SECONDS)
        logger.info(
            f"GeminiProvider calling {self.model_name} "
            f"(maxOutputTokens={payload['generationConfig']['maxOutputTokens']})"
        )

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(url, json=payload) as response:
                    if response.status != 200:
                        text = await response.text()
                        raise ProviderError(f"Gemini API error: {response.status} - {text}")

                    data = await response.json()
                    candidate = data["candidates"][0]
                    if candidate.get("finishReason") == "MAX_TOKENS":
                        logger.warning("Gemini output truncated at MAX_TOKENS")
                    return candidate["content"]["parts"][0]["text"]

        except ProviderError:
            raise
        except Exception as e:
            logger.error(f"Gemini provider error: {e}")
            raise ProviderError(f"Gemini provider error: {e}") from e
