import aiohttp
import logging
from typing import Any, Dict, List

from ..exceptions import ProviderError
from .base import Message, Provider
from ...core import settings

logger = logging.getLogger(__name__)


class OllamaProvider(Provider):
    """
    Provider for a local (or self-hosted) Ollama server, via /api/chat.
    """
    def __init__(
        self,
        model_name: str = settings.LL_MODEL,
        api_base_url: str | None = None,
        opts: Dict[str, Any] = None
    ):
        self.model_name = model_name
        self.api_base_url = (api_base_url or settings.LLM_BASE_URL or "http://localhost:11434").rstrip("/")
        self.opts = opts or {}

    def _payload(self, messages: List[Message], **generation_args: Any) -> Dict[str, Any]:
        opts = {**self.opts, **generation_args}
        payload: Dict[str, Any] = {
            "model": self.model_name,
            "messages": messages,
            "stream": False,
            "options": {
                "temperature": opts.get("temperature", settings.LLM_TEMPERATURE),
                "num_predict": opts.get("num_predict", settings.LLM_MAX_TOKENS),
            },
        }
        if opts.get("json_mode"):
            payload["format"] = "json"
        return payload

    async def __call__(self, messages: List[Message], **generation_args: Any) -> str:
        payload = self._payload(messages, **generation_args)
        timeout = aiohttp.ClientTimeout(total=settings.LLM_TIMEOUT_SECONDS)
        logger.info(f"OllamaProvider calling {self.model_name} at {self.api_base_url}")
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(f"{self.api_base_url}/api/chat", json=payload) as response:
                    if response.status != 200:
                        text = await response.text()
                        raise ProviderError(f"Ollama API error: {response.status} - {text}")
                    data = await response.json()
                    return data["message"]["content"]

        except ProviderError:
            raise
        except Exception as e:
            logger.error(f"Ollama provider error: {e}")
            raise ProviderError(f"Ollama provider error: {e}") from e
