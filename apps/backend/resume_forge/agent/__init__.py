import logging
from typing import Any, Dict, List, Optional

from .exceptions import ProviderError, StrategyError
from .providers import GeminiProvider, Message, OllamaProvider, Provider
from .strategies import JSONWrapper, Strategy
from ..core import settings

logger = logging.getLogger(__name__)

_STRATEGIES = {"json": JSONWrapper}


def get_provider(name: Optional[str] = None, model: Optional[str] = None, opts: Dict[str, Any] = None) -> Provider:
    name = (name or settings.LLM_PROVIDER or "ollama").lower()
    model = model or settings.LL_MODEL
    if name == "gemini":
        return GeminiProvider(model_name=model, opts=opts)
    if name == "ollama":
        return OllamaProvider(model_name=model, opts=opts)
    raise ProviderError(f"Unsupported LLM provider: {name}")


class AgentManager:
    """
    Runs a prompt through the configured provider and post-processes the reply
    with a strategy. The provider is built lazily so constructing a service
    never needs credentials.
    """

    def __init__(
        self,
        strategy: str = "json",
        model: Optional[str] = None,
        provider: Optional[Provider] = None,
        opts: Dict[str, Any] = None,
    ):
        if strategy not in _STRATEGIES:
            raise ValueError(f"Unknown strategy: {strategy}")
        self.strategy: Strategy = _STRATEGIES[strategy]()
        self.model = model
        self.opts = opts or {}
        self._provider = provider

    @property
    def provider(self) -> Provider:
        if self._provider is None:
            self._provider = get_provider(model=self.model, opts=self.opts)
        return self._provider

    async def run(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        history: Optional[List[Message]] = None,
        **generation_args: Any,
    ) -> Any:
        """
        `history` turns are sent between the system prompt and `prompt`.
        """
        messages: List[Message] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.extend(history or [])
        if prompt:
            messages.append({"role": "user", "content": prompt})
        return await self.strategy(messages, self.provider, **generation_args)


__all__ = [
    "AgentManager",
    "get_provider",
    "Provider",
    "ProviderError",
    "StrategyError",
]
