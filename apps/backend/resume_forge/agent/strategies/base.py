from abc import ABC, abstractmethod
from typing import Any, List

from ..providers.base import Message, Provider


class Strategy(ABC):
    """
    Post-processing applied to a provider reply (e.g. JSON extraction).
    """

    @abstractmethod
    async def __call__(self, messages: List[Message], provider: Provider, **generation_args: Any) -> Any:
        ...
