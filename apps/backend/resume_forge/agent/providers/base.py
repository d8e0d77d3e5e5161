from abc import ABC, abstractmethod
from typing import Any, Dict, List

# A chat turn: {"role": "system" | "user" | "assistant", "content": "..."}
Message = Dict[str, str]


class Provider(ABC):
    """
    Abstract base class for text generation providers.
    """

    @abstractmethod
    async def __call__(self, messages: List[Message], **generation_args: Any) -> str:
        """Send the conversation and return the raw text of the model reply."""
