from .base import Message, Provider
from .gemini import GeminiProvider
from .ollama import OllamaProvider

__all__ = ["Message", "Provider", "GeminiProvider", "OllamaProvider"]
