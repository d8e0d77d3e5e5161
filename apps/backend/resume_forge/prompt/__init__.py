from .structured_resume import PROMPT as STRUCTURED_RESUME_PROMPT
from .tailor_resume import PROMPT as TAILOR_RESUME_PROMPT
from .resume_chat import PROMPT as RESUME_CHAT_PROMPT

_PROMPTS = {
    "structured_resume": STRUCTURED_RESUME_PROMPT,
    "tailor_resume": TAILOR_RESUME_PROMPT,
    "resume_chat": RESUME_CHAT_PROMPT,
}


class PromptFactory:
    def get(self, name: str) -> str:
        if name not in _PROMPTS:
            raise KeyError(f"Unknown prompt: {name}")
        return _PROMPTS[name]


prompt_factory = PromptFactory()

__all__ = ["prompt_factory"]
