import json
import logging
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from resume_forge.agent import AgentManager, ProviderError, StrategyError
from resume_forge.core import settings
from resume_forge.prompt import prompt_factory
from resume_forge.profile import complete_from, migrate_resume_data
from resume_forge.schemas.pydantic import (
    ChatMessage,
    ChatResult,
    HighlightedField,
    ReasoningItem,
    ResumeRecord,
    TailorResult,
)
from .exceptions import ResumeParsingError, ResumeValidationError

logger = logging.getLogger(__name__)


def _valid_items(raw: Any, model) -> List:
    """Keep the list items that validate against `model`, drop the rest."""
    if not isinstance(raw, list):
        return []
    items = []
    for item in raw:
        try:
            items.append(model.model_validate(item))
        except ValidationError:
            logger.debug(f"Dropping malformed {model.__name__}: {item!r}")
    return items


class TailorService:
    """
    Rewrites the working resume against a job description, and answers
    coaching chat turns that may come back with an edited resume.
    """

    def __init__(self, agent_manager: Optional[AgentManager] = None):
        self.json_agent_manager = agent_manager or AgentManager(strategy="json")

    async def tailor(
        self,
        resume: Any,
        job_description: str,
        master_profile: Optional[ResumeRecord] = None,
    ) -> TailorResult:
        if not job_description or not job_description.strip():
            raise ResumeValidationError(message="jobDescription is required")

        working = migrate_resume_data(resume)
        jd = job_description[: settings.MAX_JOB_DESCRIPTION_CHARS]
        prompt = f"RESUME:\n{json.dumps(working.to_json_dict(), indent=2)}\n\nJOB DESCRIPTION:\n{jd}"
        if master_profile is not None:
            prompt += (
                "\n\nMASTER PROFILE (full career history, select the most relevant entries):\n"
                f"{json.dumps(master_profile.to_json_dict(), indent=2)}"
            )

        try:
            raw = await self.json_agent_manager.run(
                prompt=prompt, system_prompt=prompt_factory.get("tailor_resume")
            )
        except (ProviderError, StrategyError) as e:
            logger.error(f"Tailoring failed: {e}", exc_info=True)
            raise ResumeParsingError(message=f"AI returned malformed JSON: {e}")

        tailored = raw.get("tailored") if isinstance(raw, dict) else None
        if not isinstance(tailored, dict):
            raise ResumeParsingError(message="AI response is missing the tailored resume")

        result = TailorResult(
            tailored=migrate_resume_data(complete_from(tailored, working)),
            highlights=_valid_items(raw.get("highlights"), HighlightedField),
            reasoning=_valid_items(raw.get("reasoning"), ReasoningItem),
        )
        logger.info(
            f"Tailored resume with {len(result.highlights)} highlights "
            f"and {len(result.reasoning)} reasoning notes"
        )
        return result

    def _chat_context(self, working: ResumeRecord, job_description: str, bio: str) -> str:
        parts = [f"CURRENT RESUME JSON:\n{json.dumps(working.to_json_dict(), indent=2)}"]
        if job_description.strip():
            parts.append(f"JOB DESCRIPTION:\n{job_description[: settings.MAX_CHAT_JOB_DESCRIPTION_CHARS]}")
        if bio.strip():
            parts.append(f"USER BACKGROUND:\n{bio[: settings.MAX_CHAT_BIO_CHARS]}")
        return "\n\n---\n\n".join(parts)

    async def chat(
        self,
        messages: List[ChatMessage],
        resume: Any,
        job_description: str = "",
        bio: str = "",
    ) -> ChatResult:
        if not messages:
            raise ResumeValidationError(message="messages required")

        working = migrate_resume_data(resume)
        # Prime the model with the resume context, then replay the recent turns only
        history: List[Dict[str, str]] = [
            {"role": "user", "content": self._chat_context(working, job_description, bio)},
            {
                "role": "assistant",
                "content": '{"reply": "I have read your resume. What would you like to work on?", "updatedResume": null}',
            },
        ]
        history.extend(
            {"role": m.role, "content": m.content} for m in messages[-settings.MAX_CHAT_HISTORY:]
        )

        try:
            raw = await self.json_agent_manager.run(
                prompt="", system_prompt=prompt_factory.get("resume_chat"), history=history
            )
        except StrategyError as e:
            logger.warning(f"Chat reply was not JSON, returning it as plain text: {e}")
            return ChatResult(reply=(e.raw_output or str(e))[:800], updated_resume=None)
        except ProviderError as e:
            logger.error(f"Chat provider call failed: {e}", exc_info=True)
            raise ResumeParsingError(message=f"AI agent failed to answer: {e}")

        if not isinstance(raw, dict):
            return ChatResult(reply=str(raw)[:800], updated_resume=None)

        updated = raw.get("updatedResume")
        return ChatResult(
            reply=str(raw.get("reply") or "")[:4000],
            updated_resume=(
                migrate_resume_data(complete_from(updated, working)) if isinstance(updated, dict) else None
            ),
        )
