import json
import logging
import re
from typing import Any, Dict, List

from json_repair import repair_json

from .base import Strategy
from ..providers.base import Message, Provider
from ..exceptions import StrategyError


logger = logging.getLogger(__name__)

# Precompiled for performance; matches ```json ... ``` or ``` ... ``` fenced blocks
FENCE_PATTERN = re.compile(r"```(?:json)?\s*([\s\S]*?)```", re.IGNORECASE)


def _loads_object(candidate: str) -> Dict[str, Any] | None:
    try:
        parsed = json.loads(candidate)
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, dict) else None


def extract_json_object(response_text: str) -> Dict[str, Any]:
    """
    Pull a JSON object out of a model reply. Tries, in order: the whole text,
    each fenced code block, the outermost {...} span, then json_repair on that
    span (or on the whole text when there are no braces).
    """
    response_text = (response_text or "").strip()

    # 1) Try direct parse first
    parsed = _loads_object(response_text)
    if parsed is not None:
        return parsed

    # 2) If wrapped in fenced code blocks, return the first valid JSON object
    for fence_match in FENCE_PATTERN.finditer(response_text):
        parsed = _loads_object(fence_match.group(1).strip())
        if parsed is not None:
            return parsed

    # 3) Fallback: the largest JSON-looking object block { ... }
    obj_start, obj_end = response_text.find("{"), response_text.rfind("}")
    if obj_start != -1 and obj_end > obj_start:
        candidate = response_text[obj_start : obj_end + 1].replace("```", "").strip()
        parsed = _loads_object(candidate)
        if parsed is not None:
            return parsed
        if candidate.count("{") != candidate.count("}"):
            # Unbalanced span: the reply was cut off, repair from the first brace to the end
            candidate = response_text[obj_start:].replace("```", "").strip()
    elif obj_start == -1:
        logger.error("provider response contained no JSON object braces: %s", response_text[:2000])
        raise StrategyError(
            "JSON parsing error: no JSON object detected in provider response", raw_output=response_text
        )
    else:
        # Opening brace without a closing one, typically a reply cut off at the token limit
        candidate = response_text[obj_start:]

    # 4) Last resort: repair truncated / slightly malformed JSON
    logger.warning("Malformed JSON detected; attempting json_repair.")
    parsed = _loads_object(repair_json(candidate))
    if parsed is not None:
        return parsed

    _err_preview = response_text if len(response_text) <= 2000 else response_text[:2000] + "... (truncated)"
    logger.error(
        "provider returned non-JSON. failed to parse candidate blocks - response: %s",
        _err_preview,
    )
    raise StrategyError("JSON parsing error: failed to parse candidate JSON blocks", raw_output=response_text)


class JSONWrapper(Strategy):
    async def __call__(
        self, messages: List[Message], provider: Provider, **generation_args: Any
    ) -> Dict[str, Any]:
        """
        Ask the provider for JSON and return the decoded object.
        """
        response = await provider(messages, json_mode=True, **generation_args)

        if not isinstance(response, str):
            logger.error(f"Unexpected response type from provider: {type(response)}")
            raise StrategyError("Unexpected response type from provider.")

        logger.debug(f"provider response text: {response}")
        return extract_json_object(response)
