import asyncio

import pytest

from resume_forge.agent import AgentManager
from resume_forge.agent.exceptions import StrategyError
from resume_forge.agent.providers.base import Provider
from resume_forge.agent.strategies.wrapper import JSONWrapper, extract_json_object


class EchoProvider(Provider):
    def __init__(self, reply):
        self.reply = reply
        self.messages = None
        self.generation_args = None

    async def __call__(self, messages, **generation_args):
        self.messages = messages
        self.generation_args = generation_args
        return self.reply


def test_plain_json_is_parsed():
    assert extract_json_object('{"summary": "hi"}') == {"summary": "hi"}


def test_fenced_json_is_parsed():
    reply = 'Here you go:\n```json\n{"summary": "hi", "skills": []}\n```\nAnything else?'

    assert extract_json_object(reply) == {"summary": "hi", "skills": []}


def test_object_inside_prose_is_parsed():
    reply = 'Sure! {"reply": "Tightened the summary.", "updatedResume": null} Hope that helps.'

    assert extract_json_object(reply) == {"reply": "Tightened the summary.", "updatedResume": None}


def test_truncated_json_is_repaired():
    parsed = extract_json_object('{"contact": {"name": "Jane"}, "summary": "Backend eng')

    assert parsed["contact"] == {"name": "Jane"}
    assert parsed["summary"].startswith("Backend eng")


def test_reply_without_braces_raises_with_raw_output():
    with pytest.raises(StrategyError) as exc_info:
        extract_json_object("I could not find a resume in that text.")

    assert exc_info.value.raw_output == "I could not find a resume in that text."


def test_json_array_is_not_an_object():
    with pytest.raises(StrategyError):
        extract_json_object("[1, 2, 3]")


def test_wrapper_asks_provider_for_json_mode():
    provider = EchoProvider('{"ok": true}')

    result = asyncio.run(JSONWrapper()([{"role": "user", "content": "hi"}], provider, temperature=0))

    assert result == {"ok": True}
    assert provider.generation_args == {"json_mode": True, "temperature": 0}


def test_wrapper_rejects_non_text_replies():
    with pytest.raises(StrategyError):
        asyncio.run(JSONWrapper()([], EchoProvider(None)))


def test_agent_manager_orders_system_history_and_prompt():
    provider = EchoProvider('{"ok": true}')
    manager = AgentManager(strategy="json", provider=provider)
    history = [{"role": "user", "content": "earlier"}, {"role": "assistant", "content": "reply"}]

    assert asyncio.run(manager.run("now", system_prompt="be terse", history=history)) == {"ok": True}
    assert [m["role"] for m in provider.messages] == ["system", "user", "assistant", "user"]
    assert provider.messages[-1]["content"] == "now"


def test_agent_manager_rejects_unknown_strategy():
    with pytest.raises(ValueError):
        AgentManager(strategy="markdown")
