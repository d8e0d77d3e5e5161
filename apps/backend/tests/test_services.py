import asyncio

import pytest

from resume_forge.agent import ProviderError, StrategyError
from resume_forge.core import settings
from resume_forge.schemas.pydantic import ChatMessage
from resume_forge.services import (
    MasterProfileService,
    ResumeParsingError,
    ResumeService,
    ResumeValidationError,
    TailorService,
)
from resume_forge.services.resume_service import TEXT_TYPE

from .conftest import MASTER_DATA, FakeAgentManager

PARSED = {
    "contact": {"name": "Jane Doe", "email": ""},
    "summary": "Engineer.",
    "experience": [{"company": "Initech", "role": "Lead", "bullets": ["Shipped things"]}],
    "skills": {"Languages": ["Rust"]},
}


# ───────────────────────────── ResumeService ──
def test_parse_text_normalizes_model_output():
    agent = FakeAgentManager(PARSED)

    record = asyncio.run(ResumeService(agent_manager=agent).parse_text("Jane Doe\nLead at Initech"))

    assert record.experience[0].company == "Initech"
    assert record.experience[0].id
    assert record.skills[0].label == "Languages"
    assert agent.calls[0]["prompt"].endswith("Jane Doe\nLead at Initech")
    assert "JSON" in agent.calls[0]["system_prompt"]


@pytest.mark.parametrize("text", ["", "   \n\t"])
def test_parse_text_rejects_blank_input(text):
    agent = FakeAgentManager()

    with pytest.raises(ResumeValidationError):
        asyncio.run(ResumeService(agent_manager=agent).parse_text(text))
    assert agent.calls == []


def test_parse_text_truncates_long_input():
    agent = FakeAgentManager({})
    text = "x" * (settings.MAX_PARSE_INPUT_CHARS + 500)

    asyncio.run(ResumeService(agent_manager=agent).parse_text(text))

    sent = agent.calls[0]["prompt"].split("\n\n", 1)[1]
    assert len(sent) == settings.MAX_PARSE_INPUT_CHARS


@pytest.mark.parametrize("error", [ProviderError("timeout"), StrategyError("not json")])
def test_parse_text_wraps_agent_failures(error):
    service = ResumeService(agent_manager=FakeAgentManager(error))

    with pytest.raises(ResumeParsingError):
        asyncio.run(service.parse_text("Jane Doe"))


def test_parse_text_rejects_non_object_output():
    service = ResumeService(agent_manager=FakeAgentManager(["not", "a", "resume"]))

    with pytest.raises(ResumeParsingError):
        asyncio.run(service.parse_text("Jane Doe"))


def test_extract_text_decodes_plain_text():
    service = ResumeService(agent_manager=FakeAgentManager())

    assert service.extract_text("Jane Doe\n".encode(), TEXT_TYPE, "cv.txt") == "Jane Doe\n"


def test_extract_text_rejects_unsupported_and_empty_files():
    service = ResumeService(agent_manager=FakeAgentManager())

    with pytest.raises(ResumeValidationError):
        service.extract_text(b"GIF89a", "image/gif", "cv.gif")
    with pytest.raises(ResumeValidationError):
        service.extract_text(b"  \n", TEXT_TYPE, "cv.txt")


def test_parse_file_returns_text_and_record():
    service = ResumeService(agent_manager=FakeAgentManager(PARSED))

    text, record = asyncio.run(service.parse_file(b"Jane Doe", TEXT_TYPE, "cv.txt"))

    assert text == "Jane Doe"
    assert record.summary == "Engineer."


def test_load_parsed_fresh_fills_contact_and_saves_to_master(store):
    master_service = MasterProfileService(store)
    master_service.merge(MASTER_DATA)
    service = ResumeService(agent_manager=FakeAgentManager())
    parsed = asyncio.run(ResumeService(agent_manager=FakeAgentManager(PARSED)).parse_text("cv"))

    working, merged = service.load_parsed(parsed, master_service)

    assert merged is False
    assert working.contact.email == "a@x.com"
    assert [e.company for e in working.experience] == ["Initech"]
    assert [e.company for e in master_service.get_master().experience] == ["Acme Corp.", "Globex", "Initech"]


def test_load_parsed_merges_into_current_resume(store, master_record):
    master_service = MasterProfileService(store)
    service = ResumeService(agent_manager=FakeAgentManager())
    parsed = asyncio.run(ResumeService(agent_manager=FakeAgentManager(PARSED)).parse_text("cv"))

    working, merged = service.load_parsed(
        parsed, master_service, current_resume=master_record.to_json_dict(), save_to_master=False
    )

    assert merged is True
    assert [e.company for e in working.experience] == ["Acme Corp.", "Globex", "Initech"]
    assert working.contact.email == "a@x.com"
    assert master_service.get_master() is None


# ───────────────────────────── TailorService ──
def test_tailor_returns_normalized_result(master_record):
    agent = FakeAgentManager(
        {
            "tailored": {"summary": "Go backend engineer.", "experience": MASTER_DATA["experience"][:1]},
            "highlights": [
                {"path": "summary", "type": "changed"},
                {"path": "experience.0", "type": "reordered"},
                "junk",
            ],
            "reasoning": [{"section": "summary", "change": "Led with Go", "why": "JD asks for Go"}],
        }
    )

    result = asyncio.run(
        TailorService(agent_manager=agent).tailor(master_record.to_json_dict(), "Go developer", master_record)
    )

    assert result.tailored.summary == "Go backend engineer."
    assert [e.id for e in result.tailored.experience] == ["exp-1"]
    # sections the model left out are kept from the working resume
    assert result.tailored.contact == master_record.contact
    assert result.tailored.skills == master_record.skills
    assert [h.path for h in result.highlights] == ["summary"]
    assert result.reasoning[0].why == "JD asks for Go"
    assert "MASTER PROFILE" in agent.calls[0]["prompt"]


def test_tailor_truncates_job_description(master_record):
    agent = FakeAgentManager({"tailored": {}})
    jd = "y" * (settings.MAX_JOB_DESCRIPTION_CHARS + 100)

    asyncio.run(TailorService(agent_manager=agent).tailor(master_record.to_json_dict(), jd))

    assert "y" * settings.MAX_JOB_DESCRIPTION_CHARS in agent.calls[0]["prompt"]
    assert "y" * (settings.MAX_JOB_DESCRIPTION_CHARS + 1) not in agent.calls[0]["prompt"]
    assert "MASTER PROFILE" not in agent.calls[0]["prompt"]


def test_tailor_requires_job_description():
    with pytest.raises(ResumeValidationError):
        asyncio.run(TailorService(agent_manager=FakeAgentManager()).tailor({}, "  "))


@pytest.mark.parametrize("response", [{"highlights": []}, StrategyError("bad json")])
def test_tailor_fails_without_a_tailored_resume(response):
    service = TailorService(agent_manager=FakeAgentManager(response))

    with pytest.raises(ResumeParsingError):
        asyncio.run(service.tailor({}, "Go developer"))


def test_chat_returns_reply_and_updated_resume(master_record):
    agent = FakeAgentManager({"reply": "Shortened your summary.", "updatedResume": {"summary": "Short."}})
    messages = [ChatMessage(role="user", content="Make my summary shorter")]

    result = asyncio.run(
        TailorService(agent_manager=agent).chat(messages, master_record.to_json_dict(), bio="Ten years of Go")
    )

    assert result.reply == "Shortened your summary."
    assert result.updated_resume.summary == "Short."
    assert result.updated_resume.experience == master_record.experience
    history = agent.calls[0]["history"]
    assert "USER BACKGROUND" in history[0]["content"]
    assert "JOB DESCRIPTION" not in history[0]["content"]
    assert history[-1] == {"role": "user", "content": "Make my summary shorter"}


def test_chat_replays_only_recent_messages():
    agent = FakeAgentManager({"reply": "ok", "updatedResume": None})
    messages = [
        ChatMessage(role="user" if i % 2 == 0 else "assistant", content=f"turn {i}") for i in range(12)
    ]

    result = asyncio.run(TailorService(agent_manager=agent).chat(messages, {}))

    assert result.updated_resume is None
    replayed = [m["content"] for m in agent.calls[0]["history"][2:]]
    assert replayed == [f"turn {i}" for i in range(4, 12)]


def test_chat_degrades_to_plain_text_reply():
    agent = FakeAgentManager(StrategyError("no JSON", raw_output="Try quantifying your bullets."))

    result = asyncio.run(
        TailorService(agent_manager=agent).chat([ChatMessage(role="user", content="tips?")], {})
    )

    assert result.reply == "Try quantifying your bullets."
    assert result.updated_resume is None


def test_chat_requires_messages_and_wraps_provider_errors():
    with pytest.raises(ResumeValidationError):
        asyncio.run(TailorService(agent_manager=FakeAgentManager()).chat([], {}))

    service = TailorService(agent_manager=FakeAgentManager(ProviderError("down")))
    with pytest.raises(ResumeParsingError):
        asyncio.run(service.chat([ChatMessage(role="user", content="hi")], {}))
