import pytest
from fastapi.testclient import TestClient

from resume_forge.api.dependencies import get_agent_manager
from resume_forge.base import create_app
from resume_forge.profile import migrate_resume_data
from resume_forge.storage import MemoryStore


class FakeAgentManager:
    """Stands in for AgentManager: returns (or raises) queued responses in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    async def run(self, prompt, system_prompt=None, history=None, **generation_args):
        self.calls.append({"prompt": prompt, "system_prompt": system_prompt, "history": history})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


MASTER_DATA = {
    "contact": {
        "name": "Jane Doe",
        "title": "Backend Engineer",
        "email": "a@x.com",
        "phone": "555-0100",
        "location": "Berlin",
        "linkedin": "",
        "github": "github.com/jane",
    },
    "summary": "Backend engineer.",
    "sectionOrder": ["summary", "experience"],
    "experience": [
        {"id": "exp-1", "company": "Acme Corp.", "role": "Engineer", "dates": "2020 - 2023", "bullets": ["Built APIs"]},
        {"id": "exp-2", "company": "Globex", "role": "Intern", "dates": "2019", "bullets": []},
    ],
    "skills": [
        {"id": "sk-1", "label": "Programming Languages", "skills": ["Python", "Go"]},
    ],
    "education": [{"id": "edu-1", "institution": "MIT", "degree": "BSc", "dates": "2015 - 2019", "details": ""}],
    "projects": [{"id": "prj-1", "name": "Portfolio Website", "description": "", "dates": "", "bullets": []}],
    "certifications": [{"id": "cert-1", "name": "AWS SAA", "issuer": "Amazon", "date": "2022", "details": ""}],
    "awards": [{"id": "aw-1", "name": "Hackathon Winner", "description": "", "date": "2021"}],
    "publications": [{"id": "pub-1", "title": "On Merging", "venue": "Blog", "date": "2023", "description": ""}],
}


@pytest.fixture
def master_record():
    return migrate_resume_data(MASTER_DATA)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def fake_agent():
    return FakeAgentManager()


@pytest.fixture
def client(store, fake_agent):
    app = create_app(store=store)
    app.dependency_overrides[get_agent_manager] = lambda: fake_agent
    with TestClient(app) as test_client:
        yield test_client
