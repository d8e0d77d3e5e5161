from fastapi import Depends, Request

from resume_forge.agent import AgentManager
from resume_forge.services import MasterProfileService, ResumeService, TailorService
from resume_forge.storage import KeyValueStore


def get_store(request: Request) -> KeyValueStore:
    return request.app.state.store


def get_agent_manager() -> AgentManager:
    return AgentManager(strategy="json")


def get_master_profile_service(store: KeyValueStore = Depends(get_store)) -> MasterProfileService:
    return MasterProfileService(store)


def get_resume_service(agent_manager: AgentManager = Depends(get_agent_manager)) -> ResumeService:
    return ResumeService(agent_manager=agent_manager)


def get_tailor_service(agent_manager: AgentManager = Depends(get_agent_manager)) -> TailorService:
    return TailorService(agent_manager=agent_manager)
