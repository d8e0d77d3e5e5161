from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field

from .structured_resume import ResumeRecord


class ParseResumeRequest(BaseModel):
    text: str
    # Working resume to merge the parse into; when absent the parse is loaded fresh
    current_resume: Optional[Dict[str, Any]] = Field(None, alias="currentResume")
    save_to_master: bool = Field(True, alias="saveToMaster")

    model_config = ConfigDict(populate_by_name=True)


class MergeMasterRequest(BaseModel):
    resume: Dict[str, Any]


class TailorRequest(BaseModel):
    resume: Dict[str, Any]
    job_description: str = Field(..., alias="jobDescription")
    use_master_profile: bool = Field(True, alias="useMasterProfile")

    model_config = ConfigDict(populate_by_name=True)


class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatMessage]
    resume: Dict[str, Any]
    job_description: str = Field("", alias="jobDescription")
    bio: str = ""

    model_config = ConfigDict(populate_by_name=True)


class HighlightedField(BaseModel):
    path: str
    type: Literal["changed", "added", "removed"]


class ReasoningItem(BaseModel):
    section: str = ""
    change: str = ""
    why: str = ""
    coaching_note: Optional[str] = Field(None, alias="coachingNote")

    model_config = ConfigDict(populate_by_name=True)


class TailorResult(BaseModel):
    tailored: ResumeRecord
    highlights: List[HighlightedField] = Field(default_factory=list)
    reasoning: List[ReasoningItem] = Field(default_factory=list)


class ChatResult(BaseModel):
    reply: str
    updated_resume: Optional[ResumeRecord] = Field(None, alias="updatedResume")

    model_config = ConfigDict(populate_by_name=True)
