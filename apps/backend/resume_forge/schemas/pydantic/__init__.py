from .structured_resume import (
    DEFAULT_SECTION_ORDER,
    SECTION_KEYS,
    SECTION_LABELS,
    AwardEntry,
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    PublicationEntry,
    ResumeContact,
    ResumeRecord,
    SectionKey,
    SkillCategory,
)
from .resume_actions import (
    ChatMessage,
    ChatRequest,
    ChatResult,
    HighlightedField,
    MergeMasterRequest,
    ParseResumeRequest,
    ReasoningItem,
    TailorRequest,
    TailorResult,
)

__all__ = [
    "DEFAULT_SECTION_ORDER",
    "SECTION_KEYS",
    "SECTION_LABELS",
    "SectionKey",
    "ResumeContact",
    "ResumeRecord",
    "SkillCategory",
    "ExperienceEntry",
    "EducationEntry",
    "ProjectEntry",
    "CertificationEntry",
    "AwardEntry",
    "PublicationEntry",
    "ParseResumeRequest",
    "MergeMasterRequest",
    "TailorRequest",
    "ChatMessage",
    "ChatRequest",
    "HighlightedField",
    "ReasoningItem",
    "TailorResult",
    "ChatResult",
]
