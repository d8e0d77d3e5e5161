from typing import Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


# Controls which sections are rendered and in what order
SectionKey = Literal[
    "summary",
    "experience",
    "skills",
    "education",
    "projects",
    "certifications",
    "awards",
    "publications",
]

SECTION_LABELS: Dict[str, str] = {
    "summary": "Summary",
    "experience": "Experience",
    "skills": "Skills",
    "education": "Education",
    "projects": "Projects",
    "certifications": "Certifications",
    "awards": "Awards",
    "publications": "Publications",
}

SECTION_KEYS = tuple(SECTION_LABELS)

DEFAULT_SECTION_ORDER: List[str] = ["summary", "experience", "skills", "education"]


class ResumeContact(BaseModel):
    name: str = ""
    title: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""
    github: str = ""


class SkillCategory(BaseModel):
    id: str
    label: str = "Skills"  # e.g. "Programming Languages", "Frameworks & Tools"
    skills: List[str] = Field(default_factory=list)


class ExperienceEntry(BaseModel):
    id: str
    company: str = ""
    role: str = ""
    location: Optional[str] = None  # e.g. "London, UK" or "Remote"
    dates: str = ""
    bullets: List[str] = Field(default_factory=list)


class EducationEntry(BaseModel):
    id: str
    institution: str = ""
    degree: str = ""
    dates: str = ""
    details: str = ""


class ProjectEntry(BaseModel):
    id: str
    name: str = ""
    description: str = ""
    dates: str = ""
    bullets: List[str] = Field(default_factory=list)


class CertificationEntry(BaseModel):
    id: str
    name: str = ""
    issuer: str = ""
    date: str = ""
    details: str = ""


class AwardEntry(BaseModel):
    id: str
    name: str = ""
    description: str = ""
    date: str = ""


class PublicationEntry(BaseModel):
    id: str
    title: str = ""
    venue: str = ""
    date: str = ""
    description: str = ""


class ResumeRecord(BaseModel):
    """
    Canonical resume. Build instances through migrate_resume_data() so every
    field is present and every entry carries a unique id.
    """
    contact: ResumeContact = Field(default_factory=ResumeContact)
    summary: str = ""
    section_order: List[SectionKey] = Field(
        default_factory=lambda: list(DEFAULT_SECTION_ORDER), alias="sectionOrder"
    )
    experience: List[ExperienceEntry] = Field(default_factory=list)
    # Categorized skills, each category has a label and a list of skill strings
    skills: List[SkillCategory] = Field(default_factory=list)
    education: List[EducationEntry] = Field(default_factory=list)
    projects: List[ProjectEntry] = Field(default_factory=list)
    certifications: List[CertificationEntry] = Field(default_factory=list)
    awards: List[AwardEntry] = Field(default_factory=list)
    publications: List[PublicationEntry] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)

    def to_json_dict(self) -> Dict:
        """Wire shape (camelCase keys) used by the API and the stored master profile."""
        return self.model_dump(by_alias=True)
