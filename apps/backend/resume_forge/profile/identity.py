"""
Fuzzy identity rules: do two entries of the same kind describe the same
real-world item?

Only the fields a parser is least likely to rephrase are compared, after
lower-casing and dropping everything that is not an ASCII letter or digit.
"Acme Corp." and "acme corp" match; "Acme Corporation" does not.
"""
import re

from resume_forge.schemas.pydantic.structured_resume import (
    AwardEntry,
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    PublicationEntry,
    SkillCategory,
)

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def normalize_key(value: str) -> str:
    return _NON_ALNUM.sub("", (value or "").lower())


def same_experience(a: ExperienceEntry, b: ExperienceEntry) -> bool:
    return normalize_key(a.company) == normalize_key(b.company) and normalize_key(
        a.role
    ) == normalize_key(b.role)


def same_education(a: EducationEntry, b: EducationEntry) -> bool:
    return normalize_key(a.institution) == normalize_key(b.institution)


def same_project(a: ProjectEntry, b: ProjectEntry) -> bool:
    return normalize_key(a.name) == normalize_key(b.name)


def same_certification(a: CertificationEntry, b: CertificationEntry) -> bool:
    return normalize_key(a.name) == normalize_key(b.name)


def same_award(a: AwardEntry, b: AwardEntry) -> bool:
    return normalize_key(a.name) == normalize_key(b.name)


def same_publication(a: PublicationEntry, b: PublicationEntry) -> bool:
    return normalize_key(a.title) == normalize_key(b.title)


def same_skill_label(a: SkillCategory, b: SkillCategory) -> bool:
    return normalize_key(a.label) == normalize_key(b.label)


# list name on ResumeRecord -> comparator
COMPARATORS = {
    "experience": same_experience,
    "education": same_education,
    "projects": same_project,
    "certifications": same_certification,
    "awards": same_award,
    "publications": same_publication,
}
