"""
Schema normalisation for resume records.

Whatever the model returns, or whatever an older version of the app stored,
goes through migrate_resume_data() before anything else touches it. The
function is total: wrong types are coerced to the nearest empty value and
nothing is ever rejected.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Set, Type

from pydantic import BaseModel

from resume_forge.schemas.pydantic.structured_resume import (
    DEFAULT_SECTION_ORDER,
    SECTION_KEYS,
    AwardEntry,
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    PublicationEntry,
    ResumeContact,
    ResumeRecord,
    SkillCategory,
)
from .ids import generate_id

LEGACY_SKILLS_ID = "skills-general"
DEFAULT_SKILLS_LABEL = "Skills"

# list name -> (model, plain text fields, string list fields)
ENTITY_FIELDS: Dict[str, tuple] = {
    "experience": (ExperienceEntry, ("company", "role", "dates"), ("bullets",)),
    "education": (EducationEntry, ("institution", "degree", "dates", "details"), ()),
    "projects": (ProjectEntry, ("name", "description", "dates"), ("bullets",)),
    "certifications": (CertificationEntry, ("name", "issuer", "date", "details"), ()),
    "awards": (AwardEntry, ("name", "description", "date"), ()),
    "publications": (PublicationEntry, ("title", "venue", "date", "description"), ()),
}


# ───────────────────────────────────────── coercion helpers ──
def to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def to_text_list(value: Any) -> List[str]:
    if isinstance(value, str):
        return [value] if value else []
    if not isinstance(value, (list, tuple)):
        return []
    return [text for text in (to_text(item) for item in value if item) if text]


def unique_skills(skills: List[str]) -> List[str]:
    """Drop case-insensitive duplicates, first spelling wins."""
    seen: Set[str] = set()
    out = []
    for skill in skills:
        key = skill.lower()
        if key not in seen:
            seen.add(key)
            out.append(skill)
    return out


def assign_id(raw_id: Any, taken: Set[str]) -> str:
    entry_id = to_text(raw_id).strip()
    while not entry_id or entry_id in taken:
        entry_id = generate_id()
    taken.add(entry_id)
    return entry_id


# ───────────────────────────────────────── per-field migration ──
def migrate_contact(raw: Any) -> ResumeContact:
    if not isinstance(raw, Mapping):
        return ResumeContact()
    return ResumeContact(**{field: to_text(raw.get(field)) for field in ResumeContact.model_fields})


def migrate_section_order(raw: Any) -> List[str]:
    if not isinstance(raw, (list, tuple)):
        return list(DEFAULT_SECTION_ORDER)
    order: List[str] = []
    for key in raw:
        if isinstance(key, str) and key in SECTION_KEYS and key not in order:
            order.append(key)
    return order


def migrate_skills(raw: Any) -> List[SkillCategory]:
    """
    Convert the older skill shapes to SkillCategory objects:
      * ["Python", "Go"]                      -> one "Skills" category
      * {"Languages": ["Python"], ...}        -> one category per key
      * [{"id", "label", "skills"}, ...]      -> validated as is
    """
    if isinstance(raw, Mapping):
        raw = [{"label": label, "skills": skills} for label, skills in raw.items()]
    if not isinstance(raw, (list, tuple)) or not raw:
        return []

    if isinstance(raw[0], str):
        return [
            SkillCategory(
                id=LEGACY_SKILLS_ID,
                label=DEFAULT_SKILLS_LABEL,
                skills=unique_skills(to_text_list([s for s in raw if isinstance(s, str)])),
            )
        ]

    taken: Set[str] = set()
    categories = []
    for cat in raw:
        if not isinstance(cat, Mapping):
            continue
        categories.append(
            SkillCategory(
                id=assign_id(cat.get("id"), taken),
                label=to_text(cat.get("label")) or DEFAULT_SKILLS_LABEL,
                skills=unique_skills(to_text_list(cat.get("skills"))),
            )
        )
    return categories


def migrate_entries(
    raw: Any,
    model: Type[BaseModel],
    text_fields: tuple,
    list_fields: tuple,
) -> List[BaseModel]:
    if not isinstance(raw, (list, tuple)):
        return []
    taken: Set[str] = set()
    entries = []
    for item in raw:
        if not isinstance(item, Mapping):
            continue
        values: Dict[str, Any] = {"id": assign_id(item.get("id"), taken)}
        for field in text_fields:
            values[field] = to_text(item.get(field))
        for field in list_fields:
            values[field] = to_text_list(item.get(field))
        if model is ExperienceEntry:
            location = item.get("location")
            values["location"] = to_text(location) if location is not None else None
        entries.append(model(**values))
    return entries


def migrate_resume_data(raw: Any) -> ResumeRecord:
    """Return a complete canonical ResumeRecord for any input. Never raises."""
    if isinstance(raw, ResumeRecord):
        raw = raw.to_json_dict()
    if not isinstance(raw, Mapping):
        raw = {}

    section_order = raw.get("sectionOrder", raw.get("section_order"))
    data: Dict[str, Any] = {
        "contact": migrate_contact(raw.get("contact")),
        "summary": to_text(raw.get("summary")),
        "section_order": migrate_section_order(section_order),
        "skills": migrate_skills(raw.get("skills")),
    }
    for name, (model, text_fields, list_fields) in ENTITY_FIELDS.items():
        data[name] = migrate_entries(raw.get(name), model, text_fields, list_fields)
    return ResumeRecord(**data)


def create_empty_resume() -> ResumeRecord:
    return migrate_resume_data({})


def complete_from(partial: Optional[Mapping], fallback: ResumeRecord) -> Dict[str, Any]:
    """
    Fill the top-level keys a model response left out with the values of the
    resume it was asked to rewrite, so an omitted section is kept rather than
    emptied by the normaliser.
    """
    completed = dict(fallback.to_json_dict())
    if isinstance(partial, Mapping):
        completed.update({key: value for key, value in partial.items() if value is not None})
    return completed
