"""
Master profile merge engine.

The master profile is an append-only superset of every resume the user has
loaded. Merging never drops, reorders or edits what the master already holds:
new entries are appended, matched entries are discarded whole (no field-level
reconciliation inside a matched pair), contact details are only filled in or
refreshed, never blanked.

All functions here are pure: inputs are never mutated, a new record is returned.
"""
from typing import Callable, List, Optional, Sequence, Set, TypeVar

from pydantic import BaseModel

from resume_forge.schemas.pydantic.structured_resume import ResumeRecord, SkillCategory
from .identity import COMPARATORS, same_skill_label
from .migration import assign_id

T = TypeVar("T", bound=BaseModel)


def _claim_id(entry: T, taken: Set[str]) -> T:
    """Keep the entry's id unless the result list already uses it."""
    if entry.id and entry.id not in taken:
        taken.add(entry.id)
        return entry
    return entry.model_copy(update={"id": assign_id(None, taken)})


def merge_by_identity(
    master: Sequence[T],
    incoming: Sequence[T],
    is_same: Callable[[T, T], bool],
) -> List[T]:
    """
    Copy of `master` followed by each `incoming` entry that matches nothing
    already in the result. O(len(master) * len(incoming)) comparisons.
    """
    result = list(master)
    taken = {entry.id for entry in result}
    for entry in incoming:
        if any(is_same(existing, entry) for existing in result):
            continue
        result.append(_claim_id(entry, taken))
    return result


def merge_skill_categories(
    master: Sequence[SkillCategory], incoming: Sequence[SkillCategory]
) -> List[SkillCategory]:
    """
    Same label (case and punctuation insensitive) -> union the skills into the
    master category, new ones appended at the end. New label -> append the
    incoming category.
    """
    merged = [cat.model_copy(update={"skills": list(cat.skills)}) for cat in master]
    taken = {cat.id for cat in merged}

    for in_cat in incoming:
        matches = [cat for cat in merged if same_skill_label(cat, in_cat)]
        if not matches:
            merged.append(_claim_id(in_cat.model_copy(update={"skills": list(in_cat.skills)}), taken))
            continue

        existing = next((cat for cat in matches if cat.id == in_cat.id), matches[0])
        seen = {skill.lower() for skill in existing.skills}
        for skill in in_cat.skills:
            if skill.lower() not in seen:
                existing.skills.append(skill)
                seen.add(skill.lower())

    return merged


def merge_into_master(master: Optional[ResumeRecord], incoming: ResumeRecord) -> ResumeRecord:
    """
    Fold a newly parsed (already normalised) resume into the master profile.
    The first parse ever becomes the master as is.
    """
    if master is None:
        return incoming

    contact = master.contact.model_copy(
        update={field: value for field, value in incoming.contact.model_dump().items() if value}
    )

    section_order = list(master.section_order)
    for key in incoming.section_order:
        if key not in section_order:
            section_order.append(key)

    entity_lists = {
        name: merge_by_identity(getattr(master, name), getattr(incoming, name), is_same)
        for name, is_same in COMPARATORS.items()
    }

    return ResumeRecord(
        contact=contact,
        summary=incoming.summary or master.summary,
        section_order=section_order,
        skills=merge_skill_categories(master.skills, incoming.skills),
        **entity_lists,
    )


def fill_contact_from_master(parsed: ResumeRecord, master: Optional[ResumeRecord]) -> ResumeRecord:
    """Fill the empty contact fields of `parsed` from the master profile."""
    if master is None:
        return parsed

    filled = {
        field: value
        for field, value in master.contact.model_dump().items()
        if value and not getattr(parsed.contact, field)
    }
    if not filled:
        return parsed
    return parsed.model_copy(update={"contact": parsed.contact.model_copy(update=filled)})
