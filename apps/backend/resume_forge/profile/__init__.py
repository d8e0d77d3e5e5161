from .ids import generate_id
from .identity import COMPARATORS, normalize_key
from .migration import complete_from, create_empty_resume, migrate_resume_data
from .merge import (
    fill_contact_from_master,
    merge_by_identity,
    merge_into_master,
    merge_skill_categories,
)
from .samples import create_sample_resume

__all__ = [
    "generate_id",
    "normalize_key",
    "COMPARATORS",
    "migrate_resume_data",
    "create_empty_resume",
    "create_sample_resume",
    "complete_from",
    "merge_by_identity",
    "merge_skill_categories",
    "merge_into_master",
    "fill_contact_from_master",
]
