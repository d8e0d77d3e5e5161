import logging
from collections.abc import Mapping
from typing import Any, Optional

from resume_forge.core import settings
from resume_forge.profile import merge_into_master, migrate_resume_data
from resume_forge.schemas.pydantic import ResumeRecord
from resume_forge.storage import KeyValueStore, StorageError

logger = logging.getLogger(__name__)


class MasterProfileService:
    """
    Reads, merges into and resets the persisted master profile.

    The read-merge-write sequence takes no lock: two writers racing on the
    same store lose one update, the last full merge result wins.
    Persistence is best-effort; a failed write is logged and the merged record
    is still returned to the caller.
    """

    def __init__(self, store: KeyValueStore, key: Optional[str] = None):
        self.store = store
        self.key = key or settings.MASTER_PROFILE_KEY

    def get_master(self) -> Optional[ResumeRecord]:
        try:
            raw: Any = self.store.get(self.key)
        except StorageError as e:
            logger.warning(f"Could not read master profile, treating it as absent: {e}")
            return None
        if not isinstance(raw, Mapping):
            if raw is not None:
                logger.warning(f"Ignoring stored master profile of type {type(raw).__name__}")
            return None
        return migrate_resume_data(raw)

    def save_master(self, record: ResumeRecord) -> bool:
        try:
            self.store.set(self.key, record.to_json_dict())
            return True
        except StorageError as e:
            logger.warning(f"Master profile not persisted: {e}")
            return False

    def merge(self, incoming: Any) -> ResumeRecord:
        """Normalise `incoming`, fold it into the stored master and persist the result."""
        merged = merge_into_master(self.get_master(), migrate_resume_data(incoming))
        self.save_master(merged)
        logger.info(
            f"Master profile now holds {len(merged.experience)} experience, "
            f"{len(merged.education)} education and {len(merged.skills)} skill categories"
        )
        return merged

    def reset(self) -> None:
        self.store.delete(self.key)
        logger.info("Master profile cleared")
