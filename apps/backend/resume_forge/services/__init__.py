from .resume_service import ResumeService
from .master_profile_service import MasterProfileService
from .tailor_service import TailorService
from .exceptions import (
    ResumeParsingError,
    ResumeValidationError,
)

__all__ = [
    "ResumeService",
    "MasterProfileService",
    "TailorService",
    "ResumeParsingError",
    "ResumeValidationError",
]
