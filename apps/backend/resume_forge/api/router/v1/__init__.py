from fastapi import APIRouter

from .resume import resume_router
from .master_profile import master_profile_router
from .tailor import tailor_router


v1_router = APIRouter(prefix="/api/v1", tags=["v1"])
v1_router.include_router(resume_router, prefix="/resumes")
v1_router.include_router(master_profile_router, prefix="/master-profile")
v1_router.include_router(tailor_router)


__all__ = ["v1_router"]
