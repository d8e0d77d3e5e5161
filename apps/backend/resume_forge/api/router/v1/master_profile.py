import logging
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from resume_forge.schemas.pydantic import MergeMasterRequest
from resume_forge.services import MasterProfileService
from resume_forge.storage import StorageError
from ...dependencies import get_master_profile_service

master_profile_router = APIRouter()
logger = logging.getLogger(__name__)


@master_profile_router.get("", summary="Get the accumulated master profile (null when none exists)")
async def get_master_profile(
    request: Request,
    master_service: MasterProfileService = Depends(get_master_profile_service),
):
    request_id = getattr(request.state, "request_id", str(uuid4()))
    master = master_service.get_master()
    return JSONResponse(
        content={"request_id": request_id, "master": master.to_json_dict() if master else None},
        headers={"X-Request-ID": request_id},
    )


@master_profile_router.post("/merge", summary="Merge a resume into the master profile")
async def merge_into_master_profile(
    request: Request,
    payload: MergeMasterRequest,
    master_service: MasterProfileService = Depends(get_master_profile_service),
):
    request_id = getattr(request.state, "request_id", str(uuid4()))
    logger.info(f"[{request_id}] Merging resume into master profile")
    master = master_service.merge(payload.resume)
    return JSONResponse(
        content={"request_id": request_id, "master": master.to_json_dict()},
        headers={"X-Request-ID": request_id},
    )


@master_profile_router.delete("", summary="Clear the master profile")
async def reset_master_profile(
    request: Request,
    master_service: MasterProfileService = Depends(get_master_profile_service),
):
    request_id = getattr(request.state, "request_id", str(uuid4()))
    try:
        master_service.reset()
    except StorageError as e:
        logger.error(f"[{request_id}] Could not clear master profile: {e}")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Master profile store is unavailable",
        )
    return JSONResponse(
        content={"request_id": request_id, "message": "Master profile cleared"},
        headers={"X-Request-ID": request_id},
    )
