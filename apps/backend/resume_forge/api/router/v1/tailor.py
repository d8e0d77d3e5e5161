import logging
from uuid import uuid4

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from resume_forge.schemas.pydantic import ChatRequest, TailorRequest
from resume_forge.services import (
    MasterProfileService,
    ResumeParsingError,
    ResumeValidationError,
    TailorService,
)
from ...dependencies import get_master_profile_service, get_tailor_service

tailor_router = APIRouter()
logger = logging.getLogger(__name__)


@tailor_router.post("/tailor", summary="Rewrite the working resume against a job description")
async def tailor_resume(
    request: Request,
    payload: TailorRequest,
    tailor_service: TailorService = Depends(get_tailor_service),
    master_service: MasterProfileService = Depends(get_master_profile_service),
):
    request_id = getattr(request.state, "request_id", str(uuid4()))
    master = master_service.get_master() if payload.use_master_profile else None
    logger.info(f"[{request_id}] Tailoring resume (master profile: {'yes' if master else 'no'})")

    try:
        result = await tailor_service.tailor(
            resume=payload.resume,
            job_description=payload.job_description,
            master_profile=master,
        )
    except ResumeValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except ResumeParsingError as e:
        logger.error(f"[{request_id}] Tailoring failed: {e.message}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

    return JSONResponse(
        content={"request_id": request_id, **result.model_dump(by_alias=True)},
        headers={"X-Request-ID": request_id},
    )


@tailor_router.post("/chat", summary="Ask the resume coach; may return an updated resume")
async def chat(
    request: Request,
    payload: ChatRequest,
    tailor_service: TailorService = Depends(get_tailor_service),
):
    request_id = getattr(request.state, "request_id", str(uuid4()))
    logger.info(f"[{request_id}] Chat turn with {len(payload.messages)} messages")

    try:
        result = await tailor_service.chat(
            messages=payload.messages,
            resume=payload.resume,
            job_description=payload.job_description,
            bio=payload.bio,
        )
    except ResumeValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except ResumeParsingError as e:
        logger.error(f"[{request_id}] Chat failed: {e.message}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

    return JSONResponse(
        content={"request_id": request_id, **result.model_dump(by_alias=True)},
        headers={"X-Request-ID": request_id},
    )
