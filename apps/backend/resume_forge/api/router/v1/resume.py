import logging
import traceback
from uuid import uuid4
from fastapi.responses import JSONResponse
from fastapi import (
    APIRouter,
    File,
    Form,
    UploadFile,
    HTTPException,
    Depends,
    Request,
    status,
)

from resume_forge.core import settings
from resume_forge.profile import create_empty_resume, create_sample_resume
from resume_forge.schemas.pydantic import ParseResumeRequest
from resume_forge.services import (
    MasterProfileService,
    ResumeService,
    ResumeParsingError,
    ResumeValidationError,
)
from resume_forge.services.resume_service import ALLOWED_CONTENT_TYPES
from ...dependencies import get_master_profile_service, get_resume_service

resume_router = APIRouter()
logger = logging.getLogger(__name__)


@resume_router.post(
    "/parse",
    summary="Structure pasted resume text and merge it into the working resume and master profile",
)
async def parse_resume_text(
    request: Request,
    payload: ParseResumeRequest,
    resume_service: ResumeService = Depends(get_resume_service),
    master_service: MasterProfileService = Depends(get_master_profile_service),
):
    """
    Parses `text` with the LLM. When `currentResume` is given the parse is
    merged into it, otherwise empty contact fields are filled from the master
    profile. With `saveToMaster` (default) the result is also merged into the
    master profile.
    """
    request_id = getattr(request.state, "request_id", str(uuid4()))
    logger.info(f"[{request_id}] Parsing pasted resume text ({len(payload.text)} chars)")

    try:
        parsed = await resume_service.parse_text(payload.text)
        working, merged = resume_service.load_parsed(
            parsed,
            master_service,
            current_resume=payload.current_resume,
            save_to_master=payload.save_to_master,
        )
    except ResumeValidationError as e:
        logger.warning(f"[{request_id}] Resume validation failed: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except ResumeParsingError as e:
        logger.error(f"[{request_id}] Resume parsing failed: {e.message}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

    logger.info(f"[{request_id}] Resume parsed successfully (merged={merged}).")
    return JSONResponse(
        content={"request_id": request_id, "resume": working.to_json_dict(), "merged": merged},
        headers={"X-Request-ID": request_id},
    )


@resume_router.post(
    "/upload",
    summary="Upload a resume in PDF, DOCX or TXT format, parse it and merge it into the master profile",
)
async def upload_resume(
    request: Request,
    file: UploadFile = File(...),
    save_to_master: bool = Form(True),
    resume_service: ResumeService = Depends(get_resume_service),
    master_service: MasterProfileService = Depends(get_master_profile_service),
):
    request_id = getattr(request.state, "request_id", str(uuid4()))
    logger.info(f"[{request_id}] Received resume upload: {file.filename}")

    if file.content_type not in ALLOWED_CONTENT_TYPES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid file type. Only PDF, DOCX and TXT files are allowed.",
        )

    max_size = settings.MAX_UPLOAD_BYTES
    file_size = getattr(file, "size", None)
    if file_size and file_size > max_size:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File size exceeds maximum allowed size of {max_size / (1024 * 1024):.1f}MB.",
        )

    file_bytes = await file.read()
    if not file_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Empty file. Please upload a valid file.",
        )

    # Verify size after reading
    if len(file_bytes) > max_size:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File size exceeds maximum allowed size of {max_size / (1024 * 1024):.1f}MB.",
        )

    try:
        _, parsed = await resume_service.parse_file(
            file_bytes=file_bytes,
            file_type=file.content_type,
            filename=file.filename,
        )
        working, _ = resume_service.load_parsed(parsed, master_service, save_to_master=save_to_master)
    except ResumeValidationError as e:
        logger.warning(f"[{request_id}] Resume validation failed for {file.filename}: {e.message}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        )
    except ResumeParsingError as e:
        logger.error(f"[{request_id}] Resume parsing failed for {file.filename}: {e.message}")
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)
    except Exception as e:
        logger.error(
            f"[{request_id}] Error processing file {file.filename}: {str(e)} - traceback: {traceback.format_exc()}"
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred while processing the resume. Please try again.",
        )

    return JSONResponse(
        content={
            "message": f"File {file.filename} parsed successfully.",
            "request_id": request_id,
            "resume": working.to_json_dict(),
            "merged": False,
        },
        headers={"X-Request-ID": request_id},
    )


@resume_router.get("/empty", summary="A blank resume with every section present")
async def get_empty_resume():
    return {"resume": create_empty_resume().to_json_dict()}


@resume_router.get("/sample", summary="A fully populated demo resume")
async def get_sample_resume():
    return {"resume": create_sample_resume().to_json_dict()}
