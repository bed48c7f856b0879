import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from ...core.config import Settings, get_settings
from ...core.exceptions import ATSServiceError, UnexpectedError
from ...core.llm import GeminiGateway
from ...schemas.ats import ErrorResponse, OptimizeResponse, ResumeUpload, ScoreResponse
from ...services.ats_service import run_ats_operation
from ...services.operations import OPTIMIZE, SCORE, Operation
from ..dependencies import get_gateway

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["ATS"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid job description or resume file"},
    500: {"model": ErrorResponse, "description": "Missing credential or unexpected error"},
    502: {"model": ErrorResponse, "description": "AI provider failed or returned unusable output"},
}


def read_upload(upload: Optional[UploadFile], max_upload_bytes: int) -> Optional[ResumeUpload]:
    """Read at most one byte past the cap so oversize files are detected without buffering them whole."""
    if upload is None:
        return None
    content = upload.file.read(max_upload_bytes + 1)
    return ResumeUpload(
        filename=upload.filename,
        content_type=upload.content_type or "",
        content=content,
    )


def handle_ats_request(
    operation: Operation,
    job_description: Optional[str],
    upload: Optional[UploadFile],
    settings: Settings,
    gateway: GeminiGateway,
):
    try:
        resume = read_upload(upload, settings.max_upload_bytes)
        return run_ats_operation(
            operation,
            job_description,
            resume,
            gateway,
            max_upload_bytes=settings.max_upload_bytes,
        )
    except ATSServiceError as e:
        logger.warning(f"[{operation.name}] {e.status_code} {e.message} {e.details or ''}".rstrip())
        return JSONResponse(status_code=e.status_code, content=e.to_payload())
    except Exception as e:
        logger.exception(f"[{operation.name}] Unexpected error")
        error = UnexpectedError.from_exception(e)
        return JSONResponse(status_code=error.status_code, content=error.to_payload())


@router.post(
    "/optimize",
    responses={200: {"model": OptimizeResponse}, **ERROR_RESPONSES},
)
def optimize_resume(
    job_description: Optional[str] = Form(None, alias="jobDescription"),
    resume: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
    gateway: GeminiGateway = Depends(get_gateway),
):
    return handle_ats_request(OPTIMIZE, job_description, resume, settings, gateway)


@router.post(
    "/ats-score",
    responses={200: {"model": ScoreResponse}, **ERROR_RESPONSES},
)
def score_resume(
    job_description: Optional[str] = Form(None, alias="jobDescription"),
    resume: Optional[UploadFile] = File(None),
    settings: Settings = Depends(get_settings),
    gateway: GeminiGateway = Depends(get_gateway),
):
    return handle_ats_request(SCORE, job_description, resume, settings, gateway)
