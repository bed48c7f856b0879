import logging
from typing import Any, Dict, Optional

from ..core.exceptions import ValidationError
from ..schemas.ats import ALLOWED_MIME_TYPES, ResumeUpload
from ..workflows.ats_graph import build_ats_graph
from .operations import Operation

logger = logging.getLogger(__name__)

MEGABYTE = 1024 * 1024


def format_size_limit(max_bytes: int) -> str:
    if max_bytes >= MEGABYTE and max_bytes % MEGABYTE == 0:
        return f"{max_bytes // MEGABYTE} MB"
    if max_bytes >= MEGABYTE:
        return f"{max_bytes / MEGABYTE:.1f} MB"
    return f"{max_bytes} bytes"


def validate_request(
    job_description: Optional[str],
    resume: Optional[ResumeUpload],
    max_upload_bytes: int,
) -> str:
    """
    Check the inputs before anything is sent to the AI.
    Returns the trimmed job description.
    """
    job_description = (job_description or "").strip()
    if not job_description:
        raise ValidationError("Job description is required")

    if resume is None or resume.size == 0:
        raise ValidationError("Resume file is required")

    if resume.content_type not in ALLOWED_MIME_TYPES:
        raise ValidationError(
            "Only PDF and DOC/DOCX files are allowed",
            details=f"received {resume.content_type or 'unknown'}",
        )

    if resume.size > max_upload_bytes:
        raise ValidationError(
            f"Resume file exceeds the {format_size_limit(max_upload_bytes)} limit"
        )

    return job_description


def run_ats_operation(
    operation: Operation,
    job_description: Optional[str],
    resume: Optional[ResumeUpload],
    gateway,
    max_upload_bytes: int,
) -> Dict[str, Any]:
    """
    Validate, prompt, call the model, extract and check its JSON.
    Raises an ATSServiceError subclass on any expected failure.
    """
    job_description = validate_request(job_description, resume, max_upload_bytes)

    logger.info(
        f"[{operation.name}] {resume.filename or 'resume'} "
        f"({resume.content_type}, {resume.size} bytes)"
    )

    final_state = build_ats_graph().invoke(
        {
            "operation": operation,
            "job_description": job_description,
            "resume": resume,
        },
        {"configurable": {"gateway": gateway}},
    )
    return final_state["result"]
