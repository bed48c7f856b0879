import base64
from dataclasses import dataclass
from typing import Any, Dict, List, Union

from ..prompts.templates import JOB_DESCRIPTION_TEMPLATE, RESUME_PREAMBLE
from ..schemas.ats import ResumeUpload
from .operations import Operation


@dataclass(frozen=True)
class TextPart:
    text: str

    def to_content_block(self) -> Dict[str, Any]:
        return {"type": "text", "text": self.text}


@dataclass(frozen=True)
class InlineDataPart:
    """Raw file bytes sent next to the instructions. Encoded only on the wire."""

    data: bytes
    mime_type: str

    def to_content_block(self) -> Dict[str, Any]:
        return {
            "type": "media",
            "mime_type": self.mime_type,
            "data": base64.b64encode(self.data).decode("ascii"),
        }


PromptPart = Union[TextPart, InlineDataPart]


def build_prompt_parts(
    operation: Operation,
    job_description: str,
    resume: ResumeUpload,
) -> List[PromptPart]:
    """
    Assemble the ordered parts of a single-turn request:
    instructions, job description, resume preamble, resume bytes.
    """
    return [
        TextPart(operation.instructions),
        TextPart(JOB_DESCRIPTION_TEMPLATE.format(job_description=job_description)),
        TextPart(RESUME_PREAMBLE),
        InlineDataPart(data=resume.content, mime_type=resume.content_type),
    ]
