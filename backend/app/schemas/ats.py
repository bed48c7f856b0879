from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List


ALLOWED_MIME_TYPES = frozenset({
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
})


class ResumeUpload(BaseModel):
    """An uploaded resume held in memory for the duration of one request."""

    model_config = ConfigDict(frozen=True)

    filename: Optional[str] = None
    content_type: str
    content: bytes = Field(..., repr=False)

    @property
    def size(self) -> int:
        return len(self.content)


# Response bodies below document the API in OpenAPI only.
# Routes return the validated AI payload directly.

class ChangesSummary(BaseModel):
    keywordsAdded: List[str] = []
    sectionsImproved: List[str] = []
    formattingAdjustments: List[str] = []
    rationale: str = ""


class OptimizeResponse(BaseModel):
    optimizedHtml: str
    changes: ChangesSummary


class ScoreBreakdown(BaseModel):
    keywordMatch: float
    formatting: float
    contentRelevance: float
    structure: float


class KeywordAnalysis(BaseModel):
    matched: List[str] = []
    missing: List[str] = []
    suggested: List[str] = []


class DetailedFeedback(BaseModel):
    strengths: List[str] = []
    weaknesses: List[str] = []
    keywordAnalysis: KeywordAnalysis
    formattingIssues: List[str] = []
    recommendations: List[str] = []


class ScoreResponse(BaseModel):
    overallScore: float
    scoreBreakdown: ScoreBreakdown
    detailedFeedback: DetailedFeedback
    atsCompatibility: Optional[str] = None


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
