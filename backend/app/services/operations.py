from dataclasses import dataclass
from typing import Optional, Tuple

from ..prompts.templates import OPTIMIZE_PROMPT, SCORE_PROMPT


@dataclass(frozen=True)
class Operation:
    """
    Everything that differs between the two endpoints.

    response_fields selects which top-level keys of the AI payload are
    returned; None returns the payload unfiltered.
    """

    name: str
    instructions: str
    required_fields: Tuple[str, ...]
    response_fields: Optional[Tuple[str, ...]] = None


OPTIMIZE = Operation(
    name="optimize",
    instructions=OPTIMIZE_PROMPT,
    required_fields=("optimizedHtml", "changes"),
    response_fields=("optimizedHtml", "changes"),
)

SCORE = Operation(
    name="ats-score",
    instructions=SCORE_PROMPT,
    required_fields=("overallScore", "scoreBreakdown", "detailedFeedback"),
)
