import json
import re
from typing import Any, Dict, Optional

from ..core.exceptions import MalformedAIResponse

# ```json ... ```
JSON_FENCE_RE = re.compile(r"```\s*json\s*([\s\S]*?)```", re.IGNORECASE)
# ``` ... ```
ANY_FENCE_RE = re.compile(r"```\s*([\s\S]*?)```")


def extract_json_block(text: str) -> Optional[str]:
    """
    Best-effort recovery of a JSON object embedded in a model completion.

    Tries, in order: a fence labelled json, any fence, then the span from the
    first "{" to the last "}". Returns None when nothing JSON-like is found.
    The result is not guaranteed to be valid JSON.
    """
    if not text:
        return None

    match = JSON_FENCE_RE.search(text)
    if match and match.group(1):
        return match.group(1).strip()

    match = ANY_FENCE_RE.search(text)
    if match and match.group(1):
        return match.group(1).strip()

    # Overshoots when surrounding prose itself contains braces.
    first = text.find("{")
    last = text.rfind("}")
    if first != -1 and last != -1 and last > first:
        return text[first:last + 1].strip()

    return None


def parse_json_payload(text: str) -> Dict[str, Any]:
    json_str = extract_json_block(text)
    if not json_str:
        raise MalformedAIResponse("Invalid response from AI (no JSON found)")

    try:
        parsed = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise MalformedAIResponse("Failed to parse AI response JSON", details=str(e)) from e

    if not isinstance(parsed, dict):
        raise MalformedAIResponse(
            "AI response JSON is not an object",
            details=f"got {type(parsed).__name__}",
        )

    return parsed
