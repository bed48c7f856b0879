from typing import Any, Dict, Iterable, List

from ..core.exceptions import IncompleteAIResponse


def is_missing(value: Any) -> bool:
    """
    A field counts as missing when it is absent, null, or the empty string.
    Numbers and booleans are always present, so a score of 0 is valid;
    empty lists and objects are present too.
    """
    return value is None or value == ""


def missing_fields(payload: Dict[str, Any], required: Iterable[str]) -> List[str]:
    return [name for name in required if is_missing(payload.get(name))]


def ensure_required_fields(payload: Dict[str, Any], required: Iterable[str]) -> Dict[str, Any]:
    missing = missing_fields(payload, required)
    if missing:
        raise IncompleteAIResponse(
            "AI response missing required fields",
            details="missing: " + ", ".join(missing),
        )
    return payload
