from typing import Any, Dict, Optional


class ATSServiceError(Exception):
    """
    Base class for every failure the API reports to its caller.
    Subclasses fix the HTTP status; the message is shown to the user as-is.
    """

    status_code: int = 500

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class ValidationError(ATSServiceError):
    """Bad or missing input. Raised before the AI is ever called."""

    status_code = 400


class ConfigurationError(ATSServiceError):
    """The server is missing something it needs, e.g. the AI credential."""

    status_code = 500


class UpstreamError(ATSServiceError):
    """The AI provider call itself failed (network, auth, quota, timeout)."""

    status_code = 502


class MalformedAIResponse(ATSServiceError):
    """No parseable JSON object could be located in the completion."""

    status_code = 502


class IncompleteAIResponse(ATSServiceError):
    """The completion parsed but lacks fields the operation requires."""

    status_code = 502


class UnexpectedError(ATSServiceError):
    status_code = 500

    @classmethod
    def from_exception(cls, exc: Exception) -> "UnexpectedError":
        return cls("Server error", details=str(exc))
