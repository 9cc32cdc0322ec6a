"""Error taxonomy shared by services, coordinators, and the UI."""

from enum import Enum
from typing import Any, Optional


class ErrorKind(Enum):
    """Kinds of recoverable failures surfaced to the reader."""

    CONFIGURATION = "configuration"
    UPSTREAM = "upstream"
    MALFORMED_RESPONSE = "malformed_response"
    NOT_FOUND = "not_found"


USER_MESSAGES = {
    ErrorKind.CONFIGURATION: "API key not configured. Add GEMINI_API_KEY to .env file.",
    ErrorKind.UPSTREAM: "The language service is unavailable. Please try again later.",
    ErrorKind.MALFORMED_RESPONSE: "The language service returned an unexpected response.",
    ErrorKind.NOT_FOUND: "No entry found.",
}


class ReaderError(Exception):
    """Base class for recoverable errors.

    ``detail`` carries operator diagnostics and goes to the log;
    ``user_message`` is the short text shown to the reader.
    """

    kind: ErrorKind = ErrorKind.UPSTREAM

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.user_message)
        self.detail = detail

    @property
    def user_message(self) -> str:
        return USER_MESSAGES[self.kind]


class ConfigurationError(ReaderError):
    """A required backend credential is missing."""

    kind = ErrorKind.CONFIGURATION


class UpstreamError(ReaderError):
    """The backend call failed (status, network, or unparsable transport)."""

    kind = ErrorKind.UPSTREAM

    def __init__(self, detail: str = "", status: Optional[int] = None, payload: Any = None):
        super().__init__(detail)
        self.status = status
        self.payload = payload


class MalformedResponse(ReaderError):
    """The backend answered but the payload broke the expected contract."""

    kind = ErrorKind.MALFORMED_RESPONSE

    def __init__(self, detail: str = "", payload: Any = None):
        super().__init__(detail)
        self.payload = payload


class NotFound(ReaderError):
    """Normal negative result: the word or article does not exist."""

    kind = ErrorKind.NOT_FOUND


class SessionStateError(RuntimeError):
    """Raised when a reading session is driven through an invalid transition."""
