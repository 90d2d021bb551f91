"""Shared error code mapping for session and evaluation failures."""
from typing import Any

from .errors import (
    InvalidSessionStateError,
    MalformedAnswerError,
    SessionNotFoundError,
    UnknownQuestionError,
)

ERROR_CODE_MALFORMED_ANSWER = "MALFORMED_ANSWER"
ERROR_CODE_UNKNOWN_QUESTION = "UNKNOWN_QUESTION"
ERROR_CODE_INVALID_SESSION_STATE = "INVALID_SESSION_STATE"
ERROR_CODE_SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
ERROR_CODE_MALFORMED_REQUEST = "MALFORMED_REQUEST"
ERROR_CODE_GENERIC = "TRIAGE_FAILED"

_ERROR_CODES: tuple[tuple[type[BaseException], str], ...] = (
    (MalformedAnswerError, ERROR_CODE_MALFORMED_ANSWER),
    (UnknownQuestionError, ERROR_CODE_UNKNOWN_QUESTION),
    (InvalidSessionStateError, ERROR_CODE_INVALID_SESSION_STATE),
    (SessionNotFoundError, ERROR_CODE_SESSION_NOT_FOUND),
)


def classify_error_code(err: BaseException) -> str:
    """Classify a core failure into a stable error code."""
    for error_type, code in _ERROR_CODES:
        if isinstance(err, error_type):
            return code
    return ERROR_CODE_GENERIC


def build_error_payload(
    err: BaseException,
    details: str | None = None,
) -> dict[str, Any]:
    """Build standardized error payload from a raised core error."""
    payload: dict[str, Any] = {
        "code": classify_error_code(err),
        "message": str(err),
    }
    question_id = getattr(err, "question_id", None)
    if question_id:
        payload["question_id"] = question_id
    if details:
        payload["details"] = details
    return payload


def build_request_error_payload(message: str, details: str | None = None) -> dict[str, Any]:
    """Build standardized error payload for a request that could not be parsed."""
    payload: dict[str, Any] = {"code": ERROR_CODE_MALFORMED_REQUEST, "message": message}
    if details:
        payload["details"] = details
    return payload
