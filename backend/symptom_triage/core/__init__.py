"""Core abstractions and types for the symptom triage service."""
from .events import ScreeningEvent, QuestionEvent, VerdictEvent, ErrorEvent
from .types import AnswerValue, RawAnswers
from .schemas import (
    StartSessionRequest,
    AnswerSubmission,
    QuestionPayload,
    EvaluateResponse,
    SessionResponse,
    StatusResponse,
)

__all__ = [
    # Events
    "ScreeningEvent",
    "QuestionEvent",
    "VerdictEvent",
    "ErrorEvent",
    # Types
    "AnswerValue",
    "RawAnswers",
    # Schemas
    "StartSessionRequest",
    "AnswerSubmission",
    "QuestionPayload",
    "EvaluateResponse",
    "SessionResponse",
    "StatusResponse",
]
