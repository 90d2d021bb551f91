"""API request and response schemas for the symptom triage service."""
from pydantic import BaseModel, Field, ConfigDict
from typing import Any, Dict, List, Literal, Optional


# ============= Request Schemas =============

class StartSessionRequest(BaseModel):
    """Request schema for /sessions.

    owner_id is an opaque identifier supplied by whatever gates access to
    the screening. It is attached to the session and never interpreted.
    """
    owner_id: Optional[str] = Field(
        default=None,
        description="Opaque identifier of the session owner",
    )
    model_config = ConfigDict(extra="forbid")


class AnswerSubmission(BaseModel):
    """Request schema for /sessions/{session_id}/answers."""

    value: Any = Field(
        ...,
        description="Answer to the current question: boolean, option or free text",
    )
    model_config = ConfigDict(extra="forbid")


# ============= Response Schemas =============

class QuestionPayload(BaseModel):
    """One screening question as exposed to clients."""

    id: str
    prompt: str
    answer_type: Literal["yes_no", "multiple_choice", "free_text"]
    options: List[str] = Field(default_factory=list)
    weight: int = Field(..., ge=0)


class EvaluateResponse(BaseModel):
    """Response from /evaluate endpoint."""

    result: str = Field(..., description="Human-readable recommendation label")
    level: Literal["green", "yellow", "red"] = Field(
        ...,
        description="Severity tier of the recommendation",
    )
    message: str = Field(..., description="Explanation of the recommendation")


class SessionResponse(BaseModel):
    """Envelope response from /sessions endpoints."""

    success: bool = Field(..., description="Whether the operation succeeded")
    data: Dict[str, Any] = Field(
        default_factory=dict,
        description="Session snapshot payload",
    )
    error: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Error metadata when success is false",
    )
    model_config = ConfigDict(extra="forbid")


class StatusResponse(BaseModel):
    """Generic status response for health check endpoints."""
    status: str = Field(..., description="Service status")
    system: Optional[str] = Field(None, description="System identifier")
    profile: Optional[str] = Field(None, description="Active triage profile")
