from typing import Any, Optional

from fastapi import APIRouter, Depends, Request
from symptom_triage.config import get_services
from symptom_triage.core import (
    AnswerSubmission,
    EvaluateResponse,
    QuestionPayload,
    SessionResponse,
    StartSessionRequest,
    StatusResponse,
)
from symptom_triage.core.error_mapping import build_error_payload
from symptom_triage.core.errors import (
    InvalidSessionStateError,
    MalformedAnswerError,
    SessionNotFoundError,
)
from symptom_triage.core.logging_utils import log_event
from symptom_triage.engine import SAFE_DEFAULT_VERDICT
from symptom_triage.session import AnswerSet, Session

router = APIRouter()

_COMPONENT = "http"


def get_triage_services():
    return get_services()


@router.get("/", response_model=StatusResponse)
def read_root(services: dict = Depends(get_triage_services)):
    return {
        "status": "online",
        "system": "Symptom Triage Engine",
        "profile": services["profile"],
    }


@router.get("/questions", response_model=list[QuestionPayload])
def list_questions(services: dict = Depends(get_triage_services)):
    return [question.payload for question in services["catalog"]]


def _extract_answer_mapping(body: Any) -> dict | None:
    # Accept both a flat mapping and the {"answers": {...}} wrapper.
    if not isinstance(body, dict):
        return None
    wrapped = body.get("answers")
    if isinstance(wrapped, dict):
        return wrapped
    return body


def _safe_default_response(reason: str, details: str | None = None) -> dict:
    log_event(
        component=_COMPONENT,
        event="evaluate_degraded",
        level="WARNING",
        details={"reason": reason, "error": details},
    )
    return SAFE_DEFAULT_VERDICT.payload


@router.post("/evaluate", response_model=EvaluateResponse)
async def evaluate_answers(request: Request, services: dict = Depends(get_triage_services)):
    try:
        body = await request.json()
    except ValueError as err:
        return _safe_default_response("invalid_json", str(err))

    raw_answers = _extract_answer_mapping(body)
    if raw_answers is None:
        return _safe_default_response("not_an_object")

    try:
        answers = AnswerSet.from_values(services["catalog"], raw_answers)
        verdict = services["engine"].evaluate(answers)
    except Exception as err:
        return _safe_default_response("evaluation_failed", str(err))

    log_event(
        component=_COMPONENT,
        event="evaluate_completed",
        details={
            "answered": len(answers),
            "severity": verdict.severity.value,
            "rule_id": verdict.rule_id,
        },
    )
    return verdict.payload


def _session_envelope(session: Session) -> dict:
    return {"success": True, "data": session.payload, "error": None}


def _error_envelope(err: Exception, session: Session | None = None) -> dict:
    return {
        "success": False,
        "data": session.payload if session is not None else {},
        "error": build_error_payload(err),
    }


@router.post("/sessions", response_model=SessionResponse)
def start_session(
    request: Optional[StartSessionRequest] = None,
    services: dict = Depends(get_triage_services),
):
    owner_id = request.owner_id if request else None
    session = services["registry"].create(owner_id=owner_id)
    return _session_envelope(session)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
def get_session(session_id: str, services: dict = Depends(get_triage_services)):
    try:
        session = services["registry"].get(session_id)
    except SessionNotFoundError as err:
        return _error_envelope(err)
    return _session_envelope(session)


@router.post("/sessions/{session_id}/answers", response_model=SessionResponse)
def submit_answer(
    session_id: str,
    submission: AnswerSubmission,
    services: dict = Depends(get_triage_services),
):
    registry = services["registry"]
    try:
        session_lock = registry.lock_for(session_id)
    except SessionNotFoundError as err:
        return _error_envelope(err)

    with session_lock:
        try:
            session = registry.get(session_id)
        except SessionNotFoundError as err:
            return _error_envelope(err)
        try:
            registry.controller.submit_answer(session, submission.value)
        except (MalformedAnswerError, InvalidSessionStateError) as err:
            return _error_envelope(err, session)
    return _session_envelope(session)


@router.post("/sessions/{session_id}/reset", response_model=SessionResponse)
def reset_session(session_id: str, services: dict = Depends(get_triage_services)):
    registry = services["registry"]
    try:
        with registry.lock_for(session_id):
            session = registry.reset(session_id)
    except SessionNotFoundError as err:
        return _error_envelope(err)
    return _session_envelope(session)


@router.delete("/sessions/{session_id}", response_model=SessionResponse)
def discard_session(session_id: str, services: dict = Depends(get_triage_services)):
    registry = services["registry"]
    try:
        with registry.lock_for(session_id):
            registry.discard(session_id)
    except SessionNotFoundError as err:
        return _error_envelope(err)
    return {
        "success": True,
        "data": {"session_id": session_id, "discarded": True},
        "error": None,
    }
