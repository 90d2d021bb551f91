"""Screening session state machine."""
from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable

from ..catalog.questions import AnswerType, Question, QuestionCatalog
from ..core.errors import InvalidSessionStateError, MalformedAnswerError
from ..core.logging_utils import log_event, text_fingerprint
from ..engine.base import BaseTriageEngine
from ..engine.verdicts import Verdict
from ..storage.base import AnswerRecord, BaseAnswerStore
from .answers import Answer, AnswerSet, utc_now

_COMPONENT = "session_controller"


class SessionState(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"


@dataclass
class Session:
    """State of one screening conversation.

    Only :class:`SessionController` mutates a session. ``verdict`` is set
    exactly when ``state`` is COMPLETED.
    """

    session_id: str
    catalog: QuestionCatalog
    answers: AnswerSet
    owner_id: str | None = None
    cursor: int = 0
    state: SessionState = SessionState.ACTIVE
    verdict: Verdict | None = None

    @property
    def is_completed(self) -> bool:
        return self.state is SessionState.COMPLETED

    @property
    def payload(self) -> dict[str, Any]:
        question = None if self.is_completed else self.catalog.question_at(self.cursor)
        return {
            "session_id": self.session_id,
            "state": self.state.value,
            "answered": len(self.answers),
            "total": len(self.catalog),
            "question": question.payload if question else None,
            "verdict": self.verdict.payload if self.verdict else None,
        }


def new_session_id() -> str:
    return f"triage-{uuid.uuid4().hex[:12]}"


def _describe_answer(question: Question, value: Any) -> dict[str, Any]:
    details: dict[str, Any] = {
        "question_id": question.id,
        "answer_type": question.answer_type.value,
    }
    if question.answer_type is AnswerType.FREE_TEXT and isinstance(value, str):
        details["answer"] = text_fingerprint(value)
    return details


class SessionController:
    """Drives a session through its questions and invokes the engine once.

    The controller holds no per-session state; every call operates on the
    :class:`Session` it is given.
    """

    def __init__(
        self,
        catalog: QuestionCatalog,
        engine: BaseTriageEngine,
        *,
        answer_store: BaseAnswerStore | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        self.catalog = catalog
        self.engine = engine
        self.answer_store = answer_store
        self._clock = clock or utc_now

    def start(
        self,
        catalog: QuestionCatalog | None = None,
        *,
        owner_id: str | None = None,
        session_id: str | None = None,
    ) -> Session:
        """Create a new active session positioned on the first question."""
        session_catalog = catalog if catalog is not None else self.catalog
        session = Session(
            session_id=session_id or new_session_id(),
            catalog=session_catalog,
            answers=AnswerSet(session_catalog),
            owner_id=owner_id,
        )
        log_event(
            component=_COMPONENT,
            event="session_started",
            session_id=session.session_id,
            details={"questions": len(session_catalog), "strategy": self.engine.strategy},
        )
        return session

    def current_question(self, session: Session) -> Question:
        if session.is_completed:
            raise InvalidSessionStateError(
                f"Session '{session.session_id}' is completed; there is no current question."
            )
        return session.catalog.question_at(session.cursor)

    def submit_answer(self, session: Session, value: Any) -> Question | Verdict:
        """Record an answer to the current question and advance.

        Returns the next question, or the verdict once the last question has
        been answered. A malformed value leaves the session untouched.
        """
        if session.is_completed:
            raise InvalidSessionStateError(
                f"Session '{session.session_id}' is completed; start or reset a session to answer again."
            )

        question = session.catalog.question_at(session.cursor)
        turn_id = session.cursor + 1
        try:
            question.validate(value)
        except MalformedAnswerError as err:
            log_event(
                component=_COMPONENT,
                event="answer_rejected",
                level="WARNING",
                session_id=session.session_id,
                turn_id=turn_id,
                details={"question_id": question.id, "error": str(err)},
            )
            raise

        answer = Answer(question_id=question.id, value=value, captured_at=self._clock())
        session.answers.record(answer)
        session.cursor += 1
        log_event(
            component=_COMPONENT,
            event="answer_recorded",
            session_id=session.session_id,
            turn_id=turn_id,
            details=_describe_answer(question, value),
        )
        self._store_answer(session, answer)

        if session.cursor < len(session.catalog):
            return session.catalog.question_at(session.cursor)

        verdict = self.engine.evaluate(session.answers)
        session.verdict = verdict
        session.state = SessionState.COMPLETED
        log_event(
            component=_COMPONENT,
            event="session_completed",
            session_id=session.session_id,
            turn_id=turn_id,
            details={
                "label": verdict.label.value,
                "severity": verdict.severity.value,
                "rule_id": verdict.rule_id,
            },
        )
        return verdict

    def reset(self, session: Session) -> Session:
        """Return a fresh session for the same conversation, catalog and owner."""
        log_event(
            component=_COMPONENT,
            event="session_reset",
            session_id=session.session_id,
            details={"answered": len(session.answers)},
        )
        self._clear_stored_answers(session.session_id)
        return self.start(
            session.catalog,
            owner_id=session.owner_id,
            session_id=session.session_id,
        )

    def discard(self, session: Session, reason: str = "discarded") -> None:
        """Forget a session that will not be used again, including stored answers."""
        log_event(
            component=_COMPONENT,
            event="session_discarded",
            session_id=session.session_id,
            details={"reason": reason, "state": session.state.value},
        )
        self._clear_stored_answers(session.session_id)

    def progress(self, session: Session) -> tuple[int, int]:
        return len(session.answers), len(session.catalog)

    def _clear_stored_answers(self, session_id: str) -> None:
        if self.answer_store is None:
            return
        try:
            self.answer_store.clear(session_id)
        except Exception as err:
            log_event(
                component=_COMPONENT,
                event="answer_store_failed",
                level="ERROR",
                session_id=session_id,
                details={"operation": "clear", "error": str(err)},
            )

    def _store_answer(self, session: Session, answer: Answer) -> None:
        if self.answer_store is None:
            return
        record = AnswerRecord(
            session_id=session.session_id,
            question_id=answer.question_id,
            value=answer.value,
            captured_at=answer.captured_at,
        )
        try:
            self.answer_store.save(record)
        except Exception as err:
            log_event(
                component=_COMPONENT,
                event="answer_store_failed",
                level="ERROR",
                session_id=session.session_id,
                details={"question_id": answer.question_id, "error": str(err)},
            )
