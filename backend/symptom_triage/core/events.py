from dataclasses import dataclass
from typing import Any


@dataclass
class ScreeningEvent:
    """Base class for all screening conversation events."""
    pass


@dataclass
class QuestionEvent(ScreeningEvent):
    """The next question the user should answer."""
    question: dict[str, Any]
    answered: int
    total: int

    @property
    def payload(self):
        return {
            "type": "question",
            "question": self.question,
            "answered": self.answered,
            "total": self.total,
        }


@dataclass
class VerdictEvent(ScreeningEvent):
    """Final triage recommendation for a completed session."""
    verdict: dict[str, Any]

    @property
    def payload(self):
        return {"type": "verdict", **self.verdict}


@dataclass
class ErrorEvent(ScreeningEvent):
    """Rejected client message; the session is unchanged."""
    error: dict[str, Any]

    @property
    def payload(self):
        return {"type": "error", "error": self.error}
