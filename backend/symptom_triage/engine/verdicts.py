"""Triage verdict types."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Label(str, Enum):
    REST_AT_HOME = "rest_at_home"
    VISIT_CLINIC = "visit_clinic"
    SEEK_URGENT_CARE = "seek_urgent_care"

    @property
    def display_text(self) -> str:
        return _LABEL_TEXT[self]


_LABEL_TEXT = {
    Label.REST_AT_HOME: "Rest at home",
    Label.VISIT_CLINIC: "Visit campus clinic",
    Label.SEEK_URGENT_CARE: "Seek urgent medical help",
}


class Severity(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {Severity.GREEN: 0, Severity.YELLOW: 1, Severity.RED: 2}


@dataclass(frozen=True)
class Verdict:
    """Triage recommendation produced by an engine."""

    label: Label
    severity: Severity
    message: str
    rule_id: str | None = None

    @property
    def payload(self) -> dict[str, Any]:
        return {
            "result": self.label.display_text,
            "level": self.severity.value,
            "message": self.message,
        }


SAFE_DEFAULT_VERDICT = Verdict(
    label=Label.VISIT_CLINIC,
    severity=Severity.YELLOW,
    message="Unable to process your symptoms. Please consult a healthcare professional.",
    rule_id="safe_default",
)
