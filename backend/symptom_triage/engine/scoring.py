"""Weighted-score triage evaluation."""
from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseTriageEngine
from .verdicts import Label, Severity, Verdict

if TYPE_CHECKING:
    from ..session.answers import AnswerSet

URGENT_SCORE_VERDICT = Verdict(
    label=Label.SEEK_URGENT_CARE,
    severity=Severity.RED,
    message=(
        "Based on your responses, I recommend seeking immediate medical attention. "
        "Please visit a hospital or contact your healthcare provider."
    ),
    rule_id="score_urgent",
)

CLINIC_SCORE_VERDICT = Verdict(
    label=Label.VISIT_CLINIC,
    severity=Severity.YELLOW,
    message=(
        "Based on your responses, you should have your symptoms checked. "
        "Please visit a clinic for further evaluation."
    ),
    rule_id="score_clinic",
)

REST_SCORE_VERDICT = Verdict(
    label=Label.REST_AT_HOME,
    severity=Severity.GREEN,
    message=(
        "Based on your responses, it appears you may benefit from rest and monitoring "
        "your symptoms. However, if symptoms worsen, please seek medical attention."
    ),
    rule_id="score_rest",
)


def compute_score(answers: AnswerSet) -> int:
    """Sum the score contribution of every answered question."""
    return sum(answers.score_for(question.id) for question in answers.catalog)


class WeightedTriageEngine(BaseTriageEngine):
    """Threshold evaluation over the summed answer weights.

    With only ``urgent_threshold`` the decision is binary (urgent or rest).
    A lower ``clinic_threshold`` adds the middle tier.
    """

    strategy = "weighted"

    def __init__(self, urgent_threshold: int = 6, clinic_threshold: int | None = None):
        if urgent_threshold <= 0:
            raise ValueError("urgent_threshold must be positive")
        if clinic_threshold is not None and not 0 < clinic_threshold < urgent_threshold:
            raise ValueError("clinic_threshold must be positive and below urgent_threshold")
        self.urgent_threshold = urgent_threshold
        self.clinic_threshold = clinic_threshold

    def verdict_for_score(self, score: int) -> Verdict:
        if score >= self.urgent_threshold:
            return URGENT_SCORE_VERDICT
        if self.clinic_threshold is not None and score >= self.clinic_threshold:
            return CLINIC_SCORE_VERDICT
        return REST_SCORE_VERDICT

    def evaluate(self, answers: AnswerSet) -> Verdict:
        return self.verdict_for_score(compute_score(answers))
