"""Triage engine module."""
from .base import BaseTriageEngine
from .verdicts import Label, Severity, Verdict, SAFE_DEFAULT_VERDICT
from .rules import TriageRule, RuleTriageEngine
from .scoring import WeightedTriageEngine, compute_score
from .tables import SYMPTOM_RULES, QUICK_SCREEN_RULES

__all__ = [
    "BaseTriageEngine",
    "Label",
    "Severity",
    "Verdict",
    "SAFE_DEFAULT_VERDICT",
    "TriageRule",
    "RuleTriageEngine",
    "WeightedTriageEngine",
    "compute_score",
    "SYMPTOM_RULES",
    "QUICK_SCREEN_RULES",
]
