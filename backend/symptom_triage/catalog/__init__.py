"""Question catalog module."""
from .questions import AnswerType, Question, QuestionCatalog
from .defaults import (
    SYMPTOM_CATALOG,
    HEALTH_SCREENING_CATALOG,
    QUICK_SCREEN_CATALOG,
)

__all__ = [
    "AnswerType",
    "Question",
    "QuestionCatalog",
    "SYMPTOM_CATALOG",
    "HEALTH_SCREENING_CATALOG",
    "QUICK_SCREEN_CATALOG",
]
