"""
Symptom Triage Package.

This package provides a question-driven triage system with:
- An immutable catalog of yes/no, multiple-choice and free-text questions
- A deterministic triage engine (ordered rule table or weighted score)
- A per-conversation session state machine that invokes the engine once

Core components:
    - catalog: Question definitions and built-in catalogs
    - engine: Verdict types and evaluation strategies
    - session: Answers, session controller and session registry
    - storage: Optional answer persistence collaborators
    - core: Errors, schemas, events and structured logging
    - config: Environment-driven service configuration and factory
"""

from .catalog import AnswerType, Question, QuestionCatalog
from .session import Answer, AnswerSet, Session, SessionController, SessionState, SessionRegistry
from .engine import (
    BaseTriageEngine,
    Label,
    Severity,
    Verdict,
    SAFE_DEFAULT_VERDICT,
    RuleTriageEngine,
    WeightedTriageEngine,
)
from .config import get_services, get_controller, get_engine, get_catalog

__all__ = [
    # Catalog
    "AnswerType",
    "Question",
    "QuestionCatalog",
    # Session
    "Answer",
    "AnswerSet",
    "Session",
    "SessionController",
    "SessionState",
    "SessionRegistry",
    # Engine
    "BaseTriageEngine",
    "Label",
    "Severity",
    "Verdict",
    "SAFE_DEFAULT_VERDICT",
    "RuleTriageEngine",
    "WeightedTriageEngine",
    # Config
    "get_services",
    "get_controller",
    "get_engine",
    "get_catalog",
]

__version__ = "1.0.0"
