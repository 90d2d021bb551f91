"""Screening session module."""
from .answers import Answer, AnswerSet
from .controller import Session, SessionController, SessionState
from .registry import SessionRegistry

__all__ = [
    "Answer",
    "AnswerSet",
    "Session",
    "SessionController",
    "SessionState",
    "SessionRegistry",
]
