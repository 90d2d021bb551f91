from .base import AnswerRecord, BaseAnswerStore
from .memory import InMemoryAnswerStore

__all__ = [
    "AnswerRecord",
    "BaseAnswerStore",
    "InMemoryAnswerStore",
]
