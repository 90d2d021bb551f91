"""Base class for answer persistence collaborators."""
import abc
from dataclasses import dataclass
from datetime import datetime

from ..core.types import AnswerValue


@dataclass(frozen=True)
class AnswerRecord:
    """One recorded answer handed to the persistence layer."""

    session_id: str
    question_id: str
    value: AnswerValue
    captured_at: datetime


class BaseAnswerStore(abc.ABC):
    """Abstract base class for answer stores."""

    @abc.abstractmethod
    def save(self, record: AnswerRecord) -> None:
        """
        Persist one recorded answer.

        :param record: The answer and the session it belongs to
        """
        pass

    @abc.abstractmethod
    def clear(self, session_id: str) -> None:
        """
        Drop every record of a session, e.g. when it is reset or discarded.

        :param session_id: Session whose records should be removed
        """
        pass
