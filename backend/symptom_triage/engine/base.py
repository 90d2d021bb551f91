"""Base class for triage engines."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING

from .verdicts import Verdict

if TYPE_CHECKING:
    from ..session.answers import AnswerSet


class BaseTriageEngine(abc.ABC):
    """Abstract base class for answer-set evaluation strategies."""

    strategy: str = "base"

    @abc.abstractmethod
    def evaluate(self, answers: AnswerSet) -> Verdict:
        """
        Map an answer set to exactly one verdict.

        Implementations are deterministic and total: missing answers count
        as "not affirmed" and a partial answer set still yields a verdict.

        :param answers: Complete or partial answers for one session
        :return: The triage verdict
        """
        pass
