"""Recorded answers for one screening session."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterator, Mapping

from ..catalog.questions import AnswerType, QuestionCatalog
from ..core.errors import MalformedAnswerError, UnknownQuestionError
from ..core.logging_utils import log_event
from ..core.types import AnswerValue, RawAnswers

_YES_NO_TEXT = {"yes": True, "no": False}


@dataclass(frozen=True)
class Answer:
    question_id: str
    value: AnswerValue
    captured_at: datetime


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AnswerSet(Mapping[str, Answer]):
    """Append-only mapping of question id to :class:`Answer`.

    The set keeps a reference to its catalog so evaluation can look up answer
    types and weights without any other input.
    """

    def __init__(self, catalog: QuestionCatalog):
        self._catalog = catalog
        self._answers: dict[str, Answer] = {}

    @property
    def catalog(self) -> QuestionCatalog:
        return self._catalog

    def record(self, answer: Answer) -> None:
        question = self._catalog.get(answer.question_id)
        if question is None:
            raise UnknownQuestionError(answer.question_id)
        if answer.question_id in self._answers:
            raise ValueError(f"question '{answer.question_id}' already answered")
        question.validate(answer.value)
        self._answers[answer.question_id] = answer

    def is_affirmed(self, question_id: str) -> bool:
        """True when the answer counts as reporting the symptom.

        Missing answers, free text and zero-weight options are never affirmed.
        """
        answer = self._answers.get(question_id)
        if answer is None:
            return False
        question = self._catalog.get(question_id)
        if question.answer_type is AnswerType.YES_NO:
            return answer.value is True
        if question.answer_type is AnswerType.MULTIPLE_CHOICE:
            return question.option_weights.get(answer.value, 0) > 0
        return False

    def score_for(self, question_id: str) -> int:
        answer = self._answers.get(question_id)
        if answer is None:
            return 0
        question = self._catalog.get(question_id)
        if question.answer_type is AnswerType.YES_NO:
            return question.weight if answer.value is True else 0
        if question.answer_type is AnswerType.MULTIPLE_CHOICE:
            return question.option_weights.get(answer.value, 0)
        return 0

    @classmethod
    def from_values(
        cls,
        catalog: QuestionCatalog,
        values: RawAnswers,
        captured_at: datetime | None = None,
    ) -> "AnswerSet":
        """Build an answer set from a flat ``question_id -> value`` mapping.

        Unknown ids and values that do not fit their question are dropped and
        the question is treated as unanswered. Yes/no questions also accept
        the strings "yes" and "no".
        """
        timestamp = captured_at or utc_now()
        answers = cls(catalog)
        dropped_unknown = sorted(str(key) for key in values if key not in catalog)
        dropped_malformed: list[str] = []

        for question in catalog:
            if question.id not in values:
                continue
            value = values[question.id]
            if question.answer_type is AnswerType.YES_NO and isinstance(value, str):
                value = _YES_NO_TEXT.get(value.strip().lower(), value)
            try:
                answers.record(Answer(question.id, value, timestamp))
            except MalformedAnswerError:
                dropped_malformed.append(question.id)

        if dropped_unknown or dropped_malformed:
            log_event(
                component="answer_set",
                event="answers_dropped",
                level="DEBUG",
                details={"unknown": dropped_unknown, "malformed": dropped_malformed},
            )
        return answers

    def __getitem__(self, question_id: str) -> Answer:
        return self._answers[question_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._answers)

    def __len__(self) -> int:
        return len(self._answers)

    def __repr__(self) -> str:
        values = {key: answer.value for key, answer in self._answers.items()}
        return f"AnswerSet({values!r})"
