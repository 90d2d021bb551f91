"""Screening question definitions and the immutable question catalog."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from ..core.errors import MalformedAnswerError


class AnswerType(str, Enum):
    YES_NO = "yes_no"
    MULTIPLE_CHOICE = "multiple_choice"
    FREE_TEXT = "free_text"


@dataclass(frozen=True)
class Question:
    """One screening question.

    ``weight`` is what an affirmative yes/no answer adds to a weighted score.
    Multiple-choice questions score through ``option_weights`` instead, so a
    "Severe" answer can count for more than a "Mild" one.
    """

    id: str
    prompt: str
    answer_type: AnswerType = AnswerType.YES_NO
    options: tuple[str, ...] = ()
    weight: int = 0
    option_weights: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "answer_type", AnswerType(self.answer_type))
        object.__setattr__(self, "options", tuple(self.options))
        object.__setattr__(self, "option_weights", MappingProxyType(dict(self.option_weights)))

        if not self.id:
            raise ValueError("question id must be a non-empty string")
        if self.weight < 0:
            raise ValueError(f"question '{self.id}' weight must be >= 0")
        if self.answer_type is AnswerType.FREE_TEXT and self.weight:
            raise ValueError(f"free text question '{self.id}' cannot carry a weight")

        if self.answer_type is AnswerType.MULTIPLE_CHOICE:
            if not self.options:
                raise ValueError(f"multiple choice question '{self.id}' requires options")
            if len(set(self.options)) != len(self.options):
                raise ValueError(f"question '{self.id}' has duplicate options")
        elif self.options:
            raise ValueError(f"question '{self.id}' only allows options for multiple choice")

        unknown_options = set(self.option_weights) - set(self.options)
        if unknown_options:
            sorted_unknown = ", ".join(sorted(unknown_options))
            raise ValueError(f"question '{self.id}' weights unknown options: {sorted_unknown}")
        if any(value < 0 for value in self.option_weights.values()):
            raise ValueError(f"question '{self.id}' option weights must be >= 0")

    def validate(self, value: Any) -> Any:
        """Return ``value`` if it fits this question's answer type, else raise."""
        if self.answer_type is AnswerType.YES_NO:
            if not isinstance(value, bool):
                raise MalformedAnswerError(self.id, f"Question '{self.id}' expects a yes/no (boolean) answer.")
        elif self.answer_type is AnswerType.MULTIPLE_CHOICE:
            if not isinstance(value, str) or value not in self.options:
                choices = ", ".join(self.options)
                raise MalformedAnswerError(self.id, f"Question '{self.id}' expects one of: {choices}.")
        elif not isinstance(value, str):
            raise MalformedAnswerError(self.id, f"Question '{self.id}' expects a text answer.")
        return value

    @property
    def payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "prompt": self.prompt,
            "answer_type": self.answer_type.value,
            "options": list(self.options),
            "weight": self.weight,
        }


class QuestionCatalog:
    """Ordered, read-only set of screening questions.

    Reconfiguring a screening flow means building a new catalog; there are no
    mutation methods.
    """

    def __init__(self, questions: Iterable[Question]):
        ordered = tuple(questions)
        if not ordered:
            raise ValueError("question catalog must contain at least one question")

        index: dict[str, Question] = {}
        for question in ordered:
            if question.id in index:
                raise ValueError(f"duplicate question id '{question.id}'")
            index[question.id] = question

        self._questions = ordered
        self._index = MappingProxyType(index)

    def question_at(self, index: int) -> Question | None:
        """Return the question at ``index``, or None when out of range."""
        if 0 <= index < len(self._questions):
            return self._questions[index]
        return None

    def get(self, question_id: str) -> Question | None:
        return self._index.get(question_id)

    def length(self) -> int:
        return len(self._questions)

    def all(self) -> tuple[Question, ...]:
        return self._questions

    def ids(self) -> tuple[str, ...]:
        return tuple(question.id for question in self._questions)

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._index

    def __repr__(self) -> str:
        return f"QuestionCatalog({list(self.ids())!r})"
