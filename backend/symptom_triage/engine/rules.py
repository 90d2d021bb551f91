"""Ordered rule-table triage evaluation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Sequence

from .base import BaseTriageEngine
from .verdicts import Verdict

if TYPE_CHECKING:
    from ..catalog.questions import QuestionCatalog
    from ..session.answers import AnswerSet


@dataclass(frozen=True)
class TriageRule:
    """Rule definition mapping affirmed symptoms to a verdict.

    Matches when every ``required_all`` question is affirmed and, if
    ``required_any`` is set, at least one of those is too. A rule with
    neither is unconditional.
    """

    rule_id: str
    description: str
    verdict: Verdict
    required_all: tuple[str, ...] = ()
    required_any: tuple[str, ...] = ()

    @property
    def is_unconditional(self) -> bool:
        return not self.required_all and not self.required_any

    @property
    def question_ids(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys([*self.required_all, *self.required_any]))

    def matches(self, answers: AnswerSet) -> bool:
        if not all(answers.is_affirmed(question_id) for question_id in self.required_all):
            return False
        if self.required_any:
            return any(answers.is_affirmed(question_id) for question_id in self.required_any)
        return True


def _validate_rule_table(rules: Sequence[TriageRule]) -> None:
    if not rules:
        raise ValueError("rule table must contain at least one rule")
    if not rules[-1].is_unconditional:
        raise ValueError("last rule must be unconditional so every answer set gets a verdict")

    seen: set[str] = set()
    for rule in rules:
        if rule.rule_id in seen:
            raise ValueError(f"duplicate rule id '{rule.rule_id}'")
        seen.add(rule.rule_id)

    for higher, lower in zip(rules, rules[1:]):
        if lower.verdict.severity.rank > higher.verdict.severity.rank:
            raise ValueError(
                f"rule '{lower.rule_id}' is more severe than '{higher.rule_id}' "
                "but is checked after it"
            )


class RuleTriageEngine(BaseTriageEngine):
    """First-match evaluation over an ordered rule table.

    Rules are ordered from most to least severe, so when several rules match
    the higher-severity verdict always wins.
    """

    strategy = "rules"

    def __init__(self, rules: Iterable[TriageRule]):
        ordered = tuple(rules)
        _validate_rule_table(ordered)
        self._rules = ordered

    @property
    def rules(self) -> tuple[TriageRule, ...]:
        return self._rules

    def check_catalog(self, catalog: QuestionCatalog) -> None:
        """Raise if any rule refers to a question the catalog does not define."""
        missing = sorted(
            {
                question_id
                for rule in self._rules
                for question_id in rule.question_ids
                if question_id not in catalog
            }
        )
        if missing:
            raise ValueError(f"rules reference unknown questions: {', '.join(missing)}")

    def matching_rules(self, answers: AnswerSet) -> list[TriageRule]:
        return [rule for rule in self._rules if rule.matches(answers)]

    def evaluate(self, answers: AnswerSet) -> Verdict:
        for rule in self._rules:
            if rule.matches(answers):
                return rule.verdict
        # Unreachable: the table is validated to end with an unconditional rule.
        raise AssertionError("rule table has no unconditional fallback")
