from datetime import datetime, timezone

import pytest

from symptom_triage.catalog import HEALTH_SCREENING_CATALOG, SYMPTOM_CATALOG
from symptom_triage.core.errors import MalformedAnswerError, UnknownQuestionError
from symptom_triage.session import Answer, AnswerSet

CAPTURED_AT = datetime(2026, 2, 20, 10, 30, tzinfo=timezone.utc)


def test_record_and_lookup():
    answers = AnswerSet(SYMPTOM_CATALOG)
    answers.record(Answer("fever", True, CAPTURED_AT))

    assert len(answers) == 1
    assert answers["fever"].value is True
    assert answers["fever"].captured_at == CAPTURED_AT
    assert list(answers) == ["fever"]


def test_record_rejects_unknown_question():
    answers = AnswerSet(SYMPTOM_CATALOG)

    with pytest.raises(UnknownQuestionError) as exc_info:
        answers.record(Answer("breathing", True, CAPTURED_AT))
    assert exc_info.value.question_id == "breathing"
    assert len(answers) == 0


def test_record_is_append_only():
    answers = AnswerSet(SYMPTOM_CATALOG)
    answers.record(Answer("fever", True, CAPTURED_AT))

    with pytest.raises(ValueError, match="already answered"):
        answers.record(Answer("fever", False, CAPTURED_AT))
    assert answers["fever"].value is True


def test_record_validates_value():
    answers = AnswerSet(SYMPTOM_CATALOG)

    with pytest.raises(MalformedAnswerError):
        answers.record(Answer("fever", "maybe", CAPTURED_AT))


def test_is_affirmed_by_answer_type():
    answers = AnswerSet.from_values(
        HEALTH_SCREENING_CATALOG,
        {"q1": True, "q2": False, "q4": "No pain (0)", "q6": "aspirin"},
    )

    assert answers.is_affirmed("q1") is True
    assert answers.is_affirmed("q2") is False
    assert answers.is_affirmed("q3") is False
    assert answers.is_affirmed("q4") is False
    assert answers.is_affirmed("q6") is False


def test_score_for_uses_question_and_option_weights():
    answers = AnswerSet.from_values(
        HEALTH_SCREENING_CATALOG,
        {"q1": True, "q2": False, "q4": "Moderate (4-6)", "q7": "feeling dizzy"},
    )

    assert answers.score_for("q1") == 3
    assert answers.score_for("q2") == 0
    assert answers.score_for("q3") == 0
    assert answers.score_for("q4") == 2
    assert answers.score_for("q7") == 0


def test_from_values_drops_unknown_and_malformed_entries():
    answers = AnswerSet.from_values(
        SYMPTOM_CATALOG,
        {"fever": True, "breathing": True, "cough": 3, "nausea": None},
    )

    assert set(answers) == {"fever"}


def test_from_values_accepts_yes_no_strings():
    answers = AnswerSet.from_values(
        SYMPTOM_CATALOG,
        {"fever": "Yes", "cough": " no ", "nausea": "sometimes"},
    )

    assert answers["fever"].value is True
    assert answers["cough"].value is False
    assert "nausea" not in answers


def test_from_values_uses_given_timestamp():
    answers = AnswerSet.from_values(SYMPTOM_CATALOG, {"fever": True}, captured_at=CAPTURED_AT)

    assert answers["fever"].captured_at == CAPTURED_AT
