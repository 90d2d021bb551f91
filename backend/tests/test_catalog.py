import pytest

from symptom_triage.catalog import (
    HEALTH_SCREENING_CATALOG,
    SYMPTOM_CATALOG,
    AnswerType,
    Question,
    QuestionCatalog,
)
from symptom_triage.core.errors import MalformedAnswerError


def test_symptom_catalog_order_is_fixed():
    assert SYMPTOM_CATALOG.ids() == (
        "fever",
        "chestPain",
        "severeHeadache",
        "nausea",
        "cough",
        "fatigue",
    )
    assert SYMPTOM_CATALOG.length() == 6
    assert len(SYMPTOM_CATALOG) == 6


def test_question_at_returns_none_out_of_range():
    assert SYMPTOM_CATALOG.question_at(0).id == "fever"
    assert SYMPTOM_CATALOG.question_at(5).id == "fatigue"
    assert SYMPTOM_CATALOG.question_at(6) is None
    assert SYMPTOM_CATALOG.question_at(-1) is None


def test_all_is_read_only_tuple():
    questions = SYMPTOM_CATALOG.all()

    assert isinstance(questions, tuple)
    assert [question.id for question in questions] == list(SYMPTOM_CATALOG.ids())


def test_lookup_by_id():
    assert "chestPain" in SYMPTOM_CATALOG
    assert "breathing" not in SYMPTOM_CATALOG
    assert SYMPTOM_CATALOG.get("nausea").prompt == "Are you feeling nauseous or vomiting?"
    assert SYMPTOM_CATALOG.get("missing") is None


def test_empty_catalog_rejected():
    with pytest.raises(ValueError, match="at least one question"):
        QuestionCatalog([])


def test_duplicate_question_ids_rejected():
    with pytest.raises(ValueError, match="duplicate question id 'fever'"):
        QuestionCatalog([Question(id="fever", prompt="a"), Question(id="fever", prompt="b")])


@pytest.mark.parametrize(
    "kwargs, message",
    [
        ({"answer_type": AnswerType.MULTIPLE_CHOICE}, "requires options"),
        ({"options": ("a", "b")}, "only allows options"),
        ({"weight": -1}, "weight must be >= 0"),
        ({"answer_type": AnswerType.FREE_TEXT, "weight": 1}, "cannot carry a weight"),
        (
            {
                "answer_type": AnswerType.MULTIPLE_CHOICE,
                "options": ("Mild", "Severe"),
                "option_weights": {"Extreme": 5},
            },
            "weights unknown options",
        ),
    ],
)
def test_invalid_question_definitions(kwargs, message):
    with pytest.raises(ValueError, match=message):
        Question(id="q", prompt="prompt", **kwargs)


def test_question_accepts_plain_string_answer_type_and_list_options():
    question = Question(
        id="pain",
        prompt="Pain level?",
        answer_type="multiple_choice",
        options=["Mild", "Severe"],
    )

    assert question.answer_type is AnswerType.MULTIPLE_CHOICE
    assert question.options == ("Mild", "Severe")


def test_yes_no_validation_requires_boolean():
    question = SYMPTOM_CATALOG.get("fever")

    assert question.validate(True) is True
    assert question.validate(False) is False
    for bad_value in ("yes", 1, None):
        with pytest.raises(MalformedAnswerError) as exc_info:
            question.validate(bad_value)
        assert exc_info.value.question_id == "fever"


def test_multiple_choice_validation_requires_listed_option():
    question = HEALTH_SCREENING_CATALOG.get("q4")

    assert question.validate("Severe (7-10)") == "Severe (7-10)"
    with pytest.raises(MalformedAnswerError):
        question.validate("Severe")
    with pytest.raises(MalformedAnswerError):
        question.validate(True)


def test_free_text_accepts_any_string():
    question = HEALTH_SCREENING_CATALOG.get("q6")

    assert question.validate("") == ""
    assert question.validate("ibuprofen, penicillin allergy") == "ibuprofen, penicillin allergy"
    with pytest.raises(MalformedAnswerError):
        question.validate(False)


def test_question_payload_shape():
    payload = HEALTH_SCREENING_CATALOG.get("q4").payload

    assert payload == {
        "id": "q4",
        "prompt": "How would you rate your current pain level?",
        "answer_type": "multiple_choice",
        "options": ["No pain (0)", "Mild (1-3)", "Moderate (4-6)", "Severe (7-10)"],
        "weight": 2,
    }
