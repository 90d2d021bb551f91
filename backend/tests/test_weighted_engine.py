import pytest

from symptom_triage.catalog import HEALTH_SCREENING_CATALOG, AnswerType, Question, QuestionCatalog
from symptom_triage.engine import Label, Severity, WeightedTriageEngine, compute_score
from symptom_triage.session import AnswerSet

WEIGHTED_CATALOG = QuestionCatalog(
    [
        Question(id="fever", prompt="Fever?", weight=3),
        Question(id="breathing", prompt="Difficulty breathing?", weight=4),
        Question(id="chestPain", prompt="Chest pain?", weight=4),
    ]
)


def _answers(values, catalog=WEIGHTED_CATALOG):
    return AnswerSet.from_values(catalog, values)


def test_fever_and_breathing_escalates():
    answers = _answers({"fever": True, "breathing": True})
    engine = WeightedTriageEngine(urgent_threshold=6)

    assert compute_score(answers) == 7
    verdict = engine.evaluate(answers)
    assert verdict.label is Label.SEEK_URGENT_CARE
    assert verdict.severity is Severity.RED


def test_fever_alone_does_not_escalate():
    answers = _answers({"fever": True})
    engine = WeightedTriageEngine(urgent_threshold=6)

    assert compute_score(answers) == 3
    verdict = engine.evaluate(answers)
    assert verdict.label is Label.REST_AT_HOME
    assert verdict.severity is Severity.GREEN


def test_score_equal_to_threshold_escalates():
    engine = WeightedTriageEngine(urgent_threshold=7)

    assert engine.evaluate(_answers({"fever": True, "chestPain": True})).severity is Severity.RED


def test_clinic_threshold_adds_middle_tier():
    engine = WeightedTriageEngine(urgent_threshold=6, clinic_threshold=3)

    assert engine.evaluate(_answers({})).severity is Severity.GREEN
    assert engine.evaluate(_answers({"fever": True})).label is Label.VISIT_CLINIC
    assert engine.evaluate(_answers({"fever": True, "breathing": True})).severity is Severity.RED


@pytest.mark.parametrize(
    "kwargs",
    [
        {"urgent_threshold": 0},
        {"urgent_threshold": 6, "clinic_threshold": 6},
        {"urgent_threshold": 6, "clinic_threshold": 0},
    ],
)
def test_invalid_thresholds_rejected(kwargs):
    with pytest.raises(ValueError):
        WeightedTriageEngine(**kwargs)


def test_health_screening_scores_pain_options_and_ignores_free_text():
    answers = _answers(
        {
            "q1": True,
            "q4": "Severe (7-10)",
            "q6": "penicillin allergy",
            "q7": "I have been coughing for a week",
        },
        catalog=HEALTH_SCREENING_CATALOG,
    )

    assert compute_score(answers) == 7
    assert WeightedTriageEngine().evaluate(answers).severity is Severity.RED


def test_adding_affirmative_answers_never_lowers_score_or_severity():
    engine = WeightedTriageEngine(urgent_threshold=6, clinic_threshold=3)
    catalog = HEALTH_SCREENING_CATALOG
    affirmative = [
        ("q1", True),
        ("q2", True),
        ("q3", True),
        ("q4", "Mild (1-3)"),
        ("q5", True),
    ]

    values = {}
    previous_score = compute_score(_answers(values, catalog))
    previous_rank = engine.evaluate(_answers(values, catalog)).severity.rank
    for question_id, value in affirmative:
        values[question_id] = value
        answers = _answers(values, catalog)
        score = compute_score(answers)
        rank = engine.evaluate(answers).severity.rank

        assert score >= previous_score
        assert rank >= previous_rank
        previous_score, previous_rank = score, rank


def test_option_weight_ordering_is_monotone():
    question = HEALTH_SCREENING_CATALOG.get("q4")
    scores = [
        compute_score(_answers({"q4": option}, HEALTH_SCREENING_CATALOG))
        for option in question.options
    ]

    assert question.answer_type is AnswerType.MULTIPLE_CHOICE
    assert scores == sorted(scores)
    assert scores == [0, 1, 2, 4]
