"""Built-in screening catalogs.

Each catalog pairs with exactly one engine configuration (see
``engine.tables``); the question ids are what the rules and weights refer to.
"""
from .questions import AnswerType, Question, QuestionCatalog

# Six yes/no symptom checks evaluated by the ordered rule table.
SYMPTOM_CATALOG = QuestionCatalog(
    [
        Question(id="fever", prompt="Do you have a fever?"),
        Question(
            id="chestPain",
            prompt="Are you experiencing chest pain or difficulty breathing?",
        ),
        Question(id="severeHeadache", prompt="Do you have a severe headache?"),
        Question(id="nausea", prompt="Are you feeling nauseous or vomiting?"),
        Question(id="cough", prompt="Do you have a persistent cough?"),
        Question(id="fatigue", prompt="Are you feeling unusually tired or weak?"),
    ]
)

PAIN_LEVEL_OPTIONS = ("No pain (0)", "Mild (1-3)", "Moderate (4-6)", "Severe (7-10)")

# Mixed-type health screening scored by weight.
HEALTH_SCREENING_CATALOG = QuestionCatalog(
    [
        Question(
            id="q1",
            prompt="Are you experiencing any fever or high temperature?",
            weight=3,
        ),
        Question(
            id="q2",
            prompt="Do you have difficulty breathing or shortness of breath?",
            weight=4,
        ),
        Question(
            id="q3",
            prompt="Are you experiencing chest pain or discomfort?",
            weight=4,
        ),
        Question(
            id="q4",
            prompt="How would you rate your current pain level?",
            answer_type=AnswerType.MULTIPLE_CHOICE,
            options=PAIN_LEVEL_OPTIONS,
            weight=2,
            option_weights={
                "No pain (0)": 0,
                "Mild (1-3)": 1,
                "Moderate (4-6)": 2,
                "Severe (7-10)": 4,
            },
        ),
        Question(
            id="q5",
            prompt="Have you had any recent changes in your appetite or weight?",
            weight=1,
        ),
        Question(
            id="q6",
            prompt="Are you taking any medications or have any known allergies?",
            answer_type=AnswerType.FREE_TEXT,
            weight=0,
        ),
        Question(
            id="q7",
            prompt="Is there anything else about your current health condition you'd like to mention?",
            answer_type=AnswerType.FREE_TEXT,
            weight=0,
        ),
    ]
)

# Short yes/no screen used when the full symptom flow is unavailable.
QUICK_SCREEN_CATALOG = QuestionCatalog(
    [
        Question(id="fever", prompt="Do you have a fever above 100.4°F (38°C)?"),
        Question(id="breathing", prompt="Are you experiencing difficulty breathing?"),
        Question(id="chestPain", prompt="Do you have severe chest pain?"),
        Question(id="nausea", prompt="Are you feeling nauseous or vomiting?"),
        Question(id="headache", prompt="Do you have a persistent headache?"),
    ]
)
