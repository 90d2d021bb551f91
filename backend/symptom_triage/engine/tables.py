"""Built-in rule tables, one per screening catalog."""
from .rules import TriageRule
from .verdicts import Label, Severity, Verdict

_CHEST_PAIN = Verdict(
    label=Label.SEEK_URGENT_CARE,
    severity=Severity.RED,
    message="Chest pain can be serious. Please seek immediate medical attention or call emergency services.",
    rule_id="chest_pain",
)

_FEVER_WITH_HEADACHE = Verdict(
    label=Label.SEEK_URGENT_CARE,
    severity=Severity.RED,
    message="The combination of fever and severe headache requires immediate medical evaluation.",
    rule_id="fever_with_severe_headache",
)

_SEE_PROFESSIONAL_MESSAGE = (
    "Your symptoms suggest you should see a healthcare professional. "
    "Visit your campus clinic for proper evaluation."
)

_COMBINED_SYMPTOMS = Verdict(
    label=Label.VISIT_CLINIC,
    severity=Severity.YELLOW,
    message="Your combination of symptoms warrants medical attention. Consider visiting the campus clinic.",
    rule_id="cough_with_secondary_symptom",
)

_MODERATE_SYMPTOM = Verdict(
    label=Label.VISIT_CLINIC,
    severity=Severity.YELLOW,
    message="Your symptoms may benefit from professional medical advice. Consider visiting the campus clinic.",
    rule_id="moderate_symptom",
)

_MILD = Verdict(
    label=Label.REST_AT_HOME,
    severity=Severity.GREEN,
    message=(
        "Your symptoms appear mild. Get plenty of rest, stay hydrated, and monitor your "
        "condition. Seek medical care if symptoms worsen."
    ),
    rule_id="no_concerning_symptoms",
)

SYMPTOM_RULES: tuple[TriageRule, ...] = (
    TriageRule(
        rule_id="chest_pain",
        description="Chest pain alone is an emergency symptom",
        verdict=_CHEST_PAIN,
        required_all=("chestPain",),
    ),
    TriageRule(
        rule_id="fever_with_severe_headache",
        description="Fever together with severe headache",
        verdict=_FEVER_WITH_HEADACHE,
        required_all=("fever", "severeHeadache"),
    ),
    TriageRule(
        rule_id="fever",
        description="Fever on its own",
        verdict=Verdict(Label.VISIT_CLINIC, Severity.YELLOW, _SEE_PROFESSIONAL_MESSAGE, "fever"),
        required_all=("fever",),
    ),
    TriageRule(
        rule_id="nausea_with_severe_headache",
        description="Nausea together with severe headache",
        verdict=Verdict(
            Label.VISIT_CLINIC,
            Severity.YELLOW,
            _SEE_PROFESSIONAL_MESSAGE,
            "nausea_with_severe_headache",
        ),
        required_all=("nausea", "severeHeadache"),
    ),
    TriageRule(
        rule_id="cough_with_secondary_symptom",
        description="Cough with fever or fatigue",
        verdict=_COMBINED_SYMPTOMS,
        required_all=("cough",),
        required_any=("fever", "fatigue"),
    ),
    TriageRule(
        rule_id="moderate_symptom",
        description="Any single moderate symptom",
        verdict=_MODERATE_SYMPTOM,
        required_any=("cough", "nausea", "severeHeadache"),
    ),
    TriageRule(
        rule_id="no_concerning_symptoms",
        description="Nothing concerning reported",
        verdict=_MILD,
    ),
)

QUICK_SCREEN_RULES: tuple[TriageRule, ...] = (
    TriageRule(
        rule_id="urgent_symptom",
        description="Breathing difficulty or chest pain",
        verdict=Verdict(
            Label.SEEK_URGENT_CARE,
            Severity.RED,
            "Seek urgent medical help immediately.",
            "urgent_symptom",
        ),
        required_any=("breathing", "chestPain"),
    ),
    TriageRule(
        rule_id="moderate_symptom",
        description="Fever or nausea",
        verdict=Verdict(
            Label.VISIT_CLINIC,
            Severity.YELLOW,
            "Please visit the campus clinic for further evaluation.",
            "moderate_symptom",
        ),
        required_any=("fever", "nausea"),
    ),
    TriageRule(
        rule_id="mild",
        description="No urgent or moderate symptoms",
        verdict=Verdict(
            Label.REST_AT_HOME,
            Severity.GREEN,
            "Your symptoms seem mild. Rest and take care at home.",
            "mild",
        ),
    ),
)
