import pytest

from symptom_triage.catalog import HEALTH_SCREENING_CATALOG, QUICK_SCREEN_CATALOG, SYMPTOM_CATALOG
from symptom_triage.config import settings
from symptom_triage.engine import RuleTriageEngine, WeightedTriageEngine
from symptom_triage.storage import InMemoryAnswerStore

_TRIAGE_ENV = (
    "TRIAGE_PROFILE",
    "TRIAGE_URGENT_THRESHOLD",
    "TRIAGE_CLINIC_THRESHOLD",
    "TRIAGE_ANSWER_STORE",
    "TRIAGE_SESSION_TTL_SECONDS",
    "TRIAGE_MAX_SESSIONS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _TRIAGE_ENV:
        monkeypatch.delenv(name, raising=False)
    settings.reset_services()
    yield
    settings.reset_services()


def test_default_profile_is_symptom_rules():
    services = settings.build_services()

    assert services["profile"] == "symptom_rules"
    assert services["catalog"] is SYMPTOM_CATALOG
    assert isinstance(services["engine"], RuleTriageEngine)
    assert services["answer_store"] is None
    assert services["registry"].controller is services["controller"]
    assert services["controller"].catalog is services["catalog"]


def test_profile_from_environment_is_normalized(monkeypatch):
    monkeypatch.setenv("TRIAGE_PROFILE", "  Quick_Screen ")

    services = settings.build_services()

    assert services["profile"] == "quick_screen"
    assert services["catalog"] is QUICK_SCREEN_CATALOG


def test_weighted_profile_reads_thresholds(monkeypatch):
    monkeypatch.setenv("TRIAGE_URGENT_THRESHOLD", "8")
    monkeypatch.setenv("TRIAGE_CLINIC_THRESHOLD", "3")

    services = settings.build_services("weighted_screening")
    engine = services["engine"]

    assert services["catalog"] is HEALTH_SCREENING_CATALOG
    assert isinstance(engine, WeightedTriageEngine)
    assert engine.urgent_threshold == 8
    assert engine.clinic_threshold == 3


def test_weighted_profile_defaults():
    engine = settings.build_services("weighted_screening")["engine"]

    assert engine.urgent_threshold == 6
    assert engine.clinic_threshold is None


@pytest.mark.parametrize(
    ("env_name", "value"),
    [
        ("TRIAGE_PROFILE", "llm_triage"),
        ("TRIAGE_ANSWER_STORE", "postgres"),
        ("TRIAGE_URGENT_THRESHOLD", "six"),
        ("TRIAGE_URGENT_THRESHOLD", "0"),
        ("TRIAGE_CLINIC_THRESHOLD", "-1"),
        ("TRIAGE_SESSION_TTL_SECONDS", "0"),
        ("TRIAGE_MAX_SESSIONS", "many"),
    ],
)
def test_invalid_environment_values_raise(monkeypatch, env_name, value):
    monkeypatch.setenv("TRIAGE_PROFILE", "weighted_screening")
    monkeypatch.setenv(env_name, value)

    with pytest.raises(ValueError, match=env_name):
        settings.build_services()


def test_clinic_threshold_must_stay_below_urgent(monkeypatch):
    monkeypatch.setenv("TRIAGE_URGENT_THRESHOLD", "4")
    monkeypatch.setenv("TRIAGE_CLINIC_THRESHOLD", "5")

    with pytest.raises(ValueError):
        settings.build_services("weighted_screening")


def test_unknown_explicit_profile_rejected():
    with pytest.raises(ValueError, match="Unsupported triage profile"):
        settings.build_services("llm_triage")


def test_memory_answer_store_is_wired_into_controller(monkeypatch):
    monkeypatch.setenv("TRIAGE_ANSWER_STORE", "memory")

    services = settings.build_services()
    store = services["answer_store"]
    controller = services["controller"]
    session = controller.start()
    controller.submit_answer(session, True)

    assert isinstance(store, InMemoryAnswerStore)
    assert controller.answer_store is store
    assert [record.question_id for record in store.records_for(session.session_id)] == ["fever"]


def test_get_services_is_cached_until_reset(monkeypatch):
    first = settings.get_services()

    assert settings.get_services() is first
    assert settings.get_controller() is first["controller"]
    assert settings.get_engine() is first["engine"]
    assert settings.get_catalog() is first["catalog"]

    monkeypatch.setenv("TRIAGE_PROFILE", "weighted_screening")
    assert settings.get_services()["profile"] == "symptom_rules"

    settings.reset_services()
    assert settings.get_services()["profile"] == "weighted_screening"


def test_registry_limits_from_environment(monkeypatch):
    monkeypatch.setenv("TRIAGE_SESSION_TTL_SECONDS", "120")
    monkeypatch.setenv("TRIAGE_MAX_SESSIONS", "50")

    registry = settings.build_services()["registry"]

    assert registry.idle_ttl_seconds == 120
    assert registry.max_sessions == 50


def test_registry_limit_defaults():
    registry = settings.build_services()["registry"]

    assert registry.idle_ttl_seconds == 1800
    assert registry.max_sessions == 1000
