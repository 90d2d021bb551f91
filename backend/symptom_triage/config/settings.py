"""Configuration and service factory for the triage service."""
import os
import threading
from typing import Dict, Any

from ..catalog import HEALTH_SCREENING_CATALOG, QUICK_SCREEN_CATALOG, SYMPTOM_CATALOG
from ..catalog.questions import QuestionCatalog
from ..core.logging_utils import log_event
from ..engine import (
    QUICK_SCREEN_RULES,
    SYMPTOM_RULES,
    BaseTriageEngine,
    RuleTriageEngine,
    WeightedTriageEngine,
)
from ..session import SessionController, SessionRegistry
from ..session.registry import DEFAULT_IDLE_TTL_SECONDS, DEFAULT_MAX_SESSIONS
from ..storage import BaseAnswerStore, InMemoryAnswerStore


# Singleton service instances
_services: Dict[str, Any] = None
_services_lock = threading.Lock()
_SUPPORTED_PROFILES = ("symptom_rules", "weighted_screening", "quick_screen")
_SUPPORTED_ANSWER_STORES = ("none", "memory")
_DEFAULT_URGENT_THRESHOLD = 6


def _normalize_choice(env_name: str, supported: tuple[str, ...], default: str) -> str:
    raw = os.environ.get(env_name, default).strip().lower()
    if raw in supported:
        return raw
    supported_values = ", ".join(supported)
    raise ValueError(
        f"Unsupported {env_name} value '{raw}'. Supported values: {supported_values}."
    )


def _get_int_env(env_name: str, default: int | None) -> int | None:
    raw = os.environ.get(env_name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as err:
        raise ValueError(f"{env_name} must be an integer") from err
    if value <= 0:
        raise ValueError(f"{env_name} must be positive")
    return value


def resolve_profile() -> str:
    return _normalize_choice("TRIAGE_PROFILE", _SUPPORTED_PROFILES, "symptom_rules")


def _build_profile(profile: str) -> tuple[QuestionCatalog, BaseTriageEngine]:
    if profile == "symptom_rules":
        engine = RuleTriageEngine(SYMPTOM_RULES)
        engine.check_catalog(SYMPTOM_CATALOG)
        return SYMPTOM_CATALOG, engine
    if profile == "quick_screen":
        engine = RuleTriageEngine(QUICK_SCREEN_RULES)
        engine.check_catalog(QUICK_SCREEN_CATALOG)
        return QUICK_SCREEN_CATALOG, engine
    if profile == "weighted_screening":
        urgent_threshold = _get_int_env("TRIAGE_URGENT_THRESHOLD", _DEFAULT_URGENT_THRESHOLD)
        clinic_threshold = _get_int_env("TRIAGE_CLINIC_THRESHOLD", None)
        return HEALTH_SCREENING_CATALOG, WeightedTriageEngine(
            urgent_threshold=urgent_threshold,
            clinic_threshold=clinic_threshold,
        )
    supported = ", ".join(_SUPPORTED_PROFILES)
    raise ValueError(f"Unsupported triage profile '{profile}'. Supported values: {supported}.")


def _build_answer_store() -> BaseAnswerStore | None:
    store_name = _normalize_choice("TRIAGE_ANSWER_STORE", _SUPPORTED_ANSWER_STORES, "none")
    if store_name == "memory":
        return InMemoryAnswerStore()
    return None


def build_services(profile: str | None = None) -> Dict[str, Any]:
    """
    Build a fresh set of service instances.

    Returns a dictionary with:
        - 'profile': Active profile name
        - 'catalog': Question catalog shared by the engine and controller
        - 'engine': Triage engine for the catalog
        - 'controller': Session state machine
        - 'registry': Live sessions for the HTTP API, bounded by idle TTL and size
        - 'answer_store': Optional answer persistence (None when disabled)
    """
    resolved_profile = profile or resolve_profile()
    catalog, engine = _build_profile(resolved_profile)
    answer_store = _build_answer_store()
    controller = SessionController(catalog, engine, answer_store=answer_store)

    log_event(
        component="settings",
        event="services_built",
        details={
            "profile": resolved_profile,
            "strategy": engine.strategy,
            "questions": len(catalog),
            "answer_store": type(answer_store).__name__ if answer_store else None,
        },
    )
    return {
        "profile": resolved_profile,
        "catalog": catalog,
        "engine": engine,
        "controller": controller,
        "registry": SessionRegistry(
            controller,
            idle_ttl_seconds=_get_int_env("TRIAGE_SESSION_TTL_SECONDS", DEFAULT_IDLE_TTL_SECONDS),
            max_sessions=_get_int_env("TRIAGE_MAX_SESSIONS", DEFAULT_MAX_SESSIONS),
        ),
        "answer_store": answer_store,
    }


def get_services() -> Dict[str, Any]:
    """Factory function to get or initialize the shared service instances."""
    global _services
    with _services_lock:
        if _services is None:
            _services = build_services()
        return _services


def reset_services() -> None:
    """Drop cached services so the next call re-reads the environment."""
    global _services
    with _services_lock:
        _services = None


def get_controller() -> SessionController:
    """Get the session controller instance."""
    return get_services()["controller"]


def get_engine() -> BaseTriageEngine:
    """Get the triage engine instance."""
    return get_services()["engine"]


def get_catalog() -> QuestionCatalog:
    """Get the active question catalog."""
    return get_services()["catalog"]
