"""Configuration module for the triage service."""
from .settings import (
    build_services,
    get_services,
    reset_services,
    get_controller,
    get_engine,
    get_catalog,
)

__all__ = [
    "build_services",
    "get_services",
    "reset_services",
    "get_controller",
    "get_engine",
    "get_catalog",
]
