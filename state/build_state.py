"""
Build Session State

Wires the per-session ConfigurationService, catalog and BuildService into
Streamlit session state, and tracks the "build saved" confirmation.

The confirmation is tied to the configuration that was saved: the
configuration listener clears it as soon as the user edits anything.
"""

import streamlit as st

from domain.catalog import CatalogStore
from domain.models import BuildRecord
from services.build_service import BuildService
from services.catalog_service import CatalogService
from services.configuration_service import ConfigurationService
from state.service_registry import clear_services, get_service
from state.session_state import ss_get, ss_set

LAST_SAVED_KEY = "last_saved_build"


def _create_configuration_service() -> ConfigurationService:
    service = ConfigurationService()
    service.subscribe(lambda _config: st.session_state.pop(LAST_SAVED_KEY, None))
    return service


def get_configuration_service() -> ConfigurationService:
    return get_service("configuration_service", _create_configuration_service)


def get_catalog_service() -> CatalogService:
    return get_service("catalog_service", CatalogService.create_default)


def get_catalog_store() -> CatalogStore:
    """Session catalog, loaded on first access.

    Loaded once per session so the randomly picked descriptions stay
    stable while the user moves between pages.
    """
    service = get_catalog_service()
    if not ss_get("catalog_loaded", False):
        service.load()
        ss_set("catalog_loaded", True)
    return service.store


def reload_catalog() -> CatalogStore:
    """Reload the catalog document, picking fresh descriptions."""
    clear_services("catalog_service")
    ss_set("catalog_loaded", False)
    return get_catalog_store()


def get_build_service() -> BuildService:
    return get_service("build_service", BuildService.create_default)


def mark_saved(record: BuildRecord) -> None:
    ss_set(LAST_SAVED_KEY, record)


def get_last_saved() -> BuildRecord | None:
    return ss_get(LAST_SAVED_KEY)


def acknowledge_saved() -> None:
    st.session_state.pop(LAST_SAVED_KEY, None)

