"""
State Management Module

Streamlit session state for the presentation layer:
- Session state utilities (ss_get, ss_init, ss_set)
- Service registry (get_service, clear_services)
- Build session wiring (configuration, catalog, saved-build confirmation)

Usage:
    from state import get_configuration_service, get_catalog_store
"""

from state.session_state import ss_get, ss_init, ss_set
from state.service_registry import get_service, clear_services
from state.build_state import (
    acknowledge_saved,
    get_build_service,
    get_catalog_service,
    get_catalog_store,
    get_configuration_service,
    get_last_saved,
    mark_saved,
    reload_catalog,
)

__all__ = [
    # Session state utilities
    'ss_get',
    'ss_init',
    'ss_set',
    # Service registry
    'get_service',
    'clear_services',
    # Build session
    'acknowledge_saved',
    'get_build_service',
    'get_catalog_service',
    'get_catalog_store',
    'get_configuration_service',
    'get_last_saved',
    'mark_saved',
    'reload_catalog',
]
