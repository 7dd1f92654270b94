"""
Service Registry

Per-session singletons for services. Service and repository modules stay
free of Streamlit; pages reach them through this registry instead.
"""

import streamlit as st
from typing import TypeVar, Callable

T = TypeVar('T')

_PREFIX = "svc:"


def get_service(service_name: str, factory: Callable[[], T]) -> T:
    """Return the session's instance of a service, creating it on first use.

    Args:
        service_name: Unique name for the service
        factory: Zero-argument callable that creates the instance

    Example:
        def get_build_service() -> BuildService:
            return get_service("build_service", BuildService.create_default)
    """
    key = _PREFIX + service_name
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]


def clear_services(*service_names: str) -> None:
    """Drop services so they are re-created on next access."""
    for name in service_names:
        st.session_state.pop(_PREFIX + name, None)
