"""
Session State Utilities

Thin helpers over Streamlit's session_state used by the pages and by
state/build_state.py.
"""

import streamlit as st
from typing import TypeVar, Any, Optional

T = TypeVar('T')


def ss_get(key: str, default: T = None) -> Optional[T]:
    """Return session_state[key] unless missing or None, else default."""
    value = st.session_state.get(key)
    return default if value is None else value


def ss_init(defaults: dict[str, Any]) -> None:
    """Seed session_state keys that have not been set yet.

    Args:
        defaults: Mapping of key -> initial value
    """
    for key, default in defaults.items():
        st.session_state.setdefault(key, default)


def ss_set(key: str, value: Any) -> None:
    st.session_state[key] = value
