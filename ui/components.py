"""
UI Components

Small Streamlit widgets shared by the builder and summary pages.
"""

import streamlit as st


def render_summary_row(label: str, value: str) -> None:
    """Label on the left, value on the right."""
    left, right = st.columns([1, 2])
    left.markdown(f"**{label}**")
    right.write(value or "-")


def render_option_select(label: str, options: list[str], current: str, key: str) -> str:
    """Selectbox over catalog options that keeps an off-catalog current value.

    Configuration fields accept freeform strings, so a value set outside this
    form may not be one of the offered options; it is shown first rather
    than silently replaced.
    """
    choices = list(options)
    if current and current not in choices:
        choices.insert(0, current)
    index = choices.index(current) if current in choices else None
    selected = st.selectbox(label, choices, index=index, key=key, placeholder=f"Choose {label.lower()}")
    return selected or ""
