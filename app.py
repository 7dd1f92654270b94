"""MotoRecs Streamlit entry point.

Run with:
    streamlit run app.py
"""

import streamlit as st

from domain.errors import StorageUnavailable
from init_db import ensure_db
from logging_config import setup_logging

logger = setup_logging(__name__)


@st.cache_resource
def _init_store() -> None:
    # st.cache_resource does not cache exceptions, so a failed init is retried next run
    ensure_db()


st.set_page_config(page_title="MotoRecs", page_icon="🏍️", layout="centered")

try:
    _init_store()
except StorageUnavailable as e:
    logger.error(f"Build store failed to initialize; saving is unavailable: {e}")
    st.sidebar.error("Build store unavailable. Saved builds are disabled.")

pages = [
    st.Page("pages/builder.py", title="Builder", default=True),
    st.Page("pages/summary.py", title="Summary"),
    st.Page("pages/recent_builds.py", title="Recent Builds"),
]
st.navigation(pages).run()
