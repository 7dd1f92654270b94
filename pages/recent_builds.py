"""
Recent Builds Page

Lists saved builds, newest first, with a delete button per build.
"""

import sys
import os

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import asyncio

import streamlit as st

from domain import StorageUnavailable
from domain.models import BuildRecord
from logging_config import setup_logging
from services.configuration_service import format_add_ons
from state import get_build_service
from ui import format_build_price, format_build_title, format_delivery

logger = setup_logging(__name__, log_file="recent_builds.log")

service = get_build_service()


def render_build(build: BuildRecord) -> None:
    with st.container(border=True):
        title_col, delete_col = st.columns([5, 1])
        title_col.markdown(f"**{format_build_title(build)}**")
        if delete_col.button("Delete", key=f"delete_{build.id}"):
            try:
                asyncio.run(service.delete_build(build.id))
            except StorageUnavailable as e:
                logger.error(f"Delete of build {build.id} failed: {e}")
                st.error("Could not delete the build. Please try again.")
            else:
                st.rerun()

        st.write(f"Use: {build.use_type} | Color: {build.color_scheme or 'Default'}")
        st.write(f"Add-ons: {format_add_ons(build.selected_add_ons)}")
        if build.delivery_date:
            st.write(f"Delivery: {format_delivery(build.delivery_date, build.express_delivery)}")
        if build.social_handle:
            st.write(f"Handle: {build.social_handle}")
        st.caption(f"Estimated: {format_build_price(service.estimate_price(build))}")


def main():
    st.title("Recent Builds")
    try:
        builds = asyncio.run(service.list_builds())
    except StorageUnavailable as e:
        logger.error(f"Listing builds failed: {e}")
        st.error("Saved builds are unavailable right now.")
        if st.button("Retry"):
            st.rerun()
        return

    if not builds:
        st.info("No saved builds yet.")
        return

    for build in builds:
        render_build(build)


main()
