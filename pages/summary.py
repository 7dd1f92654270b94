"""
Summary Page

Read-only review of the current build: manufacturer image and flavor
text, every selection, the quote, and a plain-text summary to copy and
share.
"""

import sys
import os

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import streamlit as st

from services.configuration_service import format_add_ons, format_currency
from state import get_catalog_store, get_configuration_service
from ui import format_delivery, render_summary_row, resolve_image_path

configuration = get_configuration_service()
catalog = get_catalog_store()


def main():
    st.title("Build Summary")

    config = configuration.configuration
    description = catalog.description_for(config.manufacturer)

    image_path = resolve_image_path(catalog.image_for(config.manufacturer))
    if image_path is not None:
        st.image(str(image_path), caption=f"{config.manufacturer} Image", use_container_width=True)

    render_summary_row("Manufacturer", config.manufacturer)
    st.markdown(f"*{description}*")
    render_summary_row("Year", config.year)
    render_summary_row("Engine Size", config.engine_size)
    render_summary_row("Use Type", config.use_type.display_name)
    render_summary_row("Add-ons", format_add_ons(config.selected_add_ons))
    render_summary_row(
        "Delivery Date",
        format_delivery(configuration.compute_effective_delivery_date(), config.express_delivery),
    )
    if config.express_delivery:
        st.caption(f"Express Delivery Fee: +{format_currency(configuration.compute_express_fee())}")
    if config.social_handle.strip():
        render_summary_row("Social Handle", config.social_handle)
    render_summary_row("Color Scheme", config.color_scheme or "Default")

    st.divider()
    st.subheader(f"Estimated Price: {format_currency(configuration.compute_total_price())}")

    with st.expander("Share your build"):
        st.code(configuration.build_summary_text(description), language=None)


main()
