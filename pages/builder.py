"""
Builder Page

Form for configuring a build: manufacturer, year, engine, intended use,
add-ons, color scheme and delivery. Every widget writes straight through
to the session ConfigurationService; the running quote is shown in the
sidebar.
"""

import sys
import os

# Add the parent directory to the Python path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import asyncio
from datetime import date

import streamlit as st

from domain import (
    ADD_ON_LABELS,
    COLOR_SCHEMES,
    DEFAULT_DELIVERY_DAYS,
    ENGINE_SIZES,
    SOCIAL_HANDLE_ADD_ON,
    USE_TYPES,
    YEARS,
    StorageUnavailable,
)
from logging_config import setup_logging
from services.configuration_service import format_currency
from state import (
    acknowledge_saved,
    get_build_service,
    get_catalog_service,
    get_catalog_store,
    get_configuration_service,
    get_last_saved,
    mark_saved,
    reload_catalog,
    ss_get,
    ss_init,
    ss_set,
)
from ui import delivery_date_update, earliest_delivery_date, parse_delivery_date, render_option_select

logger = setup_logging(__name__, log_file="builder_page.log")

ss_init({"form_gen": 0})

configuration = get_configuration_service()
catalog = get_catalog_store()


def _key(name: str) -> str:
    # Bumping form_gen on reset gives every widget a fresh identity
    return f"{name}_{ss_get('form_gen', 0)}"


def render_sidebar_quote() -> None:
    with st.sidebar.container(border=True):
        st.caption("Running quote")
        st.metric("Estimated Price", format_currency(configuration.compute_total_price()))
        st.write(f"Base: {format_currency(configuration.compute_base_price())}")
        st.write(f"Add-ons: {format_currency(configuration.compute_add_on_cost())}")
        st.write(f"Express: {format_currency(configuration.compute_express_fee())}")
        st.write(f"Delivery: {configuration.compute_delivery_estimate_label()}")


def render_catalog_fields() -> None:
    config = configuration.configuration

    if get_catalog_service().last_error is not None:
        st.warning("The manufacturer catalog could not be loaded.")
        if st.button("Retry loading catalog"):
            reload_catalog()
            st.rerun()

    manufacturer = render_option_select(
        "Manufacturer", catalog.manufacturers(), config.manufacturer, _key("manufacturer")
    )
    if manufacturer != config.manufacturer:
        configuration.update_manufacturer(manufacturer)

    year = render_option_select("Year", list(YEARS), config.year, _key("year"))
    if year != config.year:
        configuration.update_year(year)

    engine_size = render_option_select(
        "Engine Size", list(ENGINE_SIZES), config.engine_size, _key("engine_size")
    )
    if engine_size != config.engine_size:
        configuration.update_engine_size(engine_size)

    use_type = st.pills(
        "Intended Use",
        options=list(USE_TYPES),
        default=config.use_type.value,
        key=_key("use_type"),
    )
    # pills returns None when the active pill is clicked again; keep current
    if use_type and use_type != config.use_type.value:
        configuration.update_use_type(use_type)


def render_add_ons() -> None:
    st.subheader("Add-ons")
    cols = st.columns(2)
    for i, label in enumerate(ADD_ON_LABELS):
        checked = cols[i % 2].checkbox(
            label,
            value=configuration.configuration.add_ons[label],
            key=_key(f"addon_{label}"),
        )
        if checked != configuration.configuration.add_ons[label]:
            configuration.toggle_add_on(label)

    config = configuration.configuration
    if config.add_ons[SOCIAL_HANDLE_ADD_ON]:
        handle = st.text_input("Your @Handle", value=config.social_handle, key=_key("handle"))
        if handle != config.social_handle:
            configuration.update_social_handle(handle)


def render_style_and_delivery() -> None:
    config = configuration.configuration

    color_scheme = render_option_select(
        "Bike Color Scheme", list(COLOR_SCHEMES), config.color_scheme, _key("color")
    )
    if color_scheme != config.color_scheme:
        configuration.update_color_scheme(color_scheme)

    stored = parse_delivery_date(config.delivery_date)
    # Empty until the user picks; the default stays computed, never stored
    picked = st.date_input(
        f"Delivery Date ({DEFAULT_DELIVERY_DAYS}+ days)",
        value=stored,
        min_value=earliest_delivery_date(date.today(), stored),
        format="MM/DD/YYYY",
        help=f"Defaults to {configuration.compute_effective_delivery_date()}",
        key=_key("delivery_date"),
    )
    update = delivery_date_update(config.delivery_date, picked)
    if update is not None:
        configuration.update_delivery_date(update)

    express = st.checkbox(
        "Express Delivery (30 days, adds cost)",
        value=config.express_delivery,
        key=_key("express"),
    )
    if express != config.express_delivery:
        configuration.toggle_express_delivery()


def render_actions() -> None:
    save_col, reset_col = st.columns(2)

    if save_col.button("Save Build", type="primary", use_container_width=True):
        try:
            record = asyncio.run(get_build_service().save(configuration.configuration))
        except StorageUnavailable as e:
            logger.error(f"Save failed: {e}")
            st.error("Could not save the build. Please try again.")
        else:
            mark_saved(record)

    if reset_col.button("Start Over", use_container_width=True):
        configuration.reset()
        ss_set("form_gen", ss_get("form_gen", 0) + 1)
        st.rerun()

    saved = get_last_saved()
    if saved is not None:
        st.toast("Congrats on building your dream bike!")
        st.success(f"Saved as build #{saved.id}")
        acknowledge_saved()


def main():
    st.title("MotoRecs - Build Your Dream Bike")
    render_catalog_fields()
    render_add_ons()
    render_style_and_delivery()
    st.divider()
    render_actions()
    render_sidebar_quote()


main()
