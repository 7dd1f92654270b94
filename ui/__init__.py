"""
UI Package

Presentation layer components for Streamlit pages: formatting helpers and
shared widgets. Keeps page files focused on layout and user interaction.
"""

from ui.formatters import (
    delivery_date_update,
    earliest_delivery_date,
    format_build_price,
    format_build_title,
    format_delivery,
    format_price_compact,
    parse_delivery_date,
    resolve_image_path,
)
from ui.components import render_option_select, render_summary_row

__all__ = [
    # Formatters
    "delivery_date_update",
    "earliest_delivery_date",
    "format_build_price",
    "format_build_title",
    "format_delivery",
    "format_price_compact",
    "parse_delivery_date",
    "resolve_image_path",
    # Components
    "render_option_select",
    "render_summary_row",
]
