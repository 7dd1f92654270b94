"""
Services Package

Business logic for the build configurator. Services take their
dependencies as constructor arguments and never import Streamlit;
per-session instances are created in state/build_state.py.

Available Services:
- ConfigurationService: the in-progress build, quote and summary text
- CatalogService: manufacturer catalog loading
- BuildService: saving, listing and deleting builds
"""

from services.configuration_service import (
    ConfigurationService,
    compute_add_on_cost,
    compute_base_price,
    compute_express_fee,
    compute_total_price,
    default_delivery_date,
    delivery_estimate_label,
    format_add_ons,
    format_currency,
    format_delivery_date,
)
from services.catalog_service import CatalogService, parse_bike_catalog
from services.build_service import BuildService

__all__ = [
    # Configuration
    "ConfigurationService",
    "compute_add_on_cost",
    "compute_base_price",
    "compute_express_fee",
    "compute_total_price",
    "default_delivery_date",
    "delivery_estimate_label",
    "format_add_ons",
    "format_currency",
    "format_delivery_date",
    # Catalog
    "CatalogService",
    "parse_bike_catalog",
    # Builds
    "BuildService",
]
