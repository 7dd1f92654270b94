"""
Domain Models Package

Core domain types for the build configurator. These dataclasses and
constants carry no Streamlit or database dependencies.

Key Components:
- Catalog: fixed option sets, price table, CatalogEntry, CatalogStore
- Enums: UseType
- Models: AddOnSet, BuildConfiguration, BuildRecord
- Errors: InvalidAddOnLabel, CatalogParseError, StorageUnavailable
"""

from domain.catalog import (
    ADD_ON_LABELS,
    ADD_ON_UNIT_COST,
    COLOR_SCHEMES,
    DEFAULT_DELIVERY_DAYS,
    ENGINE_SIZES,
    EXPRESS_DELIVERY_LABEL,
    EXPRESS_FEE,
    PRICE_TABLE,
    SOCIAL_HANDLE_ADD_ON,
    STANDARD_DELIVERY_LABEL,
    USE_TYPES,
    YEARS,
    CatalogEntry,
    CatalogStore,
)
from domain.enums import UseType
from domain.errors import (
    CatalogParseError,
    InvalidAddOnLabel,
    MotoRecsError,
    StorageUnavailable,
)
from domain.models import AddOnSet, BuildConfiguration, BuildRecord

__all__ = [
    # Catalog
    "ADD_ON_LABELS",
    "ADD_ON_UNIT_COST",
    "COLOR_SCHEMES",
    "DEFAULT_DELIVERY_DAYS",
    "ENGINE_SIZES",
    "EXPRESS_DELIVERY_LABEL",
    "EXPRESS_FEE",
    "PRICE_TABLE",
    "SOCIAL_HANDLE_ADD_ON",
    "STANDARD_DELIVERY_LABEL",
    "USE_TYPES",
    "YEARS",
    "CatalogEntry",
    "CatalogStore",
    # Enums
    "UseType",
    # Errors
    "MotoRecsError",
    "InvalidAddOnLabel",
    "CatalogParseError",
    "StorageUnavailable",
    # Models
    "AddOnSet",
    "BuildConfiguration",
    "BuildRecord",
]
