"""
Configuration Service

Owns the single in-progress BuildConfiguration for a session and derives
the quote, delivery estimate and summary text from it. No Streamlit
imports; the presentation layer subscribes to changes instead.

Design Principles:
1. Immutable state - each update swaps in a new frozen configuration
2. Pure Functions - pricing and delivery helpers take plain values so
   saved BuildRecords can be priced the same way
3. Explicit change channel - listeners are called after each mutation
"""

from dataclasses import replace
from datetime import date, timedelta
from typing import Callable, Iterable, Optional

from domain.catalog import (
    ADD_ON_UNIT_COST,
    DEFAULT_DELIVERY_DAYS,
    DELIVERY_DATE_FORMAT,
    EXPRESS_DELIVERY_LABEL,
    EXPRESS_FEE,
    PRICE_TABLE,
    STANDARD_DELIVERY_LABEL,
)
from domain.enums import UseType
from domain.models import BuildConfiguration
from logging_config import setup_logging

logger = setup_logging(__name__, log_file="configuration_service.log")

ConfigurationListener = Callable[[BuildConfiguration], None]

SUMMARY_TITLE = "MotoRecs Build Summary"
NO_ADD_ONS = "None"


# =============================================================================
# Pure Pricing & Delivery Functions
# =============================================================================

def compute_base_price(engine_size: str) -> int:
    """Base price for an engine size; 0 for unknown or empty sizes."""
    return PRICE_TABLE.get(engine_size, 0)


def compute_add_on_cost(selected_count: int) -> int:
    return ADD_ON_UNIT_COST * selected_count


def compute_express_fee(express_delivery: bool) -> int:
    return EXPRESS_FEE if express_delivery else 0


def compute_total_price(engine_size: str, selected_count: int, express_delivery: bool) -> int:
    return (
        compute_base_price(engine_size)
        + compute_add_on_cost(selected_count)
        + compute_express_fee(express_delivery)
    )


def format_currency(amount: float) -> str:
    """US dollar formatting, e.g. 11250 -> "$11,250.00"."""
    return f"${amount:,.2f}"


def format_add_ons(labels: Iterable[str]) -> str:
    """Comma-joined add-on labels, or "None" when nothing is selected."""
    labels = list(labels)
    return ", ".join(labels) if labels else NO_ADD_ONS


def format_delivery_date(value: date) -> str:
    """Format a date as MM/DD/YYYY."""
    return value.strftime(DELIVERY_DATE_FORMAT)


def default_delivery_date(today: date) -> str:
    return format_delivery_date(today + timedelta(days=DEFAULT_DELIVERY_DAYS))


def delivery_estimate_label(express_delivery: bool) -> str:
    """Fixed delivery window label; never derived from the chosen date."""
    return EXPRESS_DELIVERY_LABEL if express_delivery else STANDARD_DELIVERY_LABEL


# =============================================================================
# Configuration Service
# =============================================================================

class ConfigurationService:
    """Holds and edits the current build configuration.

    Update methods accept any string; catalogs only limit what the UI
    offers. Each successful mutation notifies subscribed listeners with
    the new configuration.

    Args:
        initial: Starting configuration (defaults to BuildConfiguration.default()).
        today: Zero-argument callable returning today's date.
    """

    def __init__(
        self,
        initial: Optional[BuildConfiguration] = None,
        today: Callable[[], date] = date.today,
    ):
        self._config = initial or BuildConfiguration.default()
        self._today = today
        self._listeners: list[ConfigurationListener] = []

    @property
    def configuration(self) -> BuildConfiguration:
        return self._config

    # -----------------------------------------------------------------
    # Change notification
    # -----------------------------------------------------------------

    def subscribe(self, listener: ConfigurationListener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _set(self, config: BuildConfiguration) -> BuildConfiguration:
        self._config = config
        for listener in list(self._listeners):
            listener(config)
        return config

    # -----------------------------------------------------------------
    # Updates
    # -----------------------------------------------------------------

    def update_manufacturer(self, value: str) -> BuildConfiguration:
        return self._set(replace(self._config, manufacturer=value))

    def update_year(self, value: str) -> BuildConfiguration:
        return self._set(replace(self._config, year=value))

    def update_engine_size(self, value: str) -> BuildConfiguration:
        return self._set(replace(self._config, engine_size=value))

    def update_use_type(self, value: UseType | str) -> BuildConfiguration:
        """Set the use type from a UseType or its display string.

        Raises:
            ValueError: If a string names no use type.
        """
        return self._set(replace(self._config, use_type=UseType.from_value(value)))

    def update_delivery_date(self, value: str) -> BuildConfiguration:
        return self._set(replace(self._config, delivery_date=value))

    def update_social_handle(self, value: str) -> BuildConfiguration:
        return self._set(replace(self._config, social_handle=value))

    def update_color_scheme(self, value: str) -> BuildConfiguration:
        return self._set(replace(self._config, color_scheme=value))

    def toggle_add_on(self, label: str) -> BuildConfiguration:
        """Flip one add-on.

        Raises:
            InvalidAddOnLabel: If label is not a fixed add-on label; the
                configuration is left unchanged.
        """
        add_ons = self._config.add_ons.toggled(label)
        return self._set(replace(self._config, add_ons=add_ons))

    def toggle_express_delivery(self) -> BuildConfiguration:
        return self._set(
            replace(self._config, express_delivery=not self._config.express_delivery)
        )

    def reset(self) -> BuildConfiguration:
        logger.debug("Configuration reset to defaults")
        return self._set(BuildConfiguration.default())

    # -----------------------------------------------------------------
    # Derived values
    # -----------------------------------------------------------------

    def compute_base_price(self) -> int:
        return compute_base_price(self._config.engine_size)

    def compute_add_on_cost(self) -> int:
        return compute_add_on_cost(self._config.add_ons.selected_count)

    def compute_express_fee(self) -> int:
        return compute_express_fee(self._config.express_delivery)

    def compute_total_price(self) -> int:
        return self.compute_base_price() + self.compute_add_on_cost() + self.compute_express_fee()

    def compute_effective_delivery_date(self) -> str:
        """The picked delivery date, or today + 90 days when none is set."""
        if self._config.delivery_date:
            return self._config.delivery_date
        return default_delivery_date(self._today())

    def compute_delivery_estimate_label(self) -> str:
        return delivery_estimate_label(self._config.express_delivery)

    def build_summary_text(self, manufacturer_description: str) -> str:
        """Multi-line report of the current build for sharing.

        Args:
            manufacturer_description: Flavor text from the catalog store.
        """
        config = self._config
        lines = [
            SUMMARY_TITLE,
            f"Manufacturer: {config.manufacturer}",
            f"Description: {manufacturer_description}",
            f"Year: {config.year}",
            f"Engine Size: {config.engine_size}",
            f"Use Type: {config.use_type.value}",
            f"Add-ons: {format_add_ons(config.selected_add_ons)}",
            f"Delivery Date: {self.compute_effective_delivery_date()} "
            f"({self.compute_delivery_estimate_label()})",
        ]
        if config.social_handle.strip():
            lines.append(f"Social Handle: {config.social_handle}")
        lines.append(f"Color Scheme: {config.color_scheme}")
        lines.append(f"Estimated Price: {format_currency(self.compute_total_price())}")
        return "\n".join(lines)
