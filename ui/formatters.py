"""
UI Formatting Utilities

Helper functions for consistent display formatting across Streamlit pages.

Design Principles:
- Pure functions with no side effects
- Reuse the service layer's pricing and delivery helpers
- Return simple types (str, Path) for flexibility
"""

from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Optional

from millify import millify

from domain.catalog import DELIVERY_DATE_FORMAT
from domain.models import BuildRecord
from services.configuration_service import (
    delivery_estimate_label,
    format_currency,
    format_delivery_date,
)
from settings_service import PROJECT_ROOT

IMAGES_DIR = PROJECT_ROOT / "data" / "images"
IMAGE_SUFFIXES = (".png", ".jpg", ".jpeg", ".webp")


def format_price_compact(price: float, precision: int = 1) -> str:
    """
    Format a price with millify notation for tight layouts.

    Args:
        price: Price in USD
        precision: Number of decimal places

    Returns:
        Formatted price string (e.g., "$11.2k"), or "N/A" for zero
    """
    if not price:
        return "N/A"
    return f"${millify(price, precision=precision)}"


def format_delivery(delivery_date: str, express_delivery: bool) -> str:
    """Delivery date with its fixed window label, e.g. "01/17/2027 (90 days)"."""
    return f"{delivery_date} ({delivery_estimate_label(express_delivery)})"


def parse_delivery_date(value: str) -> Optional[date]:
    """Parse a stored MM/DD/YYYY date; None for blank or freeform text."""
    try:
        return datetime.strptime(value, DELIVERY_DATE_FORMAT).date()
    except ValueError:
        return None


def earliest_delivery_date(today: date, stored: Optional[date] = None) -> date:
    """First selectable delivery day: tomorrow, or an earlier stored pick."""
    earliest = today + timedelta(days=1)
    if stored is not None and stored < earliest:
        return stored
    return earliest


def delivery_date_update(stored: str, picked: Optional[date]) -> Optional[str]:
    """
    Value to store for a date picker result.

    Args:
        stored: delivery_date currently held by the configuration
        picked: Date returned by the picker (None when cleared)

    Returns:
        New delivery_date string, "" to clear it, or None when nothing changed
    """
    current = parse_delivery_date(stored) if stored else None
    if picked == current:
        return None
    if picked is None:
        return ""
    return format_delivery_date(picked)


def format_build_title(record: BuildRecord) -> str:
    """One-line heading for a saved build."""
    parts = [p for p in (record.year, record.manufacturer, record.engine_size) if p]
    title = " ".join(parts) if parts else "Untitled build"
    return f"#{record.id} {title}" if record.id is not None else title


def format_build_price(price: float) -> str:
    """Full and compact price side by side for the recent builds list."""
    return f"{format_currency(price)} ({format_price_compact(price)})"


def resolve_image_path(image_ref: str, images_dir: Path = IMAGES_DIR) -> Optional[Path]:
    """
    Find the image file for a catalog image token.

    Args:
        image_ref: Image token from the catalog (file stem)
        images_dir: Directory holding manufacturer images

    Returns:
        Path to the first matching file, or None if there is none
    """
    if not image_ref:
        return None
    for suffix in IMAGE_SUFFIXES:
        candidate = images_dir / f"{image_ref}{suffix}"
        if candidate.exists():
            return candidate
    return None
