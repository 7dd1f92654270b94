"""
Catalog Domain Model

Fixed option sets offered by the builder plus the manufacturer catalog
entry type. Pure Python, no Streamlit or infrastructure dependencies.

The catalogs only constrain what the UI offers; a BuildConfiguration may
hold values that appear in none of them.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from domain.enums import UseType


# =============================================================================
# Fixed Option Sets
# =============================================================================

YEARS: tuple[str, ...] = tuple(str(year) for year in range(2000, 2026))

# Engine size -> base price in USD
PRICE_TABLE: dict[str, int] = {
    "125cc": 3500,
    "250cc": 5000,
    "300cc": 5400,
    "400cc": 6500,
    "600cc": 8000,
    "650cc": 8500,
    "700cc": 8900,
    "750cc": 9500,
    "900cc": 10000,
    "1000cc": 11000,
    "1100cc": 11500,
    "1200cc": 12500,
    "1400cc": 13500,
}

ENGINE_SIZES: tuple[str, ...] = tuple(PRICE_TABLE)

USE_TYPES: tuple[str, ...] = tuple(member.value for member in UseType)

ADD_ON_LABELS: tuple[str, ...] = (
    "Exhaust",
    "Graphics Kit",
    "Performance ECU",
    "Suspension",
    "Custom Headlights",
    "LEDs / HID Halos",
    "Custom Clip-ons",
    "ABS",
    "Heated Grips",
    "Full TFT Dash",
    "LED Dash",
    "Social Handle Decal",
)

# Selecting this add-on is what makes the social handle field relevant
SOCIAL_HANDLE_ADD_ON = "Social Handle Decal"

COLOR_SCHEMES: tuple[str, ...] = (
    "Black & Red",
    "Black & Orange",
    "Blue & White",
    "Red & White",
    "Yellow & Black",
    "White & Black",
    "Blue & Yellow",
    "Green & Black",
    "Matte Grey & Red",
    "Carbon Black & Gold",
    "Silver & Blue",
    "White & Gold",
)


# =============================================================================
# Pricing & Delivery Constants
# =============================================================================

ADD_ON_UNIT_COST = 500
EXPRESS_FEE = 750
EXPRESS_DELIVERY_LABEL = "30 days"
STANDARD_DELIVERY_LABEL = "90 days"
DEFAULT_DELIVERY_DAYS = 90
DELIVERY_DATE_FORMAT = "%m/%d/%Y"

MISSING_DESCRIPTION = "No description found."
DEFAULT_IMAGE = "default_image"


# =============================================================================
# Manufacturer Catalog
# =============================================================================

@dataclass(frozen=True)
class CatalogEntry:
    """
    One manufacturer parsed from the catalog document.

    Attributes:
        key: Manufacturer name shown in the builder (lookup is case-insensitive)
        description: Flavor text picked for this load
        image_ref: Image token for the summary screen
    """
    key: str
    description: str
    image_ref: str


class CatalogStore:
    """
    Immutable, ordered collection of manufacturer entries.

    Lookups are case-insensitive; when two entries share a key the first
    one in document order wins.
    """

    def __init__(
        self,
        entries: Iterable[CatalogEntry] = (),
        missing_description: str = MISSING_DESCRIPTION,
        default_image: str = DEFAULT_IMAGE,
    ):
        self._entries: tuple[CatalogEntry, ...] = tuple(entries)
        self._by_key: dict[str, CatalogEntry] = {}
        for entry in self._entries:
            self._by_key.setdefault(entry.key.casefold(), entry)
        self.missing_description = missing_description
        self.default_image = default_image

    @classmethod
    def empty(cls, **kwargs) -> "CatalogStore":
        return cls((), **kwargs)

    def manufacturers(self) -> list[str]:
        """Manufacturer keys in document order."""
        return [entry.key for entry in self._entries]

    def get(self, key: str) -> Optional[CatalogEntry]:
        if not key:
            return None
        return self._by_key.get(key.casefold())

    def description_for(self, key: str) -> str:
        entry = self.get(key)
        return entry.description if entry else self.missing_description

    def image_for(self, key: str) -> str:
        entry = self.get(key)
        return entry.image_ref if entry else self.default_image

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"CatalogStore({len(self)} entries)"
