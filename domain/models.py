"""
Domain Models

Dataclasses representing the in-progress build configuration and the
persisted build record.

Design Principles:
1. Immutability (frozen=True) - every edit produces a new configuration
2. Factory methods - clean construction from defaults and DataFrame rows
3. Computed properties - add-on bookkeeping lives on the model
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Iterator, Optional
import pandas as pd

from domain.catalog import ADD_ON_LABELS
from domain.converters import safe_bool, safe_int, safe_str
from domain.enums import UseType
from domain.errors import InvalidAddOnLabel


# Type aliases for clarity
BuildID = int

ADD_ON_SEPARATOR = ", "


# =============================================================================
# AddOnSet - fixed add-on labels with their selected state
# =============================================================================

class AddOnSet(Mapping):
    """
    Immutable mapping of add-on label -> selected flag.

    The key set is always exactly ADD_ON_LABELS, iterated in that order.
    Labels can only be toggled, never added or removed.
    """

    __slots__ = ("_selected",)

    def __init__(self, selected: frozenset[str] | set[str] | tuple[str, ...] = frozenset()):
        selected = frozenset(selected)
        for label in selected:
            if label not in ADD_ON_LABELS:
                raise InvalidAddOnLabel(label)
        self._selected = selected

    @classmethod
    def default(cls) -> "AddOnSet":
        """All add-ons unselected."""
        return cls()

    def toggled(self, label: str) -> "AddOnSet":
        """
        Return a copy with ``label`` flipped.

        Raises:
            InvalidAddOnLabel: If label is not one of the fixed labels.
        """
        if label not in ADD_ON_LABELS:
            raise InvalidAddOnLabel(label)
        return AddOnSet(self._selected ^ {label})

    @property
    def selected_labels(self) -> tuple[str, ...]:
        """Selected labels in fixed catalog order."""
        return tuple(label for label in ADD_ON_LABELS if label in self._selected)

    @property
    def selected_count(self) -> int:
        return len(self._selected)

    def __getitem__(self, label: str) -> bool:
        if label not in ADD_ON_LABELS:
            raise KeyError(label)
        return label in self._selected

    def __iter__(self) -> Iterator[str]:
        return iter(ADD_ON_LABELS)

    def __len__(self) -> int:
        return len(ADD_ON_LABELS)

    def __hash__(self) -> int:
        return hash(self._selected)

    def __repr__(self) -> str:
        return f"AddOnSet(selected={list(self.selected_labels)})"


# =============================================================================
# BuildConfiguration - the in-progress selection
# =============================================================================

@dataclass(frozen=True)
class BuildConfiguration:
    """
    The user's current build selections.

    String fields are freeform; nothing here is checked against the
    catalogs. An empty delivery_date means "use the computed default",
    which is never written back into the configuration.

    Attributes:
        manufacturer: Manufacturer key (normally from the catalog)
        year: Model year, e.g. "2024"
        engine_size: Engine size label, e.g. "750cc"
        use_type: Intended use (Track, Street, Dirt)
        add_ons: Fixed add-on labels with selected state
        delivery_date: User-picked date as MM/DD/YYYY, or ""
        express_delivery: Express delivery requested
        social_handle: Handle printed on the decal add-on
        color_scheme: Color scheme name
    """
    manufacturer: str = ""
    year: str = ""
    engine_size: str = ""
    use_type: UseType = UseType.TRACK
    add_ons: AddOnSet = field(default_factory=AddOnSet.default)
    delivery_date: str = ""
    express_delivery: bool = False
    social_handle: str = ""
    color_scheme: str = ""

    @classmethod
    def default(cls) -> "BuildConfiguration":
        return cls()

    @property
    def selected_add_ons(self) -> tuple[str, ...]:
        return self.add_ons.selected_labels


# =============================================================================
# BuildRecord - persisted form of a configuration
# =============================================================================

@dataclass(frozen=True)
class BuildRecord:
    """
    A saved build as stored in the moto_build table.

    Records are never updated; a correction is a delete plus a new save.
    ``id`` is None until the store assigns one.
    """
    manufacturer: str
    year: str
    engine_size: str
    use_type: str
    add_ons: str
    delivery_date: str
    express_delivery: bool
    social_handle: str = ""
    color_scheme: str = ""
    id: Optional[BuildID] = None

    @classmethod
    def from_configuration(cls, config: BuildConfiguration) -> "BuildRecord":
        """Project a configuration, collapsing add-ons to a joined label string."""
        return cls(
            manufacturer=config.manufacturer,
            year=config.year,
            engine_size=config.engine_size,
            use_type=config.use_type.value,
            add_ons=ADD_ON_SEPARATOR.join(config.selected_add_ons),
            delivery_date=config.delivery_date,
            express_delivery=config.express_delivery,
            social_handle=config.social_handle,
            color_scheme=config.color_scheme,
        )

    @classmethod
    def from_dataframe_row(cls, row: pd.Series) -> "BuildRecord":
        """Factory method to create a BuildRecord from a moto_build row."""
        return cls(
            id=safe_int(row.get('id')),
            manufacturer=safe_str(row.get('manufacturer')),
            year=safe_str(row.get('year')),
            engine_size=safe_str(row.get('engine_size')),
            use_type=safe_str(row.get('use_type'), UseType.default().value),
            add_ons=safe_str(row.get('add_ons')),
            delivery_date=safe_str(row.get('delivery_date')),
            express_delivery=safe_bool(row.get('express_delivery')),
            social_handle=safe_str(row.get('social_handle')),
            color_scheme=safe_str(row.get('color_scheme')),
        )

    def to_params(self) -> dict:
        """Column values for an INSERT (id is assigned by the store)."""
        return {
            "manufacturer": self.manufacturer,
            "year": self.year,
            "engine_size": self.engine_size,
            "use_type": self.use_type,
            "add_ons": self.add_ons,
            "delivery_date": self.delivery_date,
            "express_delivery": int(self.express_delivery),
            "social_handle": self.social_handle,
            "color_scheme": self.color_scheme,
        }

    @property
    def selected_add_ons(self) -> tuple[str, ...]:
        if not self.add_ons:
            return ()
        return tuple(
            label.strip() for label in self.add_ons.split(ADD_ON_SEPARATOR.strip())
            if label.strip()
        )

    @property
    def is_saved(self) -> bool:
        return self.id is not None
