"""
Catalog Service

Loads the manufacturer catalog from its XML document into a CatalogStore.

Document shape:

    <bikes>
        <bike>
            <key>Ducati</key>
            <description>...</description>
            <description>...</description>
            <image>ducati</image>
        </bike>
        ...
    </bikes>

Each <bike> may declare several descriptions. One of them is picked at
random on every load, so the same manufacturer can show different flavor
text from one load to the next.
"""

import io
import random
import threading
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import IO, Optional

from domain.catalog import (
    DEFAULT_IMAGE,
    MISSING_DESCRIPTION,
    CatalogEntry,
    CatalogStore,
)
from domain.errors import CatalogParseError
from logging_config import setup_logging

logger = setup_logging(__name__, log_file="catalog_service.log")

CatalogSource = str | Path | IO

BIKE_TAG = "bike"
KEY_TAG = "key"
DESCRIPTION_TAG = "description"
IMAGE_TAG = "image"


def _element_text(elem: ET.Element) -> str:
    return (elem.text or "").strip()


def _source_name(source: CatalogSource) -> str:
    if isinstance(source, (str, Path)):
        return str(source)
    return getattr(source, "name", "<stream>")


def parse_bike_catalog(
    source: CatalogSource, rng: Optional[random.Random] = None
) -> list[CatalogEntry]:
    """Stream-parse a catalog document into entries, in document order.

    Entries without a non-blank key, description and image are skipped
    silently. Field state is reset at every closing </bike>.

    Args:
        source: File path or binary/text file object.
        rng: Random source used to choose among alternative descriptions.

    Returns:
        List of CatalogEntry.

    Raises:
        CatalogParseError: If the document is unreadable or malformed. No
            partial result is returned.
    """
    rng = rng or random.Random()
    entries: list[CatalogEntry] = []

    key: Optional[str] = None
    descriptions: list[str] = []
    image: Optional[str] = None

    try:
        for _, elem in ET.iterparse(source, events=("end",)):
            if elem.tag == KEY_TAG:
                key = _element_text(elem)
            elif elem.tag == DESCRIPTION_TAG:
                text = _element_text(elem)
                if text:
                    descriptions.append(text)
            elif elem.tag == IMAGE_TAG:
                image = _element_text(elem)
            elif elem.tag == BIKE_TAG:
                # one description per load, chosen at random
                description = rng.choice(descriptions) if descriptions else None
                if key and description and image:
                    entries.append(CatalogEntry(key=key, description=description, image_ref=image))
                else:
                    logger.debug(f"Skipping incomplete bike entry (key={key!r})")
                key, descriptions, image = None, [], None
                elem.clear()
    except (ET.ParseError, OSError, LookupError, UnicodeError) as e:
        # unknown declared encodings raise LookupError, undecodable text UnicodeError
        raise CatalogParseError(_source_name(source), e) from e

    return entries


class CatalogService:
    """Loads and holds the manufacturer CatalogStore.

    Loads are serialised; a second load waits for the first to finish.
    A malformed document never propagates: the store degrades to empty and
    the error is kept on ``last_error``.

    Args:
        source: Catalog document path or file object.
        rng: Random source for description selection.
        missing_description: Fallback text for unknown manufacturers.
        default_image: Fallback image token for unknown manufacturers.
    """

    def __init__(
        self,
        source: CatalogSource,
        rng: Optional[random.Random] = None,
        missing_description: str = MISSING_DESCRIPTION,
        default_image: str = DEFAULT_IMAGE,
    ):
        self._source = source
        self._rng = rng
        self._missing_description = missing_description
        self._default_image = default_image
        self._load_lock = threading.Lock()
        self._buffer: Optional[bytes | str] = None
        self._store = self._empty_store()
        self.last_error: Optional[CatalogParseError] = None

    @classmethod
    def create_default(cls) -> "CatalogService":
        """Build a service from the [catalog] section of settings.toml."""
        from settings_service import SettingsService

        settings = SettingsService()
        return cls(
            settings.catalog_path,
            missing_description=settings.missing_description,
            default_image=settings.default_image,
        )

    @property
    def store(self) -> CatalogStore:
        """The most recently loaded store (empty before the first load)."""
        return self._store

    def _empty_store(self) -> CatalogStore:
        return CatalogStore.empty(
            missing_description=self._missing_description,
            default_image=self._default_image,
        )

    def _document(self) -> CatalogSource:
        """A fresh source for one parse.

        Paths are reopened on every load. A stream can only be read once, so
        its content is kept after the first read and replayed from memory.

        Raises:
            CatalogParseError: If the stream cannot be read or decoded.
        """
        if isinstance(self._source, (str, Path)):
            return self._source
        if self._buffer is None:
            try:
                self._buffer = self._source.read()
            except (OSError, UnicodeError) as e:
                raise CatalogParseError(_source_name(self._source), e) from e
        if isinstance(self._buffer, str):
            return io.StringIO(self._buffer)
        return io.BytesIO(self._buffer)

    def load(self) -> CatalogStore:
        """Parse the catalog document and replace the held store."""
        with self._load_lock:
            try:
                entries = parse_bike_catalog(self._document(), self._rng)
            except CatalogParseError as e:
                logger.error(f"Catalog load failed, using empty catalog: {e}")
                self.last_error = e
                self._store = self._empty_store()
                return self._store

            self.last_error = None
            self._store = CatalogStore(
                entries,
                missing_description=self._missing_description,
                default_image=self._default_image,
            )
            logger.info(f"Loaded {len(self._store)} manufacturers from {_source_name(self._source)}")
            return self._store
