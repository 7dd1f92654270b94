"""
Build Repository

Append-only store of saved builds in the moto_build table: insert,
list newest first, delete by id. There is no update; a correction is a
delete followed by a new insert.

Public operations are coroutines. The blocking SQLAlchemy work runs on a
worker thread via asyncio.to_thread, so a caller that stops awaiting does
not interrupt a write that is already running.
"""

import asyncio
import logging
from typing import Optional

from sqlalchemy import text

from config import DatabaseConfig
from domain.models import BuildID, BuildRecord
from logging_config import setup_logging
from repositories.base import BaseRepository

logger = setup_logging(__name__, log_file="build_repo.log")


# =============================================================================
# Schema & Statements
# =============================================================================

BUILD_TABLE = "moto_build"

BUILD_COLUMNS = (
    "manufacturer",
    "year",
    "engine_size",
    "use_type",
    "add_ons",
    "delivery_date",
    "express_delivery",
    "social_handle",
    "color_scheme",
)

# AUTOINCREMENT keeps ids strictly ascending and never reuses a deleted id
CREATE_BUILD_TABLE_SQL = f"""
CREATE TABLE IF NOT EXISTS {BUILD_TABLE} (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    manufacturer TEXT NOT NULL DEFAULT '',
    year TEXT NOT NULL DEFAULT '',
    engine_size TEXT NOT NULL DEFAULT '',
    use_type TEXT NOT NULL DEFAULT 'Track',
    add_ons TEXT NOT NULL DEFAULT '',
    delivery_date TEXT NOT NULL DEFAULT '',
    express_delivery INTEGER NOT NULL DEFAULT 0,
    social_handle TEXT NOT NULL DEFAULT '',
    color_scheme TEXT NOT NULL DEFAULT ''
)
"""

INSERT_BUILD_SQL = (
    f"INSERT INTO {BUILD_TABLE} ({', '.join(BUILD_COLUMNS)}) "
    f"VALUES ({', '.join(':' + col for col in BUILD_COLUMNS)})"
)

SELECT_ALL_BUILDS_SQL = (
    f"SELECT id, {', '.join(BUILD_COLUMNS)} FROM {BUILD_TABLE} ORDER BY id DESC"
)

DELETE_BUILD_SQL = f"DELETE FROM {BUILD_TABLE} WHERE id = :id"


# =============================================================================
# Implementation Functions (engine in, plain values out, for testability)
# =============================================================================

def _ensure_schema_impl(engine) -> None:
    """Create the moto_build table if it does not exist."""
    with engine.begin() as conn:
        conn.execute(text(CREATE_BUILD_TABLE_SQL))


def _table_exists_impl(engine) -> bool:
    with engine.connect() as conn:
        res = conn.execute(
            text("SELECT name FROM sqlite_master WHERE type='table' AND name = :name"),
            {"name": BUILD_TABLE},
        )
        return res.scalar() is not None


def _insert_build_impl(engine, record: BuildRecord) -> BuildID:
    """Insert a record and return the id the store assigned."""
    with engine.begin() as conn:
        res = conn.execute(text(INSERT_BUILD_SQL), record.to_params())
        return int(res.lastrowid)


def _delete_build_impl(engine, build_id: BuildID) -> int:
    """Delete by id and return the number of rows removed (0 or 1)."""
    with engine.begin() as conn:
        res = conn.execute(text(DELETE_BUILD_SQL), {"id": build_id})
        return res.rowcount


# =============================================================================
# BuildRepository Class
# =============================================================================

class BuildRepository(BaseRepository):
    """Repository for saved builds.

    The table is created on first use. Inserts and deletes hold the
    database write lock, so concurrent saves never produce duplicate or
    skipped ids.
    """

    def __init__(self, db: DatabaseConfig, logger_instance: Optional[logging.Logger] = None):
        super().__init__(db, logger_instance or logger)
        self._schema_ready = False

    def ensure_schema(self) -> None:
        if self._schema_ready:
            return
        self.run_write("create schema", _ensure_schema_impl)
        self._schema_ready = True

    # -----------------------------------------------------------------
    # Blocking operations
    # -----------------------------------------------------------------

    def insert_sync(self, record: BuildRecord) -> BuildID:
        self.ensure_schema()
        build_id = self.run_write(
            "insert", lambda engine: _insert_build_impl(engine, record)
        )
        self._logger.info(
            f"Saved build {build_id}: {record.manufacturer} {record.year} {record.engine_size}"
        )
        return build_id

    def list_all_sync(self) -> list[BuildRecord]:
        self.ensure_schema()
        df = self.read_df(text(SELECT_ALL_BUILDS_SQL))
        return [BuildRecord.from_dataframe_row(row) for _, row in df.iterrows()]

    def delete_by_id_sync(self, build_id: BuildID) -> None:
        self.ensure_schema()
        removed = self.run_write(
            "delete", lambda engine: _delete_build_impl(engine, build_id)
        )
        if removed:
            self._logger.info(f"Deleted build {build_id}")
        else:
            self._logger.debug(f"Delete of build {build_id} matched nothing")

    # -----------------------------------------------------------------
    # Async API
    # -----------------------------------------------------------------

    async def insert(self, record: BuildRecord) -> BuildID:
        """Store a record and return its new id. Any id on the input is ignored."""
        return await asyncio.to_thread(self.insert_sync, record)

    async def list_all(self) -> list[BuildRecord]:
        """All saved builds, newest (highest id) first."""
        return await asyncio.to_thread(self.list_all_sync)

    async def delete_by_id(self, build_id: BuildID) -> None:
        """Remove a build. Deleting an id that is not stored is a no-op."""
        await asyncio.to_thread(self.delete_by_id_sync, build_id)
