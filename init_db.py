import os
import sqlite3 as sql
from time import perf_counter

from config import DatabaseConfig
from domain.errors import StorageUnavailable
from logging_config import setup_logging
from repositories.build_repo import BUILD_TABLE, BuildRepository

logger = setup_logging(__name__)


def verify_db_path(path):
    """Check if database file exists on disk."""
    if not os.path.exists(path):
        logger.warning(f"DB path does not exist: {path}")
        return False
    return True


def verify_db_content(path):
    """Check that a database file exists and holds the moto_build table.

    Uses read-only mode to avoid accidentally creating a new file.
    """
    if not os.path.exists(path) or os.path.getsize(path) == 0:
        return False
    try:
        conn = sql.connect(f"file:{path}?mode=ro", uri=True)
        try:
            row = conn.execute(
                "SELECT count(*) FROM sqlite_master WHERE type='table' AND name = ?",
                (BUILD_TABLE,),
            ).fetchone()
        finally:
            conn.close()
        return row[0] > 0
    except sql.Error as e:
        logger.warning(f"DB content verification failed for {path}: {e}")
        return False


def init_db(db: DatabaseConfig | None = None) -> bool:
    """Create the build store if needed and verify it.

    Returns True when the moto_build table exists and the integrity check
    passes, False otherwise.
    """
    start_time = perf_counter()
    db = db or DatabaseConfig()
    logger.info("-"*60)
    logger.info(f"initializing build store: {db.path}")

    parent = os.path.dirname(os.path.abspath(db.path))
    os.makedirs(parent, exist_ok=True)

    if verify_db_content(db.path):
        logger.info(f"DB exists and has content: {db.path}")
    else:
        try:
            BuildRepository(db).ensure_schema()
        except StorageUnavailable as e:
            logger.error(f"Could not create build store: {e}")
            return False

    ok = verify_db_content(db.path) and db.integrity_check()
    elapsed_time = round((perf_counter() - start_time)*1000, 2)
    logger.info(f"TIME init_db() = {elapsed_time} ms, ok={ok}")
    logger.info("-"*60)
    return ok


def ensure_db(db: DatabaseConfig | None = None) -> None:
    """Like init_db(), but raise when the store is not usable.

    Raises:
        StorageUnavailable: If the store could not be created or verified.
    """
    db = db or DatabaseConfig()
    if not init_db(db):
        raise StorageUnavailable("init")
