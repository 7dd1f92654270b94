from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from pathlib import Path
import threading
from contextlib import suppress

from logging_config import setup_logging

logger = setup_logging(__name__)

# =============================================================================
# Database Configuration
# =============================================================================

DEFAULT_DB_ALIAS = "builds"

# Guards creation of the shared per-file engines and write locks
_REGISTRY_LOCK = threading.Lock()


def _database_paths() -> dict[str, Path]:
    from settings_service import SettingsService

    return SettingsService().database_paths


class DatabaseConfig:
    """Handle to one local SQLite build store.

    Constructed explicitly at startup and passed to repositories. Engines and
    write locks are shared per database file so that every handle pointing at
    the same file uses a single writer lock.

    Args:
        alias: Key in settings.toml [db_paths].
        path: Explicit database file; bypasses the settings lookup (tests).
        dialect: SQLAlchemy dialect prefix.
    """

    _engines: dict[str, Engine] = {}
    _write_locks: dict[str, threading.Lock] = {}

    def __init__(self, alias: str = DEFAULT_DB_ALIAS, path: str | Path | None = None,
                 dialect: str = "sqlite+pysqlite"):
        if path is None:
            db_paths = _database_paths()
            if alias not in db_paths:
                raise ValueError(
                    f"Unknown database alias '{alias}'. "
                    f"Available: {list(db_paths.keys())}"
                )
            path = db_paths[alias]
        self.alias = alias
        self.path = str(path)
        self.url = f"{dialect}:///{self.path}"

    @property
    def engine(self) -> Engine:
        eng = DatabaseConfig._engines.get(self.path)
        if eng is None:
            with _REGISTRY_LOCK:
                eng = DatabaseConfig._engines.get(self.path)
                if eng is None:
                    # repository work runs on worker threads
                    eng = create_engine(
                        self.url, connect_args={"check_same_thread": False}
                    )
                    DatabaseConfig._engines[self.path] = eng
        return eng

    @property
    def write_lock(self) -> threading.Lock:
        """Single-writer lock shared by all handles on this file."""
        lock = DatabaseConfig._write_locks.get(self.path)
        if lock is None:
            with _REGISTRY_LOCK:
                lock = DatabaseConfig._write_locks.setdefault(self.path, threading.Lock())
        return lock

    def dispose(self) -> None:
        """Dispose the shared engine for this file so file operations are safe."""
        eng = DatabaseConfig._engines.pop(self.path, None)
        if eng is not None:
            with suppress(Exception):
                eng.dispose()
            logger.debug(f"Disposed engine for {self.path}")

    def integrity_check(self) -> bool:
        """Run PRAGMA integrity_check on the local database.

        Returns True if the result is 'ok', False otherwise or on error.
        """
        try:
            with self.engine.connect() as conn:
                result = conn.execute(text("PRAGMA integrity_check")).fetchone()
                logger.debug(f"integrity_check() result: {result}")
            status = str(result[0]).lower() if result and result[0] is not None else ""
            return status == "ok"
        except Exception as e:
            logger.error(f"Integrity check error ({self.alias}): {e}")
            return False

    def __repr__(self) -> str:
        return f"DatabaseConfig(alias={self.alias!r}, path={self.path!r})"
