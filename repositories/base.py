"""
Base Repository

Provides the foundation for repository classes: DataFrame reads and
serialised writes against a DatabaseConfig, with store failures translated
into StorageUnavailable.

Design Principles:
1. Dependency Injection - Receives DatabaseConfig, doesn't create it
2. Single writer - every write holds the database's write lock
3. Consistent interface - All repositories inherit this pattern
"""

from typing import Any, Callable, Mapping, Optional, TypeVar
import logging
import pandas as pd
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from config import DatabaseConfig
from domain.errors import StorageUnavailable
from logging_config import setup_logging

logger = setup_logging(__name__)

T = TypeVar("T")


class BaseRepository:
    """
    Base class for all repository implementations.

    Attributes:
        db: DatabaseConfig instance for database access
    """

    def __init__(self, db: DatabaseConfig, logger_instance: Optional[logging.Logger] = None):
        """
        Initialize repository with database configuration.

        Args:
            db: DatabaseConfig instance
            logger_instance: Optional logger (defaults to module logger)
        """
        self.db = db
        self._logger = logger_instance or logger

    def read_df(
        self,
        query: Any,
        params: Mapping[str, Any] | None = None,
    ) -> pd.DataFrame:
        """Execute a read-only SQL query and return a DataFrame.

        Reads take no lock; SQLite handles its own reader concurrency.

        Args:
            query: SQL query string or SQLAlchemy TextClause
            params: Optional query parameters

        Returns:
            DataFrame with query results

        Raises:
            StorageUnavailable: If the database cannot be opened or queried.
        """
        try:
            with self.db.engine.connect() as conn:
                return pd.read_sql_query(query, conn, params=params)
        except SQLAlchemyError as e:
            self._logger.error(f"Read failed on {self.db.path}: {e}")
            raise StorageUnavailable("read", e) from e

    def run_write(self, operation: str, work: Callable[[Engine], T]) -> T:
        """Run ``work(engine)`` while holding the database write lock.

        Args:
            operation: Short name used in logs and errors
            work: Callable receiving the engine; its result is returned

        Raises:
            StorageUnavailable: If the database cannot be opened or written.
        """
        with self.db.write_lock:
            try:
                return work(self.db.engine)
            except SQLAlchemyError as e:
                self._logger.error(f"{operation} failed on {self.db.path}: {e}")
                raise StorageUnavailable(operation, e) from e
