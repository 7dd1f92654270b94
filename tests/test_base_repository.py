"""
Tests for BaseRepository

Tests the foundation repository class with:
- Successful reads via read_df()
- Parameters forwarded to pandas
- SQLAlchemy failures translated to StorageUnavailable
- Writes run under the database write lock
- Non-database errors are re-raised unchanged
"""
import threading

import pytest
import pandas as pd
from unittest.mock import Mock, patch, PropertyMock
from sqlalchemy.exc import OperationalError

from domain.errors import StorageUnavailable
from repositories.base import BaseRepository


class TestBaseRepository:
    """Test cases for BaseRepository.read_df() and run_write()"""

    def _make_repo(self, engine=None):
        """Helper to create a BaseRepository with mock DatabaseConfig."""
        mock_db = Mock()
        mock_db.alias = "test_db"
        mock_db.path = "/tmp/test.db"
        mock_db.write_lock = threading.Lock()

        if engine is not None:
            type(mock_db).engine = PropertyMock(return_value=engine)

        return BaseRepository(mock_db), mock_db

    def _mock_engine(self):
        """Create a mock engine whose connect() works as a context manager."""
        mock_conn = Mock()
        mock_conn.__enter__ = Mock(return_value=mock_conn)
        mock_conn.__exit__ = Mock(return_value=None)

        mock_engine = Mock()
        mock_engine.connect.return_value = mock_conn
        return mock_engine, mock_conn

    def test_read_df_success(self):
        """Test that read_df returns data from the engine on success."""
        expected = pd.DataFrame({'id': [1, 2], 'manufacturer': ['Ducati', 'Honda']})
        mock_engine, _ = self._mock_engine()
        repo, _ = self._make_repo(engine=mock_engine)

        with patch('pandas.read_sql_query', return_value=expected) as mock_read:
            result = repo.read_df("SELECT * FROM moto_build")

            assert isinstance(result, pd.DataFrame)
            assert len(result) == 2
            mock_read.assert_called_once()
            mock_engine.connect.assert_called_once()

    def test_read_df_passes_params(self):
        """Test that params are forwarded to read_sql_query."""
        expected = pd.DataFrame({'id': [1]})
        mock_engine, _ = self._mock_engine()
        repo, _ = self._make_repo(engine=mock_engine)

        with patch('pandas.read_sql_query', return_value=expected) as mock_read:
            repo.read_df("SELECT * FROM moto_build WHERE id = :id",
                        params={"id": 42})

            call_kwargs = mock_read.call_args
            assert call_kwargs[1]['params'] == {"id": 42}

    def test_read_df_database_error_becomes_storage_unavailable(self):
        mock_engine, _ = self._mock_engine()
        repo, _ = self._make_repo(engine=mock_engine)
        db_error = OperationalError("SELECT 1", {}, Exception("unable to open database file"))

        with patch('pandas.read_sql_query', side_effect=db_error):
            with pytest.raises(StorageUnavailable) as exc_info:
                repo.read_df("SELECT * FROM moto_build")

        assert exc_info.value.operation == "read"
        assert exc_info.value.cause is db_error

    def test_read_df_non_database_error_raises(self):
        """Test that errors outside SQLAlchemy are re-raised."""
        mock_engine, _ = self._mock_engine()
        repo, _ = self._make_repo(engine=mock_engine)

        with patch('pandas.read_sql_query', side_effect=KeyError("boom")):
            with pytest.raises(KeyError):
                repo.read_df("SELECT * FROM moto_build")

    def test_run_write_holds_lock(self):
        mock_engine, _ = self._mock_engine()
        repo, mock_db = self._make_repo(engine=mock_engine)

        def work(engine):
            assert engine is mock_engine
            assert mock_db.write_lock.locked()
            return 7

        assert repo.run_write("insert", work) == 7
        assert not mock_db.write_lock.locked()

    def test_run_write_database_error_releases_lock(self):
        mock_engine, _ = self._mock_engine()
        repo, mock_db = self._make_repo(engine=mock_engine)

        def work(engine):
            raise OperationalError("INSERT", {}, Exception("disk I/O error"))

        with pytest.raises(StorageUnavailable) as exc_info:
            repo.run_write("insert", work)

        assert exc_info.value.operation == "insert"
        assert not mock_db.write_lock.locked()

    def test_db_attribute_accessible(self):
        """Test that the db attribute is publicly accessible."""
        mock_db = Mock()
        mock_db.alias = "test_db"
        repo = BaseRepository(mock_db)
        assert repo.db is mock_db


if __name__ == "__main__":
    pytest.main([__file__])
