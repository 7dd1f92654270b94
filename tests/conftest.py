"""
Pytest configuration file for the motorecs project.
This file sets up the Python path so tests can import modules from the project root.
"""
import sys
import contextlib
import sqlite3 as sql
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from config import DatabaseConfig
from repositories.build_repo import BuildRepository

SAMPLE_CATALOG = b"""<?xml version="1.0" encoding="utf-8"?>
<bikes>
    <bike>
        <key>Ducati</key>
        <description>Italian passion.</description>
        <description>Desmo heart.</description>
        <description>Red and loud.</description>
        <image>ducati</image>
    </bike>
    <bike>
        <key>Honda</key>
        <description>Reliable engineering.</description>
        <image>honda</image>
    </bike>
</bikes>
"""


@pytest.fixture
def temp_db(tmp_path):
    # fresh build store per test
    db = DatabaseConfig(path=tmp_path / "test.db")
    yield db
    db.dispose()


@pytest.fixture
def build_repo(temp_db):
    return BuildRepository(temp_db)


@pytest.fixture
def catalog_file(tmp_path):
    path = tmp_path / "bikes.xml"
    path.write_bytes(SAMPLE_CATALOG)
    return path


@contextlib.contextmanager
def ro_conn(db_path: str):
    uri = f"file:{db_path}?mode=ro"
    con = sql.connect(uri, uri=True, check_same_thread=False)
    try:
        yield con
    finally:
        con.close()
