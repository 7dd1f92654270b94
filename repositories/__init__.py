"""
Repository Layer Package

This package contains repository classes that encapsulate all database access.

Key Components:
- BaseRepository: Foundation class with read_df() and locked writes
- BuildRepository: Saved builds (insert, list newest first, delete by id)
"""

from repositories.base import BaseRepository
from repositories.build_repo import BuildRepository

__all__ = [
    "BaseRepository",
    "BuildRepository",
]
