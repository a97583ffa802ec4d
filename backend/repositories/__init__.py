"""
Repository layer for data access abstraction.

This package contains repository classes that encapsulate database queries
and provide a clean interface for data access operations.
"""

from .base_repository import BaseRepository
from .item_repository import ItemRepository
from .vote_repository import VoteRepository
from .rows import DBRow

__all__ = [
    "BaseRepository",
    "ItemRepository",
    "VoteRepository",
    "DBRow",
]
