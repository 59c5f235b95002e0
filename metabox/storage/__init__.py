"""
Storage collaborators.

    MetaStorage          - abstract interface
    InMemoryMetaStorage  - dict-backed store
    SQLMetaStorage       - SQLAlchemy-backed store
"""

from .base import MetaStorage
from .memory import InMemoryMetaStorage
from .sql import SQLMetaStorage

__all__ = ["MetaStorage", "InMemoryMetaStorage", "SQLMetaStorage"]
