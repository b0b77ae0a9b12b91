"""
Database layer: SQLAlchemy models and the engine/session helpers.
"""

from .models import Base, User, MemoryEntry
from .connection import Database

__all__ = ['Base', 'User', 'MemoryEntry', 'Database']
