"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .database import DatabaseManager, db_manager, dialect_insert, get_db
from .exceptions import ServiceException, DatabaseError, IngestionError
from .models import Base

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Database
    "DatabaseManager",
    "db_manager",
    "dialect_insert",
    "get_db",
    # Exceptions
    "ServiceException",
    "DatabaseError",
    "IngestionError",
    # Models
    "Base",
]
