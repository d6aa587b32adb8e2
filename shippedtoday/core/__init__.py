"""
Core module

Core application components:
- config: configuration management
- database: database connection management
- constants: global constants
- exceptions: errors surfaced to API callers
- app: application factory
- logging: logging setup
"""

from .config import config
from .constants import StorageBackend
from .database import db

__all__ = [
    "config",
    "db",
    "StorageBackend",
]
