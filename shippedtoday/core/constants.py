"""
Global constants
"""

from enum import Enum

LAUNCHES_PATH = "/api/launches"

DEFAULT_SPAM_PATTERNS = (
    r"click here",
    r"limited time",
    r"act now",
    r"guaranteed",
    r"make money",
    r"free money",
    r"viagra",
    r"casino",
    r"crypto.*profit",
    r"investment.*guaranteed",
)


class StorageBackend(str, Enum):
    """Where launches are persisted"""
    JSON = "json"            # one JSON array file on disk
    DATABASE = "database"    # SQLAlchemy table
