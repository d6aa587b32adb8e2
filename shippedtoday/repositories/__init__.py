"""
Repositories package

Contains the launch storage backends:
- base_repository: interface shared by the backends
- json_repository: launches in a JSON file
- launch_repository: launches in a database table
"""

from typing import Optional

from shippedtoday.core.config import config
from shippedtoday.core.constants import StorageBackend
from shippedtoday.core.settings import StorageConfig

from .base_repository import BaseRepository
from .json_repository import JsonLaunchRepository
from .launch_repository import DatabaseLaunchRepository


def create_launch_repository(storage: Optional[StorageConfig] = None) -> BaseRepository:
    """Build the repository selected by ``storage.backend``"""
    storage = storage or config.app_config.storage
    if storage.backend == StorageBackend.DATABASE:
        return DatabaseLaunchRepository()
    return JsonLaunchRepository(storage.json_path)


__all__ = [
    "BaseRepository",
    "JsonLaunchRepository",
    "DatabaseLaunchRepository",
    "create_launch_repository",
]
