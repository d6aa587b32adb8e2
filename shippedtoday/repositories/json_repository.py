import json
import logging
import os
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from shippedtoday.core.exceptions import StorageError
from shippedtoday.models import Launch
from shippedtoday.repositories.base_repository import BaseRepository

logger = logging.getLogger(__name__)

_launch_list = TypeAdapter(List[Launch])


class JsonLaunchRepository(BaseRepository):
    """Launches stored as a single JSON array, newest first"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    def initialize(self) -> None:
        """Create an empty launches file if none exists"""
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._write([])
        logger.info(f"Created launches file: {self.path}")

    def check_access(self) -> None:
        if not self.path.exists():
            # initialize() was never run; an absent file reads as empty
            if os.access(self.path.parent, os.W_OK):
                return
            raise StorageError("File access denied")
        if not os.access(self.path, os.R_OK | os.W_OK):
            logger.error(f"File permission check failed: {self.path}")
            raise StorageError("File access denied")

    def list_launches(self) -> List[Launch]:
        """Read and validate every stored launch"""
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            return _launch_list.validate_python(raw)
        except (OSError, ValueError, ValidationError) as e:
            logger.error(f"Failed to read launches file {self.path}: {e}")
            raise StorageError()

    def add_launch(self, launch: Launch) -> None:
        """Prepend a launch and rewrite the file atomically"""
        launches = self.list_launches()
        self._write([launch, *launches])

    def _write(self, launches: List[Launch]) -> None:
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        payload = _launch_list.dump_python(launches, mode="json")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Failed to write launches file {self.path}: {e}")
            tmp_path.unlink(missing_ok=True)
            raise StorageError()
