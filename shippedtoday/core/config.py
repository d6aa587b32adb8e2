import os
from pathlib import Path
from typing import Any, Dict, Optional

from .settings import AppConfig

DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "config.yaml"


class Config:
    """Configuration manager backed by the Pydantic AppConfig"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path or os.getenv(
            "SHIPPEDTODAY_CONFIG", str(DEFAULT_CONFIG_PATH))
        self._app_config = AppConfig.load_from_file(self.config_path)

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a dotted key, e.g. ``storage.backend``"""
        keys = key.split(".")
        value = self._app_config

        for k in keys:
            if hasattr(value, k):
                value = getattr(value, k)
            else:
                return default

        return value

    def get_database_url(self) -> str:
        return self._app_config.database.url

    def get_logging_config(self) -> Dict[str, Optional[str]]:
        return self._app_config.get_logging_dict()

    @property
    def app_config(self) -> AppConfig:
        """The full application config object"""
        return self._app_config


# Global config instance
config = Config()
