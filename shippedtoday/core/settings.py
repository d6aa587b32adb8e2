"""
Pydantic settings models

All configuration structures are declared with Pydantic for type checking
and validation.
"""

import os
import re
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

from .constants import DEFAULT_SPAM_PATTERNS, StorageBackend


class ServerConfig(BaseModel):
    """HTTP server settings"""
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")


class StorageConfig(BaseModel):
    """Launch storage settings"""
    backend: StorageBackend = Field(
        default=StorageBackend.JSON, description="Storage backend: json or database")
    json_path: str = Field(default="data/launches.json",
                           description="Path of the JSON launches file")
    max_launches: int = Field(
        default=1000, ge=1, description="Maximum number of stored launches")


class DatabaseConfig(BaseModel):
    """Database settings"""
    url: str = Field(default="sqlite:///./data/shippedtoday.db",
                     description="Database connection URL")


class AntiSpamConfig(BaseModel):
    """Anti-spam settings"""
    rate_limit_window_seconds: float = Field(
        default=60, gt=0, description="Per-client rate limit window")
    max_attempts_per_window: int = Field(
        default=2, ge=1, description="Submissions allowed per client per window")
    global_cooldown_seconds: float = Field(
        default=10, ge=0, description="Pause between any two accepted submissions")
    duplicate_window_seconds: float = Field(
        default=3600, gt=0, description="How long identical content is rejected")
    duplicate_cleanup_threshold: int = Field(
        default=100, ge=1, description="Tracked hashes before stale ones are evicted")
    spam_patterns: List[str] = Field(
        default_factory=lambda: list(DEFAULT_SPAM_PATTERNS),
        description="Case-insensitive regular expressions flagged as spam")


class SanitizationConfig(BaseModel):
    """Text sanitization settings"""
    min_length: int = Field(default=10, ge=0, description="Minimum sanitized text length")
    max_length: int = Field(default=1000, ge=1, description="Maximum sanitized text length")
    max_tag_length: int = Field(default=50, ge=1, description="Maximum tag length")


class SecurityConfig(BaseModel):
    """Request security settings"""
    trust_forwarded_for: bool = Field(
        default=False, description="Use the proxy-appended X-Forwarded-For entry to identify clients")
    cors_origins: List[str] = Field(
        default_factory=list, description="Origins allowed by CORS")


class LoggingConfig(BaseModel):
    """Logging settings"""
    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format"
    )
    file: Optional[str] = Field(
        default="data/shippedtoday.log", description="Log file, empty to disable")


class AppConfig(BaseModel):
    """Complete application configuration"""
    server: ServerConfig = Field(default_factory=ServerConfig, description="Server")
    storage: StorageConfig = Field(default_factory=StorageConfig, description="Storage")
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database")
    anti_spam: AntiSpamConfig = Field(
        default_factory=AntiSpamConfig, description="Anti-spam")
    sanitization: SanitizationConfig = Field(
        default_factory=SanitizationConfig, description="Sanitization")
    security: SecurityConfig = Field(
        default_factory=SecurityConfig, description="Security")
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging")

    @classmethod
    def load_from_file(cls, config_path: str) -> "AppConfig":
        """Load configuration from a YAML file"""
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")

        return cls(**cls._load_yaml_with_env(config_path))

    @staticmethod
    def _load_yaml_with_env(file_path: str) -> Dict[str, Any]:
        """Load a YAML file, expanding environment variable placeholders"""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                content = f.read()

            # ${ENV_VAR:-default_value}
            def replace_env_vars(match):
                var_expr = match.group(1)
                if ":-" in var_expr:
                    env_var, default_value = var_expr.split(":-", 1)
                    return os.getenv(env_var, default_value)
                else:
                    return os.getenv(var_expr, "")

            content = re.sub(r"\$\{([^}]+)\}", replace_env_vars, content)
            return yaml.safe_load(content) or {}
        except Exception as e:
            raise RuntimeError(f"Failed to load config file {file_path}: {e}")

    def get_logging_dict(self) -> Dict[str, Optional[str]]:
        """Logging settings as a dict"""
        return {
            "level": self.logging.level,
            "format": self.logging.format,
            "file": self.logging.file,
        }
