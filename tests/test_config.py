import pytest

from shippedtoday.core.config import Config
from shippedtoday.core.constants import DEFAULT_SPAM_PATTERNS, StorageBackend
from shippedtoday.core.settings import AppConfig


class TestAppConfig:
    def test_defaults(self) -> None:
        settings = AppConfig()
        assert settings.storage.backend == StorageBackend.JSON
        assert settings.storage.max_launches == 1000
        assert settings.anti_spam.max_attempts_per_window == 2
        assert settings.anti_spam.global_cooldown_seconds == 10
        assert settings.anti_spam.spam_patterns == list(DEFAULT_SPAM_PATTERNS)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            AppConfig.load_from_file(str(tmp_path / "missing.yaml"))

    def test_env_substitution(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "storage:\n"
            "  backend: ${TEST_STORAGE_BACKEND:-json}\n"
            "  max_launches: ${TEST_MAX_LAUNCHES:-5}\n"
            "database:\n"
            "  url: ${TEST_DATABASE_URL}\n",
            encoding="utf-8",
        )
        monkeypatch.setenv("TEST_STORAGE_BACKEND", "database")
        monkeypatch.setenv("TEST_DATABASE_URL", "sqlite:///./elsewhere.db")
        monkeypatch.delenv("TEST_MAX_LAUNCHES", raising=False)

        settings = AppConfig.load_from_file(str(path))
        assert settings.storage.backend == StorageBackend.DATABASE
        assert settings.storage.max_launches == 5
        assert settings.database.url == "sqlite:///./elsewhere.db"

    def test_invalid_yaml(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("storage: [unclosed", encoding="utf-8")
        with pytest.raises(RuntimeError):
            AppConfig.load_from_file(str(path))


class TestConfig:
    def test_dotted_lookup(self, tmp_path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("anti_spam:\n  max_attempts_per_window: 4\n", encoding="utf-8")
        config = Config(str(path))
        assert config.get("anti_spam.max_attempts_per_window") == 4
        assert config.get("anti_spam.nope", "fallback") == "fallback"
        assert config.get_database_url() == "sqlite:///./data/shippedtoday.db"

    def test_env_selects_config_file(self, tmp_path, monkeypatch) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n  level: DEBUG\n  file: ''\n", encoding="utf-8")
        monkeypatch.setenv("SHIPPEDTODAY_CONFIG", str(path))
        config = Config()
        assert config.config_path == str(path)
        assert config.get_logging_config()["level"] == "DEBUG"
        assert not config.get_logging_config()["file"]
