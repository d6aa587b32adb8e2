import json
from datetime import datetime, timezone

import pytest

from shippedtoday.core.database import Database
from shippedtoday.core.exceptions import StorageError
from shippedtoday.core.settings import StorageConfig
from shippedtoday.repositories import (
    DatabaseLaunchRepository,
    JsonLaunchRepository,
    create_launch_repository,
)

from conftest import make_launch

MAY_1 = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
MAY_2 = datetime(2024, 5, 2, 9, 0, tzinfo=timezone.utc)


class TestJsonLaunchRepository:
    def test_initialize_creates_empty_file(self, tmp_path) -> None:
        path = tmp_path / "nested" / "launches.json"
        repo = JsonLaunchRepository(path)
        repo.initialize()
        assert json.loads(path.read_text(encoding="utf-8")) == []

    def test_initialize_keeps_existing_file(self, tmp_path) -> None:
        path = tmp_path / "launches.json"
        path.write_text(json.dumps([make_launch("a", MAY_1).model_dump(mode="json")]))
        JsonLaunchRepository(path).initialize()
        assert len(json.loads(path.read_text())) == 1

    def test_missing_file_reads_as_empty(self, tmp_path) -> None:
        repo = JsonLaunchRepository(tmp_path / "absent.json")
        assert repo.list_launches() == []
        assert repo.count() == 0

    def test_add_launch_prepends(self, repository) -> None:
        repository.add_launch(make_launch("a", MAY_1))
        repository.add_launch(make_launch("b", MAY_2))
        assert [launch.id for launch in repository.list_launches()] == ["b", "a"]
        assert repository.count() == 2

    def test_write_leaves_no_temp_file(self, repository) -> None:
        repository.add_launch(make_launch("a", MAY_1))
        leftovers = [p.name for p in repository.path.parent.iterdir()]
        assert leftovers == ["launches.json"]

    def test_stored_format(self, repository) -> None:
        repository.add_launch(make_launch("a", MAY_1, tags=["ünïcode"]))
        stored = json.loads(repository.path.read_text(encoding="utf-8"))
        assert stored[0]["id"] == "a"
        assert stored[0]["tags"] == ["ünïcode"]
        assert stored[0]["submittedAt"].startswith("2024-05-01T09:00:00")

    def test_naive_timestamps_read_as_utc(self, repository) -> None:
        entry = make_launch("a", MAY_1).model_dump(mode="json")
        entry["submittedAt"] = "2024-05-01T09:00:00"
        repository.path.write_text(json.dumps([entry]))
        assert repository.list_launches()[0].submittedAt == MAY_1

    def test_corrupt_file_raises_storage_error(self, repository) -> None:
        repository.path.write_text("{not json")
        with pytest.raises(StorageError):
            repository.list_launches()

    def test_invalid_entry_raises_storage_error(self, repository) -> None:
        repository.path.write_text(json.dumps([{"id": "x", "title": ""}]))
        with pytest.raises(StorageError):
            repository.list_launches()

    def test_check_access_passes_for_writable_file(self, repository) -> None:
        repository.check_access()

    def test_check_access_rejects_unwritable_file(self, repository, monkeypatch) -> None:
        monkeypatch.setattr(
            "shippedtoday.repositories.json_repository.os.access", lambda *args: False)
        with pytest.raises(StorageError) as exc_info:
            repository.check_access()
        assert exc_info.value.message == "File access denied"

    def test_read_error_message_is_generic(self, repository) -> None:
        repository.path.write_text("{not json")
        with pytest.raises(StorageError) as exc_info:
            repository.list_launches()
        assert exc_info.value.message == "Storage unavailable"

    def test_failed_write_removes_temp_file(self, repository, monkeypatch) -> None:
        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr(
            "shippedtoday.repositories.json_repository.os.replace", fail_replace)
        with pytest.raises(StorageError) as exc_info:
            repository.add_launch(make_launch("a", MAY_1))
        assert "disk full" not in exc_info.value.message

        leftovers = [p.name for p in repository.path.parent.iterdir()]
        assert leftovers == ["launches.json"]
        assert repository.list_launches() == []


class TestDatabaseLaunchRepository:
    @pytest.fixture
    def db_repository(self):
        repo = DatabaseLaunchRepository(Database("sqlite://"))
        repo.initialize()
        return repo

    def test_empty(self, db_repository) -> None:
        assert db_repository.list_launches() == []
        assert db_repository.count() == 0

    def test_lists_newest_first(self, db_repository) -> None:
        db_repository.add_launch(make_launch("old", MAY_1))
        db_repository.add_launch(make_launch("new", MAY_2))
        launches = db_repository.list_launches()
        assert [launch.id for launch in launches] == ["new", "old"]
        assert db_repository.count() == 2

    def test_round_trips_fields(self, db_repository) -> None:
        launch = make_launch(
            "a", MAY_1, tags=["ünïcode", "web"], tweetUrl="https://x.com/user/status/1")
        db_repository.add_launch(launch)
        stored = db_repository.list_launches()[0]
        assert stored.tags == ["ünïcode", "web"]
        assert stored.tweetUrl == "https://x.com/user/status/1"
        assert stored.submittedAt == MAY_1

    def test_duplicate_id_raises_storage_error(self, db_repository) -> None:
        db_repository.add_launch(make_launch("a", MAY_1))
        with pytest.raises(StorageError):
            db_repository.add_launch(make_launch("a", MAY_2))

    def test_check_access(self, db_repository) -> None:
        db_repository.check_access()

    def test_unreachable_database_fails_access_check(self, db_repository, monkeypatch) -> None:
        monkeypatch.setattr(db_repository.db, "health_check", lambda: False)
        with pytest.raises(StorageError) as exc_info:
            db_repository.check_access()
        assert exc_info.value.message == "Storage unavailable"


class TestCreateLaunchRepository:
    def test_json_backend(self, tmp_path) -> None:
        repo = create_launch_repository(
            StorageConfig(backend="json", json_path=str(tmp_path / "launches.json")))
        assert isinstance(repo, JsonLaunchRepository)
        assert repo.path == tmp_path / "launches.json"

    def test_database_backend(self) -> None:
        repo = create_launch_repository(StorageConfig(backend="database"))
        assert isinstance(repo, DatabaseLaunchRepository)
