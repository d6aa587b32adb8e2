from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from shippedtoday.core.app import create_app
from shippedtoday.core.dependencies import get_launch_service
from shippedtoday.core.settings import AppConfig
from shippedtoday.models import Launch
from shippedtoday.repositories import JsonLaunchRepository
from shippedtoday.services import LaunchService, SubmissionGuard


class FakeClock:
    """Wall clock that only moves when told to"""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_launch(launch_id: str, submitted_at: datetime, **overrides) -> Launch:
    fields = {
        "id": launch_id,
        "title": f"Launch {launch_id}",
        "url": f"https://example.com/{launch_id}",
        "description": "Something shipped today for everyone",
        "tags": ["tools"],
        "submittedAt": submitted_at,
    }
    fields.update(overrides)
    return Launch(**fields)


def valid_submission(**overrides) -> dict:
    payload = {
        "title": "Orbit Notes for teams",
        "url": "https://orbit.example.com",
        "description": "A shared notebook that syncs across every device.",
        "tags": ["productivity", "  note   taking "],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def settings():
    # Tests tell clients apart by X-Forwarded-For
    return AppConfig(security={"trust_forwarded_for": True})


@pytest.fixture
def repository(tmp_path):
    repo = JsonLaunchRepository(tmp_path / "launches.json")
    repo.initialize()
    return repo


@pytest.fixture
def guard(settings, clock):
    return SubmissionGuard(settings.anti_spam, clock=clock)


@pytest.fixture
def service(repository, guard, settings):
    return LaunchService(repository=repository, guard=guard, settings=settings)


@pytest.fixture
def app(service):
    application = create_app()
    application.dependency_overrides[get_launch_service] = lambda: service
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def seeded_repository(repository):
    repository.add_launch(make_launch("a", datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)))
    repository.add_launch(make_launch("c", datetime(2024, 5, 3, 9, 0, tzinfo=timezone.utc)))
    repository.add_launch(make_launch("b", datetime(2024, 5, 2, 9, 0, tzinfo=timezone.utc)))
    return repository
