"""
Shared pytest fixtures.

Provides:
- Upload directory under tmp_path
- Repository with a controllable millisecond clock
- TestClient bound to an app built from test settings
"""
from pathlib import Path
from typing import Iterator

import pytest
from fastapi.testclient import TestClient

from src.config import Settings
from src.infrastructure.persistence import VideoRepository
from src.interfaces.api.app import create_app

FIXED_MILLIS = 1700000000000


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start: int = FIXED_MILLIS):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int = 1) -> None:
        self.now += millis


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    public_dir = tmp_path / "public"
    return Settings(public_dir=public_dir, upload_dir=public_dir / "uploads")


@pytest.fixture
def repository(test_settings: Settings, clock: FakeClock) -> VideoRepository:
    return VideoRepository(test_settings.upload_dir, clock=clock)


@pytest.fixture
def client(test_settings: Settings, repository: VideoRepository) -> Iterator[TestClient]:
    app = create_app(test_settings, repository=repository)
    with TestClient(app) as test_client:
        yield test_client
