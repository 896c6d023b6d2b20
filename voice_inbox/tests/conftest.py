"""Shared pytest fixtures."""

from collections.abc import Iterator
from datetime import UTC, datetime

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from voice_inbox.config import Settings
from voice_inbox.dependencies import Clock, get_clock
from voice_inbox.main import create_app

# 2026-01-28 14:51:03.120 UTC
FIXED_NOW = datetime(2026, 1, 28, 14, 51, 3, 120000, tzinfo=UTC)


@pytest.fixture
def settings() -> Settings:
    """Settings that ignore any local .env file."""
    return Settings(_env_file=None, timezone="UTC", log_level="DEBUG")


@pytest.fixture
def fixed_clock() -> Clock:
    """Clock frozen at FIXED_NOW, reporting UTC."""
    return Clock(tz=UTC, source=lambda: FIXED_NOW)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create a fresh application instance."""
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create a FastAPI test client using the real clock."""
    return TestClient(app)


@pytest.fixture
def frozen_client(app: FastAPI, fixed_clock: Clock) -> Iterator[TestClient]:
    """Create a test client whose requests all see FIXED_NOW."""
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    yield TestClient(app)
    app.dependency_overrides.clear()
