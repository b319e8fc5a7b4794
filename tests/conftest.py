"""Shared test fixtures for the hello service."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_application


@pytest.fixture
def test_settings() -> Settings:
    """Settings built from defaults only, ignoring any local `.env`."""
    return Settings(_env_file=None, PROJECT_NAME="Test Service", LOG_LEVEL="DEBUG")


@pytest.fixture
def application(test_settings: Settings) -> FastAPI:
    return create_application(test_settings)


@pytest.fixture
def client(application: FastAPI) -> Iterator[TestClient]:
    """TestClient with the lifespan entered, as a real server would run it."""
    with TestClient(application) as test_client:
        yield test_client
