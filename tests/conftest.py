# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from taskboard.client import TaskApiClient, TaskStore
from taskboard.config import Settings
from taskboard.infrastructure.storage import InMemoryTaskRepository
from taskboard.interfaces.api import create_app

BASE_URL = "http://testserver"


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Point the config directory at a temp dir and drop TASKBOARD_* overrides,
    so nothing reads or writes the real ~/.taskboard.
    """
    home = tmp_path / "taskboard-home"
    for name in ("HOST", "PORT", "API_URL", "PAGE_SIZE", "LOG_LEVEL", "SEED", "TIMEOUT",
                 "CORS_ORIGINS"):
        monkeypatch.delenv(f"TASKBOARD_{name}", raising=False)
    monkeypatch.setenv("TASKBOARD_HOME", str(home))
    return home


@pytest.fixture()
def settings() -> Settings:
    return Settings(seed=False)


@pytest.fixture()
def repo() -> InMemoryTaskRepository:
    """Repository holding the five sample tasks."""
    return InMemoryTaskRepository.with_seed_data()


@pytest.fixture()
def app(settings: Settings, repo: InMemoryTaskRepository) -> FastAPI:
    return create_app(settings, repo)


@pytest.fixture()
def client(app: FastAPI):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
async def api(app: FastAPI):
    """TaskApiClient whose requests go straight into the app, no network."""
    async with TaskApiClient(BASE_URL, transport=httpx.ASGITransport(app=app)) as api_client:
        yield api_client


@pytest.fixture()
def store(api: TaskApiClient) -> TaskStore:
    return TaskStore(api)
