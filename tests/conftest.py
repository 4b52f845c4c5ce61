"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from tortoise import Tortoise, connections

from common.store import DemoStore
from config import Settings


@pytest.fixture
def settings():
    """In-memory SQLite, fresh for every test."""
    return Settings(db_dialect="sqlite", db_name=":memory:", verbosity="warning")


@pytest.fixture
def api_client(settings):
    """HTTP client for an app wired to its own empty database."""
    from app import create_app

    with TestClient(create_app(settings)) as client:
        yield client


@pytest.fixture
async def store(settings):
    """DemoStore on an initialised ORM, without the HTTP layer."""
    await Tortoise.init(config=settings.tortoise_config())
    await Tortoise.generate_schemas()

    yield DemoStore(connections.get("default"))

    await connections.close_all()
