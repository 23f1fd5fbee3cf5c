"""
Pytest configuration - shared fixtures for the Student Co-Pilot tests.
"""
import random

import pytest
from fastapi.testclient import TestClient

from copilot.api.deps import get_rng, get_storage
from copilot.core.config import Settings
from copilot.db.database import create_db_engine
from copilot.main import app
from copilot.services.storage_service import MemoryStorage, SqlStorage


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def settings():
    """Settings isolated from the developer's .env"""
    return Settings(_env_file=None, random_seed=1234)


@pytest.fixture
def memory_storage():
    return MemoryStorage(seed=False)


@pytest.fixture
def seeded_storage():
    return MemoryStorage(seed=True)


@pytest.fixture
def sql_storage(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'copilot_test.db'}")
    storage = SqlStorage(engine=engine, seed=False)
    yield storage
    engine.dispose()


@pytest.fixture(params=["memory", "sql"])
def storage(request, memory_storage, tmp_path):
    """Runs a test against both storage backends."""
    if request.param == "memory":
        yield memory_storage
        return
    engine = create_db_engine(f"sqlite:///{tmp_path / 'copilot_param.db'}")
    yield SqlStorage(engine=engine, seed=False)
    engine.dispose()


@pytest.fixture
def client(seeded_storage):
    app.dependency_overrides[get_storage] = lambda: seeded_storage
    app.dependency_overrides[get_rng] = lambda: random.Random(7)
    yield TestClient(app)
    app.dependency_overrides.clear()
