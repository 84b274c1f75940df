import asyncio
import json
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from guidance.config import settings
from guidance.database import get_db, get_engine, init_db
from guidance.dependencies import get_client, get_settings
from guidance.main import app


class FakeCompletions:
    def __init__(self, content=None, error=None, delay=0.0):
        self.content = content
        self.error = error
        self.delay = delay
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class FakeGenerationClient:
    """Stands in for AsyncOpenAI: exposes chat.completions.create."""

    def __init__(self, content=None, error=None, delay=0.0):
        self.completions = FakeCompletions(content=content, error=error, delay=delay)
        self.chat = SimpleNamespace(completions=self.completions)

    @property
    def calls(self):
        return self.completions.calls


REMOTE_RESULTS = {
    "results": [
        {"title": "Data Engineer", "description": "Builds data pipelines."},
        {"title": "ML Engineer", "description": "Ships machine learning models."},
        {"title": "Analytics Lead", "description": "Runs the analytics team."},
    ]
}


@pytest.fixture
def test_settings():
    return settings.model_copy(update={"remote_enabled": True, "remote_timeout_seconds": 0.5})


@pytest.fixture
def test_db(tmp_path):
    db_path = tmp_path / "guidance.sqlite"
    init_db(db_path)
    engine = get_engine(db_path)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def use_remote(test_db, test_settings):
    """Install a fake generation client for the next requests and return it."""

    def install(client_obj):
        app.dependency_overrides[get_client] = lambda: client_obj
        return client_obj

    app.dependency_overrides[get_settings] = lambda: test_settings
    install(None)
    return install


@pytest.fixture
def client(test_db, use_remote):
    return TestClient(app)


@pytest.fixture
def remote_ok():
    return FakeGenerationClient(content=json.dumps(REMOTE_RESULTS))
