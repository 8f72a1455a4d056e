import pytest
from fastapi.testclient import TestClient
from sqlalchemy import func, select

from core.config import Settings
from core.database import Database
from main import create_app


class StubAIClient:
    """Stands in for AIServiceClient and records every prompt it receives."""

    def __init__(self, data=None, error=None):
        self.data = data if data is not None else recipe_response("Pancakes\n1. Mix\n2. Fry")
        self.error = error
        self.prompts = []
        self.closed = False

    async def create_response(self, prompt):
        self.prompts.append(prompt)
        if self.error:
            raise self.error
        return self.data

    async def close(self):
        self.closed = True


def recipe_response(text):
    return {
        "id": "resp_123",
        "output": [
            {
                "type": "message",
                "content": [{"type": "output_text", "text": text}],
            }
        ],
    }


@pytest.fixture
def settings(tmp_path):
    return Settings(
        DATABASE_URL=f"sqlite:///{tmp_path}/ziplan-test.db",
        ENVIRONMENT="test",
        OPENAI_API_KEY="sk-test",
    )


@pytest.fixture
def ai_stub():
    return StubAIClient()


@pytest.fixture
def client(settings, ai_stub):
    app = create_app(settings=settings, ai_client=ai_stub)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def count_rows(client):
    """Count rows of a model through the app's own database."""
    async def _count(model):
        async with client.app.state.database.session() as session:
            return await session.scalar(select(func.count()).select_from(model))

    def count(model):
        return client.portal.call(_count, model)

    return count


@pytest.fixture
def fetch_all(client):
    async def _fetch(model):
        async with client.app.state.database.session() as session:
            result = await session.execute(select(model).order_by(model.id))
            return list(result.scalars())

    def fetch(model):
        return client.portal.call(_fetch, model)

    return fetch


@pytest.fixture
async def database(settings):
    db = Database.from_settings(settings)
    await db.connect()
    yield db
    await db.close()


@pytest.fixture
async def session(database):
    async with database.session() as db_session:
        yield db_session
