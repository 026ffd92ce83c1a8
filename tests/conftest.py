# conftest.py
import pytest
import pytest_asyncio
from dotenv import load_dotenv
from fastapi.testclient import TestClient

from tests.fakes import ASK_URL, FakeWorker

load_dotenv()


@pytest.fixture()
def worker():
    return FakeWorker(body={'answer': '42'})


@pytest_asyncio.fixture()
async def make_model():
    """
    Build WorkerBackedModels wired to a FakeWorker.
    Every client handed out is closed when the test ends.
    """
    from worker_bridge.adapters.llm.worker import WorkerBackedModel

    clients = []

    def _make(fake: FakeWorker, ask_url=ASK_URL) -> WorkerBackedModel:
        client = fake.client()
        clients.append(client)
        return WorkerBackedModel(ask_url=ask_url, client=client)

    yield _make

    for c in clients:
        await c.aclose()


@pytest.fixture()
def client():
    """
    A TestClient whose provider runs in test mode (dummy models).
    Tests can swap the provider through app.dependency_overrides.
    """
    from worker_bridge.infra.llm import get_provider_singleton, make_provider
    from worker_bridge.main import app

    app.dependency_overrides[get_provider_singleton] = lambda: make_provider(test_mode=True)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
