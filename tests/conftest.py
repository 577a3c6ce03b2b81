import pytest
from httpx import ASGITransport, AsyncClient

from investmate.config import settings
from investmate.main import app
from tests.helpers import FinnhubStub

TEST_API_KEY = "test-key"


@pytest.fixture(autouse=True)
def finnhub_key(monkeypatch):
    """Start every test with exactly one API key source set."""
    for name in settings.finnhub_api_key_env_vars:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("FINNHUB_API_KEY", TEST_API_KEY)
    return TEST_API_KEY


@pytest.fixture
def finnhub(monkeypatch):
    """In-memory Finnhub; register responses with ``finnhub.add(path, status, body)``."""
    return FinnhubStub().install(monkeypatch)


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
