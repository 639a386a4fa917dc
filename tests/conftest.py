import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("REPORT_DELAY_SECONDS", "0")
    monkeypatch.setenv("HEADLINE_DELAY_SECONDS", "0")
    monkeypatch.setenv("RANDOM_SEED", "1234")


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
