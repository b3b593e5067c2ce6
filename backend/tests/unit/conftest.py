"""Shared fixtures: a scripted fake CAPI behind httpx.MockTransport."""

import httpx
import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from services.capi import CapiClient

MOST_VIEWED_AB = {"response": {"mostViewed": [{"id": "a"}, {"id": "b"}]}}


class FakeCapi:
    """Records requests and answers with a scripted handler."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.handler = lambda request: httpx.Response(200, json=MOST_VIEWED_AB)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def calls(self) -> int:
        return len(self.requests)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def fake_capi() -> FakeCapi:
    return FakeCapi()


@pytest.fixture
def settings(monkeypatch) -> Settings:
    monkeypatch.setenv("CAPI_API_KEY", "test-key")
    monkeypatch.delenv("MOST_VIEWED_FORMAT", raising=False)
    monkeypatch.delenv("CACHED_EDITIONS", raising=False)
    monkeypatch.delenv("CAPI_BASE_URL", raising=False)
    return Settings()


@pytest.fixture
def client(settings, fake_capi):
    app = create_app(settings=settings, transport=fake_capi.transport)
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def http(fake_capi):
    """An AsyncClient whose requests are answered by ``fake_capi``."""
    async with httpx.AsyncClient(transport=fake_capi.transport) as http_client:
        yield http_client


@pytest.fixture
def capi_client(http) -> CapiClient:
    return CapiClient(http, "https://content.guardianapis.com", "secret")
