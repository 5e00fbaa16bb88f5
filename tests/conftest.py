import asyncio

import httpx
import pytest
from fastapi.testclient import TestClient

from mdfetch.api.routes import get_service
from mdfetch.core.config import FetchConfig
from mdfetch.main import app
from mdfetch.services.fetch import FetchService


def make_transport(routes: dict) -> httpx.MockTransport:
    """
    Build a mock transport from ``{url_or_path: response}``.

    A response is either an ``httpx.Response``, an exception instance to raise,
    or a ``(status, body, content_type)`` tuple. Unknown paths return 404.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        key = str(request.url)
        if key not in routes:
            key = request.url.path
        resp = routes.get(key)
        if resp is None:
            return httpx.Response(404, text="Not Found", headers={"content-type": "text/plain"})
        if isinstance(resp, BaseException):
            raise resp
        if isinstance(resp, httpx.Response):
            return resp
        status, body, content_type = resp
        return httpx.Response(status, text=body, headers={"content-type": content_type})

    return httpx.MockTransport(handler)


@pytest.fixture
def config():
    """Small limits so tests stay fast"""
    return FetchConfig(
        timeout_seconds=5,
        user_agent="test-agent/1.0",
        max_urls=5,
        max_workers=3,
        default_max_length=1000,
    )


@pytest.fixture
def api_client(config):
    """Return a factory that starts the app with a service on a mock transport"""
    started = []

    def _make(routes: dict) -> TestClient:
        service = FetchService(config, transport=make_transport(routes))
        app.dependency_overrides[get_service] = lambda: service
        client = TestClient(app)
        client.__enter__()
        started.append((client, service))
        return client

    yield _make

    for client, service in started:
        client.__exit__(None, None, None)
        asyncio.run(service.close())
    app.dependency_overrides.clear()


@pytest.fixture
def mock_transport():
    """Expose make_transport to tests"""
    return make_transport
