"""Shared test fixtures.

fake_gateway: in-memory stand-in for the upstream backend, keyed by path.
client: FastAPI TestClient whose gateway dependency yields fake_gateway.
mock_http: builds an httpx.MockTransport that records every request.
"""
import httpx
import pytest


class FakeGateway:
    """Answers ``get_list`` from a path->value dict; an Exception value is raised."""

    def __init__(self, responses: dict | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[str] = []

    def get_list(self, path: str) -> list:
        self.calls.append(path)
        value = self.responses.get(path, [])
        if isinstance(value, Exception):
            raise value
        return value


@pytest.fixture
def fake_gateway():
    return FakeGateway()


@pytest.fixture
def client(fake_gateway):
    """FastAPI TestClient backed by the fake gateway."""
    from fastapi.testclient import TestClient
    from transport_admin.api.app import create_app
    from transport_admin.api.deps import get_gateway

    app = create_app()
    app.dependency_overrides[get_gateway] = lambda: fake_gateway
    with TestClient(app) as c:
        yield c


class RecordingTransport(httpx.MockTransport):
    def __init__(self, handler) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def mock_http():
    return RecordingTransport
