"""Tests for the coordinate-patch service and the ``coordinates add`` command."""
import json

import httpx
import pytest
from pydantic import SecretStr
from typer.testing import CliRunner

from transport_admin.api.schemas.coordinates import CoordinatePatch
from transport_admin.cli import app
from transport_admin.config import settings
from transport_admin.domain.exceptions import UpstreamError
from transport_admin.infra import backend
from transport_admin.services.coordinates_service import (
    BATCH_PATH, DEFAULT_ENTRIES, SINGLE_PATH, add_coordinates,
)

runner = CliRunner()


def _entry(request_id: str, lat: float, lng: float) -> CoordinatePatch:
    return CoordinatePatch.model_validate({"requestId": request_id, "coordinates": {"lat": lat, "lng": lng}})


def _ok_handler(req: httpx.Request) -> httpx.Response:
    if req.url.path == BATCH_PATH:
        return httpx.Response(200, json={"success": 1, "failed": 1, "errors": [
            {"requestId": "REQUEST_ID_2", "error": "Vehicle request not found"},
        ]})
    body = json.loads(req.content)
    return httpx.Response(200, json={"_id": body["requestId"], "coordinates": body["coordinates"]})


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------

def test_two_entries_use_batch_endpoint_once(mock_http):
    transport = mock_http(_ok_handler)
    gateway = backend.BackendGateway("http://backend", "tok", transport=transport)
    outcome = add_coordinates(gateway, [_entry("a", 1.0, 2.0), _entry("b", 3.0, 4.0)])

    assert [r.url.path for r in transport.requests] == [BATCH_PATH]
    req = transport.requests[0]
    assert req.method == "PATCH"
    assert req.headers["authorization"] == "Bearer tok"
    assert json.loads(req.content) == {"requests": [
        {"requestId": "a", "coordinates": {"lat": 1.0, "lng": 2.0}},
        {"requestId": "b", "coordinates": {"lat": 3.0, "lng": 4.0}},
    ]}
    assert outcome.batch.success == 1
    assert outcome.batch.errors[0].request_id == "REQUEST_ID_2"


def test_one_entry_uses_single_endpoint(mock_http):
    transport = mock_http(_ok_handler)
    gateway = backend.BackendGateway("http://backend", "tok", transport=transport)
    outcome = add_coordinates(gateway, [_entry("a", 9.0579, 7.4951)])

    assert [r.url.path for r in transport.requests] == [SINGLE_PATH]
    assert json.loads(transport.requests[0].content) == {
        "requestId": "a", "coordinates": {"lat": 9.0579, "lng": 7.4951},
    }
    assert outcome.single.id == "a"
    assert outcome.batch is None


def test_no_entries_makes_no_calls(mock_http):
    transport = mock_http(_ok_handler)
    gateway = backend.BackendGateway("http://backend", "tok", transport=transport)
    outcome = add_coordinates(gateway, [])
    assert transport.requests == []
    assert outcome.batch is None and outcome.single is None


def test_batch_failure_propagates(mock_http):
    transport = mock_http(lambda req: httpx.Response(403, json={"message": "Forbidden resource"}))
    gateway = backend.BackendGateway("http://backend", "tok", transport=transport)
    with pytest.raises(UpstreamError) as exc_info:
        add_coordinates(gateway, DEFAULT_ENTRIES)
    assert exc_info.value.status_code == 403
    assert len(transport.requests) == 1


# ---------------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------------

@pytest.fixture
def cli_transport(monkeypatch, mock_http):
    transport = mock_http(_ok_handler)
    real = backend.BackendGateway
    monkeypatch.setattr(
        backend, "BackendGateway",
        lambda base_url, token: real(base_url, token, transport=transport),
    )
    monkeypatch.setattr(settings, "JWT_TOKEN", SecretStr("tok"))
    return transport


def test_cli_requires_token(monkeypatch):
    monkeypatch.setattr(settings, "JWT_TOKEN", None)
    result = runner.invoke(app, ["coordinates", "add"])
    assert result.exit_code == 1
    assert "JWT_TOKEN environment variable is required" in result.output


def test_cli_default_entries_call_batch_once(cli_transport):
    result = runner.invoke(app, ["coordinates", "add"])
    assert result.exit_code == 0, result.output
    assert [r.url.path for r in cli_transport.requests] == [BATCH_PATH]
    assert "Success: 1" in result.output
    assert "Request REQUEST_ID_2: Vehicle request not found" in result.output


def test_cli_single_entry_file(cli_transport, tmp_path):
    entries = tmp_path / "entries.json"
    entries.write_text(json.dumps([{"requestId": "r1", "coordinates": {"lat": 6.5244, "lng": 3.3792}}]))
    result = runner.invoke(app, ["coordinates", "add", "--file", str(entries)])
    assert result.exit_code == 0, result.output
    assert [r.url.path for r in cli_transport.requests] == [SINGLE_PATH]
    assert "Successfully added coordinates to request: r1" in result.output


def test_cli_empty_file_warns(cli_transport, tmp_path):
    entries = tmp_path / "entries.json"
    entries.write_text("[]")
    result = runner.invoke(app, ["coordinates", "add", "--file", str(entries)])
    assert result.exit_code == 0
    assert "No requests to process" in result.output
    assert cli_transport.requests == []


def test_cli_transport_failure_exits_nonzero(monkeypatch, mock_http):
    def _down(req):
        raise httpx.ConnectError("refused", request=req)

    real = backend.BackendGateway
    monkeypatch.setattr(
        backend, "BackendGateway",
        lambda base_url, token: real(base_url, token, transport=httpx.MockTransport(_down)),
    )
    monkeypatch.setattr(settings, "JWT_TOKEN", SecretStr("tok"))
    result = runner.invoke(app, ["coordinates", "add"])
    assert result.exit_code == 1
    assert "Error adding coordinates" in result.output
