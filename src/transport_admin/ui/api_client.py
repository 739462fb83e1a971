"""Typed HTTP client for Streamlit pages.

Only imports from ``transport_admin.api.schemas``, never services or FastAPI.
Instantiate via ``get_client()`` which caches per Streamlit session.
"""
from __future__ import annotations

import hashlib
from typing import Any

import httpx
import streamlit as st
from pydantic import ValidationError

from transport_admin.api.schemas.requests import RequestDetail, RequestSummary
from transport_admin.api.schemas.tracking import DriverLocation, VehicleLocation
from transport_admin.config import settings
from transport_admin.domain.exceptions import NotFoundError
from transport_admin.logging import logger
from transport_admin.ui.state import get_access_token

LOAD_FAILED = "Failed to load"

_NO_CACHE = {"Cache-Control": "no-cache"}


class APIError(Exception):
    """Raised when a fetch fails: non-2xx status (or status 0 for a network error)."""

    def __init__(self, status_code: int, detail: str) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"[{status_code}] {detail}")


def fetch_json(client: httpx.Client, url: str) -> Any:
    """GET *url* once, bypassing caches; raise ``APIError`` unless the status is 2xx."""
    try:
        resp = client.get(url, headers=_NO_CACHE)
    except httpx.HTTPError as exc:
        raise APIError(0, LOAD_FAILED) from exc
    if not resp.is_success:
        raise APIError(resp.status_code, LOAD_FAILED)
    return resp.json()


def _as_list(data: Any) -> list:
    return data if isinstance(data, list) else []


class DashboardClient:
    """One method per dashboard endpoint.  Lists come back as Pydantic DTOs."""

    def __init__(
        self,
        base_url: str | None = None,
        backend_url: str | None = None,
        token: str | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        # Query-cache scope: a digest of the token, never the token itself.
        self.scope = hashlib.sha256(token.encode()).hexdigest()[:16] if token else "anonymous"
        cookies = {"access_token": token} if token else None
        headers = {"Authorization": f"Bearer {token}"} if token else None
        self._client = httpx.Client(
            base_url=base_url or settings.DASHBOARD_API_URL,
            cookies=cookies, timeout=30.0, transport=transport,
        )
        self._backend = httpx.Client(
            base_url=backend_url or settings.NEXT_PUBLIC_API_BASE_URL,
            headers=headers, timeout=30.0, transport=transport,
        )

    # ------------------------------------------------------------------
    # Dashboard
    # ------------------------------------------------------------------

    def get_count(self, path: str) -> int:
        data = fetch_json(self._client, path)
        return data if isinstance(data, int) and not isinstance(data, bool) else 0

    # ------------------------------------------------------------------
    # Tracking
    # ------------------------------------------------------------------

    def list_vehicle_locations(self) -> list[VehicleLocation]:
        data = _as_list(fetch_json(self._client, "/api/tracking/vehicles"))
        return [VehicleLocation.model_validate(item or {}) for item in data]

    def list_driver_locations(self) -> list[DriverLocation]:
        data = _as_list(fetch_json(self._client, "/api/tracking/drivers"))
        return [DriverLocation.model_validate(item or {}) for item in data]

    # ------------------------------------------------------------------
    # Requests
    # ------------------------------------------------------------------

    def list_requests(self, path: str) -> list[RequestSummary]:
        data = _as_list(fetch_json(self._client, path))
        return [RequestSummary.model_validate(item or {}) for item in data]

    def get_request(self, request_id: str) -> RequestDetail | None:
        """Fetch one request straight from the backend.

        404 raises ``NotFoundError``; any other failure is logged and
        degrades to ``None``.
        """
        try:
            resp = self._backend.get(f"/requests/{request_id}", headers=_NO_CACHE)
        except httpx.HTTPError as exc:
            logger.error("Failed to load request details: %s", exc)
            return None
        if resp.status_code == 404:
            raise NotFoundError(f"Request {request_id} not found")
        if not resp.is_success:
            logger.error("Failed to load request details %s", resp.status_code)
            return None
        try:
            return RequestDetail.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            logger.error("Malformed request details for %s: %s", request_id, exc)
            return None

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    def health(self) -> dict:
        return fetch_json(self._client, "/health")

    def close(self) -> None:
        self._client.close()
        self._backend.close()


# ------------------------------------------------------------------
# Streamlit helper: one client per session
# ------------------------------------------------------------------

def get_client() -> DashboardClient:
    """Return a cached ``DashboardClient`` for the current Streamlit session."""
    token = get_access_token()
    cached = st.session_state.get("dashboard_api_client")
    if cached is None or st.session_state.get("dashboard_api_token") != token:
        if cached is not None:
            cached.close()
        cached = DashboardClient(token=token or None)
        st.session_state["dashboard_api_client"] = cached
        st.session_state["dashboard_api_token"] = token
    return cached
