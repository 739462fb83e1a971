"""HTTP gateway to the upstream request-management backend.

Only speaks JSON over httpx; services decide what a failure means.
"""
from __future__ import annotations

from typing import Any

import httpx

from transport_admin.domain.exceptions import NotFoundError, UpstreamError
from transport_admin.logging import logger

_NO_CACHE = {"Cache-Control": "no-cache"}


def _error_detail(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text
    if isinstance(body, dict):
        return str(body.get("message", body))
    return str(body)


class BackendGateway:
    """One method per HTTP verb the dashboard needs. Authenticates with a bearer token."""

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        self._client = httpx.Client(
            base_url=base_url, headers=headers, timeout=30.0, transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "BackendGateway":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _send(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            resp = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            logger.error("Backend %s %s failed: %s", method, path, exc)
            raise UpstreamError(0, f"{method} {path} failed: {exc}") from exc
        if resp.status_code == 404:
            raise NotFoundError(_error_detail(resp))
        if not resp.is_success:
            logger.warning("Backend %s %s returned %s", method, path, resp.status_code)
            raise UpstreamError(resp.status_code, _error_detail(resp))
        try:
            return resp.json()
        except ValueError as exc:
            raise UpstreamError(resp.status_code, f"{method} {path} returned invalid JSON") from exc

    # ------------------------------------------------------------------
    # Verbs
    # ------------------------------------------------------------------

    def get_json(self, path: str) -> Any:
        return self._send("GET", path, headers=_NO_CACHE)

    def get_list(self, path: str) -> list[Any]:
        """GET *path*; a non-array body is treated as an empty list."""
        data = self.get_json(path)
        return data if isinstance(data, list) else []

    def patch_json(self, path: str, payload: dict[str, Any]) -> Any:
        return self._send("PATCH", path, json=payload)
