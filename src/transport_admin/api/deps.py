"""FastAPI dependencies."""
from __future__ import annotations
from typing import Generator
from fastapi import Request
from transport_admin.config import settings
from transport_admin.infra.backend import BackendGateway


def get_access_token(request: Request) -> str | None:
    """Bearer token from the ``access_token`` cookie or the Authorization header."""
    token = request.cookies.get("access_token")
    if token:
        return token
    auth = request.headers.get("authorization", "")
    if auth.lower().startswith("bearer "):
        return auth[7:].strip() or None
    return None


def get_gateway(request: Request) -> Generator[BackendGateway | None, None, None]:
    """Yield one upstream gateway per request, or ``None`` when unauthenticated."""
    token = get_access_token(request)
    if not token:
        yield None
        return
    with BackendGateway(settings.API_BASE_URL, token) as gateway:
        yield gateway
