"""FastAPI application factory for the dashboard API."""
from __future__ import annotations
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from transport_admin import __version__
from transport_admin.domain.exceptions import NotFoundError, UpstreamError
from transport_admin.logging import logger


def create_app() -> FastAPI:
    app = FastAPI(
        title="Transport Admin Dashboard API",
        version=__version__,
    )

    # Import routers inside create_app() to avoid circular imports at module load time
    from transport_admin.api.routers.dashboard import router as dashboard_router
    from transport_admin.api.routers.tracking import router as tracking_router
    from transport_admin.api.routers.requests import router as requests_router

    app.include_router(dashboard_router)
    app.include_router(tracking_router)
    app.include_router(requests_router)

    @app.exception_handler(NotFoundError)
    def _not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"detail": exc.message})

    @app.exception_handler(UpstreamError)
    def _upstream(request: Request, exc: UpstreamError) -> JSONResponse:
        logger.error("Upstream failure on %s: [%s] %s", request.url.path, exc.status_code, exc.message)
        return JSONResponse(status_code=502, content={"detail": exc.message})

    @app.get("/health", tags=["ops"])
    def health() -> dict:
        return {"status": "ok"}

    return app
