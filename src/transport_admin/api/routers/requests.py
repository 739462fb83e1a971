"""Request list endpoints. Bodies pass through as the backend sent them."""
from typing import Any
from fastapi import APIRouter, Depends
from transport_admin.api.deps import get_gateway
from transport_admin.infra.backend import BackendGateway
from transport_admin.services.requests_service import RequestsService

router = APIRouter(prefix="/api", tags=["requests"])


@router.get("/transport/requests")
def transport_requests(gateway: BackendGateway | None = Depends(get_gateway)) -> list[Any]:
    return RequestsService(gateway).transport_requests()


@router.get("/ict-requests")
def ict_requests(gateway: BackendGateway | None = Depends(get_gateway)) -> list[Any]:
    return RequestsService(gateway).ict_requests()


@router.get("/store-requests")
def store_requests(gateway: BackendGateway | None = Depends(get_gateway)) -> list[Any]:
    return RequestsService(gateway).store_requests()
