"""Dashboard count endpoints — one per summary card."""
from fastapi import APIRouter, Depends
from transport_admin.api.deps import get_gateway
from transport_admin.api.schemas.dashboard import DashboardCounts
from transport_admin.infra.backend import BackendGateway
from transport_admin.services.dashboard_service import DashboardService

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


@router.get("/active-trips", response_model=int)
def active_trips(gateway: BackendGateway | None = Depends(get_gateway)) -> int:
    return DashboardService(gateway).active_trips()


@router.get("/pending-transport-requests", response_model=int)
def pending_transport_requests(gateway: BackendGateway | None = Depends(get_gateway)) -> int:
    return DashboardService(gateway).pending_transport_requests()


@router.get("/pending-ict-requests", response_model=int)
def pending_ict_requests(gateway: BackendGateway | None = Depends(get_gateway)) -> int:
    return DashboardService(gateway).pending_ict_requests()


@router.get("/pending-store-requests", response_model=int)
def pending_store_requests(gateway: BackendGateway | None = Depends(get_gateway)) -> int:
    return DashboardService(gateway).pending_store_requests()


@router.get("/available-vehicles", response_model=int)
def available_vehicles(gateway: BackendGateway | None = Depends(get_gateway)) -> int:
    return DashboardService(gateway).available_vehicles()


@router.get("/summary", response_model=DashboardCounts)
def summary(gateway: BackendGateway | None = Depends(get_gateway)) -> DashboardCounts:
    return DashboardService(gateway).get_counts()
