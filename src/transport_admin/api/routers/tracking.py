"""Live-tracking endpoints."""
from fastapi import APIRouter, Depends
from transport_admin.api.deps import get_gateway
from transport_admin.api.schemas.tracking import DriverLocation, VehicleLocation
from transport_admin.infra.backend import BackendGateway
from transport_admin.services.tracking_service import TrackingService

router = APIRouter(prefix="/api/tracking", tags=["tracking"])


@router.get("/vehicles", response_model=list[VehicleLocation], response_model_by_alias=True)
def vehicle_locations(gateway: BackendGateway | None = Depends(get_gateway)) -> list[VehicleLocation]:
    return TrackingService(gateway).vehicle_locations()


@router.get("/drivers", response_model=list[DriverLocation], response_model_by_alias=True)
def driver_locations(gateway: BackendGateway | None = Depends(get_gateway)) -> list[DriverLocation]:
    return TrackingService(gateway).driver_locations()
