"""Live-tracking use-case service."""
from __future__ import annotations
from transport_admin.api.schemas.tracking import DriverLocation, VehicleLocation
from transport_admin.infra.backend import BackendGateway


class TrackingService:
    def __init__(self, gateway: BackendGateway | None) -> None:
        self._gateway = gateway

    def vehicle_locations(self) -> list[VehicleLocation]:
        if self._gateway is None:
            return []
        return [
            VehicleLocation.model_validate(item)
            for item in self._gateway.get_list("/tracking/vehicles")
            if isinstance(item, dict)
        ]

    def driver_locations(self) -> list[DriverLocation]:
        if self._gateway is None:
            return []
        return [
            DriverLocation.model_validate(item)
            for item in self._gateway.get_list("/tracking/drivers")
            if isinstance(item, dict)
        ]
