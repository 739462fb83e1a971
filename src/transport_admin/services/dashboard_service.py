"""Dashboard read-model: the five summary counts, aggregated from upstream lists."""
from __future__ import annotations
from transport_admin.api.schemas.dashboard import DashboardCounts
from transport_admin.api.schemas.requests import (
    IctRequestStatus, StoreRequestStatus, VehicleRequestStatus,
)
from transport_admin.infra.backend import BackendGateway


def _count_status(items: list, status: str) -> int:
    return sum(1 for item in items if isinstance(item, dict) and item.get("status") == status)


class DashboardService:
    """Each count is independent; a missing gateway (no token) reads as zero."""

    def __init__(self, gateway: BackendGateway | None) -> None:
        self._gateway = gateway

    def active_trips(self) -> int:
        if self._gateway is None:
            return 0
        return len(self._gateway.get_list("/trips/active"))

    def pending_transport_requests(self) -> int:
        if self._gateway is None:
            return 0
        items = self._gateway.get_list("/requests/vehicle")
        return _count_status(items, VehicleRequestStatus.PENDING.value)

    def pending_ict_requests(self) -> int:
        if self._gateway is None:
            return 0
        items = self._gateway.get_list("/requests/ict")
        return _count_status(items, IctRequestStatus.PENDING.value)

    def pending_store_requests(self) -> int:
        if self._gateway is None:
            return 0
        items = self._gateway.get_list("/requests/store")
        return _count_status(items, StoreRequestStatus.PENDING.value)

    def available_vehicles(self) -> int:
        if self._gateway is None:
            return 0
        return len(self._gateway.get_list("/assignments/available-vehicles"))

    def get_counts(self) -> DashboardCounts:
        return DashboardCounts(
            active_trips=self.active_trips(),
            pending_transport_requests=self.pending_transport_requests(),
            pending_ict_requests=self.pending_ict_requests(),
            pending_store_requests=self.pending_store_requests(),
            available_vehicles=self.available_vehicles(),
        )
