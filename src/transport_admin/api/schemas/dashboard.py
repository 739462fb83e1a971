"""Dashboard DTOs — pure Pydantic."""
from __future__ import annotations
from pydantic import BaseModel


class DashboardCounts(BaseModel):
    active_trips: int = 0
    pending_transport_requests: int = 0
    pending_ict_requests: int = 0
    pending_store_requests: int = 0
    available_vehicles: int = 0
