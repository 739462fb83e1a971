"""Live-tracking DTOs — pure Pydantic."""
from __future__ import annotations
from pydantic import field_validator
from transport_admin.api.schemas._base import BackendModel, optional_float


class Coordinates(BackendModel):
    lat: float | None = None
    lng: float | None = None

    @field_validator("lat", "lng", mode="before")
    @classmethod
    def _numeric_or_none(cls, v):
        return optional_float(v)


class VehicleLocation(BackendModel):
    vehicle_id: str | None = None
    plate_number: str | None = None
    trip_id: str | None = None
    location: Coordinates | None = None


class DriverLocation(BackendModel):
    driver_id: str | None = None
    driver_name: str | None = None
    trip_id: str | None = None
    location: Coordinates | None = None
