"""Coordinate-patch DTOs for the vehicle request maintenance endpoints."""
from __future__ import annotations
from pydantic import Field
from transport_admin.api.schemas._base import BackendModel


class LatLng(BackendModel):
    lat: float
    lng: float


class CoordinatePatch(BackendModel):
    request_id: str
    coordinates: LatLng


class BatchCoordinatesRequest(BackendModel):
    requests: list[CoordinatePatch]


class BatchItemError(BackendModel):
    request_id: str | None = None
    error: str | None = None


class BatchCoordinatesResult(BackendModel):
    success: int = 0
    failed: int = 0
    errors: list[BatchItemError] = Field(default_factory=list)


class PatchedRequest(BackendModel):
    id: str | None = Field(default=None, alias="_id")
    coordinates: LatLng | None = None
