"""Patch destination coordinates onto existing vehicle requests.

A single best-effort pass: more than one entry goes through the batch
endpoint in one call, exactly one entry through the single-item endpoint.
Failures propagate to the caller; nothing is retried.
"""
from __future__ import annotations

from dataclasses import dataclass

from transport_admin.api.schemas.coordinates import (
    BatchCoordinatesRequest, BatchCoordinatesResult, CoordinatePatch, PatchedRequest,
)
from transport_admin.infra.backend import BackendGateway
from transport_admin.logging import logger

SINGLE_PATH = "/requests/vehicle/add-coordinates"
BATCH_PATH = "/requests/vehicle/batch-add-coordinates"

# Placeholder ids; replace before running against a real backend.
DEFAULT_ENTRIES: list[CoordinatePatch] = [
    CoordinatePatch(request_id="REQUEST_ID_1", coordinates={"lat": 9.0579, "lng": 7.4951}),  # Abuja
    CoordinatePatch(request_id="REQUEST_ID_2", coordinates={"lat": 6.5244, "lng": 3.3792}),  # Lagos
]


@dataclass
class CoordinatesOutcome:
    batch: BatchCoordinatesResult | None = None
    single: PatchedRequest | None = None


def add_coordinates(gateway: BackendGateway, entries: list[CoordinatePatch]) -> CoordinatesOutcome:
    if len(entries) > 1:
        payload = BatchCoordinatesRequest(requests=entries).model_dump(by_alias=True)
        logger.info("Patching coordinates for %d requests via batch endpoint", len(entries))
        body = gateway.patch_json(BATCH_PATH, payload)
        return CoordinatesOutcome(batch=BatchCoordinatesResult.model_validate(body))

    if len(entries) == 1:
        payload = entries[0].model_dump(by_alias=True)
        logger.info("Patching coordinates for request %s", entries[0].request_id)
        body = gateway.patch_json(SINGLE_PATH, payload)
        return CoordinatesOutcome(single=PatchedRequest.model_validate(body))

    return CoordinatesOutcome()
