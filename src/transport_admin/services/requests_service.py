"""Request list use-case service. Lists degrade to empty instead of failing."""
from __future__ import annotations
from transport_admin.domain.exceptions import AdminError
from transport_admin.infra.backend import BackendGateway
from transport_admin.logging import logger


class RequestsService:
    def __init__(self, gateway: BackendGateway | None) -> None:
        self._gateway = gateway

    def _list_or_empty(self, path: str) -> list:
        if self._gateway is None:
            return []
        try:
            return self._gateway.get_list(path)
        except AdminError as exc:
            logger.warning("Listing %s failed: %s", path, exc.message)
            return []

    def transport_requests(self) -> list:
        """Vehicle requests, falling back to the legacy ``/requests`` listing."""
        if self._gateway is None:
            return []
        try:
            return self._gateway.get_list("/requests/vehicle")
        except AdminError as exc:
            logger.warning("/requests/vehicle failed (%s); falling back to /requests", exc.message)
        return self._list_or_empty("/requests")

    def ict_requests(self) -> list:
        return self._list_or_empty("/requests/ict")

    def store_requests(self) -> list:
        return self._list_or_empty("/requests/store")
