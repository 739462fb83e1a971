"""View models: what each page shows, computed from DTOs and query results.

Pages only lay these out with Streamlit; all fallback and formatting
decisions live here so they can be tested without a running app.
"""
from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from transport_admin.api.schemas.requests import (
    ICT_STATUS_LABELS, STORE_STATUS_LABELS, RequestDetail, RequestSummary,
)
from transport_admin.api.schemas.tracking import DriverLocation, VehicleLocation
from transport_admin.ui import formatting as fmt
from transport_admin.ui.query import QueryResult

# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------

# (query key, card title, dashboard API path)
DASHBOARD_CARDS: list[tuple[str, str, str]] = [
    ("activeTrips", "Active Trips", "/api/dashboard/active-trips"),
    ("pendingTransportRequests", "Pending Transport Requests", "/api/dashboard/pending-transport-requests"),
    ("pendingIctRequests", "Pending ICT Requests", "/api/dashboard/pending-ict-requests"),
    ("pendingStoreRequests", "Pending Store Requests", "/api/dashboard/pending-store-requests"),
    ("availableVehicles", "Available Vehicles", "/api/dashboard/available-vehicles"),
]


@dataclass(frozen=True)
class DashboardCard:
    key: str
    title: str
    value: int | None  # None while the skeleton is shown

    @property
    def is_skeleton(self) -> bool:
        return self.value is None


def build_dashboard_cards(results: Mapping[str, QueryResult]) -> list[DashboardCard]:
    """All cards stay skeletons until every query settles; then value or 0."""
    is_loading = any(r.is_loading for r in results.values())
    cards = []
    for key, title, _ in DASHBOARD_CARDS:
        result = results.get(key, QueryResult())
        value = None if is_loading else fmt.format_count(result.data)
        cards.append(DashboardCard(key=key, title=title, value=value))
    return cards


# ---------------------------------------------------------------------------
# Tracking
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TrackingRow:
    key: str
    title: str
    trip: str
    location: str
    separator_before: bool


@dataclass(frozen=True)
class TrackingList:
    rows: list[TrackingRow]
    is_loading: bool = False
    empty_message: str = ""

    @property
    def message(self) -> str | None:
        """Text shown instead of rows, or ``None`` when rows are shown."""
        if self.is_loading:
            return "Loading..."
        if not self.rows:
            return self.empty_message
        return None


def _dedupe(keys: Iterable[str]) -> list[str]:
    seen: dict[str, int] = {}
    out = []
    for key in keys:
        n = seen.get(key, 0)
        seen[key] = n + 1
        out.append(key if n == 0 else f"{key}#{n}")
    return out


def _tracking_list(entries: list[tuple[str, str, str, str]], is_loading: bool, empty: str) -> TrackingList:
    """*entries* are ``(key, title, trip, location)``; keys are made unique."""
    keys = _dedupe(e[0] for e in entries)
    rows = [
        TrackingRow(key=k, title=title, trip=trip, location=loc, separator_before=i > 0)
        for i, (k, (_, title, trip, loc)) in enumerate(zip(keys, entries))
    ]
    return TrackingList(rows=rows, is_loading=is_loading, empty_message=empty)


def build_vehicle_list(result: QueryResult) -> TrackingList:
    vehicles: list[VehicleLocation] = result.data or []
    entries = [
        (
            fmt.row_key("vehicle", v.vehicle_id, v.trip_id, v.plate_number),
            f"Plate: {fmt.or_fallback(v.plate_number)}",
            f"Trip: {fmt.or_fallback(v.trip_id)}",
            f"Location: {fmt.format_location(v.location)}",
        )
        for v in vehicles
    ]
    return _tracking_list(entries, result.is_loading, "No vehicle locations")


def build_driver_list(result: QueryResult) -> TrackingList:
    drivers: list[DriverLocation] = result.data or []
    entries = [
        (
            fmt.row_key("driver", d.driver_id, d.trip_id, d.driver_name),
            f"Name: {fmt.or_fallback(d.driver_name)}",
            f"Trip: {fmt.or_fallback(d.trip_id)}",
            f"Location: {fmt.format_location(d.location)}",
        )
        for d in drivers
    ]
    return _tracking_list(entries, result.is_loading, "No driver locations")


# ---------------------------------------------------------------------------
# Request lists
# ---------------------------------------------------------------------------

NO_REQUESTS = "No requests found"


def requester_name(request: RequestSummary) -> str:
    if request.requester is not None and request.requester.name:
        return request.requester.name
    return "Unknown"


def status_label(status: str, labels: Mapping[str, str] | None = None) -> str:
    if labels is None:
        return fmt.format_status(status)
    return labels.get(status) or status


def filter_by_status(requests: list[RequestSummary], status: str) -> list[RequestSummary]:
    if status == "all":
        return list(requests)
    return [r for r in requests if r.status == status]


def build_transport_rows(requests: list[RequestSummary]) -> list[dict[str, str]]:
    return [
        {
            "ID": r.id or "",
            "Destination": fmt.or_fallback(r.destination),
            "Purpose": fmt.or_fallback(r.purpose),
            "Status": status_label(r.status),
            "Requester": requester_name(r),
            "Start": fmt.format_date(r.start_date),
        }
        for r in requests
    ]


def build_ict_rows(requests: list[RequestSummary]) -> list[dict[str, str]]:
    return [
        {
            "Equipment Type": fmt.or_fallback(r.equipment_type),
            "Specifications": fmt.or_fallback(r.specifications),
            "Purpose": fmt.or_fallback(r.purpose),
            "Status": status_label(r.status, ICT_STATUS_LABELS),
            "Requester": requester_name(r),
            "Date": fmt.format_date(r.created_at),
        }
        for r in requests
    ]


def build_store_rows(requests: list[RequestSummary]) -> list[dict[str, str]]:
    return [
        {
            "Item": fmt.or_fallback(r.item_name),
            "Quantity": " ".join(str(p) for p in (r.quantity, r.unit) if p is not None) or fmt.NA,
            "Purpose": fmt.or_fallback(r.purpose),
            "Urgency": fmt.or_fallback(r.urgency),
            "Status": status_label(r.status, STORE_STATUS_LABELS),
            "Requester": requester_name(r),
            "Date": fmt.format_date(r.created_at),
        }
        for r in requests
    ]


# ---------------------------------------------------------------------------
# Request detail
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ApprovalLine:
    status: str
    when: str
    comments: str | None


@dataclass(frozen=True)
class RequestDetailView:
    title: str
    purpose: str | None
    status: str
    start_time: str
    end_time: str
    passengers: str
    requester_name: str
    requester_contact: str
    driver_name: str
    driver_email: str | None
    vehicle: str
    distance: str
    duration: str
    average_speed: str
    approvals: list[ApprovalLine] = field(default_factory=list)

    @property
    def approvals_message(self) -> str | None:
        return None if self.approvals else "No approvals recorded"


def build_request_detail(request: RequestDetail | None) -> RequestDetailView:
    """Render-ready detail; a ``None`` request yields every fallback."""
    requester = request.requester if request else None
    driver = request.assigned_driver if request else None
    vehicle = request.assigned_vehicle if request else None
    metrics = request.trip_metrics if request else None

    return RequestDetailView(
        title=request.destination if request and request.destination is not None else "Unknown destination",
        purpose=request.purpose if request and request.purpose else None,
        status=fmt.format_status(request.status) if request and request.status else fmt.NA,
        start_time=fmt.format_date(request.start_date if request else None),
        end_time=fmt.format_date(request.end_date if request else None),
        passengers=fmt.or_fallback(request.passenger_count if request else None),
        requester_name=requester.name if requester and requester.name is not None else "Unknown requester",
        requester_contact=fmt.format_requester_contact(
            requester.email if requester else None,
            requester.department if requester else None,
        ),
        driver_name=driver.name if driver and driver.name is not None else fmt.NOT_ASSIGNED,
        driver_email=driver.email if driver and driver.email else None,
        vehicle=fmt.format_vehicle(vehicle),
        distance=fmt.format_distance(metrics.distance_km if metrics else None),
        duration=fmt.format_duration(metrics.duration_minutes if metrics else None),
        average_speed=fmt.format_speed(metrics.average_speed_kph if metrics else None),
        approvals=[
            ApprovalLine(
                status=fmt.format_status(event.status) or fmt.NA,
                when=fmt.format_date(event.timestamp),
                comments=event.comments or None,
            )
            for event in (request.approval_chain if request else [])
        ],
    )
