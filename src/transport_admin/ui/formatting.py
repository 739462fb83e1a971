"""Display formatting for the dashboard pages.

Every helper accepts a missing value and returns the literal fallback the
page shows in its place; none of them raise.
"""
from __future__ import annotations

import math
from datetime import datetime
from typing import Any

NA = "N/A"
NOT_ASSIGNED = "Not assigned"


def format_status(status: str | None) -> str:
    """``ict_supervisor_approved`` -> ``Ict Supervisor Approved``."""
    if not status:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in status.split("_"))


def _parse_datetime(value: str) -> datetime | None:
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_date(value: str | None) -> str:
    """``2025-03-05T14:30:00Z`` -> ``Mar 5, 2025, 02:30 PM``; unparseable input comes back verbatim."""
    if not value:
        return NA
    d = _parse_datetime(value)
    if d is None:
        return value
    return f"{d:%b} {d.day}, {d.year}, {d:%I:%M %p}"


def format_coordinate(value: float | None) -> str:
    return f"{value:.6f}" if value is not None else NA


def format_location(location: Any) -> str:
    """``lat, lng`` to six decimals, each side ``N/A`` when absent."""
    lat = getattr(location, "lat", None)
    lng = getattr(location, "lng", None)
    return f"{format_coordinate(lat)}, {format_coordinate(lng)}"


def format_count(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def or_fallback(value: Any, fallback: str = NA) -> str:
    return fallback if value is None else str(value)


def row_key(prefix: str, primary_id: str | None, trip_id: str | None, label: str | None) -> str:
    """Row identity: primary id, else trip id, else ``{prefix}-{label}``.

    A missing label reads as ``unknown`` (``vehicle-unknown``), never
    ``undefined`` or ``null``.
    """
    if primary_id:
        return primary_id
    if trip_id:
        return trip_id
    return f"{prefix}-{label if label is not None else 'unknown'}"


# ---------------------------------------------------------------------------
# Trip metrics
# ---------------------------------------------------------------------------

def format_distance(km: float | None) -> str:
    return f"{km:.1f} km" if km is not None else NA


def format_duration(minutes: float | None) -> str:
    # Half-up rounding, not banker's rounding.
    return f"{math.floor(minutes + 0.5)} min" if minutes is not None else NA


def format_speed(kph: float | None) -> str:
    return f"{kph:.1f} km/h" if kph is not None else NA


# ---------------------------------------------------------------------------
# People and vehicles
# ---------------------------------------------------------------------------

def format_requester_contact(email: str | None, department: str | None) -> str:
    contact = email if email is not None else "No email"
    if department:
        contact += f" • {department}"
    return contact


def format_vehicle(vehicle: Any) -> str:
    if vehicle is None:
        return NOT_ASSIGNED
    plate = vehicle.plate_number if vehicle.plate_number is not None else "Unknown plate"
    description = " ".join(part for part in (vehicle.make, vehicle.model) if part)
    return f"{plate} • {description}"
