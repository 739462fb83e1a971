from types import SimpleNamespace

import pytest

from transport_admin.ui import formatting as fmt


@pytest.mark.parametrize("status, expected", [
    ("ict_supervisor_approved", "Ict Supervisor Approved"),
    ("pending", "Pending"),
    ("in_progress", "In Progress"),
    ("", ""),
    (None, ""),
])
def test_format_status(status, expected):
    assert fmt.format_status(status) == expected


def test_format_date_en_us_style():
    assert fmt.format_date("2025-03-05T14:30:00.000Z") == "Mar 5, 2025, 02:30 PM"
    assert fmt.format_date("2024-12-25T09:05:00+01:00") == "Dec 25, 2024, 09:05 AM"


def test_format_date_missing_and_unparseable():
    assert fmt.format_date(None) == "N/A"
    assert fmt.format_date("") == "N/A"
    assert fmt.format_date("next tuesday") == "next tuesday"


def test_format_location_six_decimals():
    loc = SimpleNamespace(lat=9.0579, lng=7.4951)
    assert fmt.format_location(loc) == "9.057900, 7.495100"


def test_format_location_missing_sides():
    assert fmt.format_location(None) == "N/A, N/A"
    assert fmt.format_location(SimpleNamespace(lat=0.0, lng=None)) == "0.000000, N/A"


def test_format_count():
    assert fmt.format_count(5) == 5
    assert fmt.format_count(None) == 0
    assert fmt.format_count("5") == 0
    assert fmt.format_count(True) == 0


def test_row_key_priority():
    assert fmt.row_key("vehicle", "v1", "t1", "ABC") == "v1"
    assert fmt.row_key("vehicle", None, "t1", "ABC") == "t1"
    assert fmt.row_key("vehicle", "", "", "ABC") == "vehicle-ABC"
    assert fmt.row_key("driver", None, None, None) == "driver-unknown"


def test_trip_metric_formatting():
    assert fmt.format_distance(12.345) == "12.3 km"
    assert fmt.format_duration(44.5) == "45 min"
    assert fmt.format_duration(42.4) == "42 min"
    assert fmt.format_speed(60) == "60.0 km/h"
    assert fmt.format_distance(None) == "N/A"
    assert fmt.format_distance(0.0) == "0.0 km"


def test_requester_contact():
    assert fmt.format_requester_contact("a@b.c", "Finance") == "a@b.c • Finance"
    assert fmt.format_requester_contact(None, None) == "No email"


def test_format_vehicle():
    assert fmt.format_vehicle(None) == "Not assigned"
    v = SimpleNamespace(plate_number=None, make="Toyota", model=None)
    assert fmt.format_vehicle(v) == "Unknown plate • Toyota"
    v = SimpleNamespace(plate_number="ABC-123", make="Toyota", model="Hilux")
    assert fmt.format_vehicle(v) == "ABC-123 • Toyota Hilux"
