"""Sidebar navigation tree.

Routes are the admin panel's URL paths; ``page`` names the Streamlit page
file under ``ui/pages`` that renders the route, or ``None`` when the route
is served elsewhere.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

PAGES_DIR = Path(__file__).parent / "pages"


@dataclass(frozen=True)
class NavItem:
    title: str
    url: str | None = None
    icon: str | None = None
    page: str | None = None
    items: tuple["NavItem", ...] = ()
    # Active for any path under this prefix, on top of an exact url match.
    active_prefix: str | None = None
    # Routable but left out of the sidebar; reached from another page.
    hidden: bool = False

    def is_active(self, pathname: str) -> bool:
        if self.url is not None and pathname == self.url:
            return True
        if self.active_prefix is not None and pathname.startswith(self.active_prefix):
            return True
        return False

    def walk(self):
        yield self
        for child in self.items:
            yield from child.walk()


NAV_MAIN: tuple[NavItem, ...] = (
    NavItem("Dashboard", "/", ":material/dashboard:", "1_dashboard.py"),
    NavItem("ICT Requests", "/ict-requests", ":material/description:", "5_ict_requests.py"),
    NavItem("Store Requests", "/store-requests", ":material/inventory_2:", "6_store_requests.py"),
    NavItem(
        "Transport",
        icon=":material/local_shipping:",
        active_prefix="/transport",
        items=(
            NavItem("Transport Requests", "/transport/requests", page="3_transport_requests.py"),
            NavItem(
                "Request Details", "/transport/requests/detail", page="4_request_detail.py", hidden=True,
            ),
            NavItem(
                "Vehicles", "/transport/vehicles", ":material/directions_car:",
                active_prefix="/transport/vehicles/",
            ),
            NavItem("Tracking", "/transport/tracking", ":material/location_on:", "2_tracking.py"),
        ),
    ),
    NavItem("Users", "/users", ":material/group:"),
    NavItem("Offices", "/offices", ":material/apartment:"),
    NavItem("Departments", "/departments", ":material/domain:"),
)


def active_items(pathname: str, items: tuple[NavItem, ...] = NAV_MAIN) -> list[str]:
    """Titles of every item highlighted for *pathname*, parents before children."""
    return [item.title for root in items for item in root.walk() if item.is_active(pathname)]


def page_sections(items: tuple[NavItem, ...] = NAV_MAIN) -> dict[str, list[NavItem]]:
    """Group the items that have a page into ``st.navigation`` sections.

    Top-level pages share the unnamed section; a group becomes its own
    section holding its pages.
    """
    sections: dict[str, list[NavItem]] = {"": []}
    for item in items:
        if item.items:
            children = [child for child in item.items if child.page]
            if children:
                sections[item.title] = children
        elif item.page:
            sections[""].append(item)
    return sections


def url_path(item: NavItem) -> str:
    """Streamlit url path (no leading slash) for a page item."""
    return (item.url or "").strip("/").replace("/", "-")
