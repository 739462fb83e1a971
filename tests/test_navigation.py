from transport_admin.ui.navigation import NAV_MAIN, PAGES_DIR, active_items, page_sections, url_path


def test_dashboard_active_only_on_root():
    assert active_items("/") == ["Dashboard"]
    assert "Dashboard" not in active_items("/users")


def test_transport_group_active_for_any_transport_path():
    assert active_items("/transport/tracking") == ["Transport", "Tracking"]
    assert active_items("/transport/vehicles/abc") == ["Transport", "Vehicles"]
    assert active_items("/transport/requests") == ["Transport", "Transport Requests"]


def test_every_page_file_exists():
    pages = [item.page for root in NAV_MAIN for item in root.walk() if item.page]
    assert pages
    for page in pages:
        assert (PAGES_DIR / page).is_file(), page


def test_page_sections_group_transport_pages():
    sections = page_sections()
    assert [i.title for i in sections[""]] == ["Dashboard", "ICT Requests", "Store Requests"]
    assert [i.title for i in sections["Transport"]] == ["Transport Requests", "Request Details", "Tracking"]
    # Routes without a page here are left out.
    assert "Users" not in [i.title for items in sections.values() for i in items]


def test_url_paths_are_unique():
    paths = [url_path(i) for items in page_sections().values() for i in items]
    assert len(paths) == len(set(paths))
    assert url_path(sections_item("Tracking")) == "transport-tracking"


def sections_item(title):
    return next(i for root in NAV_MAIN for i in root.walk() if i.title == title)


def test_request_details_is_routable_but_hidden_from_sidebar():
    detail = sections_item("Request Details")
    assert detail.hidden
    assert detail in page_sections()["Transport"]
    visible = [i.title for root in NAV_MAIN for i in root.walk() if not i.hidden]
    assert "Request Details" not in visible
    assert "Transport Requests" in visible
