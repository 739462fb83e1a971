"""Trip details for one transport request, selected by the ``id`` query param
or the Transport Requests page."""
import streamlit as st
from transport_admin.domain.exceptions import NotFoundError
from transport_admin.ui.api_client import get_client
from transport_admin.ui.views import build_request_detail

request_id = st.query_params.get("id") or st.session_state.get("selected_request_id")

head, back = st.columns([5, 1])
head.title("Trip Details")
head.caption("View full information for this completed trip.")
if back.button("Back to Requests"):
    st.switch_page("pages/3_transport_requests.py")

if not request_id:
    st.warning("No request selected. Open one from the Transport Requests page.")
    st.stop()

try:
    request = get_client().get_request(request_id)
except NotFoundError:
    st.error("Request not found")
    st.caption(f"No request exists with ID `{request_id}`.")
    st.stop()

view = build_request_detail(request)

main, side = st.columns([2, 1])

with main.container(border=True):
    title_col, badge_col = st.columns([4, 1])
    title_col.subheader(view.title)
    if view.purpose:
        title_col.caption(view.purpose)
    badge_col.markdown(f"`{view.status}`")

    c1, c2 = st.columns(2)
    c1.caption("Start time")
    c1.write(view.start_time)
    c2.caption("End time")
    c2.write(view.end_time)
    c1.caption("Passengers")
    c1.write(view.passengers)

    st.divider()

    r1, r2 = st.columns(2)
    r1.caption("Requester")
    r1.markdown(f"**{view.requester_name}**")
    r1.caption(view.requester_contact)

    r2.caption("Assignment")
    r2.caption("Driver")
    r2.write(view.driver_name)
    if view.driver_email:
        r2.caption(view.driver_email)
    r2.caption("Vehicle")
    r2.write(view.vehicle)

with side.container(border=True):
    st.markdown("**Trip Metrics**")
    for label, value in (
        ("Distance", view.distance),
        ("Duration", view.duration),
        ("Average speed", view.average_speed),
    ):
        lc, vc = st.columns(2)
        lc.caption(label)
        vc.write(value)

with side.container(border=True):
    st.markdown("**Approvals**")
    if view.approvals_message:
        st.caption(view.approvals_message)
    for line in view.approvals:
        st.write(f"{line.status} — {line.when}")
        if line.comments:
            st.caption(line.comments)
