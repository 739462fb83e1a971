import streamlit as st
from transport_admin.ui.api_client import get_client
from transport_admin.ui.query import get_query_cache
from transport_admin.ui.views import NO_REQUESTS, build_transport_rows

st.title("Transport Requests")

client = get_client()
result = get_query_cache().scoped(client.scope).use_query(
    "transport-requests", lambda: client.list_requests("/api/transport/requests"),
)

if result.error is not None:
    st.error("Failed to load transport requests.")

requests = result.data or []

if not requests:
    st.info(NO_REQUESTS)
else:
    rows = build_transport_rows(requests)
    st.dataframe(rows, use_container_width=True, hide_index=True)

    ids = [row["ID"] for row in rows if row["ID"]]
    if ids:
        selected = st.selectbox("Open request", ids)
        if st.button("View details"):
            st.session_state["selected_request_id"] = selected
            st.switch_page("pages/4_request_detail.py")
