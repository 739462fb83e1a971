import streamlit as st
from transport_admin.api.schemas.requests import ICT_STATUS_LABELS
from transport_admin.ui.api_client import get_client
from transport_admin.ui.query import get_query_cache
from transport_admin.ui.views import NO_REQUESTS, build_ict_rows, filter_by_status

st.title("ICT Requests Management")

client = get_client()

options = ["all", *ICT_STATUS_LABELS]
status = st.selectbox(
    "Filter", options,
    format_func=lambda s: "All" if s == "all" else ICT_STATUS_LABELS[s],
)

result = get_query_cache().scoped(client.scope).use_query("ict-requests", lambda: client.list_requests("/api/ict-requests"))
if result.error is not None:
    st.error("Failed to load ICT requests.")

filtered = filter_by_status(result.data or [], status)
if not filtered:
    st.info(NO_REQUESTS)
else:
    st.dataframe(build_ict_rows(filtered), use_container_width=True, hide_index=True)
