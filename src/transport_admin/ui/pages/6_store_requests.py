import streamlit as st
from transport_admin.api.schemas.requests import STORE_STATUS_LABELS
from transport_admin.ui.api_client import get_client
from transport_admin.ui.query import get_query_cache
from transport_admin.ui.views import NO_REQUESTS, build_store_rows, filter_by_status

st.title("Store Requests Management")

client = get_client()

options = ["all", *STORE_STATUS_LABELS]
status = st.selectbox(
    "Filter", options,
    format_func=lambda s: "All" if s == "all" else STORE_STATUS_LABELS[s],
)

result = get_query_cache().scoped(client.scope).use_query("store-requests", lambda: client.list_requests("/api/store-requests"))
if result.error is not None:
    st.error("Failed to load store requests.")

filtered = filter_by_status(result.data or [], status)
if not filtered:
    st.info(NO_REQUESTS)
else:
    st.dataframe(build_store_rows(filtered), use_container_width=True, hide_index=True)
