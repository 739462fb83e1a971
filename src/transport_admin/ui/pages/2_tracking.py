import streamlit as st
from transport_admin.ui.api_client import get_client
from transport_admin.ui.query import get_query_cache
from transport_admin.ui.views import TrackingList, build_driver_list, build_vehicle_list

st.title("Live Tracking")
st.caption("(Map integration pending) Below are live location entries.")

client = get_client()
cache = get_query_cache().scoped(client.scope)

results = cache.use_queries({
    "vehicleLocations": client.list_vehicle_locations,
    "driverLocations": client.list_driver_locations,
})


def _render(title: str, listing: TrackingList) -> None:
    with st.container(border=True):
        st.subheader(title)
        with st.container(height=400, border=False):
            if listing.message is not None:
                st.caption(listing.message)
                return
            for row in listing.rows:
                if row.separator_before:
                    st.divider()
                st.markdown(f"**{row.title}**")
                st.caption(row.trip)
                st.caption(row.location)


c1, c2 = st.columns(2)
with c1:
    _render("Vehicles", build_vehicle_list(results["vehicleLocations"]))
with c2:
    _render("Drivers", build_driver_list(results["driverLocations"]))
