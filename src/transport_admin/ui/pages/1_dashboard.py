import streamlit as st
from transport_admin.ui.api_client import get_client
from transport_admin.ui.query import get_query_cache
from transport_admin.ui.views import DASHBOARD_CARDS, build_dashboard_cards

st.title("Dashboard Overview")
st.caption("Real-time statistics and system metrics")

client = get_client()
cache = get_query_cache().scoped(client.scope)

# Issue all five count queries before waiting on any of them.
futures = {
    key: cache.fetch(key, lambda path=path: client.get_count(path))
    for key, _, path in DASHBOARD_CARDS
}

cols = st.columns(len(DASHBOARD_CARDS))
slots = {}
for col, card in zip(cols, build_dashboard_cards({k: cache.state(k) for k in futures})):
    with col.container(border=True):
        st.caption(card.title)
        slots[card.key] = st.empty()
        if card.is_skeleton:
            slots[card.key].markdown("### ░░░")
        else:
            slots[card.key].markdown(f"### {card.value}")

results = {key: cache.resolve(fut) for key, fut in futures.items()}

for card in build_dashboard_cards(results):
    slots[card.key].markdown(f"### {card.value}")

failed = [key for key, r in results.items() if r.error is not None]
if failed:
    st.caption(f"{len(failed)} metric(s) could not be loaded and show 0.")
