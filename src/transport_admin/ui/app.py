"""Streamlit entry point: ``streamlit run src/transport_admin/ui/app.py``."""
import streamlit as st

from transport_admin.ui.navigation import PAGES_DIR, page_sections, url_path
from transport_admin.ui.state import get_access_token, get_user, init_session, set_access_token

st.set_page_config(page_title="Admin Panel", page_icon=":material/directions_car:", layout="wide")

init_session()

sections = {
    title: [
        st.Page(
            str(PAGES_DIR / item.page),
            title=item.title,
            icon=item.icon,
            url_path=url_path(item) or None,
            default=item.url == "/",
            visibility="hidden" if item.hidden else "visible",
        )
        for item in items
    ]
    for title, items in page_sections().items()
}

with st.sidebar:
    st.markdown("**Admin Panel**  \nTransport Management")

pg = st.navigation(sections)

with st.sidebar:
    st.divider()
    user = get_user()
    st.caption(f"Signed in as **{user['name']}**" + (f" ({user['email']})" if user.get("email") else ""))
    token = st.text_input("Access token", value=get_access_token(), type="password")
    if token != get_access_token():
        set_access_token(token)
        st.rerun()

pg.run()
