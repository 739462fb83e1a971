"""Session-state helpers for the Streamlit UI.

No services or FastAPI here; this module only reads/writes ``st.session_state``.
"""
import streamlit as st

from transport_admin.config import settings


def init_session() -> None:
    """Initialize session state variables."""
    if "access_token" not in st.session_state:
        st.session_state["access_token"] = settings.jwt_token


def get_access_token() -> str:
    """Bearer token the pages send to the dashboard API and backend."""
    return st.session_state.get("access_token", settings.jwt_token)


def set_access_token(token: str) -> None:
    st.session_state["access_token"] = token.strip()


def get_user() -> dict:
    """Signed-in user shown in the sidebar footer; ``Admin`` when unknown."""
    return st.session_state.get("user") or {"name": "Admin", "email": ""}
