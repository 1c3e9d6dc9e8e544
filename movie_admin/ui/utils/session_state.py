"""
Session state helpers for Streamlit.
"""

import streamlit as st

from movie_admin.client import CatalogClient, UsersClient
from movie_admin.config import load_config
from movie_admin.ui.utils.form_state import FormStateManager
from movie_admin.ui.utils.list_state import ListState
from movie_admin.utils import configure_ui_logging


def init_session_state() -> None:
    """Initialize session state keys if not present."""
    if "logging_configured" not in st.session_state:
        configure_ui_logging()
        st.session_state["logging_configured"] = True
    if "config" not in st.session_state:
        st.session_state["config"] = load_config()
    if "catalog_client" not in st.session_state:
        st.session_state["catalog_client"] = CatalogClient(st.session_state["config"])
    if "users_client" not in st.session_state:
        st.session_state["users_client"] = UsersClient(st.session_state["config"])
    if "movie_form" not in st.session_state:
        st.session_state["movie_form"] = FormStateManager()
    if "movies" not in st.session_state:
        st.session_state["movies"] = ListState()
    if "users" not in st.session_state:
        st.session_state["users"] = ListState()


def get_catalog_client() -> CatalogClient:
    """Get the session's catalog client."""
    return st.session_state["catalog_client"]


def get_users_client() -> UsersClient:
    """Get the session's users client."""
    return st.session_state["users_client"]


def get_movie_form() -> FormStateManager:
    """Get the add-movie form state."""
    return st.session_state["movie_form"]


def get_movie_list() -> ListState:
    """Get the movies table state."""
    return st.session_state["movies"]


def get_user_list() -> ListState:
    """Get the users table state."""
    return st.session_state["users"]


def request_confirmation(key: str, prompt: str, target=True) -> None:
    """Remember that a destructive action on target awaits confirmation."""
    st.session_state[f"confirm_{key}"] = {"prompt": prompt, "target": target}


def pending_confirmation(key: str) -> dict | None:
    """Get the pending confirmation for key, if any."""
    return st.session_state.get(f"confirm_{key}")


def clear_confirmation(key: str) -> None:
    """Drop a pending confirmation."""
    if f"confirm_{key}" in st.session_state:
        del st.session_state[f"confirm_{key}"]
