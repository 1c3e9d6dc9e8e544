"""
Registered users page - read-only list.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from movie_admin.ui.components.user_table import render_user_table
from movie_admin.ui.utils.list_state import LOADING
from movie_admin.ui.utils.session_state import get_user_list, get_users_client, init_session_state

col1, col2 = st.columns([4, 1])
with col1:
    st.title("👥 Registered Users")
    st.caption("Basic list")

try:
    init_session_state()
except Exception as e:
    st.error(f"Failed to start admin session: {e}")
    st.stop()

client = get_users_client()
users = get_user_list()

with col2:
    refresh = st.button("Refresh", key="refresh_users", disabled=not users.can_refresh,
                        use_container_width=True)

try:
    if users.items is None or refresh:
        with st.spinner("Loading users…"):
            users.load(client.list)
except Exception as e:
    st.error(f"Failed to load users: {e}")

if users.error:
    st.error(users.error)

if users.status != LOADING:
    render_user_table(users.items or [])
