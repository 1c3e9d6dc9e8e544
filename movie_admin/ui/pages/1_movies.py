"""
Movies admin page - add, view and delete catalog entries.
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[3]))

from movie_admin.client import delete_all
from movie_admin.models import Movie
from movie_admin.ui.components.confirm_prompt import render_confirm_prompt
from movie_admin.ui.components.movie_form import render_movie_form
from movie_admin.ui.components.movie_table import render_movie_table
from movie_admin.ui.utils.session_state import (
    get_catalog_client,
    get_movie_form,
    get_movie_list,
    init_session_state,
    request_confirmation,
)

st.title("🎬 Admin — Movies")
st.caption("Add • view • delete")

try:
    init_session_state()
except Exception as e:
    st.error(f"Failed to start admin session: {e}")
    st.stop()

client = get_catalog_client()
form = get_movie_form()
movies = get_movie_list()


def begin_operation() -> None:
    """The page shows one message; every operation starts by clearing it."""
    form.clear_error()
    movies.clear_error()


def ask_delete(movie: Movie) -> None:
    """Callback for a row's Delete button."""
    request_confirmation("delete_one", f"Delete this movie? ({movie.title})", movie.id)
    st.rerun()


try:
    # First visit in this session
    if movies.items is None:
        with st.spinner("Working…"):
            movies.load(client.list)

    action = render_movie_form(form, disabled=not movies.can_refresh)
    if action == "clear":
        form.clear()
        st.rerun()
    elif action == "add":
        begin_operation()
        with st.spinner("Working…"):
            created = form.submit(client.create)
        if created is not None:
            movies.load(client.list)
            st.rerun()

    col1, col2, _ = st.columns([1, 1, 4])
    with col1:
        if st.button("🔄 Refresh", key="refresh_movies", disabled=not movies.can_refresh,
                     use_container_width=True):
            begin_operation()
            with st.spinner("Working…"):
                movies.load(client.list)
    with col2:
        if st.button("Delete All", key="delete_all_movies", type="primary",
                     disabled=not movies.can_refresh, use_container_width=True):
            request_confirmation("delete_all", "Delete ALL movies? This cannot be undone.")
            st.rerun()

    if render_confirm_prompt("delete_all"):
        begin_operation()
        with st.spinner("Working…"):
            movies.run(lambda: delete_all(client), client.list, reload_on_error=True)

    target = render_confirm_prompt("delete_one")
    if target is not None:
        begin_operation()
        with st.spinner("Working…"):
            movies.run(lambda: client.delete_one(target), client.list)
except Exception as e:
    st.error(f"Unexpected error: {e}")

message = form.error or movies.error
if message:
    st.error(message)

st.subheader(f"Movies in DB ({len(movies.items or [])})")
render_movie_table(movies.items or [], on_delete=ask_delete, disabled=not movies.can_refresh)
