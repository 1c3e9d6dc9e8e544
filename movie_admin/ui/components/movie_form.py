"""
Add-movie form component.
"""

import datetime

import streamlit as st

from movie_admin.ui.utils.form_state import FormStateManager


def _parse_date(value: str) -> datetime.date | None:
    try:
        return datetime.date.fromisoformat(value) if value else None
    except ValueError:
        return None


def render_movie_form(form: FormStateManager, disabled: bool = False) -> str | None:
    """
    Render the add-movie form bound to the session draft.

    Widget values are copied into the draft when a button is pressed; keys
    include the form revision so a reset draft shows empty inputs.

    Args:
        form: Form state for this session
        disabled: Extra lock, e.g. while another operation is in flight

    Returns:
        "add" or "clear" when the matching button was pressed, else None.
    """
    draft = form.draft
    rev = form.revision
    locked = disabled or form.inputs_disabled

    with st.form(f"add_movie_form_{rev}"):
        col1, col2 = st.columns(2)
        with col1:
            title = st.text_input("Title *", value=draft.title, placeholder="Title *", key=f"movie_title_{rev}", disabled=locked)
        with col2:
            director = st.text_input("Director", value=draft.director, key=f"movie_director_{rev}", disabled=locked)

        col1, col2 = st.columns(2)
        with col1:
            genre = st.text_input("Genre", value=draft.genre, disabled=locked)
        with col2:
            lead_actor_1 = st.text_input("Lead Actor 1", value=draft.lead_actor_1, disabled=locked)

        col1, col2 = st.columns(2)
        with col1:
            lead_actor_2 = st.text_input("Lead Actor 2", value=draft.lead_actor_2, disabled=locked)
        with col2:
            release_date = st.date_input(
                "Release Date",
                value=_parse_date(draft.release_date),
                min_value=datetime.date(1870, 1, 1),
                format="YYYY-MM-DD",
                disabled=locked,
            )

        poster_url = st.text_input("Poster URL", value=draft.poster_url, disabled=locked)
        sales_millions = st.text_input(
            "Sales (millions)", value=draft.sales_millions, placeholder="e.g. 402.5", disabled=locked
        )

        col1, col2, _ = st.columns([1, 1, 4])
        with col1:
            add = st.form_submit_button("Add Movie", disabled=locked)
        with col2:
            clear = st.form_submit_button("Clear", disabled=locked)

    if clear:
        return "clear"
    if add:
        form.update_many({
            "title": title,
            "director": director,
            "genre": genre,
            "lead_actor_1": lead_actor_1,
            "lead_actor_2": lead_actor_2,
            "release_date": release_date.isoformat() if release_date else "",
            "poster_url": poster_url,
            "sales_millions": sales_millions,
        })
        return "add"
    return None
