"""
Movies table component.
"""

from typing import Callable, List, Optional

import streamlit as st

from movie_admin.models import Movie

COLUMNS = ["ID", "Title", "Director", "Genre", "Lead 1", "Lead 2", "Release", "Sales ($M)", "Poster"]
COLUMN_WIDTHS = [1, 3, 2, 2, 2, 2, 2, 1, 2, 1]


def format_sales(value: float | None) -> str:
    """Render sales without a trailing '.0' for whole numbers."""
    if value is None:
        return ""
    return str(int(value)) if float(value).is_integer() else str(value)


def movie_row(movie: Movie) -> dict:
    """Table cells for one movie; missing fields render as empty strings."""
    return {
        "ID": "" if movie.id is None else str(movie.id),
        "Title": movie.title,
        "Director": movie.director or "",
        "Genre": movie.genre or "",
        "Lead 1": movie.lead_actor_1 or "",
        "Lead 2": movie.lead_actor_2 or "",
        "Release": movie.release_date or "",
        "Sales ($M)": format_sales(movie.sales_millions),
        "Poster": movie.poster_url or "—",
    }


def render_movie_table(
    movies: List[Movie],
    on_delete: Optional[Callable[[Movie], None]] = None,
    disabled: bool = False,
) -> None:
    """
    Render the movies table with a Delete button per row.

    Args:
        movies: Movies to show
        on_delete: Called with the movie whose Delete button was pressed
        disabled: Disable row buttons while an operation is in flight
    """
    header = st.columns(COLUMN_WIDTHS)
    for col, name in zip(header, COLUMNS + ["Actions"]):
        col.markdown(f"**{name}**")

    if not movies:
        st.info("No movies found")
        return

    for i, movie in enumerate(movies):
        cells = st.columns(COLUMN_WIDTHS)
        row = movie_row(movie)
        # Server text is shown verbatim, never interpreted as markdown
        for col, name in zip(cells, COLUMNS):
            if name == "Poster" and movie.poster_url:
                col.link_button("View Poster", movie.poster_url)
            else:
                col.text(row[name])
        if cells[-1].button("Delete", key=f"delete_movie_{movie.id}_{i}", disabled=disabled) and on_delete:
            on_delete(movie)
