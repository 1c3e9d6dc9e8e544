"""
Registered users table component.
"""

from typing import List

import streamlit as st

from movie_admin.models import User


def user_row(user: User) -> dict:
    """Table cells for one user; missing fields render as '-'."""
    def cell(value) -> str:
        return "-" if value is None or value == "" else str(value)

    return {
        "ID": cell(user.id),
        "Username": cell(user.username),
        "Email": cell(user.email),
        "Role": cell(user.role),
        "Status": cell(user.status),
        "Created": cell(user.created_at),
    }


def render_user_table(users: List[User]) -> None:
    """Render the users table, or a placeholder when there are none."""
    if not users:
        st.caption("No users found")
        return
    st.dataframe([user_row(u) for u in users], hide_index=True, use_container_width=True)
