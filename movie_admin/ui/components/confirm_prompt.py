"""
Yes/Cancel prompt for destructive actions.
"""

import streamlit as st

from movie_admin.ui.utils.session_state import clear_confirmation, pending_confirmation


def render_confirm_prompt(key: str):
    """
    Show the pending confirmation for key, if any.

    Returns:
        The confirmed target when the user pressed Yes, else None.
    """
    pending = pending_confirmation(key)
    if not pending:
        return None

    st.warning(pending["prompt"])
    col1, col2, _ = st.columns([1, 1, 6])
    with col1:
        if st.button("Yes", key=f"{key}_yes", type="primary"):
            clear_confirmation(key)
            return pending["target"]
    with col2:
        if st.button("Cancel", key=f"{key}_cancel"):
            clear_confirmation(key)
            st.rerun()
    return None
