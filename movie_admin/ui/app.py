"""
Streamlit main app for the movie catalog admin panel.

Run: streamlit run movie_admin/ui/app.py --server.port 8501
"""

import streamlit as st
import sys
from pathlib import Path

# Ensure project root in path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from movie_admin.ui.utils.session_state import get_catalog_client, init_session_state

st.set_page_config(
    page_title="Movie Admin",
    page_icon="🎬",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.title("🛠️ Admin Panel")
st.markdown("Manage Movies, Users and Review")

try:
    init_session_state()
except Exception as e:
    st.error(f"Failed to start admin session: {e}")
    st.stop()

# Check the backend is reachable
client = get_catalog_client()
try:
    count = len(client.list())
    st.success(f"API connected ({count} movies in catalog)")
except Exception as e:
    st.error(f"API not available: {e}")
    st.info(f"Backend expected at {client.config.base_url} (set API_BASE_URL to change)")

st.divider()

col1, col2 = st.columns(2)
with col1:
    if st.button("🎬 Manage Movies", use_container_width=True):
        st.switch_page("pages/1_movies.py")
with col2:
    if st.button("👥 Registered Users", use_container_width=True):
        st.switch_page("pages/2_users.py")
