"""
Movie Catalog Admin Application Package.

This package contains the Streamlit admin interface for the movie catalog,
the REST client it talks to the backend with, and shared utilities.
"""

__version__ = "1.0.0"
