"""
Pydantic schemas for movie and user records exchanged with the backend.
"""

from movie_admin.models.movie import Movie, MovieDraft, DRAFT_FIELDS
from movie_admin.models.user import User

__all__ = [
    "Movie",
    "MovieDraft",
    "DRAFT_FIELDS",
    "User",
]
