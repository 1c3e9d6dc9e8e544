"""
REST clients for the movie catalog backend.
"""

from movie_admin.client.api_client import CatalogClient, UsersClient
from movie_admin.client.bulk_delete import BulkDeleteOrchestrator, BulkDeleteResult, DeleteOutcome, delete_all

__all__ = [
    "CatalogClient",
    "UsersClient",
    "BulkDeleteOrchestrator",
    "BulkDeleteResult",
    "DeleteOutcome",
    "delete_all",
]
