"""
Bulk delete: remove every movie currently on the server.

The authoritative list is fetched first, then one DELETE per movie is issued
concurrently. There is no ordering guarantee among the deletes, no retry and
no rollback; the first failure to complete becomes the reported error.
"""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from movie_admin.client.api_client import CatalogClient
from movie_admin.errors import AdminApiError, BulkDeleteError

logger = logging.getLogger(__name__)


@dataclass
class DeleteOutcome:
    """Result of one DELETE issued by a bulk delete."""

    movie_id: int | str | None
    error: Optional[AdminApiError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BulkDeleteResult:
    """Per-movie outcomes, in the order the server listed the movies."""

    outcomes: List[DeleteOutcome] = field(default_factory=list)

    @property
    def deleted_ids(self) -> list:
        return [o.movie_id for o in self.outcomes if o.ok]

    @property
    def failed_ids(self) -> list:
        return [o.movie_id for o in self.outcomes if not o.ok]


class BulkDeleteOrchestrator:
    """
    Deletes every movie through independent per-movie DELETE requests.

    Args:
        client: Catalog client used for both the listing and the deletes
        max_workers: Cap on concurrent deletes. Defaults to the client's
            bulk_delete_max_workers, and when that is unset, one worker per movie.
    """

    def __init__(self, client: CatalogClient, max_workers: Optional[int] = None):
        self.client = client
        self.max_workers = max_workers or client.config.bulk_delete_max_workers

    def run(self) -> BulkDeleteResult:
        """
        Delete all movies.

        Returns:
            BulkDeleteResult with every delete succeeded

        Raises:
            AdminApiError: If the initial listing fails (no delete is issued)
            BulkDeleteError: If any delete failed, carrying the first failure
        """
        movies = self.client.list()
        ids = [m.id for m in movies]
        if not ids:
            logger.info("Bulk delete: catalog already empty")
            return BulkDeleteResult()

        workers = self.max_workers or len(ids)
        logger.info("Bulk delete: deleting %d movie(s) with %d worker(s)", len(ids), workers)
        self.client.ensure_pool_size(workers)

        errors: Dict[int, Optional[AdminApiError]] = {}
        first_error: Optional[AdminApiError] = None
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="bulk-delete") as pool:
            futures = {pool.submit(self.client.delete_one, movie_id): i for i, movie_id in enumerate(ids)}
            for future in as_completed(futures):
                index = futures[future]
                try:
                    future.result()
                    errors[index] = None
                except AdminApiError as e:
                    errors[index] = e
                    if first_error is None:
                        first_error = e

        result = BulkDeleteResult([DeleteOutcome(movie_id, errors[i]) for i, movie_id in enumerate(ids)])
        if first_error is not None:
            logger.warning(
                "Bulk delete: %d of %d delete(s) failed, first: %s",
                len(result.failed_ids), len(ids), first_error,
            )
            raise BulkDeleteError(first_error, result)
        return result


def delete_all(client: CatalogClient, max_workers: Optional[int] = None) -> BulkDeleteResult:
    """Delete every movie on the server; see BulkDeleteOrchestrator.run()."""
    return BulkDeleteOrchestrator(client, max_workers=max_workers).run()
