"""
Loading/error/loaded state behind the movie and user tables.
"""

import logging
from typing import Callable, Generic, List, Optional, TypeVar

from movie_admin.errors import AdminApiError

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOADING = "loading"
ERROR = "error"
LOADED = "loaded"


class ListState(Generic[T]):
    """
    A fetched collection together with the last error and a busy flag.

    The collection is always replaced wholesale; after a failed load it is
    emptied so stale rows are never shown next to an error.
    """

    def __init__(self):
        self.items: Optional[List[T]] = None
        self.error: Optional[str] = None
        self.busy = False

    @property
    def status(self) -> str:
        if self.error:
            return ERROR
        if self.items is None:
            return LOADING
        return LOADED

    @property
    def can_refresh(self) -> bool:
        return not self.busy

    def load(self, fetch: Callable[[], List[T]]) -> bool:
        """
        Replace the collection with a fresh fetch.

        Returns:
            True if the fetch succeeded
        """
        self.busy = True
        self.error = None
        try:
            self.items = list(fetch())
            return True
        except AdminApiError as e:
            logger.warning("Load failed: %s", e)
            self.error = str(e)
            self.items = []
            return False
        finally:
            self.busy = False

    def clear_error(self) -> None:
        """Drop the message left by the previous operation."""
        self.error = None

    def run(
        self,
        action: Callable[[], object],
        reload: Callable[[], List[T]],
        reload_on_error: bool = False,
    ) -> bool:
        """
        Run a mutating action, then reload the collection.

        By default the reload only follows a successful action, so a failed
        delete leaves the rows on screen untouched. With reload_on_error the
        reload happens whatever the outcome and the action's error stays
        visible afterwards, unless the reload itself fails.

        Returns:
            True if both the action and the reload succeeded
        """
        self.error = None
        self.busy = True
        action_error = None
        try:
            action()
        except AdminApiError as e:
            logger.warning("Action failed: %s", e)
            action_error = str(e)
        finally:
            self.busy = False

        if action_error and not reload_on_error:
            self.error = action_error
            return False
        reloaded = self.load(reload)
        if action_error and reloaded:
            self.error = action_error
        return action_error is None and reloaded
