"""
REST client wrappers for the admin UI.

Thin wrappers around the backend's movie and user endpoints. They never cache:
callers are expected to reload the list after every create or delete.
"""

import logging
from typing import Any, List, Optional

import requests
from requests.adapters import HTTPAdapter
from pydantic import ValidationError

from movie_admin.config import ClientConfig, load_config
from movie_admin.errors import ApiFormatError, ApiStatusError, ApiTransportError
from movie_admin.models import Movie, MovieDraft, User

logger = logging.getLogger(__name__)

MOVIES_PATH = "/api/movies"
ADMIN_MOVIES_PATH = "/api/admin/movies"
USERS_PATH = "/users"

# urllib3's own default; grown on demand by ensure_pool_size()
DEFAULT_POOL_SIZE = 10


class BaseClient:
    """
    Shared request plumbing for the admin clients.

    Parameters
    - config: Explicit settings. Falls back to load_config() (environment).
    - session: Object with a requests-compatible request() method. Defaults to a
      new requests.Session whose connection pool this client manages.
    """

    def __init__(self, config: Optional[ClientConfig] = None, session: Any = None):
        self.config = config or load_config()
        self._owns_session = session is None
        self._pool_size = 0
        self.session = session or requests.Session()
        if self._owns_session:
            self.ensure_pool_size(DEFAULT_POOL_SIZE)

    def ensure_pool_size(self, size: int) -> None:
        """
        Keep at least size pooled connections per host.

        Concurrent callers beyond the pool size would otherwise open throwaway
        connections. Injected sessions are left as they are.
        """
        if not self._owns_session or size <= self._pool_size:
            return
        adapter = HTTPAdapter(pool_connections=DEFAULT_POOL_SIZE, pool_maxsize=size)
        for prefix in ("http://", "https://"):
            old = self.session.adapters.get(prefix)
            self.session.mount(prefix, adapter)
            if old is not None and old is not adapter:
                old.close()
        self._pool_size = size
        logger.debug("Connection pool size set to %d", size)

    def _url(self, path: str) -> str:
        return f"{self.config.base_url}{path}"

    def _request(self, method: str, path: str, **kwargs) -> Any:
        """
        Send a request and return the response if its status is 2xx.

        Raises:
            ApiTransportError: If no response was received
            ApiStatusError: If the response status is not 2xx
        """
        logger.debug("%s %s", method, self._url(path))
        try:
            response = self.session.request(method, self._url(path), timeout=self.config.timeout, **kwargs)
        except requests.exceptions.Timeout:
            logger.warning("%s %s timed out", method, path)
            raise ApiTransportError(f"{method} {path} timed out after {self.config.timeout}s")
        except requests.exceptions.ConnectionError:
            logger.warning("%s %s could not connect to %s", method, path, self.config.base_url)
            raise ApiTransportError(f"{method} {path} failed: could not connect to {self.config.base_url}")
        except requests.exceptions.RequestException as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise ApiTransportError(f"{method} {path} failed: {e}")

        if not 200 <= response.status_code < 300:
            logger.warning("%s %s returned %s", method, path, response.status_code)
            raise ApiStatusError(method, path, response.status_code, response.text)
        return response

    def _json_body(self, response: Any, path: str) -> Any:
        """Decode a JSON body, rejecting HTML pages and other non-JSON payloads."""
        content_type = (response.headers.get("content-type") or "").lower()
        if "json" not in content_type:
            raise ApiFormatError(path, content_type, response.text)
        try:
            return response.json()
        except ValueError:
            raise ApiFormatError(path, content_type, response.text, reason="invalid JSON")


class CatalogClient(BaseClient):
    """
    Client for the movie catalog endpoints.

    Usage:
        client = CatalogClient(ClientConfig(base_url="http://localhost:8080"))
        movies = client.list()
        client.create(MovieDraft(title="Dune"))
        client.delete_one(movies[0].id)
    """

    def list(self) -> List[Movie]:
        """List every movie in the catalog."""
        response = self._request("GET", MOVIES_PATH)
        data = self._json_body(response, MOVIES_PATH)
        content_type = response.headers.get("content-type")
        if not isinstance(data, list):
            raise ApiFormatError(MOVIES_PATH, content_type, response.text, reason="expected a JSON array")
        try:
            return [Movie.model_validate(item) for item in data]
        except ValidationError as e:
            raise ApiFormatError(
                MOVIES_PATH, content_type, response.text, reason=f"{e.error_count()} invalid movie field(s)"
            )

    def create(self, draft: MovieDraft) -> Movie:
        """
        Create a movie from a form draft.

        The draft is validated before anything is sent, so an empty title never
        reaches the network.

        Args:
            draft: Form draft to submit

        Returns:
            The created movie as reported by the server, or built from the
            submitted payload when the server returns no usable body

        Raises:
            FormValidationError: If the draft is not submittable
            ApiStatusError: If the server rejects the request
        """
        draft.validate_required()
        payload = draft.to_payload(self.config.payload_casing)
        response = self._request("POST", ADMIN_MOVIES_PATH, json=payload)
        logger.info("Created movie %r", payload.get("title"))

        created = None
        try:
            created = response.json()
        except ValueError:
            logger.debug("POST %s returned no JSON body", ADMIN_MOVIES_PATH)
        if isinstance(created, dict):
            try:
                return Movie.model_validate(created)
            except ValidationError:
                logger.debug("POST %s body is not a movie record", ADMIN_MOVIES_PATH)
        return Movie.model_validate(payload)

    def delete_one(self, movie_id: int | str) -> None:
        """Delete a single movie by id."""
        path = f"{ADMIN_MOVIES_PATH}/{movie_id}"
        self._request("DELETE", path)
        logger.info("Deleted movie %s", movie_id)


class UsersClient(BaseClient):
    """Client for the read-only registered users endpoint."""

    def list(self) -> List[User]:
        """List registered users; a non-array JSON body is treated as no users."""
        response = self._request("GET", USERS_PATH)
        data = self._json_body(response, USERS_PATH)
        if not isinstance(data, list):
            logger.warning("GET %s returned %s, expected a list", USERS_PATH, type(data).__name__)
            return []
        try:
            return [User.model_validate(item) for item in data]
        except ValidationError as e:
            raise ApiFormatError(
                USERS_PATH,
                response.headers.get("content-type"),
                response.text,
                reason=f"{e.error_count()} invalid user field(s)",
            )
