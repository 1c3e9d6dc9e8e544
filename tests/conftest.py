"""
Shared fixtures: an in-memory fake of the catalog backend.

The fake is a small FastAPI app driven through FastAPI's TestClient, which is
handed to the admin clients as their HTTP session.
"""

import threading

import pytest
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from fastapi.testclient import TestClient

from movie_admin.client import CatalogClient, UsersClient
from movie_admin.config import ClientConfig

SNAKE_TO_CAMEL = {
    "lead_actor_1": "leadActor1",
    "lead_actor_2": "leadActor2",
    "release_date": "releaseDate",
    "sales_millions": "salesMillions",
    "poster_url": "posterUrl",
}

HTML_ERROR_PAGE = "<html><body><h1>500 Internal Server Error</h1></body></html>"


class FakeBackend:
    """In-memory movies/users store with request recording and failure injection."""

    def __init__(self):
        self.movies: dict[int, dict] = {}
        self.users: list = []
        self.requests: list[tuple[str, str]] = []
        self.created_payloads: list[dict] = []
        self.failures: dict[tuple[str, str], tuple[int, str, str]] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        self.app = self._build_app()

    def add_movie(self, **fields) -> dict:
        with self._lock:
            movie = {"id": self._next_id, **fields}
            self.movies[self._next_id] = movie
            self._next_id += 1
        return movie

    def fail(self, method: str, path: str, status: int = 500,
             body: str = HTML_ERROR_PAGE, content_type: str = "text/html") -> None:
        """Answer every method+path request with the given status and body."""
        self.failures[(method, path)] = (status, body, content_type)

    def requests_for(self, method: str) -> list[str]:
        return [path for m, path in self.requests if m == method]

    def _build_app(self) -> FastAPI:
        app = FastAPI()

        @app.middleware("http")
        async def record_and_inject(request: Request, call_next):
            key = (request.method, request.url.path)
            self.requests.append(key)
            if key in self.failures:
                status, body, content_type = self.failures[key]
                return Response(content=body, status_code=status, media_type=content_type)
            return await call_next(request)

        @app.get("/api/movies")
        def list_movies():
            with self._lock:
                return list(self.movies.values())

        @app.post("/api/admin/movies")
        async def create_movie(request: Request):
            body = await request.json()
            self.created_payloads.append(body)
            if not body.get("title"):
                return JSONResponse({"detail": "title is required"}, status_code=400)
            fields = {SNAKE_TO_CAMEL.get(k, k): v for k, v in body.items()}
            return JSONResponse(self.add_movie(**fields), status_code=201)

        @app.delete("/api/admin/movies/{movie_id}")
        def delete_movie(movie_id: int):
            with self._lock:
                if self.movies.pop(movie_id, None) is None:
                    return JSONResponse({"detail": "Movie not found"}, status_code=404)
            return Response(status_code=204)

        @app.get("/users")
        def list_users():
            return self.users

        return app


@pytest.fixture
def backend():
    """Fresh fake backend per test."""
    return FakeBackend()


@pytest.fixture
def http(backend):
    """TestClient speaking to the fake backend."""
    return TestClient(backend.app)


@pytest.fixture
def config():
    """Client config pointing at the TestClient's host."""
    return ClientConfig(base_url="http://testserver/")


@pytest.fixture
def catalog(config, http):
    """Catalog client wired to the fake backend."""
    return CatalogClient(config, session=http)


@pytest.fixture
def users_client(config, http):
    """Users client wired to the fake backend."""
    return UsersClient(config, session=http)
