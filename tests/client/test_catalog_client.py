"""
Tests for CatalogClient against the in-memory fake backend.
"""

import pytest
import requests

from movie_admin.client import CatalogClient
from movie_admin.config import ClientConfig
from movie_admin.errors import (
    ApiFormatError,
    ApiStatusError,
    ApiTransportError,
    FormValidationError,
)
from movie_admin.models import MovieDraft
from movie_admin.ui.components.movie_table import movie_row


class TestList:
    """Tests for CatalogClient.list()."""

    def test_list_empty(self, catalog):
        """GET /api/movies with no movies returns an empty list."""
        assert catalog.list() == []

    def test_list_normalizes_camel_case(self, catalog, backend):
        """camelCase server keys end up on the canonical snake_case fields."""
        backend.add_movie(title="Heat", leadActor1="Al Pacino", releaseDate="1995-12-15", salesMillions=187.4)
        [movie] = catalog.list()
        assert movie.id == 1
        assert movie.lead_actor_1 == "Al Pacino"
        assert movie.release_date == "1995-12-15"
        assert movie.sales_millions == 187.4
        assert movie.director is None

    def test_list_normalizes_snake_case(self, catalog, backend):
        backend.add_movie(title="Heat", lead_actor_2="Robert De Niro", poster_url="http://img/heat.jpg")
        [movie] = catalog.list()
        assert movie.lead_actor_2 == "Robert De Niro"
        assert movie.poster_url == "http://img/heat.jpg"

    def test_list_status_error_includes_code(self, catalog, backend):
        """A 500 with an HTML page surfaces the status code and a body preview."""
        backend.fail("GET", "/api/movies", status=500)
        with pytest.raises(ApiStatusError) as exc:
            catalog.list()
        assert exc.value.status_code == 500
        assert "500" in str(exc.value)
        assert "Internal Server Error" in str(exc.value)

    def test_list_status_error_truncates_body(self, catalog, backend):
        backend.fail("GET", "/api/movies", status=502, body="x" * 1000, content_type="text/plain")
        with pytest.raises(ApiStatusError) as exc:
            catalog.list()
        assert "x" * 200 in str(exc.value)
        assert "x" * 201 not in str(exc.value)

    def test_list_html_with_success_status(self, catalog, backend):
        """A 200 HTML page is a format error naming the content type."""
        backend.fail("GET", "/api/movies", status=200, body="<html>login</html>")
        with pytest.raises(ApiFormatError) as exc:
            catalog.list()
        assert "text/html" in str(exc.value)
        assert "<html>login</html>" in str(exc.value)

    def test_list_requires_array(self, catalog, backend):
        backend.fail("GET", "/api/movies", status=200, body='{"movies": []}', content_type="application/json")
        with pytest.raises(ApiFormatError) as exc:
            catalog.list()
        assert "JSON array" in str(exc.value)

    def test_list_rejects_record_without_title(self, catalog, backend):
        backend.fail("GET", "/api/movies", status=200, body='[{"id": 1}]', content_type="application/json")
        with pytest.raises(ApiFormatError):
            catalog.list()


class TestCreate:
    """Tests for CatalogClient.create()."""

    def test_create_then_list_round_trip(self, catalog):
        """Submitted values come back from list; empty optional fields are None."""
        draft = MovieDraft(
            title="Arrival",
            director="Denis Villeneuve",
            genre="Sci-Fi",
            lead_actor_1="Amy Adams",
            release_date="2016-11-11",
            sales_millions="203.4",
        )
        created = catalog.create(draft)
        assert created.id is not None
        assert created.title == "Arrival"

        [movie] = catalog.list()
        assert movie.title == "Arrival"
        assert movie.director == "Denis Villeneuve"
        assert movie.genre == "Sci-Fi"
        assert movie.lead_actor_1 == "Amy Adams"
        assert movie.lead_actor_2 is None
        assert movie.release_date == "2016-11-11"
        assert movie.sales_millions == 203.4
        assert movie.poster_url is None

    def test_create_dune_with_empty_sales(self, catalog, backend):
        """Empty sales is sent as null and renders as an empty Sales cell."""
        catalog.create(MovieDraft(title="Dune", director="Villeneuve", sales_millions=""))

        [payload] = backend.created_payloads
        assert "salesMillions" in payload
        assert payload["salesMillions"] is None
        assert payload["director"] == "Villeneuve"

        [movie] = catalog.list()
        row = movie_row(movie)
        assert row["Title"] == "Dune"
        assert row["Sales ($M)"] == ""

    @pytest.mark.parametrize("title", ["", "   ", "\t\n"])
    def test_create_blank_title_sends_nothing(self, catalog, backend, title):
        """Blank titles fail validation before any request is made."""
        with pytest.raises(FormValidationError) as exc:
            catalog.create(MovieDraft(title=title, director="Someone"))
        assert exc.value.field == "title"
        assert backend.requests == []

    def test_create_non_numeric_sales_sends_nothing(self, catalog, backend):
        with pytest.raises(FormValidationError):
            catalog.create(MovieDraft(title="Dune", sales_millions="lots"))
        assert backend.requests == []

    def test_create_snake_case_payload(self, http, backend):
        """payload_casing='snake' sends snake_case keys."""
        client = CatalogClient(ClientConfig(base_url="http://testserver", payload_casing="snake"), session=http)
        client.create(MovieDraft(title="Dune", lead_actor_1="Timothée Chalamet", poster_url="http://p/dune.jpg"))

        [payload] = backend.created_payloads
        assert payload["lead_actor_1"] == "Timothée Chalamet"
        assert payload["poster_url"] == "http://p/dune.jpg"
        assert "leadActor1" not in payload
        assert catalog_titles(client) == ["Dune"]

    def test_create_server_rejection(self, catalog, backend):
        """A non-2xx create surfaces status code and server body."""
        backend.fail("POST", "/api/admin/movies", status=409, body='{"detail":"duplicate"}',
                     content_type="application/json")
        with pytest.raises(ApiStatusError) as exc:
            catalog.create(MovieDraft(title="Dune"))
        assert exc.value.status_code == 409
        assert "duplicate" in str(exc.value)

    def test_create_without_response_body(self, catalog, backend):
        """A 2xx with an empty body yields a movie built from the payload."""
        backend.fail("POST", "/api/admin/movies", status=201, body="", content_type="text/plain")
        created = catalog.create(MovieDraft(title="Dune", genre="Sci-Fi"))
        assert created.id is None
        assert created.title == "Dune"
        assert created.genre == "Sci-Fi"


class TestDeleteOne:
    """Tests for CatalogClient.delete_one()."""

    def test_delete_one(self, catalog, backend):
        backend.add_movie(title="Heat")
        backend.add_movie(title="Ronin")
        catalog.delete_one(1)
        assert [m.title for m in catalog.list()] == ["Ronin"]

    def test_delete_missing_id(self, catalog, backend):
        """Deleting an unknown id raises and leaves the server list untouched."""
        backend.add_movie(title="Heat")
        with pytest.raises(ApiStatusError) as exc:
            catalog.delete_one(999)
        assert exc.value.status_code == 404
        assert "/api/admin/movies/999" in str(exc.value)
        assert len(catalog.list()) == 1


class _RefusingSession:
    """Session stub whose every request fails before reaching a server."""

    def __init__(self, exc):
        self.exc = exc

    def request(self, method, url, **kwargs):
        raise self.exc


class TestTransport:
    """Tests for errors raised before any HTTP response exists."""

    def test_connection_error(self):
        client = CatalogClient(ClientConfig(base_url="http://backend:8080"),
                               session=_RefusingSession(requests.exceptions.ConnectionError("refused")))
        with pytest.raises(ApiTransportError) as exc:
            client.list()
        assert "http://backend:8080" in str(exc.value)

    def test_timeout(self):
        client = CatalogClient(ClientConfig(timeout=2.5), session=_RefusingSession(requests.exceptions.Timeout()))
        with pytest.raises(ApiTransportError) as exc:
            client.delete_one(1)
        assert "2.5" in str(exc.value)


def catalog_titles(client):
    return [m.title for m in client.list()]
