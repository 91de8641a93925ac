"""
Booklist Backend - HTTP API Tests
==================================

What:  End-to-end request/response behavior through the FastAPI app.
How:   HTTPX AsyncClient over ASGITransport against a fresh SQLite schema;
       store failures are simulated by overriding the store dependency.

What we test:
    ✅ Full book lifecycle: POST → GET → DELETE → DELETE again
    ✅ Status codes: 201 / 200 / 204 / 400 / 404 / 409 / 422 / 500
    ✅ Location header, JSON content type, X-Request-ID header
    ✅ Partial updates and filters for every resource type
"""

import pytest

from app.exceptions import StoreUnavailableError

API = "/api/v1"


async def _create(client, resource, payload):
    response = await client.post(f"{API}/{resource}", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestRootAndHealth:

    @pytest.mark.asyncio
    async def test_welcome(self, test_client):
        response = await test_client.get("/")
        assert response.status_code == 200
        assert response.text == "Welcome to Booklist!"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_health(self, test_client):
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "connected"

    @pytest.mark.asyncio
    async def test_health_unhealthy(self, test_client, mock_store, override_store):
        mock_store.ping.return_value = False
        override_store(mock_store)

        response = await test_client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "unhealthy"


class TestBookLifecycle:

    @pytest.mark.asyncio
    async def test_create_get_delete_scenario(self, test_client, book_payload):
        response = await test_client.post(f"{API}/books", json=book_payload)
        assert response.status_code == 201
        book = response.json()
        assert response.headers["location"] == f"http://test{API}/books/{book['id']}"

        response = await test_client.get(f"{API}/books/{book['id']}")
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"id": book["id"], **book_payload}

        response = await test_client.delete(f"{API}/books/{book['id']}")
        assert response.status_code == 204
        assert response.content == b""

        response = await test_client.delete(f"{API}/books/{book['id']}")
        assert response.status_code == 204

        response = await test_client.get(f"{API}/books/{book['id']}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_never_existing_id(self, test_client):
        response = await test_client.delete(f"{API}/books/does-not-exist")
        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_get_missing_book(self, test_client):
        response = await test_client.get(f"{API}/books/00000000-0000-0000-0000-000000000000")
        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert body["message"] == "Book Not Found"
        assert body["request_id"] == response.headers["x-request-id"]

    @pytest.mark.asyncio
    async def test_client_request_id_is_echoed(self, test_client):
        response = await test_client.get(f"{API}/books", headers={"X-Request-ID": "trace-42"})
        assert response.headers["x-request-id"] == "trace-42"


class TestValidation:

    @pytest.mark.asyncio
    async def test_create_missing_fields_is_422(self, test_client):
        response = await test_client.post(f"{API}/books", json={"title": "Dune", "isbn": ""})

        assert response.status_code == 422
        body = response.json()
        assert set(body["errors"]) == {"author", "isbn", "image"}
        assert body["title"] == "Dune"
        assert "location" not in response.headers

        listing = await test_client.get(f"{API}/books")
        assert listing.json() == []

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [b"{not json", b"", b"[1, 2]", b'"Dune"'])
    async def test_malformed_body_is_400(self, test_client, body):
        response = await test_client.post(
            f"{API}/books", content=body, headers={"content-type": "application/json"}
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid JSON"

    @pytest.mark.asyncio
    async def test_patch_missing_record_is_404_before_body_parsing(self, test_client):
        response = await test_client.patch(f"{API}/movies/missing", content=b"{oops")
        assert response.status_code == 404
        assert response.json()["message"] == "Movie Not Found"

    @pytest.mark.asyncio
    async def test_duplicate_isbn_is_409(self, test_client, book_payload):
        await _create(test_client, "books", book_payload)

        response = await test_client.post(
            f"{API}/books", json={**book_payload, "title": "Dune Messiah"}
        )

        assert response.status_code == 409
        assert response.json()["errors"] == {"isbn": ["is already taken"]}
        listing = await test_client.get(f"{API}/books", params={"isbn": "123"})
        assert [b["title"] for b in listing.json()] == ["Dune"]

    @pytest.mark.asyncio
    async def test_patch_to_taken_isbn_is_409(self, test_client, book_payload):
        await _create(test_client, "books", book_payload)
        other = await _create(test_client, "books", {**book_payload, "isbn": "456"})

        response = await test_client.patch(f"{API}/books/{other['id']}", json={"isbn": "123"})

        assert response.status_code == 409
        unchanged = await test_client.get(f"{API}/books/{other['id']}")
        assert unchanged.json()["isbn"] == "456"


class TestPartialUpdate:

    @pytest.mark.asyncio
    async def test_patch_changes_only_title(self, test_client, movie_payload):
        movie = await _create(test_client, "movies", movie_payload)

        response = await test_client.patch(f"{API}/movies/{movie['id']}", json={"title": "X"})

        assert response.status_code == 200
        assert response.json() == {**movie, "title": "X"}

    @pytest.mark.asyncio
    async def test_patch_invalid_is_422_and_not_persisted(self, test_client, show_payload):
        show = await _create(test_client, "shows", show_payload)

        response = await test_client.patch(
            f"{API}/shows/{show['id']}", json={"director": "", "title": "New"}
        )

        assert response.status_code == 422
        body = response.json()
        assert body["errors"] == {"director": ["can't be blank"]}
        assert body["title"] == "New"

        stored = await test_client.get(f"{API}/shows/{show['id']}")
        assert stored.json() == show


class TestFilters:

    @pytest.mark.asyncio
    async def test_title_prefix_filter(self, test_client, book_payload):
        for i, title in enumerate(["Harry Potter", "The Hobbit", "harbor"]):
            await _create(test_client, "books", {**book_payload, "title": title, "isbn": str(i)})

        response = await test_client.get(f"{API}/books", params={"title": "Har"})

        assert response.status_code == 200
        assert [b["title"] for b in response.json()] == ["Harry Potter"]

    @pytest.mark.asyncio
    async def test_unknown_filters_are_ignored(self, test_client, show_payload):
        await _create(test_client, "shows", show_payload)

        response = await test_client.get(f"{API}/shows", params={"platform": "netflix"})

        assert len(response.json()) == 1

    @pytest.mark.asyncio
    async def test_rating_and_director_filters(self, test_client, movie_payload):
        await _create(test_client, "movies", movie_payload)
        await _create(test_client, "movies", {**movie_payload, "title": "Gladiator", "rating": 9})

        by_rating = await test_client.get(f"{API}/movies", params={"rating": "9"})
        by_director = await test_client.get(f"{API}/movies", params={"director": "Ridley Scott"})

        assert [m["title"] for m in by_rating.json()] == ["Gladiator"]
        assert len(by_director.json()) == 2

    @pytest.mark.asyncio
    async def test_bad_rating_filter_is_400(self, test_client):
        response = await test_client.get(f"{API}/movies", params={"rating": "high"})
        assert response.status_code == 400
        assert response.json()["error"] == "malformed_request"


class TestStoreFailure:

    @pytest.mark.asyncio
    async def test_store_error_is_generic_500(self, test_client, mock_store, override_store):
        mock_store.find.side_effect = StoreUnavailableError(context={"error_type": "OperationalError"})
        override_store(mock_store)

        response = await test_client.get(f"{API}/books")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "server_error"
        assert "OperationalError" not in response.text


class TestOutOfRangeInput:
    """Values that cannot be stored or rendered as JSON are client errors."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "rating, echoed",
        [(b"NaN", "nan"), (b"Infinity", "inf"), (b"1e400", "inf"), (b'"Infinity"', "Infinity")],
    )
    async def test_create_with_non_finite_rating_is_422(self, test_client, rating, echoed):
        body = b'{"title": "Alien", "director": "Ridley Scott", "image": "a.jpg", "rating": ' + rating + b"}"

        response = await test_client.post(
            f"{API}/movies", content=body, headers={"content-type": "application/json"}
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"rating": ["is invalid"]}
        assert response.json()["rating"] == echoed
        listing = await test_client.get(f"{API}/movies")
        assert listing.json() == []

    @pytest.mark.asyncio
    async def test_patch_with_nan_rating_is_422(self, test_client, show_payload):
        show = await _create(test_client, "shows", show_payload)

        response = await test_client.patch(
            f"{API}/shows/{show['id']}",
            content=b'{"rating": NaN}',
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 422
        assert response.json()["errors"] == {"rating": ["is invalid"]}
        stored = await test_client.get(f"{API}/shows/{show['id']}")
        assert stored.json()["rating"] == show_payload["rating"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", ["inf", "nan", "-Infinity"])
    async def test_non_finite_rating_filter_is_400(self, test_client, value):
        response = await test_client.get(f"{API}/movies", params={"rating": value})
        assert response.status_code == 400
        assert response.json()["error"] == "malformed_request"

    @pytest.mark.asyncio
    async def test_overlong_title_is_422(self, test_client, book_payload):
        response = await test_client.post(f"{API}/books", json={**book_payload, "title": "x" * 256})

        assert response.status_code == 422
        assert response.json()["errors"] == {"title": ["is invalid"]}

    @pytest.mark.asyncio
    async def test_title_at_column_size_is_accepted(self, test_client, book_payload):
        title = "x" * 255
        book = await _create(test_client, "books", {**book_payload, "title": title})
        assert book["title"] == title
