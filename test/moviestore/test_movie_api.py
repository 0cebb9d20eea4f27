import pytest
from fastapi.testclient import TestClient

from src.moviestore.main import app
from src.moviestore.dependencies import get_store


# ---------- Scenarios ----------

def test_create_then_get(client, heat):
    r = client.post("/movie", json=heat)
    assert r.status_code == 201
    assert r.content == b""

    r = client.get("/movie/m1")
    assert r.status_code == 200
    assert r.json() == heat


def test_duplicate_create_conflicts(client, heat):
    assert client.post("/movie", json=heat).status_code == 201

    r = client.post("/movie", json=heat)
    assert r.status_code == 409
    assert r.content == b""

    assert client.get("/movie/m1").json() == heat


def test_duplicate_with_other_fields_does_not_overwrite(client, heat, store):
    client.post("/movie", json=heat)

    r = client.post("/movie", json={**heat, "name": "Not Heat", "year": 2001, "was_good": False})
    assert r.status_code == 409

    assert client.get("/movie/m1").json() == heat
    assert len(store) == 1


def test_unknown_id_not_found(client):
    r = client.get("/movie/unknown")
    assert r.status_code == 404
    assert r.content == b""


def test_missing_fields_rejected_before_store(client, store):
    r = client.post("/movie", json={"name": "NoId"})
    assert r.status_code == 400

    body = r.json()
    assert body["error"] == "Validation error"
    missing = {tuple(e["loc"])[-1] for e in body["details"]}
    assert {"id", "year", "was_good"} <= missing
    assert len(store) == 0


def test_repeated_reads_identical(client, heat):
    client.post("/movie", json=heat)

    bodies = [client.get("/movie/m1").json() for _ in range(5)]
    assert all(b == heat for b in bodies)


# ---------- Payload validation ----------

@pytest.mark.parametrize(
    "patch",
    [
        {"year": -1},
        {"year": 65536},
        {"year": "1995"},
        {"year": 1995.5},
        {"was_good": 1},
        {"was_good": "true"},
        {"id": ""},
        {"id": 7},
        {"name": None},
    ],
)
def test_malformed_field_rejected(client, heat, store, patch):
    r = client.post("/movie", json={**heat, **patch})
    assert r.status_code == 400
    assert len(store) == 0


def test_invalid_json_rejected(client, store):
    r = client.post(
        "/movie",
        content=b'{"id": "m1", "name": ',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert len(store) == 0


def test_empty_body_rejected(client, store):
    r = client.post("/movie")
    assert r.status_code == 400
    assert len(store) == 0


def test_year_bounds_accepted(client):
    for movie_id, year in (("old", 0), ("far", 65535)):
        movie = {"id": movie_id, "name": "Edge", "year": year, "was_good": False}
        assert client.post("/movie", json=movie).status_code == 201
        assert client.get(f"/movie/{movie_id}").json()["year"] == year


def test_extra_fields_ignored(client, heat):
    r = client.post("/movie", json={**heat, "rating": 9})
    assert r.status_code == 201

    body = client.get("/movie/m1").json()
    assert body == heat
    assert set(body) == {"id", "name", "year", "was_good"}


def test_id_with_reserved_characters(client):
    movie = {"id": "star wars: a new hope", "name": "Star Wars", "year": 1977, "was_good": True}
    assert client.post("/movie", json=movie).status_code == 201

    r = client.get("/movie/star%20wars%3A%20a%20new%20hope")
    assert r.status_code == 200
    assert r.json() == movie


# ---------- Outcome mapping ----------

class _BrokenStore:
    def put_if_absent(self, movie):
        return None


def test_unmapped_store_outcome_is_server_error(client, heat):
    app.dependency_overrides[get_store] = lambda: _BrokenStore()
    try:
        r = client.post("/movie", json=heat)
    finally:
        app.dependency_overrides.clear()

    assert r.status_code == 500
    assert r.json()["error"].startswith("Unhandled store outcome")
    assert r.headers.get("X-Request-Id")


class _FailingStore:
    def get(self, movie_id):
        raise RuntimeError("boom")

    def put_if_absent(self, movie):
        raise RuntimeError("boom")


def test_unexpected_error_is_internal_server_error(heat):
    app.dependency_overrides[get_store] = lambda: _FailingStore()
    try:
        with TestClient(app, raise_server_exceptions=False) as c:
            created = c.post("/movie", json=heat, headers={"X-Request-Id": "req-42"})
            fetched = c.get("/movie/m1")
    finally:
        app.dependency_overrides.clear()

    assert created.status_code == 500
    assert created.json() == {"error": "Internal server error", "details": "boom"}
    assert created.headers["X-Request-Id"] == "req-42"

    assert fetched.status_code == 500
    assert fetched.json()["details"] == "boom"
    assert fetched.headers.get("X-Request-Id")


def test_server_error_model_documented(client):
    openapi = client.get("/openapi.json").json()
    schemas = openapi["components"]["schemas"]
    assert "ErrorResponse" in schemas

    for path, method in (("/movie", "post"), ("/movie/{movie_id}", "get")):
        error_doc = openapi["paths"][path][method]["responses"]["500"]
        ref = error_doc["content"]["application/json"]["schema"]["$ref"]
        assert ref.endswith("/ErrorResponse")


# ---------- Service endpoints / middleware ----------

def test_root_banner(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "running"
    assert body["service"] == "Movie Store"


def test_health_counts_movies(client, heat):
    assert client.get("/health").json() == {"status": "ok", "movies": 0}
    client.post("/movie", json=heat)
    assert client.get("/health").json() == {"status": "ok", "movies": 1}


def test_request_id_generated(client):
    r = client.get("/movie/unknown")
    assert r.headers.get("X-Request-Id")


def test_request_id_echoed(client):
    r = client.get("/health", headers={"X-Request-Id": "abc123"})
    assert r.headers["X-Request-Id"] == "abc123"


def test_store_empty_on_startup(heat):
    with TestClient(app) as c:
        assert c.post("/movie", json=heat).status_code == 201

    with TestClient(app) as c:
        assert c.get("/movie/m1").status_code == 404
