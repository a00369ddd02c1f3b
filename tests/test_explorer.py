import logging

import pytest
from fastapi.testclient import TestClient

from emailql.main import create_app
from emailql.utils.headers import NO_STORE_HEADERS

NO_STORE = "no-store, no-cache, must-revalidate, proxy-revalidate"


def test_graphiql_page(client):
    resp = client.get("/graphiql")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
    assert '<div id="graphiql">' in resp.text
    assert "/explorer.js" in resp.text


def test_static_assets_are_served(client):
    resp = client.get("/explorer.js")

    assert resp.status_code == 200
    assert "fetch('/graphql'" in resp.text
    assert client.get("/explorer.css").status_code == 200


def test_unknown_static_path(client):
    assert client.get("/does-not-exist.js").status_code == 404


@pytest.mark.parametrize("method,path", [
    ("GET", "/graphql?query=%7B__typename%7D"),
    ("POST", "/graphql"),
    ("PUT", "/graphql"),
    ("GET", "/graphiql"),
    ("GET", "/explorer.js"),
    ("GET", "/does-not-exist.js"),
    ("GET", "/health"),
])
def test_every_response_forbids_caching(client, method, path):
    resp = client.request(method, path, json={"query": "{ __typename }"} if method == "POST" else None)

    assert resp.headers["cache-control"] == NO_STORE
    for name, value in NO_STORE_HEADERS.items():
        assert resp.headers[name] == value


def test_unreadable_explorer_page_is_a_generic_500(settings, tmp_path):
    settings.EXPLORER_PAGE = str(tmp_path / "missing.html")

    with TestClient(create_app(settings)) as client:
        resp = client.get("/graphiql")

    assert resp.status_code == 500
    assert resp.json() == {"detail": "Internal Server Error"}
    assert "missing.html" not in resp.text
    assert resp.headers["cache-control"] == NO_STORE


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_startup_logs_routes(app, caplog):
    caplog.set_level(logging.INFO, logger="emailql")

    with TestClient(app):
        pass

    assert "Server running at http://localhost:4000" in caplog.text
    assert "http://localhost:4000/graphql" in caplog.text
    assert "http://localhost:4000/graphiql" in caplog.text
