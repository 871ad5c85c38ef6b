import pytest

fastapi = pytest.importorskip("fastapi")
from fastapi.testclient import TestClient

from bibshelf.web import app


client = TestClient(app)


@pytest.fixture(autouse=True)
def _contents_env(monkeypatch, contents_dir):
    monkeypatch.setenv("BIBSHELF_CONTENTS_DIR", str(contents_dir))
    monkeypatch.setenv("BIBSHELF_DEFAULT_SITE_ID", "site_a")


def test_api_requires_site_id():
    response = client.get("/api/bibliography")

    assert response.status_code == 400
    assert "siteId" in response.json()["error"]


def test_api_rejects_invalid_site_id():
    response = client.get("/api/bibliography", params={"siteId": "invalid@site"})

    assert response.status_code == 400
    assert "Invalid" in response.json()["error"]


def test_api_returns_404_for_unknown_site():
    response = client.get("/api/bibliography", params={"siteId": "unknown_site"})

    assert response.status_code == 404
    assert "not found" in response.json()["error"]


def test_api_returns_entries_without_memo():
    response = client.get("/api/bibliography", params={"siteId": "site_a"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.headers["cache-control"] == "public, max-age=3600, stale-while-revalidate=86400"
    assert response.headers["etag"].startswith('"')

    data = response.json()
    assert len(data) == 2
    assert data[0]["title"] == "数学する身体"
    assert all("memo" not in entry["customInfo"] for entry in data)
    assert "private note" not in response.text


def test_api_conditional_request_returns_304():
    first = client.get("/api/bibliography", params={"siteId": "site_a"})

    second = client.get(
        "/api/bibliography",
        params={"siteId": "site_a"},
        headers={"If-None-Match": first.headers["etag"]},
    )

    assert second.status_code == 304
    assert second.headers["etag"] == first.headers["etag"]


def test_homepage_lists_every_record_with_public_notes():
    response = client.get("/")

    assert response.status_code == 200
    assert "tailwind" in response.text.lower()
    assert "森田真生" in response.text
    assert "John Smith" in response.text
    assert "Plain {Notes} Revisited" in response.text
    assert "Solid overview." in response.text
    assert "private note" not in response.text


def test_health_reports_item_count():
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "items": 3}
