"""Integration tests for the HTTP surface.

Run: pytest tests/integration/test_api_routes.py -v
"""

from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from slideshow.api.main import create_app
from slideshow.config.settings import AppSettings
from slideshow.domain import Slide, SlideStore
from slideshow.services.bootstrap import load_slides


# ============================================
# Fixtures
# ============================================


@pytest.fixture
def site(settings: AppSettings) -> AppSettings:
    """Populate static/ and images/ with a few files."""
    static_dir = settings.storage.static_dir
    static_dir.mkdir()
    (static_dir / "index.html").write_text("<html>slides</html>")
    (static_dir / "style.css").write_text("body { margin: 0; }")
    (static_dir / "script.js").write_text("console.log('hi');")

    images_dir = settings.storage.images_dir
    images_dir.mkdir()
    (images_dir / "a.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (images_dir / "notes.txt").write_text("not an image")
    return settings


@pytest.fixture
def store() -> SlideStore:
    return SlideStore(
        [
            Slide(id=1, image_url="/images/a.png", quote="First", author="Ada"),
            Slide(id=2, image_url="/images/b.png", quote="Second"),
        ]
    )


@pytest.fixture
def client(site: AppSettings, store: SlideStore):
    """Provide a TestClient for an app serving `store`."""
    with TestClient(create_app(store, site)) as c:
        yield c


# ============================================
# /api/slides
# ============================================


class TestSlidesEndpoint:
    """Tests for the slides API."""

    def test_returns_slides(self, client):
        response = client.get("/api/slides")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.headers["cache-control"] == "no-cache"
        assert response.json() == [
            {"id": 1, "imageUrl": "/images/a.png", "quote": "First", "author": "Ada"},
            {"id": 2, "imageUrl": "/images/b.png", "quote": "Second"},
        ]

    @pytest.mark.parametrize(
        "method", ["POST", "PUT", "DELETE", "PATCH", "OPTIONS", "TRACE", "PURGE"]
    )
    def test_any_method(self, client, method):
        response = client.request(method, "/api/slides", content=b"ignored")

        assert response.status_code == 200
        assert len(response.json()) == 2

    def test_query_parameters_ignored(self, client):
        assert len(client.get("/api/slides?page=2&limit=1").json()) == 2

    def test_persisted_file_round_trip(self, settings: AppSettings, slides_file: Path, sample_slides):
        app = create_app(load_slides(settings), settings)

        with TestClient(app) as c:
            body = c.get("/api/slides").json()

        assert [s["id"] for s in body] == [3, 1, 1]
        assert body[0] == sample_slides[0]
        assert body[1] == sample_slides[1]
        assert "author" not in body[2]

    def test_empty_store(self, settings: AppSettings):
        with TestClient(create_app(SlideStore(), settings)) as c:
            response = c.get("/api/slides")

        assert response.status_code == 200
        assert response.json() == []

    def test_encoding_failure(self, settings: AppSettings):
        broken = MagicMock(spec=SlideStore)
        broken.__len__.return_value = 0
        broken.to_json.side_effect = ValueError("Circular reference detected")

        with TestClient(create_app(broken, settings)) as c:
            response = c.get("/api/slides")

        assert response.status_code == 500
        assert response.text == "Failed to encode slides"
        assert response.headers["content-type"].startswith("text/plain")


class TestHealthEndpoint:
    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["slides"] == 2


# ============================================
# Static assets at /
# ============================================


class TestStaticAssets:
    """Tests for the root static file handler."""

    def test_index(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "slides" in response.text
        assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"

    @pytest.mark.parametrize("path", ["/style.css", "/script.js"])
    def test_css_and_js_cached(self, client, path):
        response = client.get(path)

        assert response.status_code == 200
        assert response.headers["cache-control"] == "public, max-age=86400"

    def test_missing_css_still_cached(self, client):
        response = client.get("/foo.css")

        assert response.status_code == 404
        assert response.headers["cache-control"] == "public, max-age=86400"

    def test_missing_html_not_cached(self, client):
        response = client.get("/foo.html")

        assert response.status_code == 404
        assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"

    def test_no_expires_header(self, client):
        assert "expires" not in client.get("/style.css").headers

    def test_missing_static_directory(self, settings: AppSettings, store: SlideStore):
        with TestClient(create_app(store, settings)) as c:
            response = c.get("/index.html")

        assert response.status_code == 404
        assert response.headers["cache-control"] == "no-cache, no-store, must-revalidate"


# ============================================
# Images at /images/
# ============================================


class TestImageFiles:
    """Tests for the image directory handler."""

    def _assert_cached_for_a_day(self, response):
        assert response.headers["cache-control"] == "public, max-age=86400"
        expires = parsedate_to_datetime(response.headers["expires"])
        expected = datetime.now(timezone.utc) + timedelta(hours=24)
        assert abs((expires - expected).total_seconds()) < 60

    def test_image(self, client):
        response = client.get("/images/a.png")

        assert response.status_code == 200
        assert response.content == b"\x89PNG\r\n\x1a\n"
        self._assert_cached_for_a_day(response)

    def test_non_image_file(self, client):
        response = client.get("/images/notes.txt")

        assert response.status_code == 200
        self._assert_cached_for_a_day(response)

    def test_missing_image(self, client):
        response = client.get("/images/missing.png")

        assert response.status_code == 404
        self._assert_cached_for_a_day(response)

    def test_configured_max_age(self, site: AppSettings, store: SlideStore):
        site.cache.max_age_seconds = 60
        with TestClient(create_app(store, site)) as c:
            response = c.get("/images/a.png")

        assert response.headers["cache-control"] == "public, max-age=60"
        expires = parsedate_to_datetime(response.headers["expires"])
        assert expires < datetime.now(timezone.utc) + timedelta(minutes=5)


class TestAppWiring:
    """Verify the app has the expected routes registered."""

    def test_routes(self, client):
        route_paths = {r.path for r in client.app.routes if hasattr(r, "path")}
        assert "/api/slides" in route_paths
        assert "/api/health" in route_paths
        assert "/images" in route_paths
        assert "" in route_paths or "/" in route_paths

    def test_slides_route_accepts_every_method(self, client):
        route = next(r for r in client.app.routes if getattr(r, "path", None) == "/api/slides")
        assert route.methods is None

    def test_store_on_app_state(self, client, store):
        assert client.app.state.slide_store is store
