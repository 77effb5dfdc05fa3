"""
Pytest configuration and shared fixtures.
"""

import pytest

from bookshelf import create_app, db
from bookshelf.config import TestingConfig


@pytest.fixture
def app():
    """Create an application backed by a fresh in-memory database."""
    app = create_app(TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def app_context(app):
    """Push an application context for tests that call services directly."""
    with app.app_context():
        yield


@pytest.fixture
def make_book(client):
    """Create a book through the API and return its JSON."""
    def _make_book(name="Atlas"):
        response = client.post("/api/books", json={"name": name})
        assert response.status_code == 200
        return response.get_json()
    return _make_book


@pytest.fixture
def make_page(client):
    """Create a page through the API and return its JSON."""
    def _make_page(book_id, number=1, name="", content="text"):
        response = client.post(
            "/api/pages",
            json={"bookId": book_id, "name": name, "number": number, "content": content},
        )
        assert response.status_code == 200
        return response.get_json()
    return _make_page
