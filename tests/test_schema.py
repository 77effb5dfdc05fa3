"""
Tests for start-up schema creation and the additive pages.name migration.
"""

import pytest
from sqlalchemy import create_engine, text

from bookshelf import create_app, db
from bookshelf.config import TestingConfig
from bookshelf.errors import SchemaError
from bookshelf.schema import ensure_schema


def _columns(table):
    rows = db.session.execute(text(f"PRAGMA table_info('{table}')")).fetchall()
    return [r[1] for r in rows]


def _legacy_database(path):
    """Build a database as written before pages had a name column."""
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE books (id INTEGER PRIMARY KEY AUTOINCREMENT, name TEXT NOT NULL)"
        ))
        conn.execute(text(
            "CREATE TABLE pages (id INTEGER PRIMARY KEY AUTOINCREMENT, "
            "book_id INTEGER NOT NULL, number INTEGER, content TEXT NOT NULL)"
        ))
        conn.execute(text("INSERT INTO books (name) VALUES ('Atlas')"))
        conn.execute(text(
            "INSERT INTO pages (book_id, number, content) VALUES (1, 1, 'Hello')"
        ))
    engine.dispose()


def test_fresh_database_gets_canonical_columns(app_context):
    """Test both tables are created with their full column sets."""
    assert _columns("books") == ["id", "name"]
    assert _columns("pages") == ["id", "book_id", "name", "number", "content"]


def test_ensure_schema_is_idempotent(app_context):
    """Test running schema setup again changes nothing."""
    before = (_columns("books"), _columns("pages"))
    ensure_schema()
    ensure_schema()
    assert (_columns("books"), _columns("pages")) == before


def test_legacy_pages_table_gains_name_column(tmp_path):
    """Test a pages table without name is migrated in place."""
    path = tmp_path / "legacy.db"
    _legacy_database(path)

    app = create_app(TestingConfig, overrides={"SQLALCHEMY_DATABASE_URI": f"sqlite:///{path}"})
    with app.app_context():
        assert "name" in _columns("pages")
        ensure_schema()
        assert _columns("pages").count("name") == 1

    client = app.test_client()
    pages = client.get("/api/pages?bookId=1").get_json()
    assert pages == [{"id": 1, "bookId": 1, "name": "", "number": 1, "content": "Hello"}]
    assert client.get("/api/books").get_json() == [{"id": 1, "name": "Atlas"}]


def test_migrated_database_accepts_named_pages(tmp_path):
    """Test new pages can carry a name after the migration."""
    path = tmp_path / "legacy.db"
    _legacy_database(path)

    app = create_app(TestingConfig, overrides={"SQLALCHEMY_DATABASE_URI": f"sqlite:///{path}"})
    client = app.test_client()
    response = client.post(
        "/api/pages", json={"bookId": 1, "name": "Ch. 2", "number": 2, "content": "More"}
    )
    assert response.status_code == 200
    assert [p["name"] for p in client.get("/api/pages?bookId=1").get_json()] == ["", "Ch. 2"]


def test_extra_legacy_columns_are_left_alone(tmp_path):
    """Test columns the models do not know about are kept, not dropped."""
    path = tmp_path / "extra.db"
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE books (id INTEGER PRIMARY KEY AUTOINCREMENT, "
            "name TEXT NOT NULL, author TEXT)"
        ))
    engine.dispose()

    app = create_app(TestingConfig, overrides={"SQLALCHEMY_DATABASE_URI": f"sqlite:///{path}"})
    with app.app_context():
        assert _columns("books") == ["id", "name", "author"]

    response = app.test_client().post("/api/books", json={"name": "Atlas"})
    assert response.status_code == 200


def test_unopenable_database_aborts_startup(tmp_path):
    """Test schema failure is fatal for application start-up."""
    missing = tmp_path / "no" / "such" / "dir" / "books.db"
    with pytest.raises(SchemaError):
        create_app(TestingConfig, overrides={"SQLALCHEMY_DATABASE_URI": f"sqlite:///{missing}"})
