"""Shared fixtures for the store and HTTP tests."""

from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from htmlblog.app import create_app
from htmlblog.store import PostStore

PASSWORD = "correct horse battery staple"


@pytest.fixture
def blog_dir(tmp_path):
    path = tmp_path / "blog"
    path.mkdir()
    return path


@pytest.fixture
def store(blog_dir):
    return PostStore(blog_dir)


@pytest.fixture
def app(store):
    app = create_app(
        store=store,
        PASSWORD_HASH=generate_password_hash(PASSWORD),
        SECRET_KEY="test-secret",
        TESTING=True,
    )
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers(client):
    response = client.post("/api/blog/login", json={"password": PASSWORD})
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.get_json()['token']}"}
