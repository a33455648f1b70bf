import os

import pytest

import db.connection
import services.storage
from services.storage import InMemoryBookStore
from settings import AppConfig


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """Every test starts from defaults: no BOOKSTORE_* env, no config file, no cached clients."""
    for key in list(os.environ):
        if key.startswith("BOOKSTORE_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("BOOKSTORE_CONFIG_PATH", str(tmp_path / "missing.json"))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
    AppConfig.reset()
    db.connection.reset_client()
    monkeypatch.setattr(services.storage, "_memory_store", None)
    yield
    AppConfig.reset()
    db.connection.reset_client()


@pytest.fixture
def store():
    return InMemoryBookStore()


@pytest.fixture
def book_payload():
    return {"isbn": "978-1420931693", "title": "The Republic", "author": "Plato"}
