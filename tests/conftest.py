# tests/conftest.py
"""Shared fixtures: in-memory SQLite database and an HTTP client bound to the app."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before safecall.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["SEED_DEMO_DATA"] = "false"
os.environ["LOG_FILE"] = ""

import pytest
from httpx import AsyncClient, ASGITransport
from safecall.database import Base, SessionLocal, engine, create_tables


@pytest.fixture
def db():
    """Fresh schema per test; the app and the test share the same in-memory database."""
    create_tables()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


def api_client():
    from safecall.main import app
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
