"""Shared fixtures for calculator tests."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app import create_app
from calculator import Calculator
from settings import Settings
from store import SessionStore


TEST_SETTINGS = Settings(log_level="WARNING", title="Test Calculator")


@pytest.fixture
def calc() -> Calculator:
    return Calculator()


@pytest.fixture
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def client(store: SessionStore) -> TestClient:
    app = create_app(store=store, settings=TEST_SETTINGS)
    return TestClient(app)
