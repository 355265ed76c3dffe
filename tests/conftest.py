import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.api.main import create_app
from app.api.settings import Settings


@pytest.fixture
def make_app():
    """Build an app serving under the given hostname."""

    def _make(hostname: str, **overrides) -> FastAPI:
        return create_app(Settings(hostname=hostname, **overrides))

    return _make


@pytest.fixture
def make_client(make_app):
    def _make(hostname: str, **overrides) -> TestClient:
        return TestClient(make_app(hostname, **overrides))

    return _make
