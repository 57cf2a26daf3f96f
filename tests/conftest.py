"""
Shared pytest fixtures.
"""
from pathlib import Path
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from bookshelf.core.config import get_settings
from bookshelf.db_connection import init_schema
from bookshelf.gateway import Gateway
from bookshelf.main import create_app


@pytest.fixture
def temp_db_path(tmp_path: Path) -> str:
    """Path of a throwaway SQLite database file."""
    return str(tmp_path / "bookshelf.db")


@pytest.fixture
def settings(temp_db_path: str, monkeypatch) -> dict:
    """Settings pointing at the temporary database."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{temp_db_path}")
    monkeypatch.setenv("DB_INIT_SCHEMA", "true")
    return get_settings()


@pytest.fixture
def gateway(settings: dict) -> Generator[Gateway, None, None]:
    """Real gateway over the temporary database with the schema created."""
    test_gateway = Gateway.from_settings(settings)
    init_schema(test_gateway.engine)
    yield test_gateway
    test_gateway.close()


@pytest.fixture
def app(settings: dict):
    return create_app(settings)


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    """FastAPI test client; entering it runs the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_book_data() -> dict:
    return {
        "name": "Laskar Pelangi",
        "year": 2005,
        "author": "Andrea Hirata",
        "summary": "Sepuluh anak Belitung dan sekolah mereka",
        "publisher": "Bentang Pustaka",
        "pageCount": 529,
        "readPage": 120,
        "reading": True,
    }


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "integration: tests against a real SQLite store")
