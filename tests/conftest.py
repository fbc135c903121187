"""
Test configuration and fixtures for the metrics backend.
This centralizes all test setup, making individual tests clean.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from metrics_app.config import Settings
from metrics_app.storage.strategies import InMemoryMetricsStorage

INDEX_HTML = "<!doctype html><title>metrics</title><h1>hello</h1>"


class BrokenStorage(InMemoryMetricsStorage):
    """Storage whose every operation fails, like a database that went away"""

    def __init__(self, message: str = "connection refused"):
        super().__init__()
        self.message = message

    async def record_page_view(self) -> None:
        raise RuntimeError(self.message)

    async def record_click(self) -> None:
        raise RuntimeError(self.message)

    async def record_signup(self, email: str) -> None:
        raise RuntimeError(self.message)

    async def count_clicks(self) -> int:
        raise RuntimeError(self.message)

    async def get_metrics(self):
        raise RuntimeError(self.message)


@pytest.fixture(scope="function")
def public_dir(tmp_path):
    """Static directory with a single index page"""
    directory = tmp_path / "public"
    directory.mkdir()
    (directory / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    return directory


@pytest.fixture(scope="function")
def sqlite_url(tmp_path):
    """Connection string for a fresh SQLite file per test"""
    return f"sqlite+aiosqlite:///{tmp_path / 'metrics.db'}"


@pytest.fixture(scope="function")
def memory_settings(public_dir):
    return Settings(database_url="", public_dir=str(public_dir))


@pytest.fixture(scope="function")
def sql_settings(public_dir, sqlite_url):
    return Settings(database_url=sqlite_url, public_dir=str(public_dir))


@pytest.fixture(scope="function")
def client(memory_settings):
    """
    Test client running in in-memory mode (no DATABASE_URL).
    This is the main fixture that tests will use.
    """
    with TestClient(create_app(memory_settings)) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def sql_client(sql_settings):
    """Test client backed by a bootstrapped SQLite database"""
    with TestClient(create_app(sql_settings)) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def broken_client(memory_settings):
    """Test client whose storage fails every call"""
    with TestClient(create_app(memory_settings, storage=BrokenStorage())) as test_client:
        yield test_client
