"""
Pytest configuration and fixtures for Bing Search tests.
"""

from typing import List, Optional, Tuple

import pytest

import bing_search
from bing_search.utils import config
from bing_search.utils.config import ACCOUNT_KEY_ENV, WEB_ONLY_ENV, clear_config_cache
from tests.fixtures import response_body

TEST_ACCOUNT_KEY = "test-account-key"


# ============================================
# Fake transport
# ============================================

class FakeTransport:
    """Records every GET and answers with a canned status and body."""

    def __init__(self, status: int = 200, body: Optional[bytes] = None):
        self.status = status
        self.body = body if body is not None else response_body([])
        self.calls: List[Tuple[str, str, str, str]] = []
        self.is_open = False
        self.open_count = 0

    def respond(self, results=None, status: int = 200, body: Optional[bytes] = None):
        self.status = status
        self.body = body if body is not None else response_body(results if results is not None else [])

    def perform_get(self, path, query_string, username, password):
        self.calls.append((path, query_string, username, password))
        return self.status, self.body

    def open(self):
        self.is_open = True
        self.open_count += 1

    def close(self):
        self.is_open = False

    @property
    def last_path(self) -> str:
        return self.calls[-1][0]

    @property
    def last_query(self) -> str:
        return self.calls[-1][1]


# ============================================
# Isolation
# ============================================

@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep environment, config cache and module defaults out of each test."""
    monkeypatch.delenv(ACCOUNT_KEY_ENV, raising=False)
    monkeypatch.delenv(WEB_ONLY_ENV, raising=False)
    # a developer .env must not leak into tests
    monkeypatch.setattr(config, "_dotenv_loaded", True)
    monkeypatch.setattr(bing_search, "account_key", None)
    monkeypatch.setattr(bing_search, "web_only", None)
    clear_config_cache()
    yield
    clear_config_cache()


# ============================================
# Clients
# ============================================

@pytest.fixture
def transport():
    return FakeTransport()


@pytest.fixture
def client(transport):
    from bing_search.client import Client

    return Client(account_key=TEST_ACCOUNT_KEY, transport=transport)
