"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Add backend to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../backend'))

# Set up test environment variables before importing any modules
os.environ.setdefault('LOG_LEVEL', 'INFO')
os.environ.setdefault('EMAIL_CHECKER', 'strict')

from fastapi.testclient import TestClient  # noqa: E402

from emailql.config import Settings  # noqa: E402
from emailql.main import create_app  # noqa: E402


@pytest.fixture
def settings():
    """Fresh settings built from the test environment."""
    return Settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def post_query(client):
    """POST a query to /graphql the way the explorer does."""
    def _post(query, variables=None):
        body = {"query": query}
        if variables is not None:
            body["variables"] = variables
        return client.post("/graphql", json=body)
    return _post
