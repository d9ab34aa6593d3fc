"""
Pytest fixtures for HTTP endpoint tests.

Provides the FastAPI test client and a stub for the Harvest API transport.
"""
from unittest.mock import Mock

import pytest
import requests
from fastapi.testclient import TestClient

from harvestdoc.main import app


@pytest.fixture(scope="function")
def client():
    """FastAPI test client for the export service."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def harvest_api(monkeypatch):
    """
    Stub the outbound Harvest API.

    Returns the Mock standing in for requests.Session.get; set its
    return_value or side_effect per test.
    """
    get = Mock()
    monkeypatch.setattr(requests.Session, "get", get)
    return get
