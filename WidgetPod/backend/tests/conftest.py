"""
Pytest configuration and fixtures
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient

from client.api import WidgetsApi
from client.state import WidgetsState
from main import create_app
from settings import Settings
from store import WidgetStore


@pytest.fixture
def store():
    """Fresh in-memory store"""
    return WidgetStore()


@pytest.fixture
def app(store):
    """App bound to its own store"""
    return create_app(Settings(), store=store)


@pytest.fixture
def client(app):
    """HTTP test client for the API"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def live_api(client):
    """WidgetsApi talking to the in-process app"""
    return WidgetsApi("http://testserver", session=client)


@pytest.fixture
def mock_api():
    """WidgetsApi double with an empty server"""
    api = Mock(spec=WidgetsApi)
    api.get_widgets.return_value = []
    api.save_widget.return_value = None
    api.delete_widget.return_value = None
    return api


@pytest.fixture
def ids():
    """Predictable widget ids: w1, w2, ..."""
    counter = iter(range(1, 1000))
    return lambda: f"w{next(counter)}"


@pytest.fixture
def state(mock_api, ids):
    """Client state over the mocked API"""
    return WidgetsState(mock_api, id_factory=ids)
