"""
Pytest configuration and fixtures for COMRADE tests.
"""

import os
import sys
from http import HTTPStatus
from pathlib import Path
from urllib.parse import urlsplit

import pytest
import requests

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# The module-level app in app.py is built on import
os.environ.setdefault("FLASK_ENV", "testing")

from app import create_app  # noqa: E402
from models import db  # noqa: E402


@pytest.fixture
def app():
    """Fresh app with an empty in-memory database."""
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_key(app):
    return app.config['ADMIN_KEY']


@pytest.fixture
def issue_token(client, admin_key):
    """Issue a token through the API and return its string."""
    def _issue(domain='example.com', description='Test site'):
        response = client.post('/api/tokens/generate', json={
            'domain': domain,
            'description': description,
            'adminKey': admin_key,
        })
        assert response.status_code == 200
        return response.get_json()['token']
    return _issue


class FlaskResponseAdapter:
    """The slice of requests.Response the widget client reads."""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code
        self.ok = response.status_code < 400
        self.reason = HTTPStatus(response.status_code).phrase

    def json(self):
        data = self._response.get_json(silent=True)
        if data is None:
            raise ValueError("Response body is not JSON")
        return data


class FlaskRequestsSession:
    """Routes requests.Session-style calls into the Flask test client."""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, url, headers=None, params=None, json=None, timeout=None):
        path = urlsplit(url).path
        self.calls.append((method, path))
        response = self.client.open(
            path, method=method, headers=headers, query_string=params, json=json
        )
        return FlaskResponseAdapter(response)


class OfflineSession:
    """Every call fails as if the API were unreachable."""

    def __init__(self):
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, urlsplit(url).path))
        raise requests.ConnectionError("connection refused")


@pytest.fixture
def http_session(client):
    return FlaskRequestsSession(client)


@pytest.fixture
def offline_session():
    return OfflineSession()
