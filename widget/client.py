"""
Widget API Client

Talks to the COMRADE API on behalf of an embedded widget. Every call
carries the site token in the X-API-Token header.
"""

import logging

import requests

from constants import TOKEN_HEADER

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10


class WidgetApiError(Exception):
    """Raised when an API call fails (network error, non-2xx status or bad JSON)."""

    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class ApiClient:
    """
    Thin JSON client for the widget endpoints.

    Args:
        base_url: API base, e.g. http://localhost:3000/api
        token: Site token from the embedding script tag
        session: Optional requests.Session (or compatible object)
        timeout: Per-request timeout in seconds
    """

    def __init__(self, base_url, token, session=None, timeout=DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout

    def request(self, endpoint, method='GET', params=None, json=None):
        url = f"{self.base_url}{endpoint}"
        headers = {
            'Content-Type': 'application/json',
            TOKEN_HEADER: self.token,
        }

        try:
            response = self.session.request(
                method, url, headers=headers, params=params, json=json, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error("COMRADE API Error: %s %s failed: %s", method, endpoint, e)
            raise WidgetApiError(f"Request failed: {e}") from e

        if not response.ok:
            logger.error("COMRADE API Error: %s %s returned %s", method, endpoint, response.status_code)
            raise WidgetApiError(f"API error: {response.reason}", status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.error("COMRADE API Error: %s %s returned invalid JSON", method, endpoint)
            raise WidgetApiError("Invalid JSON in API response", status_code=response.status_code) from e

    def validate_token(self):
        return self.request('/tokens/validate')

    def get_profiles(self):
        return self.request('/profiles').get('profiles', [])

    def load_settings(self, user_id):
        return self.request('/settings/load', params={'userId': user_id})

    def save_settings(self, user_id, profile, custom_settings):
        return self.request('/settings/save', method='POST', json={
            'userId': user_id,
            'profile': profile,
            'customSettings': custom_settings,
        })
