"""
URL Validation Module

Validates the API base URL the widget is configured with before any
request (and the site token it carries) is sent to it.
"""

from urllib.parse import urlparse


class InvalidApiUrlError(ValueError):
    """Raised when a configured API base URL cannot be used."""
    pass


def is_valid_api_url(url):
    """
    Validate that a URL can serve as the widget's API base.

    Returns (is_valid, error_message) tuple.

    Checks:
    - Scheme is http or https only
    - A hostname is present
    - No embedded credentials, query string or fragment
    """
    if not url:
        return False, "Empty URL"

    if not isinstance(url, str):
        return False, "URL must be a string"

    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False, "Invalid URL format"

    if parsed.scheme not in ('http', 'https'):
        return False, f"Invalid scheme: {parsed.scheme}. Only http and https are allowed."

    if not parsed.hostname:
        return False, "No hostname in URL"

    if parsed.username or parsed.password:
        return False, "Credentials are not allowed in the API URL"

    if parsed.query or parsed.fragment:
        return False, "API URL must not carry a query string or fragment"

    return True, None


def normalize_api_url(url):
    """
    Validate and normalize an API base URL (trailing slashes removed).

    Raises:
        InvalidApiUrlError: If the URL fails validation
    """
    is_valid, error = is_valid_api_url(url)
    if not is_valid:
        raise InvalidApiUrlError(error)
    return url.strip().rstrip('/')
