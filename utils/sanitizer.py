"""
Input Sanitization Module

Cleans free-text fields (token domain/description, user ids) before
they are stored or used to build storage keys.
"""

import re

from constants import MAX_LENGTHS

_CONTROL_CHARS = re.compile(r'[\x00-\x1f\x7f-\x9f]')


def sanitize_text(text, max_length=10000):
    """
    Sanitize a free-text value for storage.

    Removes control characters, collapses runs of whitespace and
    truncates. HTML escaping is left to whoever renders the value.

    Args:
        text: The text to sanitize (can be None)
        max_length: Maximum allowed length (default 10000)

    Returns:
        Sanitized string, possibly empty
    """
    if text is None:
        return ''

    if not isinstance(text, str):
        text = str(text)

    text = re.sub(r'\s+', ' ', text)
    text = _CONTROL_CHARS.sub('', text).strip()

    if len(text) > max_length:
        text = text[:max_length]

    return text


def sanitize_domain(domain, default='localhost'):
    """
    Normalize a site domain given at token issuance.

    Accepts bare hosts or full URLs ("https://Example.com/page" -> "example.com").
    Falls back to `default` when nothing usable is left.
    """
    domain = sanitize_text(domain, max_length=2048)
    if not domain:
        return default

    # Strip a scheme and anything after the host
    domain = re.sub(r'^[a-zA-Z][a-zA-Z0-9+.-]*://', '', domain)
    domain = re.split(r'[/?#]', domain, maxsplit=1)[0]
    domain = domain.strip().lower()

    if len(domain) > MAX_LENGTHS['domain']:
        domain = domain[:MAX_LENGTHS['domain']]

    return domain or default


def sanitize_description(description, default='New token'):
    """Sanitize a token description, falling back to `default` when empty."""
    description = sanitize_text(description, max_length=MAX_LENGTHS['description'])
    return description or default


def sanitize_user_id(user_id):
    """
    Normalize a widget user id for use in a settings key.

    The id is kept as sent so distinct ids never share a key. Returns an
    empty string for missing/blank ids so callers can reject the request;
    length is checked by the caller against MAX_LENGTHS['user_id'].
    """
    if user_id is None:
        return ''
    user_id = str(user_id)
    if not user_id.strip():
        return ''
    return user_id
