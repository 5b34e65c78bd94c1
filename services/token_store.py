"""
Token Store Service

Issues, lists, looks up and deactivates per-site API tokens.
"""

import logging
import secrets

from constants import TOKEN_PREFIX, TOKEN_BYTES, DEFAULT_DOMAIN, DEFAULT_DESCRIPTION
from models import ApiToken, utcnow
from utils.sanitizer import sanitize_domain, sanitize_description
from .storage import storage_operation

logger = logging.getLogger(__name__)


def generate_token_string():
    """Random token string: namespace prefix + 64 hex chars."""
    return TOKEN_PREFIX + secrets.token_hex(TOKEN_BYTES)


def generate_token(domain=None, description=None):
    """
    Issue a new active token for a site.

    Args:
        domain: Site domain or URL (defaults to 'localhost')
        description: Free-text label (defaults to 'New token')

    Returns:
        The persisted ApiToken
    """
    with storage_operation('Failed to generate token') as session:
        token = ApiToken(
            token=generate_token_string(),
            domain=sanitize_domain(domain, default=DEFAULT_DOMAIN),
            description=sanitize_description(description, default=DEFAULT_DESCRIPTION),
            active=True,
            created_at=utcnow(),
            last_used=None,
            request_count=0,
        )
        session.add(token)

    logger.info("Issued token for domain %s", token.domain)
    return token


def list_tokens():
    """All tokens ever issued, oldest first (inactive ones included)."""
    with storage_operation('Failed to retrieve tokens'):
        return ApiToken.query.order_by(ApiToken.id).all()


def find_token(token_string):
    """Look up a token regardless of its active flag."""
    if not token_string:
        return None
    return ApiToken.query.filter_by(token=token_string).first()


def find_active_token(token_string):
    """Look up a token, returning None if it is unknown or deactivated."""
    if not token_string:
        return None
    return ApiToken.query.filter_by(token=token_string, active=True).first()


def record_usage(token):
    """Stamp last_used and bump request_count for a validated request."""
    with storage_operation('Token validation failed'):
        token.last_used = utcnow()
        token.request_count = (token.request_count or 0) + 1
    return token


def deactivate_token(token_string):
    """
    Deactivate a token.

    Returns:
        True if the token existed (already-inactive tokens are re-stamped),
        False if no such token was issued.
    """
    with storage_operation('Failed to deactivate token'):
        token = find_token(token_string)
        if token is None:
            return False
        token.active = False
        token.deactivated_at = utcnow()

    logger.info("Deactivated token for domain %s", token.domain)
    return True
