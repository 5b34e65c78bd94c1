"""
Validation Constants

Limits and defaults applied to user input before it is stored.
"""

# Token issuance defaults
TOKEN_PREFIX = 'comrade_'
TOKEN_BYTES = 32
DEFAULT_DOMAIN = 'localhost'
DEFAULT_DESCRIPTION = 'New token'

# Maximum field lengths
MAX_LENGTHS = {
    'domain': 253,
    'description': 500,
    'user_id': 128,
}

# Header and query parameter carrying the per-site token
TOKEN_HEADER = 'X-API-Token'
TOKEN_QUERY_PARAM = 'token'
