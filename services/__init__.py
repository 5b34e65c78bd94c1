"""
Services Package

Business logic modules for the COMRADE API.
"""

from .token_store import (
    generate_token_string,
    generate_token,
    list_tokens,
    find_token,
    find_active_token,
    record_usage,
    deactivate_token,
)

from .settings_store import (
    settings_key,
    save_settings,
    load_settings,
)

from .profiles import (
    get_profiles,
    is_valid_profile,
)

__all__ = [
    # Tokens
    'generate_token_string',
    'generate_token',
    'list_tokens',
    'find_token',
    'find_active_token',
    'record_usage',
    'deactivate_token',
    # Settings
    'settings_key',
    'save_settings',
    'load_settings',
    # Profiles
    'get_profiles',
    'is_valid_profile',
]
