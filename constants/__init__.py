"""
Constants Package

Static catalogs and validation limits shared by the API and the widget.
"""

from .profiles import (
    DEFAULT_PROFILE,
    PROFILES,
    PROFILE_IDS,
    PROFILE_CLASSES,
    MARKER_CLASSES,
    HIGHLIGHT_PROFILES,
    HIGHLIGHT_KEYWORDS,
    HIGHLIGHT_CLASS,
    BUTTON_CLASS,
    PANEL_CLASS,
    CARD_CLASS,
    PROFILES_CONTAINER_ID,
)

from .validation import (
    TOKEN_PREFIX,
    TOKEN_BYTES,
    DEFAULT_DOMAIN,
    DEFAULT_DESCRIPTION,
    MAX_LENGTHS,
    TOKEN_HEADER,
    TOKEN_QUERY_PARAM,
)
