"""
Widget Package

Python rendition of the embeddable accessibility widget: it works on a
parsed host page and talks to the API over HTTP.
"""

from .client import ApiClient, WidgetApiError
from .directives import SetClassList, apply_profile_directives, resolve_profile
from .page import Page, TagClassList
from .session import (
    WidgetSession, WidgetHandle, embed, get_user_id,
    UNINITIALIZED, VALIDATING, FAILED, READY,
)

__all__ = [
    'ApiClient',
    'WidgetApiError',
    'SetClassList',
    'apply_profile_directives',
    'resolve_profile',
    'Page',
    'TagClassList',
    'WidgetSession',
    'WidgetHandle',
    'embed',
    'get_user_id',
    'UNINITIALIZED',
    'VALIDATING',
    'FAILED',
    'READY',
]
