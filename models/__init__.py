"""
Models Package

Exports all database models and the db instance for use throughout the application.
"""

from .base import db, utcnow, isoformat

from .token import ApiToken
from .settings import SettingsRecord

__all__ = [
    'db',
    'utcnow',
    'isoformat',
    'ApiToken',
    'SettingsRecord',
]
