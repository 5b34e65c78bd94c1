"""
Settings Store Service

Saves and loads the profile choice of one user under one token.
"""

from models import SettingsRecord, utcnow
from .storage import storage_operation


def settings_key(token_string, user_id):
    """Composite storage key for a token/user pair."""
    return f"{token_string}_{user_id}"


def save_settings(key, profile, custom_settings):
    """
    Upsert the record under `key`, overwriting it wholesale.

    Returns:
        The saved SettingsRecord
    """
    with storage_operation('Failed to save settings') as session:
        record = SettingsRecord.query.filter_by(key=key).first()
        if record is None:
            record = SettingsRecord(key=key)
            session.add(record)
        record.profile = profile
        record.custom_settings = dict(custom_settings)
        record.updated_at = utcnow()
    return record


def load_settings(key):
    """Return the SettingsRecord under `key`, or None if nothing was saved."""
    with storage_operation('Failed to load settings'):
        return SettingsRecord.query.filter_by(key=key).first()
