"""
Settings Model

Contains the SettingsRecord model: one saved profile choice per
token/user pair.
"""

from .base import db, utcnow, isoformat


class SettingsRecord(db.Model):
    """Profile and custom settings stored under a `<token>_<userId>` key."""
    __tablename__ = 'settings_record'

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(300), unique=True, nullable=False, index=True)
    profile = db.Column(db.String(50), nullable=False, default='standard')
    custom_settings = db.Column(db.JSON, nullable=False, default=dict)
    updated_at = db.Column(db.DateTime, nullable=False, default=utcnow)

    def to_dict(self):
        return {
            'profile': self.profile,
            'customSettings': self.custom_settings or {},
            'updatedAt': isoformat(self.updated_at),
        }
