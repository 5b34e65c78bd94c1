"""
API Token Model

Contains the ApiToken model for per-site tokens issued to widget embedders.
"""

from .base import db, utcnow, isoformat


class ApiToken(db.Model):
    """
    Token issued to one site/integration.

    Tokens are never deleted; deactivation flips `active` and stamps
    `deactivated_at`. Every validated request bumps `last_used` and
    `request_count`.
    """
    __tablename__ = 'api_token'

    id = db.Column(db.Integer, primary_key=True)
    token = db.Column(db.String(100), unique=True, nullable=False, index=True)
    domain = db.Column(db.String(253), nullable=False, default='localhost')
    description = db.Column(db.String(500), nullable=False, default='New token')
    active = db.Column(db.Boolean, nullable=False, default=True)
    created_at = db.Column(db.DateTime, nullable=False, default=utcnow)
    last_used = db.Column(db.DateTime, nullable=True)
    request_count = db.Column(db.Integer, nullable=False, default=0)
    deactivated_at = db.Column(db.DateTime, nullable=True)

    def to_dict(self):
        return {
            'token': self.token,
            'domain': self.domain,
            'description': self.description,
            'active': self.active,
            'createdAt': isoformat(self.created_at),
            'lastUsed': isoformat(self.last_used),
            'requestCount': self.request_count or 0,
            'deactivatedAt': isoformat(self.deactivated_at),
        }
