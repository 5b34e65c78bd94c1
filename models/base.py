"""
Database Base Module

Creates the SQLAlchemy database instance that all models inherit from.
This is separate to avoid circular imports.
"""

from datetime import datetime, timezone

from flask_sqlalchemy import SQLAlchemy

# Create the SQLAlchemy instance
# This will be initialized with the Flask app in app.py
db = SQLAlchemy()


def utcnow():
    """Naive UTC timestamp (SQLite does not keep tzinfo)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    """Render a stored UTC timestamp the way the widget expects, e.g. 2026-01-24T14:48:29.250Z"""
    if value is None:
        return None
    return value.isoformat(timespec='milliseconds') + 'Z'
