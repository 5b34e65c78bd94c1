"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# Well-known fallback admin key. Deployments must override ADMIN_KEY.
DEFAULT_ADMIN_KEY = 'comrade_admin_key_change_me'


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # SQLAlchemy settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///comrade.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # API settings
    API_PREFIX = '/api'
    ADMIN_KEY = os.environ.get('ADMIN_KEY', DEFAULT_ADMIN_KEY)
    PORT = int(os.environ.get('PORT', 3000))
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB max request body

    # Logging settings
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    ADMIN_KEY = 'test-admin-key'
    LOG_FILE = None


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
