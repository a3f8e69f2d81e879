import os
from datetime import timedelta

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Content Settings
    # With CONTENT_BASE_URL set, documents are fetched over HTTP from that
    # origin; otherwise they are read from CONTENT_DIR (the static folder).
    CONTENT_BASE_URL = os.environ.get('CONTENT_BASE_URL')
    CONTENT_DIR = os.environ.get('CONTENT_DIR', os.path.join(BASE_DIR, 'static'))
    CONTENT_FETCH_TIMEOUT = float(os.environ.get('CONTENT_FETCH_TIMEOUT', '10'))

    # Interaction Settings
    NAV_SCROLL_DELAY_MS = 350
    SWIPE_THRESHOLD_PX = 50

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG')


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SECRET_KEY = 'testing-secret-key'
    # Tests point CONTENT_DIR at a temporary directory
    CONTENT_BASE_URL = None


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(name=None):
    """Get configuration by name, or based on FLASK_ENV"""
    env = name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
