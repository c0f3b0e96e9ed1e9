"""
Configuration for the CREDGUARD backend
Values are read from environment variables with development defaults
"""

import os


def _as_bool(value, default=False):
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key')
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///credguard.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.environ.get('CORS_ORIGINS', 'http://localhost:5173,http://localhost:8080').split(',')
        if origin.strip()
    ]

    TOKEN_EXPIRY_HOURS = int(os.environ.get('TOKEN_EXPIRY_HOURS', '24'))

    # Optional vendor; the LLM gateway and local generation are the fallbacks
    CYBORGDB_API_KEY = os.environ.get('CYBORGDB_API_KEY')
    CYBORGDB_API_URL = os.environ.get('CYBORGDB_API_URL', 'https://api.cyborgdb.com')

    LLM_API_KEY = os.environ.get('LLM_API_KEY')
    LLM_GATEWAY_URL = os.environ.get('LLM_GATEWAY_URL', 'https://ai.gateway.lovable.dev/v1/chat/completions')
    LLM_MODEL = os.environ.get('LLM_MODEL', 'google/gemini-2.5-flash')

    HTTP_TIMEOUT = float(os.environ.get('HTTP_TIMEOUT', '15'))

    SEED_DEMO_DATA = _as_bool(os.environ.get('SEED_DEMO_DATA'), default=True)

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FILE = os.environ.get('LOG_FILE')


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'test-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    CYBORGDB_API_KEY = None
    LLM_API_KEY = None
    SEED_DEMO_DATA = False
