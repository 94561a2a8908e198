"""
Application configuration for the different environments.
Values come from environment variables with defaults for local work.
"""

import os
from datetime import timedelta
from dotenv import load_dotenv

# Load .env if present
load_dotenv()


class Config:
    """
    Base configuration shared by all environments.
    """

    # Flask core
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')

    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv(
        'DATABASE_URL',
        'postgresql+psycopg://localhost:5432/naijafind'
    )
    # Heroku style URLs use postgres://
    if SQLALCHEMY_DATABASE_URI.startswith('postgres://'):
        SQLALCHEMY_DATABASE_URI = SQLALCHEMY_DATABASE_URI.replace(
            'postgres://', 'postgresql+psycopg://', 1
        )
    elif SQLALCHEMY_DATABASE_URI.startswith('postgresql://'):
        SQLALCHEMY_DATABASE_URI = SQLALCHEMY_DATABASE_URI.replace(
            'postgresql://', 'postgresql+psycopg://', 1
        )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # JWT - tokens are issued by the identity provider.
    # HS256 with a shared secret, or RS256 with the provider's public key.
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', 'jwt-secret-key-change-in-production')
    JWT_PUBLIC_KEY = os.getenv('JWT_PUBLIC_KEY', '')
    JWT_ALGORITHM = os.getenv('JWT_ALGORITHM', 'HS256')
    JWT_ISSUER = os.getenv('JWT_ISSUER') or None
    JWT_AUDIENCE = os.getenv('JWT_AUDIENCE') or None
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(
        seconds=int(os.getenv('JWT_ACCESS_TOKEN_EXPIRES', 3600))  # 1h, locally issued tokens only
    )

    # Transactional email (Resend)
    RESEND_API_KEY = os.getenv('RESEND_API_KEY', '')
    FROM_EMAIL = os.getenv('FROM_EMAIL', 'onboarding@resend.dev')
    CONTACT_EMAIL = os.getenv('CONTACT_EMAIL', 'contact@Olufinja.com')
    FRONTEND_URL = os.getenv('FRONTEND_URL', 'https://Olufinja.com')

    # Bootstrap routes (/init, /admin/create, /categories/init)
    # Empty = open, only acceptable outside production
    BOOTSTRAP_TOKEN = os.getenv('BOOTSTRAP_TOKEN', '')

    # Background scheduler (rate limit cleanup)
    SCHEDULER_ENABLED = os.getenv('SCHEDULER_ENABLED', 'true').lower() == 'true'

    # Search defaults
    SEARCH_DEFAULT_RADIUS_KM = float(os.getenv('SEARCH_DEFAULT_RADIUS_KM', 50))
    SEARCH_DEFAULT_LIMIT = int(os.getenv('SEARCH_DEFAULT_LIMIT', 20))

    # Rate limiting (contact forms, supplier messages)
    RATE_LIMIT_DEFAULT_ATTEMPTS = int(os.getenv('RATE_LIMIT_DEFAULT_ATTEMPTS', 5))
    RATE_LIMIT_WINDOW_MINUTES = int(os.getenv('RATE_LIMIT_WINDOW_MINUTES', 60))
    RATE_LIMIT_RETENTION_MINUTES = int(os.getenv('RATE_LIMIT_RETENTION_MINUTES', 120))

    # CORS
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*').split(',')

    # Values that must never reach production
    INSECURE_SECRETS = [
        'jwt-secret-key-change-in-production',
        'dev-secret-key-change-in-production',
        'changeme',
        'secret',
    ]


class DevelopmentConfig(Config):
    """
    Development configuration - debug on.
    """
    DEBUG = True
    SQLALCHEMY_ECHO = os.getenv('SQLALCHEMY_ECHO', 'false').lower() == 'true'


class TestingConfig(Config):
    """
    Test configuration - used by pytest.
    """
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    JWT_SECRET_KEY = 'test-jwt-secret'
    JWT_PUBLIC_KEY = ''
    JWT_ALGORITHM = 'HS256'
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(minutes=5)
    RESEND_API_KEY = ''
    BOOTSTRAP_TOKEN = ''
    SCHEDULER_ENABLED = False


def _get_production_cors_origins() -> list:
    """
    CORS origins for production. Never a wildcard.
    """
    origins = os.getenv('CORS_ORIGINS', '')
    if not origins or origins.strip() == '*':
        return [
            'https://olufinja.com',
            'https://www.olufinja.com',
        ]
    return [o.strip() for o in origins.split(',') if o.strip()]


class ProductionConfig(Config):
    """
    Production configuration.

    Secrets are validated in validate_production_config() at startup.
    """
    DEBUG = False

    SECRET_KEY = os.getenv('SECRET_KEY', '')
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY', '')

    CORS_ORIGINS = _get_production_cors_origins()

    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
        'pool_size': 10,
        'max_overflow': 20,
    }


def validate_production_config(app):
    """
    Validates production configuration when the app starts.

    Raises:
        ValueError: If a secret is missing or insecure
    """
    if os.getenv('FLASK_ENV') != 'production':
        return

    insecure_defaults = Config.INSECURE_SECRETS

    secret_key = app.config.get('SECRET_KEY', '')
    if not secret_key:
        raise ValueError(
            "CRITICAL: SECRET_KEY environment variable must be set in production!\n"
            "Generate with: python -c \"import secrets; print(secrets.token_hex(32))\""
        )
    if len(secret_key) < 32:
        raise ValueError("SECRET_KEY must be at least 32 characters")
    for insecure in insecure_defaults:
        if insecure.lower() in secret_key.lower():
            raise ValueError("CRITICAL: SECRET_KEY contains insecure default value!")

    # Either a provider public key (RS256) or a strong shared secret (HS256)
    if app.config.get('JWT_ALGORITHM', 'HS256').startswith('RS'):
        if not app.config.get('JWT_PUBLIC_KEY'):
            raise ValueError("CRITICAL: JWT_PUBLIC_KEY must be set when JWT_ALGORITHM is RS*")
    else:
        jwt_key = app.config.get('JWT_SECRET_KEY', '')
        if not jwt_key:
            raise ValueError("CRITICAL: JWT_SECRET_KEY environment variable must be set in production!")
        if len(jwt_key) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        for insecure in insecure_defaults:
            if insecure.lower() in jwt_key.lower():
                raise ValueError("CRITICAL: JWT_SECRET_KEY contains insecure default value!")

    if not app.config.get('BOOTSTRAP_TOKEN'):
        raise ValueError("CRITICAL: BOOTSTRAP_TOKEN must be set in production!")


config_by_name = {
    'development': DevelopmentConfig,
    'testing': TestingConfig,
    'production': ProductionConfig,
    'default': DevelopmentConfig,
}


def get_config():
    """
    Returns the config class for FLASK_ENV. Defaults to development.
    """
    env = os.getenv('FLASK_ENV', 'development')
    return config_by_name.get(env, DevelopmentConfig)
