"""Centralized configuration for the user registry API."""
from __future__ import annotations

import os

from dotenv import load_dotenv

# Environment must be loaded before the class attributes below read it
load_dotenv()


class Config:
    """Base configuration loaded from environment variables."""
    SECRET_KEY = os.getenv('SECRET_KEY')
    APP_ENV = os.getenv('APP_ENV', 'development').lower()
    VERSION = '1.0.0'
    TIMEZONE = os.getenv('TZ', 'UTC')
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    FORCE_HTTPS = os.getenv('FORCE_HTTPS', 'false').lower() == 'true'
    SEED_ADMIN = os.getenv('SEED_ADMIN', 'true').lower() == 'true'
    BCRYPT_ROUNDS = int(os.getenv('BCRYPT_ROUNDS', '12'))
    PORT = int(os.getenv('PORT', '5000'))
    # Only a development deployment may leak exception text to callers
    EXPOSE_ERROR_DETAILS = APP_ENV == 'development'


class DevelopmentConfig(Config):
    DEBUG = True
    APP_ENV = 'development'
    EXPOSE_ERROR_DETAILS = True


class ProductionConfig(Config):
    DEBUG = False
    APP_ENV = 'production'
    EXPOSE_ERROR_DETAILS = False


class TestingConfig(Config):
    TESTING = True
    APP_ENV = 'test'
    SECRET_KEY = 'test-secret-key-for-testing'
    BCRYPT_ROUNDS = 4
    FORCE_HTTPS = False
    SEED_ADMIN = True
    EXPOSE_ERROR_DETAILS = False


CONFIG_BY_ENV = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'test': TestingConfig,
}


def config_for_env(app_env: str | None = None) -> type[Config]:
    """Pick the config class matching APP_ENV (falls back to the base class)."""
    key = (app_env or os.getenv('APP_ENV', 'development')).lower()
    return CONFIG_BY_ENV.get(key, Config)
