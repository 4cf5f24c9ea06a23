"""Application package for the user registry API."""

from __future__ import annotations

import logging

from flask import Flask, request

from app.config import Config
from app.extensions import talisman
from app.models import UserRecord
from app.repositories import UserRepository
from app.routes import (
    create_health_blueprint,
    create_pages_blueprint,
    create_users_blueprint,
    register_error_handlers,
)
from app.services import UserService
from app.services.process_metrics_service import ProcessMetricsService
from app.utils.clock import utc_timestamp

logger = logging.getLogger(__name__)


def seed_records(config_class: type[Config]) -> list[UserRecord]:
    """Initial users present when the process starts."""
    if not config_class.SEED_ADMIN:
        return []
    return [
        UserRecord(
            id=1,
            username='admin',
            email='admin@company.com',
            role='admin',
            created_at=utc_timestamp(),
        )
    ]


def create_app(config_class: type[Config] = Config) -> Flask:
    """Create and configure the Flask application."""
    app = Flask(__name__)
    app.config.from_object(config_class)

    if not app.config.get('SECRET_KEY'):
        logger.warning("SECRET_KEY not set! Using insecure default.")
        app.config['SECRET_KEY'] = 'dev-secret-key-change-in-production'

    _configure_security_headers(app)

    @app.before_request
    def log_request():
        logger.info(f"{request.method} {request.path} - IP: {request.remote_addr}")

    user_service = UserService(
        UserRepository(seed_records(config_class)),
        bcrypt_rounds=app.config['BCRYPT_ROUNDS'],
    )
    app.extensions['user_service'] = user_service

    app.register_blueprint(create_pages_blueprint(version=app.config['VERSION']))
    app.register_blueprint(create_health_blueprint(
        metrics_service=ProcessMetricsService(),
        version=app.config['VERSION'],
        app_env=app.config['APP_ENV'],
        port=app.config['PORT'],
        timezone=app.config['TIMEZONE'],
        logger=logging.getLogger('app.health'),
    ))
    app.register_blueprint(create_users_blueprint(
        user_service=user_service,
        logger=logging.getLogger('app.users'),
    ))
    register_error_handlers(app, logger=logger)

    return app


def _configure_security_headers(app: Flask) -> None:
    # Only enforce HTTPS if explicitly enabled (for reverse proxy setups)
    if app.config.get('FORCE_HTTPS'):
        talisman.init_app(
            app,
            force_https=True,
            strict_transport_security=True,
            frame_options='DENY',
            content_security_policy={'default-src': "'self'"},
        )
        return

    @app.after_request
    def set_security_headers(response):
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['X-XSS-Protection'] = '1; mode=block'
        response.headers['Referrer-Policy'] = 'strict-origin-when-cross-origin'
        return response
