"""
Messaging Backend - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import os

from flask import Flask
from sqlalchemy.engine import make_url
from messaging_app.extensions import db, login_manager, cors
from messaging_app.config import Config
from messaging_app.errors import register_error_handlers


SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'DENY',
    'Referrer-Policy': 'no-referrer',
}


def create_app(config_class=Config):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.session_protection = None
    cors.init_app(app,
                  origins=app.config['CORS_ORIGINS'],
                  supports_credentials=True,
                  methods=['GET', 'POST', 'PATCH'],
                  allow_headers=['Authorization', 'Content-Type', 'SessionId'])

    # Bearer token -> current_user
    from messaging_app.admin.decorators import load_identity_from_request
    login_manager.request_loader(load_identity_from_request)

    # Register blueprints
    from messaging_app.admin import admin_bp
    from messaging_app.chat import chat_bp

    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(chat_bp, url_prefix='/api')

    register_error_handlers(app)

    @app.after_request
    def set_security_headers(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        response.headers.setdefault('Cache-Control', 'no-store')
        return response

    # Create database tables
    _ensure_sqlite_directory(app.config['SQLALCHEMY_DATABASE_URI'])
    with app.app_context():
        from messaging_app import models  # noqa: F401
        db.create_all()
        _ensure_default_admin(app)

    return app


def _ensure_sqlite_directory(uri):
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(uri)
    if url.get_backend_name() != 'sqlite' or url.database in (None, '', ':memory:'):
        return
    directory = os.path.dirname(url.database)
    if directory:
        os.makedirs(directory, exist_ok=True)


def _ensure_default_admin(app):
    """Seed the configured admin when the admins table is empty."""
    from messaging_app.models import Admin
    from messaging_app.services.admins import create_admin

    if Admin.query.first() is None:
        create_admin(app.config['ADMIN_USERNAME'], app.config['ADMIN_PASSWORD'])
        app.logger.info('Seeded default admin %s', app.config['ADMIN_USERNAME'])
