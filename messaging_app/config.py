"""
Configuration settings for the messaging backend
"""
import os


class Config:
    """Flask application configuration"""

    # Signing key for bearer tokens (CHANGE THIS IN PRODUCTION!)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'

    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'messaging_app.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Bearer tokens
    TOKEN_ALGORITHM = 'HS256'
    TOKEN_EXPIRES_IN = int(os.environ.get('TOKEN_EXPIRES_IN', 3600))

    # Browser client
    CORS_ORIGINS = [o.strip() for o in
                    os.environ.get('CORS_ORIGINS', 'http://localhost:3000').split(',')
                    if o.strip()]

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Admin seeded on first start when the admins table is empty
    ADMIN_USERNAME = os.environ.get('ADMIN_USERNAME') or 'admin'
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD') or 'admin123'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SECRET_KEY = 'test-secret-key-for-the-messaging-suite'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    LOG_LEVEL = 'DEBUG'
    TOKEN_EXPIRES_IN = 3600
    CORS_ORIGINS = ['http://localhost:3000']
    ADMIN_USERNAME = 'admin'
    ADMIN_PASSWORD = 'admin123'
