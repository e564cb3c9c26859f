"""
Error taxonomy

Every failure a request can end in is one of these; the handlers
registered by ``register_error_handlers`` turn them into JSON responses.
"""

import logging

from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import InternalServerError

from messaging_app.extensions import db

logger = logging.getLogger(__name__)


class MessagingError(Exception):
    """Base class for request-terminating failures."""
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class AuthenticationFailure(MessagingError):
    """Missing, malformed, badly signed or expired token; bad credentials."""
    status_code = 401
    default_message = 'Unauthorized request'


class AuthorizationFailure(MessagingError):
    """Verified token whose role is not the one the route requires."""
    status_code = 403
    default_message = 'Forbidden'


class ValidationFailure(MessagingError):
    status_code = 400
    default_message = 'Bad request'


class SessionNotFound(MessagingError):
    status_code = 404
    default_message = 'Session not found'


class AdminNotFound(MessagingError):
    status_code = 404
    default_message = 'Admin not found'


class NoAdminAvailable(MessagingError):
    status_code = 503
    default_message = 'No admin available to take the session'


class StoreFailure(MessagingError):
    status_code = 500


def register_error_handlers(app):
    """Attach JSON error handlers for the taxonomy above to ``app``."""

    @app.errorhandler(MessagingError)
    def handle_messaging_error(e):
        return jsonify({'error': e.message}), e.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(e):
        db.session.rollback()
        logger.exception('Database error: %s', e)
        return handle_messaging_error(StoreFailure())

    @app.errorhandler(404)
    def handle_not_found(e):
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def handle_method_not_allowed(e):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(InternalServerError)
    def handle_internal_error(e):
        logger.error('Unhandled error: %s', e.original_exception or e)
        return handle_messaging_error(MessagingError())
