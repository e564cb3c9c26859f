"""
Admin Routes

Token issuance and the admin-only views. Everything except ``/login``
sits behind ``admin_required``.
"""

import logging

from flask import request, jsonify
from flask_login import current_user

from messaging_app.admin import admin_bp
from messaging_app.admin.decorators import admin_required
from messaging_app.errors import AuthenticationFailure, ValidationFailure
from messaging_app.models import Role
from messaging_app.services import (
    authenticate, issue_token, list_admins, send_message, sessions_for_admin
)
from messaging_app.validation import json_object, string_field

logger = logging.getLogger(__name__)


@admin_bp.route('/login', methods=['POST'])
def admin_login():
    """Exchange username and password for a bearer token."""
    data = json_object(request)
    username = (string_field(data, 'username') or '').strip()
    password = string_field(data, 'password') or ''

    if not username or not password:
        raise ValidationFailure('Username and password are required')

    admin = authenticate(username, password)
    if admin is None:
        logger.info('Failed login for %s', username)
        raise AuthenticationFailure('Invalid username or password')

    token = issue_token(admin.username, admin.admin_id, Role.ADMIN)
    logger.info('Admin %s logged in', admin.username)
    return jsonify({'token': token}), 200


@admin_bp.route('/verify', methods=['GET'])
@admin_required
def verify():
    return jsonify({'isValid': True}), 200


@admin_bp.route('', methods=['GET'])
@admin_required
def welcome():
    return jsonify({'message': f'Welcome {current_user.username}'}), 200


@admin_bp.route('/sessions', methods=['GET'])
@admin_required
def own_sessions():
    """Ids of the sessions assigned to the calling admin."""
    return jsonify(sessions_for_admin(current_user.admin_id)), 200


@admin_bp.route('/list', methods=['GET'])
@admin_required
def admin_list():
    return jsonify([a.to_dict() for a in list_admins()]), 200


@admin_bp.route('/message', methods=['POST'])
@admin_required
def admin_message():
    """Post a message as admin to the session named in the SessionId header."""
    data = json_object(request)
    send_message(request.headers.get('SessionId'), string_field(data, 'message'), Role.ADMIN)
    return '', 200
