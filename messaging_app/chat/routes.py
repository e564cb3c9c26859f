"""
Chat Routes
"""

from flask import request, jsonify

from messaging_app.admin.decorators import admin_required
from messaging_app.chat import chat_bp
from messaging_app.models import Role
from messaging_app.services import (
    authorize, list_messages, reassign_session, send_message, start_session, verify_token
)
from messaging_app.validation import json_object, string_field


@chat_bp.route('/session', methods=['POST'])
def new_session():
    """Open a session and assign it to a random admin."""
    chat_session = start_session()
    return jsonify({'sessionId': chat_session.id}), 200


@chat_bp.route('/user/message', methods=['POST'])
def user_message():
    """Post a message from the anonymous side of a session.

    An optional ``token`` in the body upgrades the sender to admin once it
    passes the same verification as the admin routes.
    """
    data = json_object(request)
    session_id = string_field(data, 'sessionId') or request.headers.get('SessionId')

    sender = Role.USER
    token = string_field(data, 'token')
    if token:
        authorize(verify_token(token), Role.ADMIN)
        sender = Role.ADMIN

    send_message(session_id, string_field(data, 'message'), sender)
    return '', 200


@chat_bp.route('/user/update', methods=['PATCH'])
@admin_required
def update_session_admin():
    """Reassign a session to another admin."""
    data = json_object(request)
    chat_session = reassign_session(string_field(data, 'sessionId'), data.get('adminId'))
    return jsonify({'sessionId': chat_session.id, 'adminId': chat_session.admin_id}), 200


@chat_bp.route('/messages', methods=['GET'])
def messages():
    """All messages of the session named in the SessionId header, oldest first."""
    rows = list_messages(request.headers.get('SessionId'))
    return jsonify([m.to_dict() for m in rows]), 200
