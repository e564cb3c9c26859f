"""
Services Package

Exports all services for easy importing.
"""

from messaging_app.services.tokens import TokenIdentity, issue_token, verify_token, authorize, bearer_token
from messaging_app.services.admins import authenticate, create_admin, list_admins
from messaging_app.services.sessions import (
    start_session, get_session, session_owner, sessions_for_admin, reassign_session
)
from messaging_app.services.messages import send_message, list_messages

__all__ = [
    'TokenIdentity',
    'issue_token',
    'verify_token',
    'authorize',
    'bearer_token',
    'authenticate',
    'create_admin',
    'list_admins',
    'start_session',
    'get_session',
    'session_owner',
    'sessions_for_admin',
    'reassign_session',
    'send_message',
    'list_messages'
]
