"""
Token Service

Issues and verifies the signed, time-limited bearer tokens that assert an
admin identity. There is no refresh: once a token expires the admin logs in
again.
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app
from flask_login import UserMixin

from messaging_app.errors import AuthenticationFailure, AuthorizationFailure
from messaging_app.models import Role

logger = logging.getLogger(__name__)


class TokenIdentity(UserMixin):
    """Identity carried by a verified token.

    ``role`` is None when the token names a role this service does not know.
    """

    def __init__(self, username, admin_id, role):
        self.username = username
        self.admin_id = admin_id
        self.role = role

    @property
    def id(self):
        return self.admin_id

    @property
    def is_admin(self):
        return self.role is Role.ADMIN

    def __repr__(self):
        return f'<TokenIdentity {self.username} role={self.role}>'


def issue_token(username, admin_id, role=Role.ADMIN, expires_in=None):
    """Sign a token for ``username``; expiry defaults to TOKEN_EXPIRES_IN seconds."""
    if expires_in is None:
        expires_in = current_app.config['TOKEN_EXPIRES_IN']
    now = datetime.now(timezone.utc)
    payload = {
        'username': username,
        'adminId': admin_id,
        'role': Role(role).value,
        'iat': now,
        'exp': now + timedelta(seconds=expires_in),
    }
    return jwt.encode(payload, current_app.config['SECRET_KEY'],
                      algorithm=current_app.config['TOKEN_ALGORITHM'])


def verify_token(token):
    """Check signature and expiry of ``token`` and return its identity.

    Raises AuthenticationFailure for a missing, invalid or expired token.
    """
    if not token:
        raise AuthenticationFailure('Token is missing')
    try:
        data = jwt.decode(token, current_app.config['SECRET_KEY'],
                          algorithms=[current_app.config['TOKEN_ALGORITHM']],
                          options={'require': ['exp']})
    except jwt.ExpiredSignatureError:
        logger.info('Rejected expired token')
        raise AuthenticationFailure('Token has expired')
    except jwt.InvalidTokenError as e:
        logger.info('Rejected invalid token: %s', e)
        raise AuthenticationFailure('Token is invalid')

    username = data.get('username')
    admin_id = data.get('adminId')
    if not username or admin_id is None:
        raise AuthenticationFailure('Token is invalid')
    return TokenIdentity(username, admin_id, Role.from_claim(data.get('role')))


def authorize(identity, required=Role.ADMIN):
    """Return ``identity`` if it holds the ``required`` role, else raise AuthorizationFailure."""
    if identity.role is not required:
        logger.info('Denied %r, requires role %s', identity, required.value)
        raise AuthorizationFailure()
    return identity


def bearer_token(request):
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    auth_header = request.headers.get('Authorization', '')
    parts = auth_header.split()
    if len(parts) == 2 and parts[0].lower() == 'bearer':
        return parts[1]
    return None
