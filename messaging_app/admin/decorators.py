"""
Access Guard

Admin routes are gated on a bearer token only. The token is verified once
per request by the login manager's request loader; ``admin_required`` then
turns the outcome into a 401 or 403.
"""

import logging
from functools import wraps

from flask_login import current_user

from messaging_app.errors import AuthenticationFailure
from messaging_app.models import Role
from messaging_app.services.tokens import authorize, bearer_token, verify_token

logger = logging.getLogger(__name__)


def load_identity_from_request(request):
    """Request loader: the verified token identity, or None to stay anonymous."""
    token = bearer_token(request)
    if token is None:
        return None
    try:
        return verify_token(token)
    except AuthenticationFailure as e:
        logger.debug('Treating request as anonymous: %s', e.message)
        return None


def admin_required(f):
    """Decorator to ensure the request carries a valid admin token.

    - No token, or one that fails verification: 401
    - Valid token asserting any role other than admin: 403
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        if not current_user.is_authenticated:
            raise AuthenticationFailure()
        authorize(current_user, Role.ADMIN)
        return f(*args, **kwargs)
    return wrapper
