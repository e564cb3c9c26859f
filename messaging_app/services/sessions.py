"""
Session Registry

Maps opaque session ids to the admin that owns them. The ``sessions`` table
is the only source of truth; nothing is cached in process.
"""

import logging
import uuid

from sqlalchemy import func

from messaging_app.errors import AdminNotFound, NoAdminAvailable, SessionNotFound, ValidationFailure
from messaging_app.extensions import db
from messaging_app.models import Admin, ChatSession
from messaging_app.models.session import utcnow

logger = logging.getLogger(__name__)


def start_session():
    """Create a session owned by an admin picked uniformly at random."""
    admin = Admin.query.order_by(func.random()).first()
    if admin is None:
        raise NoAdminAvailable()

    chat_session = ChatSession(id=str(uuid.uuid4()), admin_id=admin.admin_id)
    db.session.add(chat_session)
    db.session.commit()
    logger.info('Started session %s for admin %s', chat_session.id, admin.username)
    return chat_session


def get_session(session_id):
    if not session_id:
        raise ValidationFailure('Session id is required')
    if not isinstance(session_id, str):
        raise ValidationFailure('Session id must be a string')
    chat_session = db.session.get(ChatSession, session_id)
    if chat_session is None:
        raise SessionNotFound()
    return chat_session


def session_owner(session_id):
    """Return the admin currently assigned to ``session_id``."""
    return get_session(session_id).admin


def sessions_for_admin(admin_id):
    """Ids of the sessions owned by ``admin_id``, oldest first."""
    rows = ChatSession.query.filter_by(admin_id=admin_id)\
        .order_by(ChatSession.created_at, ChatSession.id).all()
    return [s.id for s in rows]


def reassign_session(session_id, admin_id):
    """Hand ``session_id`` over to ``admin_id``; existing messages stay put."""
    if admin_id is None or admin_id == '':
        raise ValidationFailure('Admin id is required')
    if isinstance(admin_id, bool):
        raise ValidationFailure('Admin id must be an integer')
    try:
        admin_id = int(admin_id)
    except (TypeError, ValueError):
        raise ValidationFailure('Admin id must be an integer')

    chat_session = get_session(session_id)
    admin = db.session.get(Admin, admin_id)
    if admin is None:
        raise AdminNotFound()

    previous = chat_session.admin_id
    chat_session.admin_id = admin.admin_id
    chat_session.updated_at = utcnow()
    db.session.commit()
    logger.info('Reassigned session %s from admin %s to admin %s',
                chat_session.id, previous, admin.admin_id)
    return chat_session
