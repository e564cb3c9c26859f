"""
Message Relay

Appends messages to a session and reads them back in arrival order.
"""

from messaging_app.errors import ValidationFailure
from messaging_app.extensions import db
from messaging_app.models import Message, Role
from messaging_app.services.sessions import get_session


def send_message(session_id, body, sender=Role.USER):
    """Record ``body`` from ``sender`` against an existing session."""
    if not isinstance(body, str) or not body.strip():
        raise ValidationFailure('Message is required')
    chat_session = get_session(session_id)

    message = Message(sender=Role(sender).value, message=body, session_id=chat_session.id)
    db.session.add(message)
    db.session.commit()
    return message


def list_messages(session_id):
    chat_session = get_session(session_id)
    return Message.query.filter_by(session_id=chat_session.id)\
        .order_by(Message.created_at, Message.id).all()
