"""
Chat Session Model
"""

from datetime import datetime, timezone

from messaging_app.extensions import db


def utcnow():
    return datetime.now(timezone.utc)


class ChatSession(db.Model):
    """Conversation thread between an anonymous user and its assigned admin"""
    __tablename__ = 'sessions'

    id = db.Column(db.String(36), primary_key=True)
    admin_id = db.Column('adminid', db.Integer, db.ForeignKey('admins.adminid'), nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    admin = db.relationship('Admin', back_populates='sessions')
    messages = db.relationship('Message', back_populates='session', lazy=True)

    def __repr__(self):
        return f'<ChatSession {self.id} Admin:{self.admin_id}>'
