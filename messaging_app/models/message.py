"""
Message Model
"""

from messaging_app.extensions import db
from messaging_app.models.session import utcnow


class Message(db.Model):
    """A single message posted to a session"""
    __tablename__ = 'user_messages'

    id = db.Column(db.Integer, primary_key=True)
    sender = db.Column(db.String(20), nullable=False)  # Role value
    message = db.Column(db.Text, nullable=False)
    session_id = db.Column('session', db.String(36), db.ForeignKey('sessions.id'),
                           nullable=False, index=True)
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow)

    session = db.relationship('ChatSession', back_populates='messages')

    def to_dict(self):
        return {
            'id': self.id,
            'sender': self.sender,
            'message': self.message,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Message {self.id} {self.sender} Session:{self.session_id}>'
