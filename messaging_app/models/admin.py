"""
Admin Model
"""

from werkzeug.security import generate_password_hash, check_password_hash
from messaging_app.extensions import db


class Admin(db.Model):
    """Staff account that owns sessions and answers users"""
    __tablename__ = 'admins'

    admin_id = db.Column('adminid', db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)

    sessions = db.relationship('ChatSession', back_populates='admin', lazy=True)

    def set_password(self, password):
        self.password = generate_password_hash(password, method='pbkdf2:sha256')

    def check_password(self, password):
        return check_password_hash(self.password, password)

    def to_dict(self):
        return {'adminId': self.admin_id, 'username': self.username}

    def __repr__(self):
        return f'<Admin {self.username}>'
